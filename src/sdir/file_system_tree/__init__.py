"""Classification of filesystem entries and construction of the filtered tree.

This package provides the entry model, the immutable tree node, and the builder
that walks a directory honoring the filter policy and the depth bound.
"""
