"""Catalog query service.

Lists products with category/price filters and pagination, and resolves
single-product detail with variant price inheritance.
"""

__version__ = "0.1.0"
