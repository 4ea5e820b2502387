"""Product Catalog API: an in-memory product catalog served over HTTP."""

__version__ = "1.0.0"
