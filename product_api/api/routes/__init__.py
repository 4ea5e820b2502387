"""
==============================================================================
API Route Modules
==============================================================================

Routers:
--------
- root: Endpoint directory
- products: Product catalog CRUD, listing and statistics

==============================================================================
"""

from . import products, root

__all__ = ["products", "root"]
