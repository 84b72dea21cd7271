"""
Catalog adapters — where distros, sources, apps and packages come from.
"""

from linite.adapters.catalog.base import CatalogAdapter  # noqa: F401
from linite.adapters.catalog.memory import InMemoryCatalog  # noqa: F401
