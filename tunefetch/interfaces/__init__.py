"""Abstract interfaces (ABCs) for tunefetch.

The catalog contract lets callers (the CLI, tests, an embedding UI) depend on
page operations rather than on the mirror-backed implementation.
"""

from tunefetch.interfaces.catalog_provider import ICatalogProvider

__all__ = ["ICatalogProvider"]
