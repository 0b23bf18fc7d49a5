"""Discovery layer: building catalogs from archives and source trees.

Functions to discover loadable classes:
- From a zip-format archive (.zip, .pyz, .whl, .egg)
- From a directory tree of .py files, optionally with nested archives
- Incrementally into an existing catalog
"""

from reflectkit.application.discovery.loader import CatalogLoader, add, load_archive, load_directory
from reflectkit.application.discovery.names import canonical_name, derive_module_name, top_level_classes

__all__ = [
    "CatalogLoader",
    "add",
    "canonical_name",
    "derive_module_name",
    "load_archive",
    "load_directory",
    "top_level_classes",
]
