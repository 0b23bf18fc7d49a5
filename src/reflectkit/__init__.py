"""reflectkit - class discovery from archives and source trees with reflective invocation."""

__version__ = "0.1.0"

from reflectkit.application.discovery import CatalogLoader, add, load_archive, load_directory
from reflectkit.application.invocation import Invoker
from reflectkit.domain.model.catalog import Catalog
from reflectkit.domain.model.load_report import LoadFailure, LoadReport
from reflectkit.domain.model.type_handle import TypeHandle

__all__ = [
    "Catalog",
    "CatalogLoader",
    "Invoker",
    "LoadFailure",
    "LoadReport",
    "TypeHandle",
    "__version__",
    "add",
    "load_archive",
    "load_directory",
]
