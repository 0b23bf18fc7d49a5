"""Infrastructure: filesystem/archive scanning and module loading."""

from reflectkit.infrastructure.loading_context import LoadingContext
from reflectkit.infrastructure.scanning import ScanEntry, iter_archive, iter_directory

__all__ = [
    "LoadingContext",
    "ScanEntry",
    "iter_archive",
    "iter_directory",
]
