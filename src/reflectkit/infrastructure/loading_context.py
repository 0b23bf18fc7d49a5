"""LoadingContext: isolated module loading for one scan root.

A context is bound to a single archive or directory root. It is a
sys.meta_path finder and loader over an index of module name → source
bytes, so modules of the same root import each other while the context
is active, and nothing of it stays visible afterwards.

Entry bytes are read once, at registration: the archive a root came from
may be closed long before its classes stop being used (tracebacks read
source through get_source).

Activation:
  1. Registered names already in sys.modules are stashed away
  2. Modules loaded by earlier activations are reinstalled
  3. The context is put first on sys.meta_path
Deactivation:
  1. The context is removed from sys.meta_path
  2. Every module it loaded is moved out of sys.modules and kept
  3. Stashed modules are restored

Activations are serialized process-wide: sys.meta_path and sys.modules
are global state. Re-entering an active context from the activating
thread is a no-op, so code running inside a scope may call back into it.
"""

from __future__ import annotations

import importlib
import importlib.abc
import importlib.machinery
import importlib.util
import sys
import threading
import zipfile
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reflectkit.domain.exceptions import DiscoveryError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from types import ModuleType

    from reflectkit.infrastructure.scanning import ScanEntry

_ACTIVATION_LOCK = threading.RLock()


@dataclass(frozen=True, slots=True)
class _ModuleSource:
    """Registered module: data is None for implicit (directory-only) packages."""

    origin: str | None
    data: bytes | None
    is_package: bool


class LoadingContext(importlib.abc.MetaPathFinder, importlib.abc.Loader):
    """Meta-path finder/loader scoped to one scan root."""

    def __init__(self, root: str) -> None:
        """Initialize with the root's printable location.

        Raises:
            ValueError: If root is empty
        """
        if not root:
            raise ValueError("root must not be empty")

        self._root = root
        self._sources: dict[str, _ModuleSource] = {}
        self._loaded: dict[str, ModuleType] = {}
        self._stashed: dict[str, ModuleType] = {}
        self._active = False

    def __repr__(self) -> str:
        return f"LoadingContext({self._root!r}, {len(self._sources)} modules)"

    def __contains__(self, module_name: object) -> bool:
        return module_name in self._sources

    @property
    def root(self) -> str:
        """Printable location of the bound root."""
        return self._root

    @property
    def module_names(self) -> frozenset[str]:
        """Names of all registered modules, implicit packages included."""
        return frozenset(self._sources)

    @property
    def is_active(self) -> bool:
        """Check if the context is currently on sys.meta_path."""
        return self._active

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, module_name: str, entry: ScanEntry, *, is_package: bool = False) -> None:
        """Register a source entry under a module name, reading its bytes.

        Parent packages without an __init__ entry are synthesized.

        Raises:
            RuntimeError: If the context is active
            DiscoveryError: If another entry already provides module_name,
                a parent name is a plain module, or the entry is unreadable
        """
        if self._active:
            raise RuntimeError("cannot register modules while context is active")

        existing = self._sources.get(module_name)
        if existing is not None and existing.origin is not None:
            raise DiscoveryError(
                entry.origin,
                f"module '{module_name}' already provided by {existing.origin}",
            )
        if existing is not None and not is_package:
            raise DiscoveryError(entry.origin, f"module '{module_name}' shadows a package directory")

        parts = module_name.split(".")
        parents = [".".join(parts[:i]) for i in range(1, len(parts))]
        for parent in parents:
            source = self._sources.get(parent)
            if source is not None and not source.is_package:
                raise DiscoveryError(source.origin or entry.origin, f"module '{parent}' shadows a package directory")

        try:
            data = entry.read()
        except (OSError, zipfile.BadZipFile) as e:
            raise DiscoveryError(entry.origin, f"cannot read: {e}") from e

        self._sources[module_name] = _ModuleSource(origin=entry.origin, data=data, is_package=is_package)
        for parent in parents:
            self._sources.setdefault(parent, _ModuleSource(origin=None, data=None, is_package=True))

    # =========================================================================
    # Activation
    # =========================================================================

    @contextmanager
    def activated(self) -> Iterator[LoadingContext]:
        """Make registered modules importable for the duration of the block."""
        with _ACTIVATION_LOCK:
            if self._active:
                # the lock is held, so this thread is the one that activated
                yield self
                return

            self._activate()
            try:
                yield self
            finally:
                self._deactivate()

    def _activate(self) -> None:
        for name in self._sources:
            module = sys.modules.pop(name, None)
            if module is not None:
                self._stashed[name] = module
        sys.modules.update(self._loaded)
        sys.meta_path.insert(0, self)
        self._active = True

    def _deactivate(self) -> None:
        self._active = False
        try:
            sys.meta_path.remove(self)
        except ValueError:
            pass  # removed by the loaded code itself

        for name, module in list(sys.modules.items()):
            if getattr(getattr(module, "__spec__", None), "loader", None) is self:
                self._loaded[name] = sys.modules.pop(name)

        sys.modules.update(self._stashed)
        self._stashed.clear()

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self, module_name: str) -> ModuleType:
        """Import a registered module through this context.

        Modules already loaded by this context are returned as they are.

        Raises:
            RuntimeError: If the context is not active
            DiscoveryError: If the module is unknown, or raised while executing
        """
        if not self._active:
            raise RuntimeError("context must be active to load modules")

        source = self._sources.get(module_name)
        if source is None:
            raise DiscoveryError(self._root, f"module '{module_name}' is not registered")

        origin = self._origin(module_name, source)
        try:
            module = importlib.import_module(module_name)
        except DiscoveryError as e:
            if e.path == origin:
                raise
            raise DiscoveryError(origin, f"dependency {e.path}: {e.reason}") from e
        except SyntaxError as e:
            raise DiscoveryError(origin, f"syntax error: {e}") from e
        except ImportError as e:
            raise DiscoveryError(origin, f"import failed: {e}") from e
        # BLE001: module bodies are arbitrary code; any failure is one bad entry
        except Exception as e:  # noqa: BLE001
            raise DiscoveryError(origin, f"{type(e).__name__} during import: {e}") from e

        if getattr(module.__spec__, "loader", None) is not self:
            raise DiscoveryError(origin, f"module '{module_name}' resolved outside {self._root}")

        self._loaded[module_name] = module
        return module

    # =========================================================================
    # importlib protocol
    # =========================================================================

    def find_spec(
        self,
        fullname: str,
        path: Sequence[str] | None = None,
        target: ModuleType | None = None,
    ) -> importlib.machinery.ModuleSpec | None:
        """Spec for registered names, None for everything else."""
        del path, target  # names are global within the root

        source = self._sources.get(fullname)
        if source is None:
            return None

        spec = importlib.machinery.ModuleSpec(
            fullname,
            self,
            origin=self._origin(fullname, source),
            is_package=source.is_package,
        )
        spec.has_location = source.data is not None
        return spec

    def create_module(self, spec: importlib.machinery.ModuleSpec) -> ModuleType | None:
        """Default module creation."""
        del spec
        return None

    def exec_module(self, module: ModuleType) -> None:
        """Compile and execute the registered source in module's namespace."""
        source = self._sources[module.__name__]
        if source.data is None:
            return

        code = compile(source.data, self._origin(module.__name__, source), "exec", dont_inherit=True)
        exec(code, module.__dict__)  # noqa: S102

    def get_source(self, fullname: str) -> str | None:
        """Decoded source of a registered module (used by linecache)."""
        source = self._sources.get(fullname)
        if source is None or source.data is None:
            return None
        return importlib.util.decode_source(source.data)

    def _origin(self, module_name: str, source: _ModuleSource) -> str:
        if source.origin is not None:
            return source.origin
        return f"{self._root}/{module_name.replace('.', '/')}"
