"""Domain ports (protocols implemented by outer layers)."""

from reflectkit.domain.ports.module_scope import ModuleScopeProtocol

__all__ = ["ModuleScopeProtocol"]
