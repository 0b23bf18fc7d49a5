"""Module scope protocol: the import environment a loaded class came from.

Classes discovered under one root keep resolving that root's modules at
call time (function-level imports, lazy lookups). Whoever runs their code
enters the scope first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


class ModuleScopeProtocol(Protocol):
    """Contract for import scopes.

    Implemented by infrastructure.LoadingContext.
    """

    def activated(self) -> AbstractContextManager[object]:
        """Make the scope's modules importable for the duration of a block.

        Must be re-entrant within one thread.
        """
        ...

    def __contains__(self, module_name: object) -> bool:
        """Check if module_name belongs to this scope."""
        ...
