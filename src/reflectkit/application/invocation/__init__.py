"""Reflective invocation facade."""

from reflectkit.application.invocation.invoker import Invoker

__all__ = ["Invoker"]
