"""Domain exceptions."""

from reflectkit.domain.exceptions.base import ReflectKitError
from reflectkit.domain.exceptions.discovery import DiscoveryError, SourceUnavailableError
from reflectkit.domain.exceptions.invocation import (
    FieldAccessError,
    InstantiationError,
    InvocationError,
    NoMatchingMethodError,
    OverloadResolutionError,
)

__all__ = [
    "ReflectKitError",
    "DiscoveryError",
    "SourceUnavailableError",
    "OverloadResolutionError",
    "InstantiationError",
    "NoMatchingMethodError",
    "InvocationError",
    "FieldAccessError",
]
