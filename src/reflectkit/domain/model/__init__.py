"""Domain model: handles, catalog, signatures and invocation targets."""

from reflectkit.domain.model.catalog import Catalog
from reflectkit.domain.model.configuration import LoaderConfig
from reflectkit.domain.model.enums import Visibility
from reflectkit.domain.model.load_report import LoadFailure, LoadReport
from reflectkit.domain.model.primitives import PRIMITIVE_EQUIVALENTS, boxed
from reflectkit.domain.model.signature import ArgumentSignature, ParameterSignature
from reflectkit.domain.model.target import InstanceTarget, InvocationTarget, TypeTarget
from reflectkit.domain.model.type_handle import TypeHandle

__all__ = [
    "ArgumentSignature",
    "Catalog",
    "InstanceTarget",
    "InvocationTarget",
    "LoadFailure",
    "LoadReport",
    "LoaderConfig",
    "PRIMITIVE_EQUIVALENTS",
    "ParameterSignature",
    "TypeHandle",
    "TypeTarget",
    "Visibility",
    "boxed",
]
