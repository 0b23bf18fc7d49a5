"""Primitive kind → boxed builtin equivalence table.

ctypes scalar types are the primitive kinds of Python: a parameter declared
as c_int accepts a plain int and a c_int argument satisfies a parameter
declared as int. The None annotation is the void kind.
"""

from __future__ import annotations

import ctypes
from collections.abc import Mapping
from types import MappingProxyType, NoneType
from typing import Final

PRIMITIVE_EQUIVALENTS: Final[Mapping[object, type]] = MappingProxyType(
    {
        ctypes.c_bool: bool,
        ctypes.c_byte: int,
        ctypes.c_ubyte: int,
        ctypes.c_short: int,
        ctypes.c_ushort: int,
        ctypes.c_int: int,
        ctypes.c_uint: int,
        ctypes.c_long: int,
        ctypes.c_ulong: int,
        ctypes.c_longlong: int,
        ctypes.c_ulonglong: int,
        ctypes.c_float: float,
        ctypes.c_double: float,
        ctypes.c_longdouble: float,
        ctypes.c_char: bytes,
        ctypes.c_wchar: str,
        None: NoneType,
    }
)


def boxed(kind: object) -> object:
    """Return the boxed counterpart of a primitive kind.

    Non-primitive kinds are returned unchanged.
    """
    try:
        return PRIMITIVE_EQUIVALENTS.get(kind, kind)
    except TypeError:
        # unhashable annotation objects are never primitive kinds
        return kind
