from enum import Enum
from typing import Any

import numpy as np

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Kind(Enum):
    """Tag stored next to every value in a :class:`~bundlekit.bundle.Bundle`.

    Typed getters only return a value whose tag matches the kind they
    request, so a value put with ``put_long`` is not visible to ``get_int``.
    """

    BOOLEAN = 'boolean'
    BYTE = 'byte'
    CHAR = 'char'
    DOUBLE = 'double'
    FLOAT = 'float'
    INT = 'int'
    LONG = 'long'
    SHORT = 'short'
    STRING = 'string'

    BOOLEAN_ARRAY = 'boolean[]'
    BYTE_ARRAY = 'byte[]'
    CHAR_ARRAY = 'char[]'
    DOUBLE_ARRAY = 'double[]'
    FLOAT_ARRAY = 'float[]'
    INT_ARRAY = 'int[]'
    LONG_ARRAY = 'long[]'
    SHORT_ARRAY = 'short[]'
    STRING_ARRAY = 'string[]'

    INT_LIST = 'list<int>'
    STRING_LIST = 'list<string>'

    BUNDLE = 'bundle'
    NULL = 'null'
    OBJECT = 'object'

    @property
    def is_scalar(self) -> bool:
        return self in _SCALARS

    @property
    def is_array(self) -> bool:
        return self.value.endswith('[]')


_SCALARS = frozenset(
    {
        Kind.BOOLEAN,
        Kind.BYTE,
        Kind.CHAR,
        Kind.DOUBLE,
        Kind.FLOAT,
        Kind.INT,
        Kind.LONG,
        Kind.SHORT,
        Kind.STRING,
    }
)

# numpy dtype -> (scalar kind, array kind)
_DTYPE_KINDS: dict[np.dtype[Any], tuple[Kind, Kind]] = {
    np.dtype(np.bool_): (Kind.BOOLEAN, Kind.BOOLEAN_ARRAY),
    np.dtype(np.uint8): (Kind.BYTE, Kind.BYTE_ARRAY),
    np.dtype(np.int8): (Kind.BYTE, Kind.BYTE_ARRAY),
    np.dtype(np.int16): (Kind.SHORT, Kind.SHORT_ARRAY),
    np.dtype(np.int32): (Kind.INT, Kind.INT_ARRAY),
    np.dtype(np.int64): (Kind.LONG, Kind.LONG_ARRAY),
    np.dtype(np.float32): (Kind.FLOAT, Kind.FLOAT_ARRAY),
    np.dtype(np.float64): (Kind.DOUBLE, Kind.DOUBLE_ARRAY),
}


def infer_kind(value: Any, *, long_integers: bool = False) -> Kind:
    """Infer the kind of a value put without an explicit kind.

    Parameters
    ----------
    value : Any
        The value being stored.
    long_integers : bool, optional
        Tag every plain ``int`` as ``Kind.LONG`` instead of picking ``INT``
        for values within the 32-bit signed range, by default False

    Returns
    -------
    Kind
        The inferred kind, ``Kind.OBJECT`` when no supported kind matches.
        Nested bundles are recognised by the bundle itself, not here.
    """
    if value is None:
        return Kind.NULL

    # bool before int, bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return Kind.BOOLEAN

    if isinstance(value, np.generic):
        kinds = _DTYPE_KINDS.get(value.dtype.newbyteorder('='))
        return kinds[0] if kinds else Kind.OBJECT

    if isinstance(value, int):
        if long_integers or not INT_MIN <= value <= INT_MAX:
            return Kind.LONG
        return Kind.INT

    if isinstance(value, float):
        return Kind.DOUBLE

    if isinstance(value, str):
        return Kind.STRING

    if isinstance(value, np.ndarray):
        return _infer_array_kind(value)

    if isinstance(value, list) and value:
        if all(isinstance(item, str) for item in value):
            return Kind.STRING_LIST
        if all(isinstance(item, int) and not isinstance(item, bool) for item in value):
            return Kind.INT_LIST

    return Kind.OBJECT


def _infer_array_kind(array: np.ndarray[Any, Any]) -> Kind:
    if array.dtype.kind == 'U':
        # itemsize is in bytes, numpy stores 4 per code point
        return Kind.CHAR_ARRAY if array.dtype.itemsize == 4 else Kind.STRING_ARRAY

    kinds = _DTYPE_KINDS.get(array.dtype.newbyteorder('='))
    return kinds[1] if kinds else Kind.OBJECT
