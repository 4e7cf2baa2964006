from logging import DEBUG, WARNING, getLogger
from typing import Any, Iterator, Mapping, MutableMapping, NamedTuple, Sequence

import numpy as np

from bundlekit.kinds import Kind, infer_kind
from bundlekit.settings import settings

_logger = getLogger(__name__)


class Entry(NamedTuple):
    kind: Kind
    value: Any


class Bundle(MutableMapping[str | None, Any]):
    """
    Ordered, heterogeneous key-value container with typed accessors.

    Every value is stored next to its :class:`~bundlekit.kinds.Kind`.
    Typed getters (``get_int``, ``get_string_list``, ...) return the value
    only when the stored kind matches; otherwise they return the default,
    so a missing key and a key holding another kind look the same to the
    caller. A key may hold ``None``, which reads back as ``None`` from every
    getter and is distinct from the key being absent.

    Parameters
    ----------
    source : Bundle | Mapping[str | None, Any] | int | None, optional
        A bundle to copy (shallow: values are shared, kinds are kept), a
        mapping whose values are stored with inferred kinds, or a capacity
        hint. Python dicts grow on demand, so the capacity is accepted for
        compatibility and otherwise ignored.

    Attributes
    ----------
    _dict : dict[str | None, Entry]
        Tagged entries in insertion order.
    _key_set : set[str | None]
        Mirror of the keys of ``_dict``, updated on every mutation.

    Notes
    -----
    - ``b[key]`` follows the mapping protocol and raises ``KeyError`` for a
      missing key; ``get`` and the typed getters never raise.
    - Equality and hashing are by identity.
    - Not thread-safe.

    Examples
    --------
    >>> b = Bundle()
    >>> b.put_int('answer', 42)
    >>> b.get_int('answer')
    42
    >>> b.get_long('answer')
    0
    >>> b.get_boolean('missing', True)
    True
    """

    _dict: dict[str | None, Entry]
    _key_set: set[str | None]

    def __init__(self, source: 'Bundle | Mapping[str | None, Any] | int | None' = None) -> None:
        if isinstance(source, Bundle):
            self._dict = dict(source._dict)
            self._key_set = set(source._key_set)
            return

        self._dict = {}
        self._key_set = set()
        if isinstance(source, Mapping):
            self.update(source)

    # Mapping protocol

    def __getitem__(self, key: str | None) -> Any:
        return self._dict[key].value

    def __setitem__(self, key: str | None, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str | None) -> None:
        del self._dict[key]
        self._key_set.discard(key)

    def __iter__(self) -> Iterator[str | None]:
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, key: object) -> bool:
        return key in self._dict

    def __repr__(self) -> str:
        return f'{type(self).__name__}@{id(self):X}'

    __str__ = __repr__
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __copy__(self) -> 'Bundle':
        return self.clone()

    # Container operations

    def clear(self) -> None:
        self._dict.clear()
        self._key_set.clear()

    def clone(self) -> 'Bundle':
        """Return a shallow copy: a new mapping sharing the stored values."""
        return type(self)(self)

    def contains_key(self, key: str | None) -> bool:
        return key in self._dict

    def is_empty(self) -> bool:
        return len(self._dict) == 0

    def key_set(self) -> frozenset[str | None]:
        return frozenset(self._key_set)

    def size(self) -> int:
        return len(self._dict)

    def kind_of(self, key: str | None) -> Kind | None:
        """Return the kind stored under ``key``, or ``None`` if it is absent."""
        entry = self._dict.get(key)
        return entry.kind if entry is not None else None

    def remove(self, key: str | None) -> None:
        """Remove ``key`` if present. Unlike ``del``, a missing key is a no-op."""
        self._dict.pop(key, None)
        self._key_set.discard(key)

    def put(self, key: str | None, value: Any, kind: Kind | None = None) -> None:
        """Store ``value`` under ``key``, replacing any existing entry.

        When ``kind`` is omitted it is inferred from the value, see
        :func:`~bundlekit.kinds.infer_kind`. The value is stored by
        reference.
        """
        if kind is None:
            if isinstance(value, Bundle):
                kind = Kind.BUNDLE
            else:
                kind = infer_kind(value, long_integers=settings.infer_long_integers)
        self._dict[key] = Entry(kind, value)
        self._key_set.add(key)

    def put_all(self, source: 'Bundle | Mapping[str | None, Any]') -> None:
        """Copy every entry of ``source`` into this bundle.

        Entries from ``source`` win on conflicting keys. Kinds are kept when
        ``source`` is a bundle and inferred otherwise.
        """
        if isinstance(source, Bundle):
            self._dict.update(source._dict)
            self._key_set.update(source._key_set)
        else:
            self.update(source)

    def get(self, key: str | None, default: Any = None, kind: Kind | None = None) -> Any:
        """Return the value stored under ``key``, or ``default``.

        ``default`` is returned when the key is absent, when ``kind`` is
        given and the stored kind differs, or when ``kind`` is omitted and
        the value is not an instance of ``type(default)`` (a ``bool`` never
        satisfies a numeric default). A stored ``None`` is returned as ``None``.
        """
        entry = self._dict.get(key)
        if entry is None:
            return default

        if entry.value is None:
            return None

        if kind is not None:
            if entry.kind is kind:
                return entry.value
            self._log_fallback(key, entry.kind, kind.value)
            return default

        if default is not None and not _matches_default_type(entry.value, default):
            self._log_fallback(key, entry.kind, type(default).__name__)
            return default

        return entry.value

    def _log_fallback(self, key: str | None, stored: Kind, requested: str) -> None:
        level = WARNING if settings.warn_on_kind_mismatch else DEBUG
        _logger.log(
            level,
            'Key %r holds a %s value, %s requested; returning the default',
            key,
            stored.value,
            requested,
        )

    # Typed getters

    def get_boolean(self, key: str | None, default: bool | None = False) -> bool | None:
        return self.get(key, default, Kind.BOOLEAN)

    def get_byte(self, key: str | None, default: int | None = 0) -> int | None:
        return self.get(key, default, Kind.BYTE)

    def get_char(self, key: str | None, default: str | None = '\0') -> str | None:
        return self.get(key, default, Kind.CHAR)

    def get_double(self, key: str | None, default: float | None = 0.0) -> float | None:
        return self.get(key, default, Kind.DOUBLE)

    def get_float(self, key: str | None, default: float | None = 0.0) -> float | None:
        return self.get(key, default, Kind.FLOAT)

    def get_int(self, key: str | None, default: int | None = 0) -> int | None:
        return self.get(key, default, Kind.INT)

    def get_long(self, key: str | None, default: int | None = 0) -> int | None:
        return self.get(key, default, Kind.LONG)

    def get_short(self, key: str | None, default: int | None = 0) -> int | None:
        return self.get(key, default, Kind.SHORT)

    def get_string(self, key: str | None, default: str | None = None) -> str | None:
        return self.get(key, default, Kind.STRING)

    def get_boolean_array(self, key: str | None) -> Sequence[bool] | np.ndarray | None:
        return self.get(key, None, Kind.BOOLEAN_ARRAY)

    def get_byte_array(self, key: str | None) -> Sequence[int] | bytes | np.ndarray | None:
        return self.get(key, None, Kind.BYTE_ARRAY)

    def get_char_array(self, key: str | None) -> Sequence[str] | np.ndarray | None:
        return self.get(key, None, Kind.CHAR_ARRAY)

    def get_double_array(self, key: str | None) -> Sequence[float] | np.ndarray | None:
        return self.get(key, None, Kind.DOUBLE_ARRAY)

    def get_float_array(self, key: str | None) -> Sequence[float] | np.ndarray | None:
        return self.get(key, None, Kind.FLOAT_ARRAY)

    def get_int_array(self, key: str | None) -> Sequence[int] | np.ndarray | None:
        return self.get(key, None, Kind.INT_ARRAY)

    def get_long_array(self, key: str | None) -> Sequence[int] | np.ndarray | None:
        return self.get(key, None, Kind.LONG_ARRAY)

    def get_short_array(self, key: str | None) -> Sequence[int] | np.ndarray | None:
        return self.get(key, None, Kind.SHORT_ARRAY)

    def get_string_array(self, key: str | None) -> Sequence[str] | np.ndarray | None:
        return self.get(key, None, Kind.STRING_ARRAY)

    def get_int_list(self, key: str | None) -> list[int] | None:
        return self.get(key, None, Kind.INT_LIST)

    def get_string_list(self, key: str | None) -> list[str] | None:
        return self.get(key, None, Kind.STRING_LIST)

    def get_bundle(self, key: str | None) -> 'Bundle | None':
        return self.get(key, None, Kind.BUNDLE)

    # Typed putters

    def put_boolean(self, key: str | None, value: bool | None) -> None:
        self.put(key, value, Kind.BOOLEAN)

    def put_byte(self, key: str | None, value: int | None) -> None:
        self.put(key, value, Kind.BYTE)

    def put_char(self, key: str | None, value: str | None) -> None:
        self.put(key, value, Kind.CHAR)

    def put_double(self, key: str | None, value: float | None) -> None:
        self.put(key, value, Kind.DOUBLE)

    def put_float(self, key: str | None, value: float | None) -> None:
        self.put(key, value, Kind.FLOAT)

    def put_int(self, key: str | None, value: int | None) -> None:
        self.put(key, value, Kind.INT)

    def put_long(self, key: str | None, value: int | None) -> None:
        self.put(key, value, Kind.LONG)

    def put_short(self, key: str | None, value: int | None) -> None:
        self.put(key, value, Kind.SHORT)

    def put_string(self, key: str | None, value: str | None) -> None:
        self.put(key, value, Kind.STRING)

    def put_boolean_array(self, key: str | None, value: Sequence[bool] | np.ndarray | None) -> None:
        self.put(key, value, Kind.BOOLEAN_ARRAY)

    def put_byte_array(self, key: str | None, value: Sequence[int] | bytes | np.ndarray | None) -> None:
        self.put(key, value, Kind.BYTE_ARRAY)

    def put_char_array(self, key: str | None, value: Sequence[str] | np.ndarray | None) -> None:
        self.put(key, value, Kind.CHAR_ARRAY)

    def put_double_array(self, key: str | None, value: Sequence[float] | np.ndarray | None) -> None:
        self.put(key, value, Kind.DOUBLE_ARRAY)

    def put_float_array(self, key: str | None, value: Sequence[float] | np.ndarray | None) -> None:
        self.put(key, value, Kind.FLOAT_ARRAY)

    def put_int_array(self, key: str | None, value: Sequence[int] | np.ndarray | None) -> None:
        self.put(key, value, Kind.INT_ARRAY)

    def put_long_array(self, key: str | None, value: Sequence[int] | np.ndarray | None) -> None:
        self.put(key, value, Kind.LONG_ARRAY)

    def put_short_array(self, key: str | None, value: Sequence[int] | np.ndarray | None) -> None:
        self.put(key, value, Kind.SHORT_ARRAY)

    def put_string_array(self, key: str | None, value: Sequence[str] | np.ndarray | None) -> None:
        self.put(key, value, Kind.STRING_ARRAY)

    def put_int_list(self, key: str | None, value: list[int] | None) -> None:
        self.put(key, value, Kind.INT_LIST)

    def put_string_list(self, key: str | None, value: list[str] | None) -> None:
        self.put(key, value, Kind.STRING_LIST)

    def put_bundle(self, key: str | None, value: 'Bundle | None') -> None:
        self.put(key, value, Kind.BUNDLE)


def _matches_default_type(value: Any, default: Any) -> bool:
    # bool is an int subclass, but a flag never stands in for a number
    if isinstance(value, bool) and not isinstance(default, bool):
        return False
    return isinstance(value, type(default))
