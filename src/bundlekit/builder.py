from typing import Any, Mapping, Self, Sequence

import numpy as np

from bundlekit.bundle import Bundle
from bundlekit.kinds import Kind


class BundleBuilder:
    """Chainable construction of a :class:`~bundlekit.bundle.Bundle`.

    Every ``put_*`` call is forwarded to the owned bundle and returns the
    builder::

        bundle = BundleBuilder().put_boolean('x', True).put_int('y', 1).get_bundle()

    ``get_bundle`` hands out the owned bundle itself, so the builder and the
    caller alias the same container afterwards.
    """

    _bundle: Bundle

    def __init__(self, source: Bundle | int | None = None) -> None:
        self._bundle = Bundle(source)

    def get_bundle(self) -> Bundle:
        return self._bundle

    def put(self, key: str | None, value: Any, kind: Kind | None = None) -> Self:
        self._bundle.put(key, value, kind)
        return self

    def put_all(self, source: Bundle | Mapping[str | None, Any]) -> Self:
        self._bundle.put_all(source)
        return self

    def remove(self, key: str | None) -> Self:
        self._bundle.remove(key)
        return self

    def put_boolean(self, key: str | None, value: bool | None) -> Self:
        self._bundle.put_boolean(key, value)
        return self

    def put_boolean_array(self, key: str | None, value: Sequence[bool] | np.ndarray | None) -> Self:
        self._bundle.put_boolean_array(key, value)
        return self

    def put_bundle(self, key: str | None, value: Bundle | None) -> Self:
        self._bundle.put_bundle(key, value)
        return self

    def put_byte(self, key: str | None, value: int | None) -> Self:
        self._bundle.put_byte(key, value)
        return self

    def put_byte_array(self, key: str | None, value: Sequence[int] | bytes | np.ndarray | None) -> Self:
        self._bundle.put_byte_array(key, value)
        return self

    def put_char(self, key: str | None, value: str | None) -> Self:
        self._bundle.put_char(key, value)
        return self

    def put_char_array(self, key: str | None, value: Sequence[str] | np.ndarray | None) -> Self:
        self._bundle.put_char_array(key, value)
        return self

    def put_double(self, key: str | None, value: float | None) -> Self:
        self._bundle.put_double(key, value)
        return self

    def put_double_array(self, key: str | None, value: Sequence[float] | np.ndarray | None) -> Self:
        self._bundle.put_double_array(key, value)
        return self

    def put_float(self, key: str | None, value: float | None) -> Self:
        self._bundle.put_float(key, value)
        return self

    def put_float_array(self, key: str | None, value: Sequence[float] | np.ndarray | None) -> Self:
        self._bundle.put_float_array(key, value)
        return self

    def put_int(self, key: str | None, value: int | None) -> Self:
        self._bundle.put_int(key, value)
        return self

    def put_int_array(self, key: str | None, value: Sequence[int] | np.ndarray | None) -> Self:
        self._bundle.put_int_array(key, value)
        return self

    def put_int_list(self, key: str | None, value: list[int] | None) -> Self:
        self._bundle.put_int_list(key, value)
        return self

    def put_long(self, key: str | None, value: int | None) -> Self:
        self._bundle.put_long(key, value)
        return self

    def put_long_array(self, key: str | None, value: Sequence[int] | np.ndarray | None) -> Self:
        self._bundle.put_long_array(key, value)
        return self

    def put_short(self, key: str | None, value: int | None) -> Self:
        self._bundle.put_short(key, value)
        return self

    def put_short_array(self, key: str | None, value: Sequence[int] | np.ndarray | None) -> Self:
        self._bundle.put_short_array(key, value)
        return self

    def put_string(self, key: str | None, value: str | None) -> Self:
        self._bundle.put_string(key, value)
        return self

    def put_string_array(self, key: str | None, value: Sequence[str] | np.ndarray | None) -> Self:
        self._bundle.put_string_array(key, value)
        return self

    def put_string_list(self, key: str | None, value: list[str] | None) -> Self:
        self._bundle.put_string_list(key, value)
        return self
