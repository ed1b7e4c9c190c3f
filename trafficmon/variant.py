"""A small tagged value used to fill numbered placeholders in format strings."""

from __future__ import annotations

import enum

_UINT32_MASK = 0xFFFFFFFF


class _Kind(enum.Enum):
    INT = enum.auto()
    UINT = enum.auto()
    DOUBLE = enum.auto()
    STRING = enum.auto()


class Variant:
    """Holds an int, unsigned int, float or string and renders it as text."""

    __slots__ = ("_value", "_kind")

    def __init__(self, value, unsigned=False):
        if isinstance(value, int):
            self._value = value
            self._kind = _Kind.UINT if unsigned else _Kind.INT
            return
        if unsigned:
            raise TypeError("only integer values can be unsigned")
        if isinstance(value, float):
            self._value = value
            self._kind = _Kind.DOUBLE
        elif isinstance(value, str):
            self._value = value
            self._kind = _Kind.STRING
        else:
            raise TypeError(f"unsupported variant value type: {type(value).__name__}")

    def to_string(self) -> str:
        """Render the value: %d, %u (32-bit), %g, or the string itself."""
        if self._kind is _Kind.INT:
            return "%d" % int(self._value)
        if self._kind is _Kind.UINT:
            return "%u" % (int(self._value) & _UINT32_MASK)
        if self._kind is _Kind.DOUBLE:
            return "%g" % self._value
        return self._value

    __str__ = to_string

    def __repr__(self) -> str:
        return f"Variant({self._value!r}, kind={self._kind.name})"