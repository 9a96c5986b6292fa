"""
Boolean Value Type

Serializers need to tell a boolean apart from the integers 1 and 0 (and
from Python's own ``True``/``False``, which *are* integers) so that a
decoded ``true`` is encoded back as ``true`` and not as ``1``.

``Boolean`` wraps the integer 1 or 0:
    - numeric context:  int(b), float(b), operator.index(b) -> 1 / 0
    - string context:   str(b) -> "1" / "0"
    - logical context:  bool(b), ``if b:`` -> True / False

Two canonical instances exist per process, returned by ``true()`` and
``false()``. ``to_bool`` only ever returns one of them.

IMPORTANT:
    Instances are immutable. ``b + 1`` returns a plain int and leaves
    ``b`` (which may be a shared singleton) untouched.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Optional

from typeserial.error_value import is_error
from typeserial.registry import CapabilityRegistry, default_registry


# The coercions are plain functions so they can also be attached to a
# foreign shared type (see typeserial.compat). Any shared-convention type
# keeps its wrapped integer in ``value``.

def _to_number(self) -> int:
    return self.value


def _to_float(self) -> float:
    return float(self.value)


def _to_string(self) -> str:
    return str(self.value)


def _to_truth(self) -> bool:
    return bool(self.value)


def _equals(self, other: Any) -> Any:
    if is_bool(other):
        return self.value == int(other)
    if isinstance(other, (int, float)):
        return self.value == other
    return NotImplemented


def _hash(self) -> int:
    # Must agree with __eq__: Boolean(True) == 1 == 1.0 == True
    return hash(self.value)


def _as_operand(other: Any) -> Any:
    if is_bool(other):
        return int(other)
    if isinstance(other, (int, float)):
        return other
    return None


def _numeric_operator(op, reflected: bool = False, integral: bool = False):
    """Build a binary operator that works on the wrapped integer."""

    def method(self, other: Any) -> Any:
        operand = _as_operand(other)
        if operand is None or (integral and not isinstance(operand, int)):
            return NotImplemented
        if reflected:
            return op(operand, self.value)
        return op(self.value, operand)

    return method


@dataclass(frozen=True, eq=False, repr=False)
class Boolean:
    """
    Boolean object wrapping 1 or 0.

    ``Boolean(x)`` normalises any truth value ``x`` and builds an
    independent instance: it compares equal to the matching singleton but
    is not identical to it.

    Properties:
        value: 1 or 0
    """

    value: int = 0

    def __post_init__(self):
        object.__setattr__(self, "value", 1 if self.value else 0)

    __bool__ = _to_truth
    __int__ = _to_number
    __index__ = _to_number
    __float__ = _to_float
    __str__ = _to_string
    __eq__ = _equals
    __hash__ = _hash

    def to_number(self) -> int:
        """Numeric value, 1 or 0."""
        return self.value

    def to_string(self) -> str:
        """String value, "1" or "0"."""
        return str(self.value)

    def to_bool(self) -> bool:
        """Native truth value."""
        return bool(self.value)

    # Arithmetic, comparison and bitwise operators yield new plain numbers,
    # never a modified Boolean.

    __add__ = _numeric_operator(operator.add)
    __radd__ = _numeric_operator(operator.add, reflected=True)
    __sub__ = _numeric_operator(operator.sub)
    __rsub__ = _numeric_operator(operator.sub, reflected=True)
    __mul__ = _numeric_operator(operator.mul)
    __rmul__ = _numeric_operator(operator.mul, reflected=True)
    __truediv__ = _numeric_operator(operator.truediv)
    __rtruediv__ = _numeric_operator(operator.truediv, reflected=True)
    __floordiv__ = _numeric_operator(operator.floordiv)
    __rfloordiv__ = _numeric_operator(operator.floordiv, reflected=True)
    __mod__ = _numeric_operator(operator.mod)
    __rmod__ = _numeric_operator(operator.mod, reflected=True)

    __and__ = _numeric_operator(operator.and_, integral=True)
    __rand__ = _numeric_operator(operator.and_, reflected=True, integral=True)
    __or__ = _numeric_operator(operator.or_, integral=True)
    __ror__ = _numeric_operator(operator.or_, reflected=True, integral=True)
    __xor__ = _numeric_operator(operator.xor, integral=True)
    __rxor__ = _numeric_operator(operator.xor, reflected=True, integral=True)

    __lt__ = _numeric_operator(operator.lt)
    __le__ = _numeric_operator(operator.le)
    __gt__ = _numeric_operator(operator.gt)
    __ge__ = _numeric_operator(operator.ge)

    def __neg__(self) -> int:
        return -self.value

    def __pos__(self) -> int:
        return self.value

    def __abs__(self) -> int:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __copy__(self) -> "Boolean":
        return self

    def __deepcopy__(self, memo) -> "Boolean":
        return self

    def __repr__(self) -> str:
        if self is _TRUE:
            return "typeserial.true"
        if self is _FALSE:
            return "typeserial.false"
        return f"Boolean({bool(self.value)})"


_TRUE = Boolean(1)
_FALSE = Boolean(0)


def true() -> Boolean:
    """The canonical true object."""
    return _TRUE


def false() -> Boolean:
    """The canonical false object."""
    return _FALSE


def shared_type_name(registry: Optional[CapabilityRegistry] = None) -> str:
    """Identifier cooperating libraries use for the shared boolean type."""
    registry = registry if registry is not None else default_registry
    return registry.type_name


def shared_type(registry: Optional[CapabilityRegistry] = None) -> type:
    """
    Class currently bound to the shared type name.

    Falls back to ``Boolean`` when nothing has been bound (passive mode
    with no other library loaded).
    """
    registry = registry if registry is not None else default_registry
    bound = registry.shared_type()
    return bound if bound is not None else Boolean


def is_bool(value: Any, registry: Optional[CapabilityRegistry] = None) -> bool:
    """
    True if ``value`` is a boolean object.

    Type-based, not truth-based: native True/False, numbers and strings
    are never boolean objects. Instances of a foreign class bound to the
    shared type name are.
    """
    if isinstance(value, Boolean):
        return True
    registry = registry if registry is not None else default_registry
    bound = registry.shared_type()
    return bound is not None and isinstance(value, bound)


def to_bool(value: Any) -> Boolean:
    """
    Map any value to ``true()`` or ``false()`` by Python truthiness.

    Never raises: the error sentinel, and any value whose truth test
    raises (e.g. a multi-element array), map to ``false()``.
    """
    if is_error(value):
        return _FALSE
    try:
        return _TRUE if value else _FALSE
    except Exception:
        return _FALSE


def is_true(value: Any, registry: Optional[CapabilityRegistry] = None) -> bool:
    """True only for a boolean object that is true."""
    return is_bool(value, registry) and to_bool(value) is _TRUE


def is_false(value: Any, registry: Optional[CapabilityRegistry] = None) -> bool:
    """True only for a boolean object that is false."""
    return is_bool(value, registry) and to_bool(value) is _FALSE
