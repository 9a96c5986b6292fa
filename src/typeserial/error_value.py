"""
Error sentinel.

Some formats carry a value that means "undefined" or "error" (CBOR's
``undefined``, for instance). A decoder can put ``error()`` in its data tree
for such values. The sentinel cannot be used as a value: any boolean,
numeric, string or equality use raises ``SerialiserError``. Identity checks
(``v is error()``) and ``is_error`` keep working.
"""

from typing import Any


class SerialiserError(Exception):
    """Raised when the error sentinel is used as a value."""
    pass


class Error:
    """Serialiser error value. Use ``error()`` for the shared instance."""

    __slots__ = ()

    def _refuse(self, *args):
        raise SerialiserError("the serialiser error value cannot be used as a value")

    __bool__ = _refuse
    __int__ = _refuse
    __index__ = _refuse
    __float__ = _refuse
    __str__ = _refuse
    __eq__ = _refuse
    __ne__ = _refuse
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        if self is _ERROR:
            return "typeserial.error"
        return "Error()"


_ERROR = Error()


def error() -> Error:
    """The shared serialiser error value."""
    return _ERROR


def is_error(value: Any) -> bool:
    """True if ``value`` is an error sentinel (type-based)."""
    return isinstance(value, Error)
