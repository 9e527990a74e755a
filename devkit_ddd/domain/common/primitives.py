"""Classification of leaf values."""

from datetime import date

from .types import UNSET

_PLAIN_SCALARS = (str, int, float, bool, bytes, bytearray, complex)


def is_domain_primitive(value: object) -> bool:
    """
    Check whether value is a domain primitive.

    Domain primitives are str, int, float, bool, None and dates.
    UNSET is never a domain primitive.
    """
    return value is None or isinstance(value, (str, int, float, bool, date))


def is_primitive(value: object) -> bool:
    """Check whether value is a plain scalar, including UNSET and non-JSON scalars."""
    return value is None or value is UNSET or isinstance(value, _PLAIN_SCALARS)
