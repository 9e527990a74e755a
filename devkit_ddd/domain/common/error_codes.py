"""
Error code tables.

Codes are stable strings, optionally namespaced by the module that owns
them. Example:

    codes = create_error_codes(["argument-invalid"], module_name="ddd")
    codes["argument-invalid"]  # "ddd/argument-invalid"
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType


def create_error_codes(
    source: Sequence[str] | Mapping[str, str],
    *,
    module_name: str = "",
    delimiter: str = "/",
) -> Mapping[str, str]:
    """
    Build a read-only error code table.

    Args:
        source: Code names, or a mapping of key to code name
        module_name: Optional namespace prepended to every code
        delimiter: Separator between namespace and code name

    Returns:
        Mapping of key to fully qualified code
    """
    if isinstance(source, str):
        raise TypeError("source must be a sequence of names or a mapping")

    pairs = source.items() if isinstance(source, Mapping) else ((name, name) for name in source)

    codes: dict[str, str] = {}
    for key, value in pairs:
        codes[key] = f"{module_name}{delimiter}{value}" if module_name else value
    return MappingProxyType(codes)


DDD_MODULE_NAME = "ddd"

DDD_ERROR_CODES = create_error_codes(
    ["argument-invalid", "invalid-input"],
    module_name=DDD_MODULE_NAME,
)
