"""Item name helpers — charge/dose tokens like "Prayer potion(3)"."""

import re

# Optional sign then ASCII digits only, no whitespace or underscores
_CHARGE_PATTERN = re.compile(r"[+-]?[0-9]+")


def _charge_token(name: str) -> tuple[int, int] | None:
    """Return (open, close) indices of the first "(...)" in name, if any."""
    open_index = name.find("(")
    if open_index == -1:
        return None
    close_index = name.find(")", open_index + 1)
    if close_index == -1:
        return None
    return open_index, close_index


def parse_charge(name: str) -> int:
    """Return the charge/dose embedded in an item name.

    Returns 0 when the name has no "(...)" token or its content is not an
    integer.
    """
    token = _charge_token(name)
    if token is None:
        return 0
    open_index, close_index = token
    text = name[open_index + 1 : close_index]
    if _CHARGE_PATTERN.fullmatch(text) is None:
        return 0
    charge = int(text)
    # Values outside a 32-bit int are malformed too
    if not -(2**31) <= charge < 2**31:
        return 0
    return charge


def base_name(name: str) -> str:
    """Return the item name with its charge token stripped.

    >>> base_name("Ring of dueling(4)")
    'Ring of dueling'
    """
    token = _charge_token(name)
    if token is None:
        return name.strip()
    return name[: token[0]].strip()


def match_key(name: str) -> str:
    """Key under which two names refer to the same item, ignoring case and charge."""
    return base_name(name).casefold()
