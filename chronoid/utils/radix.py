"""
Positional integer encoding in radix 2..36.

Digits are 0-9 then a-z, most significant first. Padding to a fixed
width is left to the caller.
"""

import re

from chronoid.core.errors import InvalidRadix, MalformedTimeField

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_patterns = {}


def _check_radix(radix):
    if not 2 <= radix <= 36:
        raise InvalidRadix(radix)


def radix_encode(value, radix):
    """Encode a non-negative integer in the given radix."""
    _check_radix(radix)
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")
    if value == 0:
        return "0"

    chars = []
    while value > 0:
        value, remainder = divmod(value, radix)
        chars.append(DIGITS[remainder])

    return "".join(reversed(chars))


def radix_decode(text, radix, identifier=None):
    """Strict inverse of radix_encode.

    Only lowercase digits of the radix are accepted; int() alone would
    also take uppercase, signs, whitespace and underscores.
    """
    _check_radix(radix)
    pattern = _patterns.get(radix)
    if pattern is None:
        pattern = _patterns[radix] = re.compile(f"[{re.escape(DIGITS[:radix])}]+")

    if not pattern.fullmatch(text):
        raise MalformedTimeField(
            f"time field {text!r} is not valid base-{radix}",
            identifier=identifier if identifier is not None else text,
            context={"field": text, "radix": radix},
        )
    return int(text, radix)
