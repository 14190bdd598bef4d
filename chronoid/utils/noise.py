"""Random discriminator characters."""

import secrets

HEX = "0123456789abcdef"
ALNUM_LOWER = "0123456789abcdefghijklmnopqrstuvwxyz"


def random_chars(length, alphabet=ALNUM_LOWER):
    """Draw `length` characters independently and uniformly from `alphabet`."""
    return "".join(secrets.choice(alphabet) for _ in range(length))


def random_hex(length):
    return random_chars(length, HEX)
