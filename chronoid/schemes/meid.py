"""
MEID - 24 character hex identifier.

Format: 12 hex chars of (milliseconds since 1970 + 0x800000000000)
followed by 12 random hex chars.

Known limitation: a time of exactly 0 is written as the single
character "0", giving a 13 character id that fails REGEX and that
parse() rejects as malformed.
"""

import re

from chronoid.core.errors import ArithmeticUnderflow, MalformedTimeField
from chronoid.schemes.base import SchemeGenerator
from chronoid.utils.noise import random_hex
from chronoid.utils.radix import radix_decode

BIAS = 0x800000000000
TIME_LENGTH = 12
RANDOM_LENGTH = 12
MAX_TIME = (1 << 48) - 1 - BIAS

REGEX = re.compile(r"^[0-9a-f]{24}$")


class MeidGenerator(SchemeGenerator):
    name = "meid"
    length = 24
    regex = REGEX

    def _time(self, time_ms):
        time_ms = self._saturate(time_ms, 0, MAX_TIME)
        if time_ms == 0:
            return "0"
        return format(time_ms + BIAS, "012x")

    def generate(self, time_ms):
        return self._time(time_ms) + random_hex(RANDOM_LENGTH)

    def parse(self, identifier):
        if not isinstance(identifier, str) or len(identifier) != self.length:
            raise MalformedTimeField(f"expected {self.length} characters", identifier=identifier)
        biased = radix_decode(identifier[:TIME_LENGTH], 16, identifier=identifier)
        if biased < BIAS:
            raise ArithmeticUnderflow(
                f"time field {identifier[:TIME_LENGTH]!r} is below the MEID bias", value=biased)
        return biased - BIAS


_default = MeidGenerator()


def generate(time_ms):
    return _default.generate(time_ms)


def parse(identifier):
    return _default.parse(identifier)


def parse_datetime(identifier):
    return _default.parse_datetime(identifier)


def format_local_time(identifier):
    return _default.format_local_time(identifier)


def format_utc_time(identifier):
    return _default.format_utc_time(identifier)


def is_valid(identifier):
    return _default.is_valid(identifier)
