"""
Legacy ObjectId - 24 character hex identifier.

Format: 8 hex chars of seconds since 1970 followed by 16 random hex
chars. Kept for ids minted by older systems in this format; parsing
only recovers whole seconds.
"""

import re

from chronoid.core.errors import MalformedTimeField
from chronoid.schemes.base import SchemeGenerator
from chronoid.utils.noise import random_hex
from chronoid.utils.radix import radix_decode

TIME_LENGTH = 8
RANDOM_LENGTH = 16
MAX_SECONDS = 0xFFFFFFFF

REGEX = re.compile(r"^[0-9a-f]{24}$")


class ObjectIdGenerator(SchemeGenerator):
    name = "objectid"
    length = 24
    regex = REGEX

    def generate(self, time_ms):
        seconds = self._saturate(time_ms // 1000, 0, MAX_SECONDS)
        return format(seconds, "08x") + random_hex(RANDOM_LENGTH)

    def parse(self, identifier):
        if not isinstance(identifier, str) or len(identifier) < TIME_LENGTH:
            raise MalformedTimeField(
                f"expected at least {TIME_LENGTH} time characters", identifier=identifier)
        return radix_decode(identifier[:TIME_LENGTH], 16, identifier=identifier) * 1000


_default = ObjectIdGenerator()


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
