"""
ULID - 26 character Crockford base32 identifier.

48-bit millisecond timestamp + 80 bits of randomness. Encoding and
decoding are delegated to python-ulid; this module only gives ULIDs
the same generate/parse/format surface as the other schemes.
"""

import re

from ulid import ULID

from chronoid.core.errors import ExternalDecodeFailure
from chronoid.schemes.base import SchemeGenerator

MAX_TIME = (1 << 48) - 1

REGEX = re.compile(r"^[0-7][0-9A-HJKMNP-TV-Z]{25}$")


class UlidGenerator(SchemeGenerator):
    name = "ulid"
    length = 26
    regex = REGEX

    def generate(self, time_ms):
        # int timestamps are taken as milliseconds by ULID.from_timestamp
        return str(ULID.from_timestamp(int(self._saturate(time_ms, 0, MAX_TIME))))

    def parse(self, identifier):
        try:
            value = ULID.from_str(identifier)
        except (ValueError, TypeError) as exc:
            raise ExternalDecodeFailure(
                f"not a ULID: {exc}", identifier=identifier, cause=exc) from exc
        return value.milliseconds


_default = UlidGenerator()


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
