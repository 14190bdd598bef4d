"""
AID - 10 character time-ordered identifier.

Format: 8 base-36 chars of milliseconds since 2000-01-01T00:00:00Z
followed by 2 base-36 chars of a per-generator counter.
"""

import re

from chronoid.core.errors import MalformedTimeField
from chronoid.schemes.base import SchemeGenerator
from chronoid.utils.counter import AtomicCounter
from chronoid.utils.radix import radix_decode, radix_encode

# 2000-01-01T00:00:00Z
EPOCH_2000_MS = 946684800000
TIME_LENGTH = 8
NOISE_LENGTH = 2
MAX_ELAPSED = 36 ** TIME_LENGTH - 1
COUNTER_BITS = 16

REGEX = re.compile(r"^[0-9a-z]{10}$")


def encode_time(generator, time_ms):
    """8-char base-36 time field, saturating below the epoch and past the max."""
    elapsed = generator._saturate(time_ms - EPOCH_2000_MS, 0, MAX_ELAPSED)
    return radix_encode(elapsed, 36).rjust(TIME_LENGTH, "0")


def decode_time(identifier):
    if not isinstance(identifier, str) or len(identifier) < TIME_LENGTH:
        raise MalformedTimeField(
            f"expected at least {TIME_LENGTH} time characters", identifier=identifier)
    return radix_decode(identifier[:TIME_LENGTH], 36, identifier=identifier) + EPOCH_2000_MS


class AidGenerator(SchemeGenerator):
    name = "aid"
    length = 10
    regex = REGEX

    def __init__(self, counter=None):
        super().__init__()
        self.counter = counter or AtomicCounter(COUNTER_BITS)

    def _noise(self):
        # Two base-36 digits hold 1296 values; the field shows the last two.
        value = self.counter.next() % 36 ** NOISE_LENGTH
        return radix_encode(value, 36).rjust(NOISE_LENGTH, "0")

    def generate(self, time_ms):
        return encode_time(self, time_ms) + self._noise()

    def parse(self, identifier):
        return decode_time(identifier)


_default = AidGenerator()


def default_generator():
    """The process-wide AID generator; every default path shares its counter."""
    return _default


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
