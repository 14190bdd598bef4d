"""
AIDX - 16 character time-ordered identifier.

Format: 8 base-36 chars of milliseconds since 2000-01-01T00:00:00Z,
4 chars of node tag, 4 hex chars of a per-generator counter.

The node tag is drawn once per generator from [0-9a-z] and separates
ids minted by different processes in the same millisecond.
"""

import re
import threading

from chronoid.schemes.aid import decode_time, encode_time
from chronoid.schemes.base import SchemeGenerator
from chronoid.utils.counter import AtomicCounter
from chronoid.utils.noise import random_chars

NODE_LENGTH = 4
NOISE_LENGTH = 4
COUNTER_BITS = 32

REGEX = re.compile(r"^[0-9a-z]{16}$")
NODE_REGEX = re.compile(r"^[0-9a-z]{4}$")


class AidxGenerator(SchemeGenerator):
    name = "aidx"
    length = 16
    regex = REGEX

    def __init__(self, node_tag=None, counter=None):
        super().__init__()
        if node_tag is not None and not NODE_REGEX.fullmatch(node_tag):
            raise ValueError(f"node tag must be 4 characters of [0-9a-z], got {node_tag!r}")
        self._node_tag = node_tag
        self._node_lock = threading.Lock()
        self.counter = counter or AtomicCounter(COUNTER_BITS)

    @property
    def node_tag(self):
        """Chosen on first use; concurrent first callers all see the same tag."""
        if self._node_tag is None:
            with self._node_lock:
                if self._node_tag is None:
                    self._node_tag = random_chars(NODE_LENGTH)
                    self._log.info("node tag assigned", node=self._node_tag)
        return self._node_tag

    def _noise(self):
        # 32-bit counter, field shows the low 16 bits: ffff rolls to 0000.
        value = self.counter.next() & 0xFFFF
        return format(value, "04x")

    def generate(self, time_ms):
        return encode_time(self, time_ms) + self.node_tag + self._noise()

    def parse(self, identifier):
        return decode_time(identifier)


_default = AidxGenerator()


def default_generator():
    """The process-wide AIDX generator; every default path shares its counter and tag."""
    return _default


def generate(time_ms):
    return _default.generate(time_ms)


def parse(identifier):
    return _default.parse(identifier)


def parse_datetime(identifier):
    return _default.parse_datetime(identifier)


def node_tag():
    return _default.node_tag


def format_local_time(identifier):
    return _default.format_local_time(identifier)


def format_utc_time(identifier):
    return _default.format_utc_time(identifier)


def is_valid(identifier):
    return _default.is_valid(identifier)
