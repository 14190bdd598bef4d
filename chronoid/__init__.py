"""Time-ordered identifier schemes: AID, AIDX, MEID, legacy ObjectId and ULID."""

from chronoid.config import Config, load_config
from chronoid.core.errors import (
    ArithmeticUnderflow,
    ExternalDecodeFailure,
    IdError,
    InvalidRadix,
    MalformedIdentifier,
    MalformedTimeField,
    TimeOutOfRange,
    UnknownScheme,
)
from chronoid.core.registry import SchemeRegistry, configure, get_registry
from chronoid.utils.radix import radix_encode

__version__ = "0.1.0"


def generate(scheme=None, time_ms=None):
    return get_registry().generate(scheme, time_ms)


def parse(scheme, identifier):
    return get_registry().parse(scheme, identifier)


def parse_datetime(scheme, identifier):
    return get_registry().parse_datetime(scheme, identifier)


def format_local_time(scheme, identifier):
    return get_registry().format_local_time(scheme, identifier)


def format_utc_time(scheme, identifier):
    return get_registry().format_utc_time(scheme, identifier)


def is_valid(scheme, identifier):
    return get_registry().is_valid(scheme, identifier)


__all__ = [
    "ArithmeticUnderflow",
    "Config",
    "ExternalDecodeFailure",
    "IdError",
    "InvalidRadix",
    "MalformedIdentifier",
    "MalformedTimeField",
    "SchemeRegistry",
    "TimeOutOfRange",
    "UnknownScheme",
    "configure",
    "format_local_time",
    "format_utc_time",
    "generate",
    "get_registry",
    "is_valid",
    "load_config",
    "parse",
    "parse_datetime",
    "radix_encode",
]
