"""Behaviour shared by every identifier scheme."""

from chronoid.core.errors import TimeOutOfRange
from chronoid.internal.logging import get_logger
from chronoid.utils.timestamp import millis_to_datetime, to_rfc3339


class SchemeGenerator:
    """Generator for one identifier scheme.

    Subclasses set `name`, `length` and `regex` and implement
    `generate(time_ms)` and `parse(identifier)`.
    """

    name = None
    length = None
    regex = None

    def __init__(self):
        self._log = get_logger(scheme=self.name)

    def generate(self, time_ms):
        raise NotImplementedError

    def parse(self, identifier):
        raise NotImplementedError

    def is_valid(self, identifier):
        return isinstance(identifier, str) and self.regex.fullmatch(identifier) is not None

    def parse_datetime(self, identifier):
        return self._convert(millis_to_datetime, identifier)

    def format_utc_time(self, identifier):
        return self._convert(to_rfc3339, identifier)

    def format_local_time(self, identifier):
        return self._convert(to_rfc3339, identifier, local=True)

    def _convert(self, convert, identifier, **kwargs):
        time_ms = self.parse(identifier)
        try:
            return convert(time_ms, **kwargs)
        except OverflowError as exc:
            raise TimeOutOfRange(
                f"time {time_ms}ms is past what datetime can represent",
                value=time_ms, cause=exc) from exc

    def _saturate(self, value, low, high):
        """Clamp into [low, high]; generate never fails on out-of-range time."""
        if value < low:
            clamped = low
        elif value > high:
            clamped = high
        else:
            return value
        self._log.warn("time out of range, clamped", value=value, clamped=clamped)
        return clamped

    def __repr__(self):
        return f"{type(self).__name__}()"
