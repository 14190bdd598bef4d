import threading


class AtomicCounter:
    """Fetch-and-increment counter that wraps at 2**bits."""

    __slots__ = ("bits", "_value", "_mask", "_lock")

    def __init__(self, bits, start=0):
        self.bits = bits
        self._mask = (1 << bits) - 1
        self._value = start & self._mask
        self._lock = threading.Lock()

    def next(self):
        """Return the current value and advance, wrapping to 0 past the max."""
        with self._lock:
            value = self._value
            self._value = (value + 1) & self._mask
            return value

    @property
    def value(self):
        return self._value
