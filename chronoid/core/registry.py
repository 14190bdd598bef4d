"""Select identifier schemes by name."""

import threading

from chronoid.config import Config
from chronoid.core.errors import UnknownScheme
from chronoid.internal.logging import LogLevel, StructuredLogger, get_logger
from chronoid.schemes import aid, aidx
from chronoid.schemes.aid import AidGenerator
from chronoid.schemes.aidx import AidxGenerator
from chronoid.schemes.meid import MeidGenerator
from chronoid.schemes.object_id import ObjectIdGenerator
from chronoid.schemes.ulid_id import UlidGenerator
from chronoid.utils.timestamp import now_millis

_registry = None
_registry_lock = threading.Lock()


def normalize(name):
    """'AIDX', 'object-id' and 'object_id' all resolve the same way."""
    return str(name).lower().replace("-", "").replace("_", "")


class SchemeRegistry:
    def __init__(self, generators, default_scheme="aidx"):
        self._generators = {normalize(g.name): g for g in generators}
        self.default_scheme = default_scheme
        # Fail at construction rather than on the first generate() call.
        self.get(default_scheme)

    @classmethod
    def from_config(cls, config=None):
        config = config or Config()
        # AID and AIDX keep one counter per process, whichever registry mints the id.
        shared_aid, shared_aidx = aid.default_generator(), aidx.default_generator()
        return cls(
            [
                AidGenerator(counter=shared_aid.counter),
                AidxGenerator(node_tag=config.ids.node_tag or shared_aidx.node_tag,
                              counter=shared_aidx.counter),
                MeidGenerator(),
                ObjectIdGenerator(),
                UlidGenerator(),
            ],
            default_scheme=config.ids.default_scheme,
        )

    def names(self):
        return sorted(self._generators)

    def get(self, scheme=None):
        key = normalize(self.default_scheme if scheme is None else scheme)
        try:
            return self._generators[key]
        except KeyError:
            raise UnknownScheme(self.default_scheme if scheme is None else scheme) from None

    def generate(self, scheme=None, time_ms=None):
        if time_ms is None:
            time_ms = now_millis()
        return self.get(scheme).generate(time_ms)

    def parse(self, scheme, identifier):
        return self.get(scheme).parse(identifier)

    def parse_datetime(self, scheme, identifier):
        return self.get(scheme).parse_datetime(identifier)

    def format_local_time(self, scheme, identifier):
        return self.get(scheme).format_local_time(identifier)

    def format_utc_time(self, scheme, identifier):
        return self.get(scheme).format_utc_time(identifier)

    def is_valid(self, scheme, identifier):
        return self.get(scheme).is_valid(identifier)


def configure(config=None):
    """Apply a Config to the process: log level and the default registry."""
    global _registry
    config = config or Config()
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    registry = SchemeRegistry.from_config(config)
    with _registry_lock:
        _registry = registry
    get_logger().info("id registry configured", default_scheme=config.ids.default_scheme,
                      node=config.ids.node_tag)
    return registry


def get_registry():
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = SchemeRegistry.from_config()
    return _registry
