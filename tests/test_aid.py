"""Unit tests for AID and AIDX."""

import threading

import pytest

from chronoid.core.errors import MalformedTimeField
from chronoid.schemes import aid as aid_module
from chronoid.schemes import aidx as aidx_module
from chronoid.schemes.aid import EPOCH_2000_MS, MAX_ELAPSED, AidGenerator
from chronoid.schemes.aidx import AidxGenerator
from chronoid.utils.counter import AtomicCounter

SAMPLE_MS = 1741519768780


class TestAid:
    """Tests for the 10 character AID scheme."""

    def test_generate_shape(self, aid):
        """AID is 10 lowercase base-36 characters."""
        generated = aid.generate(SAMPLE_MS)
        assert len(generated) == 10
        assert aid_module.REGEX.match(generated)

    def test_parse_round_trip(self, aid):
        """Parsing recovers the exact millisecond."""
        assert aid.parse(aid.generate(SAMPLE_MS)) == SAMPLE_MS

    def test_module_level_functions(self):
        """Module functions use the default generator."""
        generated = aid_module.generate(SAMPLE_MS)
        assert aid_module.is_valid(generated)
        assert aid_module.parse(generated) == SAMPLE_MS

    def test_time_field_known_value(self, aid):
        """1024ms after 2000-01-01 encodes as 000000sg."""
        assert aid.generate(EPOCH_2000_MS + 1024)[:8] == "000000sg"

    def test_before_epoch_clamps_to_zero(self, aid):
        """Times before 2000 saturate to the epoch instead of failing."""
        generated = aid.generate(0)
        assert generated[:8] == "00000000"
        assert aid.parse(generated) == EPOCH_2000_MS

    def test_past_max_saturates(self, aid):
        """Times beyond 8 base-36 digits saturate, length stays 10."""
        generated = aid.generate(EPOCH_2000_MS + MAX_ELAPSED + 5000)
        assert len(generated) == 10
        assert generated[:8] == "zzzzzzzz"
        assert aid.parse(generated) == EPOCH_2000_MS + MAX_ELAPSED

    def test_counter_increments(self, aid):
        """Same millisecond, consecutive counter values."""
        first, second = aid.generate(SAMPLE_MS), aid.generate(SAMPLE_MS)
        assert first[8:] == "00"
        assert second[8:] == "01"
        assert first < second

    def test_distinct_within_millisecond(self, aid):
        """The 2-char field distinguishes 1296 ids in one millisecond."""
        ids = [aid.generate(SAMPLE_MS) for _ in range(36 * 36)]
        assert len(set(ids)) == 36 * 36
        assert ids == sorted(ids)

    def test_counter_wraps(self):
        """16-bit counter goes 65535 -> 0."""
        generator = AidGenerator(counter=AtomicCounter(16, start=65535))
        last, wrapped = generator.generate(SAMPLE_MS), generator.generate(SAMPLE_MS)
        # 65535 % 1296 == 735 == "kf"
        assert last[8:] == "kf"
        assert wrapped[8:] == "00"
        assert generator.counter.value == 1

    def test_generators_have_independent_counters(self):
        """Each generator owns its counter."""
        a, b = AidGenerator(), AidGenerator()
        a.generate(SAMPLE_MS)
        a.generate(SAMPLE_MS)
        assert b.generate(SAMPLE_MS)[8:] == "00"

    def test_monotonic_across_times(self, aid):
        """Later times sort after earlier ones."""
        times = [EPOCH_2000_MS, EPOCH_2000_MS + 1, SAMPLE_MS - 1000, SAMPLE_MS, SAMPLE_MS + 1, 2 ** 41]
        ids = [aid.generate(t) for t in reversed(times)]
        assert sorted(ids) == list(reversed(ids))

    @pytest.mark.parametrize("bad", ["", "0000000", "ABCDEFGH00", "0000-00000", " 00000000"])
    def test_parse_malformed(self, aid, bad):
        """Short or out-of-alphabet time fields raise MalformedTimeField."""
        with pytest.raises(MalformedTimeField):
            aid.parse(bad)

    def test_parse_ignores_counter_field(self, aid):
        """Only the first 8 characters are read."""
        generated = aid.generate(SAMPLE_MS)
        assert aid.parse(generated[:8] + "!!") == SAMPLE_MS

    def test_format_utc_time(self, aid):
        """RFC 3339 in UTC with milliseconds."""
        assert aid.format_utc_time(aid.generate(SAMPLE_MS)) == "2025-03-09T11:29:28.780+00:00"

    def test_format_local_time_same_instant(self, aid):
        """Local formatting denotes the same instant."""
        generated = aid.generate(SAMPLE_MS)
        local = aid.format_local_time(generated)
        assert local.startswith("20")
        assert aid.parse_datetime(generated).isoformat(timespec="milliseconds") == aid.format_utc_time(generated)


class TestAidx:
    """Tests for the 16 character AIDX scheme."""

    def test_generate_shape(self, aidx):
        """AIDX is 16 lowercase base-36 characters."""
        generated = aidx.generate(SAMPLE_MS)
        assert len(generated) == 16
        assert aidx_module.REGEX.match(generated)

    def test_parse_round_trip(self, aidx):
        """Parsing recovers the exact millisecond."""
        assert aidx.parse(aidx.generate(SAMPLE_MS)) == SAMPLE_MS

    def test_module_level_functions(self):
        """Module functions use the default generator."""
        generated = aidx_module.generate(SAMPLE_MS)
        assert aidx_module.is_valid(generated)
        assert aidx_module.parse(generated) == SAMPLE_MS
        assert generated[8:12] == aidx_module.node_tag()

    def test_same_time_field_as_aid(self, aid, aidx):
        """AID and AIDX share the time encoding."""
        assert aidx.generate(SAMPLE_MS)[:8] == aid.generate(SAMPLE_MS)[:8]

    def test_node_tag_stable(self, aidx):
        """The node tag is chosen once and reused."""
        tags = {aidx.generate(SAMPLE_MS)[8:12] for _ in range(50)}
        assert tags == {aidx.node_tag}
        assert len(aidx.node_tag) == 4

    def test_pinned_node_tag(self):
        """A configured node tag is used as-is."""
        generator = AidxGenerator(node_tag="n0d3")
        assert generator.generate(SAMPLE_MS)[8:12] == "n0d3"

    @pytest.mark.parametrize("tag", ["abc", "abcde", "ABCD", "ab-d"])
    def test_invalid_node_tag(self, tag):
        """Node tags must be 4 characters of [0-9a-z]."""
        with pytest.raises(ValueError):
            AidxGenerator(node_tag=tag)

    def test_node_tag_initialized_once_under_contention(self):
        """Concurrent first callers all observe one tag."""
        generator = AidxGenerator()
        barrier = threading.Barrier(16)
        seen = []

        def worker():
            barrier.wait()
            seen.append(generator.node_tag)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(set(seen)) == 1

    def test_counter_field_is_hex(self, aidx):
        """Counter renders as 4 zero-padded hex characters."""
        ids = [aidx.generate(SAMPLE_MS) for _ in range(17)]
        assert ids[0][12:] == "0000"
        assert ids[10][12:] == "000a"
        assert ids[16][12:] == "0010"

    def test_distinct_within_millisecond(self, aidx):
        """65536 ids in one millisecond are all distinct."""
        ids = {aidx.generate(SAMPLE_MS) for _ in range(65536)}
        assert len(ids) == 65536

    def test_counter_field_rolls_over(self):
        """Field goes ffff -> 0000 while the 32-bit counter keeps counting."""
        generator = AidxGenerator(counter=AtomicCounter(32, start=0xFFFF))
        assert generator.generate(SAMPLE_MS)[12:] == "ffff"
        assert generator.generate(SAMPLE_MS)[12:] == "0000"
        assert generator.counter.value == 0x10001

    def test_counter_wraps_at_32_bits(self):
        """The counter itself wraps at 2**32."""
        generator = AidxGenerator(counter=AtomicCounter(32, start=2 ** 32 - 1))
        assert generator.generate(SAMPLE_MS)[12:] == "ffff"
        assert generator.generate(SAMPLE_MS)[12:] == "0000"
        assert generator.counter.value == 1

    def test_concurrent_generation_unique(self, aidx):
        """Threads sharing a generator never mint the same id."""
        results = []
        lock = threading.Lock()

        def worker():
            local = [aidx.generate(SAMPLE_MS) for _ in range(500)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 4000
        assert len(set(results)) == 4000

    def test_monotonic_across_times(self, aidx):
        """Later times sort after earlier ones, regardless of counter."""
        earlier = [aidx.generate(SAMPLE_MS) for _ in range(20)]
        later = aidx.generate(SAMPLE_MS + 1)
        assert all(e < later for e in earlier)

    def test_parse_malformed(self, aidx):
        """Same error behavior as AID."""
        with pytest.raises(MalformedTimeField):
            aidx.parse("ZZZZZZZZ00000000")
