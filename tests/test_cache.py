from csim.cache import Cache, Counters, Outcome


def test_new_cache_is_empty():
    cache = Cache(2, 3)
    assert len(cache.sets) == 4
    assert all(len(s.lines) == 3 for s in cache.sets)
    assert all(cache.valid_lines(i) == 0 for i in range(4))


def test_miss_fill_then_hit():
    cache = Cache(0, 2)
    counters = Counters()
    assert cache.access(0, 7, 1, counters) is Outcome.MISS_FILL
    assert cache.access(0, 7, 2, counters) is Outcome.HIT
    assert counters.as_tuple() == (1, 1, 0)
    assert cache.sets[0].lines[0].time == 2


def test_fill_uses_first_invalid_line():
    cache = Cache(0, 3)
    counters = Counters()
    cache.access(0, 1, 1, counters)
    cache.access(0, 2, 2, counters)
    lines = cache.sets[0].lines
    assert [line.tag for line in lines] == [1, 2, None]
    assert [line.valid for line in lines] == [True, True, False]


def test_evicts_least_recently_used():
    cache = Cache(0, 2)
    counters = Counters()
    cache.access(0, 1, 1, counters)
    cache.access(0, 2, 2, counters)
    cache.access(0, 1, 3, counters)
    assert cache.access(0, 3, 4, counters) is Outcome.MISS_EVICT
    assert [line.tag for line in cache.sets[0].lines] == [1, 3]
    assert counters.as_tuple() == (1, 3, 1)


def test_eviction_tie_breaks_on_lowest_index():
    cache = Cache(0, 3)
    counters = Counters()
    for tag in (1, 2, 3):
        cache.access(0, tag, 5, counters)
    assert cache.access(0, 4, 6, counters) is Outcome.MISS_EVICT
    assert [line.tag for line in cache.sets[0].lines] == [4, 2, 3]


def test_no_eviction_while_set_has_invalid_line():
    cache = Cache(0, 4)
    counters = Counters()
    for stamp, tag in enumerate(range(4), 1):
        assert cache.access(0, tag, stamp, counters) is Outcome.MISS_FILL
    assert counters.evictions == 0
    assert cache.access(0, 99, 5, counters) is Outcome.MISS_EVICT


def test_sets_are_independent():
    cache = Cache(1, 1)
    counters = Counters()
    cache.access(0, 1, 1, counters)
    assert cache.access(1, 1, 2, counters) is Outcome.MISS_FILL
    assert cache.access(0, 1, 3, counters) is Outcome.HIT


def test_valid_lines_never_exceed_associativity_or_decrease():
    cache = Cache(1, 2)
    counters = Counters()
    previous = [0, 0]
    for stamp in range(1, 50):
        set_index = stamp % 2
        cache.access(set_index, stamp * 7 % 5, stamp, counters)
        valid = [cache.valid_lines(i) for i in range(2)]
        assert all(v <= 2 for v in valid)
        assert all(v >= p for v, p in zip(valid, previous))
        previous = valid


def test_no_duplicate_tags_in_a_set():
    cache = Cache(0, 4)
    counters = Counters()
    for stamp, tag in enumerate([1, 2, 1, 3, 2, 5, 6, 1, 7, 2], 1):
        cache.access(0, tag, stamp, counters)
        tags = [line.tag for line in cache.sets[0].lines if line.valid]
        assert len(tags) == len(set(tags))


def test_dump_lists_every_line():
    cache = Cache(1, 2)
    cache.access(1, 3, 1, Counters())
    rows = cache.dump()
    assert len(rows) == 4
    assert rows[2] == 'set: 1; line: 0, valid: 1, time: 1'
    assert rows[0] == 'set: 0; line: 0, valid: 0, time: 0'


def test_counters_format():
    assert str(Counters(1, 2, 3)) == 'hits:1 misses:2 evictions:3'
    assert Counters(1, 2, 3) == Counters(1, 2, 3)
