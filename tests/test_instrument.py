import itertools
import time

import pytest

from seqops import modify, sections, windows
from seqops.instrument import debug, monitor_pulls


def test_debug():
    arr = list(range(100))

    def do(i, v):
        do.calls.append((i, v))

    do.calls = []

    debugged_arr = debug(arr, do)

    assert list(debugged_arr) == arr
    assert do.calls == list(enumerate(arr))

    do.calls = []
    debugged_arr = debug(arr, do, max_calls=3)

    assert list(debugged_arr) == arr
    assert do.calls == [(0, 0), (1, 1), (2, 2)]

    def proc(x):
        time.sleep(0.01)
        return x

    do.calls = []
    debugged_arr = debug(modify(arr, proc), do, max_rate=10)

    t = time.monotonic()
    assert list(debugged_arr) == arr
    elapsed = time.monotonic() - t
    assert 1 <= len(do.calls) <= elapsed * 10 + 1


@pytest.mark.timeout(3)
def test_monitor_pulls():
    source = monitor_pulls(range(10))
    assert source.n_pulls == 0
    assert source.n_cursors == 0
    assert not source.exhausted

    it = iter(windows(source, 3))
    next(it)
    assert source.n_pulls == 3
    assert source.n_cursors == 1
    assert not source.exhausted

    assert len(list(it)) == 7
    assert source.n_pulls == 10
    assert source.exhausted

    source.reset()
    assert source.n_pulls == 0
    assert source.n_cursors == 0
    assert not source.exhausted

    assert [list(s) for s in sections(source, 5)] == [[0, 1, 2, 3, 4],
                                                       [5, 6, 7, 8, 9]]
    assert source.n_cursors == 1

    source = monitor_pulls(itertools.count())
    assert source.unbounded
    it = iter(source)
    assert [next(it) for _ in range(5)] == list(range(5))
    assert source.n_pulls == 5
