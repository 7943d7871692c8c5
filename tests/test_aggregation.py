import itertools

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from seqops import (
    EvaluationError, InvalidArgument, aggregate_changes, coalesce, for_each,
    is_empty, seqslice, subset, to_text)
from seqops.instrument import monitor_pulls


def identity(x):
    return x


def test_aggregate_changes():
    data = [3, 1, 4, 1, 5]
    assert aggregate_changes(data, identity, max) == 5
    assert aggregate_changes(data, identity, min) == 1

    # the second 1 leaves the minimum unchanged
    items = [(3, 'a'), (1, 'b'), (4, 'c'), (1, 'd'), (5, 'e')]
    result = aggregate_changes(items, lambda item: item[0], min)
    assert result == (1, 'b')

    words = ['kiwi', 'fig', 'banana', 'apple', 'cherry']
    assert aggregate_changes(words, len, max) == 'banana'

    assert aggregate_changes([7], identity, max) == 7
    assert aggregate_changes([2, 2, 2], identity, max) == 2


def test_aggregate_changes_initial():
    data = [3, 1, 4, 1, 5]
    assert aggregate_changes(data, identity, min, initial=0) is None
    assert aggregate_changes(data, identity, min, initial=0, default=-1) == -1
    assert aggregate_changes(data, identity, max, initial=10) is None
    assert aggregate_changes(data, identity, max, initial=4) == 5
    assert aggregate_changes(data, identity, lambda a, b: a + b, initial=0) == 5


def test_aggregate_changes_no_change():
    assert aggregate_changes([], identity, max) is None
    marker = object()
    assert aggregate_changes([], identity, max, default=marker) is marker
    assert aggregate_changes(iter([]), identity, max, default=0) == 0


def test_aggregate_changes_laziness():
    source = monitor_pulls(range(10))
    assert aggregate_changes(source, identity, max) == 9
    assert source.n_cursors == 1
    assert source.n_pulls == 10
    assert source.exhausted


def test_aggregate_changes_numpy():
    data = np.array([2., 7., 1., 8., 2., 8.])
    assert aggregate_changes(data, identity, max) == 8.
    assert aggregate_changes(data, identity, min) == 1.

    rows = np.array([[1, 5], [3, 2], [0, 0], [4, 1]])
    result = aggregate_changes(rows, identity, np.maximum)
    assert_array_equal(result, [4, 1])
    result = aggregate_changes(rows[:3], identity, np.maximum)
    assert_array_equal(result, [3, 2])
    result = aggregate_changes(rows, identity, np.minimum)
    assert_array_equal(result, [0, 0])

    with pytest.raises(EvaluationError):
        aggregate_changes([np.zeros(2), np.zeros(3)], identity, np.maximum)


def test_aggregate_changes_arguments():
    for args, name in [((None, identity, max), "sequence"),
                       (([1], None, max), "selector"),
                       (([1], identity, None), "combine")]:
        with pytest.raises(InvalidArgument) as excinfo:
            aggregate_changes(*args)
        assert excinfo.value.argument == name

    with pytest.raises(TypeError):
        aggregate_changes([1], 'x', max)

    with pytest.raises(EvaluationError) as excinfo:
        aggregate_changes([1, 'a'], identity, max)
    assert isinstance(excinfo.value.__cause__, TypeError)
    assert "item 1" in str(excinfo.value)


def test_coalesce():
    assert coalesce([None, None, 'a', None, 'b']) == 'a'
    assert coalesce([0, None]) == 0
    assert coalesce([None, None]) is None
    assert coalesce([], default='x') == 'x'

    source = monitor_pulls([None, 1, 2, 3])
    assert coalesce(source) == 1
    assert source.n_pulls == 2


def test_for_each():
    seen = []
    assert for_each(range(5), seen.append) is None
    assert seen == list(range(5))

    with pytest.raises(InvalidArgument):
        for_each(range(5), None)

    def fail(x):
        raise RuntimeError

    with pytest.raises(EvaluationError):
        for_each(range(5), fail)


def test_to_text():
    assert to_text(['a', 'b', 'c']) == 'abc'
    assert to_text(seqslice('hello world', 6)) == 'world'
    assert to_text(seqslice('abcdef', step=-1)) == 'fedcba'
    assert to_text([]) == ''


@pytest.mark.timeout(3)
def test_is_empty():
    assert is_empty([])
    assert is_empty(subset(range(5), 5))
    assert not is_empty([None])
    assert not is_empty(itertools.count())

    source = monitor_pulls(range(100))
    assert not is_empty(source)
    assert source.n_pulls <= 1

    source = monitor_pulls([])
    assert is_empty(source)
    assert source.n_pulls == 0
    assert source.exhausted
