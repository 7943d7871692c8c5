"""Operations that select or place items based on their position."""

import itertools

from .errors import InvalidArgument, format_stack, raise_evaluation_error
from .utils import check_func, check_int, get_logger, is_unbounded, isint


logger = get_logger(__name__)


class SubSet(object):
    def __init__(self, sequence, start, count=None):
        self.sequence = sequence
        self.start = check_int(start, "start")
        self.count = None if count is None else check_int(count, "count")

        if self.count == 0:
            logger.warning("count is 0, the subset will always be empty")

    @property
    def unbounded(self):
        return self.count is None and is_unbounded(self.sequence)

    def __iter__(self):
        stop = None if self.count is None else self.start + self.count
        return itertools.islice(self.sequence, self.start, stop)


def subset(sequence, start, count=None):
    """Return the items of a sequence starting from position `start`.

    Args:
        sequence (Iterable):
            The input sequence.
        start (int):
            Number of leading items to skip.
        count (Optional[int]):
            Maximum number of items to return, or `None` to return all
            remaining items (default None).

    Example:

        >>> list(seqops.subset('abcdefg', 2, 3))
        ['c', 'd', 'e']
    """
    return SubSet(sequence, start, count)


class SeqSlice(object):
    def __init__(self, sequence, start=0, end=None, step=1):
        if sequence is None:
            raise InvalidArgument("sequence is required", "sequence")

        if step == 0:
            raise InvalidArgument("slice step cannot be 0", "step")
        if not isint(step):
            raise TypeError(
                "step must be an integer, not " + step.__class__.__name__)

        start = check_int(start, "start")

        if end is not None:
            if not isint(end):
                raise TypeError(
                    "end must be an integer, not " + end.__class__.__name__)
            if end <= start:
                raise InvalidArgument(
                    "end must be greater than start, got start={} and "
                    "end={}".format(start, end),
                    "end")

        if step < 0 and end is None and is_unbounded(sequence):
            raise InvalidArgument(
                "cannot use a negative step on an unbounded sequence "
                "without an end index", "step")

        self.sequence = sequence
        self.start = start
        self.end = end
        self.step = int(step)

    @property
    def unbounded(self):
        return self.end is None and is_unbounded(self.sequence)

    def __iter__(self):
        items = self.sequence
        if self.start != 0 or self.end is not None:
            count = None if self.end is None else self.end - self.start
            items = SubSet(items, self.start, count)

        step = self.step
        if step < 0:
            items = list(items)
            logger.debug("reversing %d materialized items", len(items))
            items.reverse()
            step = -step

        yield from itertools.islice(items, 0, None, step)


def seqslice(sequence, start=0, end=None, step=1):
    """Return a slice of a sequence.

    Equivalent to :code:`list(sequence)[start:end:step]` for non-negative
    steps, except that items are read on-demand. With a negative step,
    the range `[start, end)` is read entirely and traversed backward.

    Args:
        sequence (Iterable):
            The input sequence.
        start (int):
            Index of the first item of the range (default 0).
        end (Optional[int]):
            Index past the last item of the range, `None` means up to
            the end of the sequence (default None).
        step (int):
            Distance between two selected items, a negative value
            reverses the range first (default 1).

    Raise:
        InvalidArgument: if `start` is negative, `end` is not greater
            than `start`, `step` is null or if a negative `step` is
            requested over an unbounded range.

    Example:

        >>> list(seqops.seqslice(range(6), 1, 5, 2))
        [1, 3]
        >>> list(seqops.seqslice(range(5), step=-1))
        [4, 3, 2, 1, 0]
    """
    return SeqSlice(sequence, start, end, step)


class InsertAt(object):
    def __init__(self, sequence, item, index):
        self.sequence = sequence
        self.item = item
        self.index = check_int(index, "index")

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def __iter__(self):
        for i, value in enumerate(self.sequence):
            if i == self.index:
                yield self.item

            yield value


def insert_at(sequence, item, index):
    """Insert an item into a sequence.

    `item` is placed right before the item at position `index`, if the
    sequence has no such position, `item` is not returned at all.

    Example:

        >>> list(seqops.insert_at(['a', 'b', 'c'], 'x', 1))
        ['a', 'x', 'b', 'c']
        >>> list(seqops.insert_at(['a', 'b', 'c'], 'x', 10))
        ['a', 'b', 'c']
    """
    return InsertAt(sequence, item, index)


class SkipWhereIndex(object):
    def __init__(self, sequence, predicate):
        check_func(predicate, "predicate")
        self.sequence = sequence
        self.predicate = predicate
        self.stack = format_stack(2)

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def __iter__(self):
        for i, value in enumerate(self.sequence):
            try:
                skip = self.predicate(i)
            except Exception as error:
                raise_evaluation_error(
                    error, i, self.__class__.__name__, self.stack)

            if not skip:
                yield value


def skip_where_index(sequence, predicate):
    """Drop the items whose position satisfies `predicate`.

    Args:
        sequence (Iterable):
            The input sequence.
        predicate (Callable[[int], bool]):
            Called with the position of each item, a true value means
            the item is skipped.

    Example:

        >>> list(seqops.skip_where_index('abcdef', lambda i: i % 2 == 1))
        ['a', 'c', 'e']
    """
    return SkipWhereIndex(sequence, predicate)
