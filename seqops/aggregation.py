"""Operations that consume a sequence to compute a single result."""

from .errors import InvalidArgument, raise_evaluation_error
from .utils import check_func


_empty = object()


def differs(a, b):
    """Return wether `a` and `b` differ by value.

    Elementwise comparisons, such as those of numpy arrays, differ when
    any element does.
    """
    result = a != b
    if isinstance(result, bool):
        return result

    if hasattr(result, "any"):
        return bool(result.any())

    return bool(result)


def aggregate_changes(sequence, selector, combine, initial=_empty,
                      default=None):
    """Return the last item which modified a running aggregate.

    A value is selected from each item and folded into an aggregate
    with `combine`. The items which cause the aggregate to change are
    tracked and the last one is returned once the sequence is
    exhausted.

    Args:
        sequence (Iterable):
            The input sequence, it is read entirely.
        selector (Callable[[Any], Any]):
            Returns the value to aggregate for an item.
        combine (Callable[[Any, Any], Any]):
            Takes the current aggregate and the value of the next item,
            returns the new aggregate.
        initial (Any):
            Starting aggregate. When omitted, the aggregate is initialized
            with the value of the first item, which always counts as a
            change.
        default (Any):
            Returned when no item changed the aggregate, notably for an
            empty sequence (default None).

    Return:
        The last item for which the new aggregate differed from the
        previous one, as compared by value.

    Example:

        >>> data = [3, 1, 4, 1, 5]
        >>> seqops.aggregate_changes(data, lambda x: x, max)
        5
        >>> words = ['kiwi', 'fig', 'banana', 'apple']
        >>> seqops.aggregate_changes(words, len, max)
        'banana'
        >>> seqops.aggregate_changes([], len, max, default='nothing')
        'nothing'
    """
    if sequence is None:
        raise InvalidArgument("sequence is required", "sequence")
    check_func(selector, "selector")
    check_func(combine, "combine")

    aggregate = initial
    changed = default

    for i, item in enumerate(sequence):
        try:
            current = selector(item)
            if aggregate is _empty:
                new_aggregate = current
            else:
                new_aggregate = combine(aggregate, current)
            is_change = (aggregate is _empty
                         or differs(new_aggregate, aggregate))

        except Exception as error:
            raise_evaluation_error(error, i, "aggregate_changes")

        if is_change:
            changed = item

        aggregate = new_aggregate

    return changed


def coalesce(sequence, default=None):
    """Return the first item which is not `None`.

    Items are read up to the first match only.

    Example:

        >>> seqops.coalesce([None, None, 'a', None, 'b'])
        'a'
    """
    for item in sequence:
        if item is not None:
            return item

    return default


def is_empty(sequence):
    """Return wether a sequence has no item.

    At most one item is read, note that it is lost if `sequence` is an
    iterator.

    Example:

        >>> seqops.is_empty(seqops.subset(range(5), 5))
        True
    """
    for _ in sequence:
        return False

    return True


def for_each(sequence, action):
    """Call `action` on every item of a sequence.

    Example:

        >>> seqops.for_each(['a', 'b'], print)
        a
        b
    """
    check_func(action, "action")

    for i, item in enumerate(sequence):
        try:
            action(item)
        except Exception as error:
            raise_evaluation_error(error, i, "for_each")


def to_text(sequence):
    """Concatenate a sequence of characters into a string.

    Example:

        >>> seqops.to_text(seqops.seqslice('abcdef', step=-2))
        'fdb'
    """
    return "".join(sequence)
