from .errors import format_stack, raise_evaluation_error
from .utils import check_func, is_unbounded


class Modification(object):
    def __init__(self, sequence, func, with_index=False):
        check_func(func, "func")

        self.sequence = sequence
        self.func = func
        self.with_index = with_index
        self.stack = format_stack(2)

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def __iter__(self):
        for i, item in enumerate(self.sequence):
            try:
                if self.with_index:
                    value = self.func(i, item)
                else:
                    value = self.func(item)

            except Exception as error:
                raise_evaluation_error(
                    error, i, self.__class__.__name__, self.stack)

            yield value


def modify(sequence, func):
    """Return a mapping of `func` over the sequence.

    Equivalent to :code:`(func(x) for x in sequence)` with each item
    evaluated when it is pulled.

    Example:

        >>> a = [1, 2, 3, 4]
        >>> m = seqops.modify(a, lambda x: x + 2)
        >>> list(m)
        [3, 4, 5, 6]
    """
    return Modification(sequence, func)


def modify_by_index(sequence, func):
    """Return a mapping of `func` over the items and their positions.

    Args:
        sequence (Iterable):
            The input sequence.
        func (Callable[[int, Any], Any]):
            Called with the position and the value of each item.

    Example:

        >>> list(seqops.modify_by_index('abc', lambda i, c: c * (i + 1)))
        ['a', 'bb', 'ccc']
    """
    return Modification(sequence, func, with_index=True)
