"""Debugging tools."""

from time import monotonic

from .utils import is_unbounded


class Debug(object):
    def __init__(self, sequence, func, max_calls, max_rate):
        self.sequence = sequence
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.last_call = monotonic()
        self.func = func

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def __iter__(self):
        for i, value in enumerate(self.sequence):
            if not self.silence():
                self.func(i, value)
                self.last_call = monotonic()
                self.n_calls += 1

            yield value


def debug(sequence, func, max_calls=None, max_rate=None):
    """Wrap a sequence to trigger a function on each read.

    Args:
        sequence (Iterable):
            Source sequence.
        func (Callable):
            A function to call whenever an item is read, must take the
            index and value of the items.
        max_calls (Optional[int]):
            An optional count limit on how many times `func` is invoked
            (default None).
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `func`.

    Returns:
        (Iterable): The wrapped sequence.

    Example:

        .. testsetup::

           from seqops.instrument import debug

        >>> sequence = [1, 2, 3, 4, 5]
        >>> watchthis = debug(sequence, lambda i, v: print(i, v), 2)
        >>> list(watchthis)
        0 1
        1 2
        [1, 2, 3, 4, 5]
    """
    return Debug(sequence, func, max_calls, max_rate)


class PullMonitor(object):
    def __init__(self, sequence):
        self.sequence = sequence
        self.n_pulls = 0
        self.n_cursors = 0
        self.exhausted = False

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def reset(self):
        """Reset counters."""
        self.n_pulls = 0
        self.n_cursors = 0
        self.exhausted = False

    def __iter__(self):
        self.n_cursors += 1
        self.exhausted = False

        for value in self.sequence:
            self.n_pulls += 1
            yield value

        self.exhausted = True


def monitor_pulls(sequence):
    """Wrap a sequence in an object which records how it is read.

    The wrapper exposes three attributes and one method:

    * :code:`n_pulls` the number of items read so far.
    * :code:`n_cursors` the number of times iteration was started.
    * :code:`exhausted` wether the last iteration reached the end of the
      sequence.
    * :code:`reset()` resets the statistics.

    Example:

        >>> source = seqops.instrument.monitor_pulls(range(100))
        >>> first = next(iter(seqops.windows(source, 3)))
        >>> source.n_pulls
        3
    """
    return PullMonitor(sequence)
