"""Operations that regroup or assemble sequences."""

import itertools

from .errors import SourceTooSmall
from .utils import check_int, is_unbounded


class Windows(object):
    def __init__(self, sequence, window_size, copy=False):
        self.sequence = sequence
        self.window_size = check_int(window_size, "window_size", 1)
        self.copy = copy

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def __iter__(self):
        source = iter(self.sequence)
        window = list(itertools.islice(source, self.window_size))
        if len(window) < self.window_size:
            raise SourceTooSmall(
                "sequence has {} items, fewer than window_size={}".format(
                    len(window), self.window_size))

        yield tuple(window) if self.copy else window

        for item in source:
            window[:-1] = window[1:]
            window[-1] = item
            yield tuple(window) if self.copy else window


def windows(sequence, window_size, copy=False):
    """Return a sliding window over a sequence.

    Args:
        sequence (Iterable):
            The input sequence, possibly unbounded.
        window_size (int):
            Number of items in each window, must be positive.
        copy (bool):
            Yield an independent tuple for each window instead of the
            shared buffer (default False).

    Return:
        Iterable[List]: The successive windows, there are
        `len(sequence) - window_size + 1` of them.

    Raise:
        InvalidArgument: when `window_size` is not positive.
        SourceTooSmall: upon reading the first window if the sequence
            contains less than `window_size` items.

    .. warning::

        Unless `copy` is set, the same list object is updated in place
        and yielded at every step, make a copy of it to keep its content
        past the next step.

    Example:

        >>> data = [1, 2, 3, 4, 5]
        >>> [list(w) for w in seqops.windows(data, 3)]
        [[1, 2, 3], [2, 3, 4], [3, 4, 5]]
        >>> list(seqops.windows(data, 4, copy=True))
        [(1, 2, 3, 4), (2, 3, 4, 5)]
    """
    return Windows(sequence, window_size, copy)


class Sections(object):
    def __init__(self, sequence, section_size, copy=False):
        self.sequence = sequence
        self.section_size = check_int(section_size, "section_size", 1)
        self.copy = copy

    @property
    def unbounded(self):
        return is_unbounded(self.sequence)

    def __iter__(self):
        source = iter(self.sequence)
        section = []

        while True:
            del section[:]
            section.extend(itertools.islice(source, self.section_size))
            size = len(section)
            if size == 0:
                return

            yield tuple(section) if self.copy else section

            if size < self.section_size:
                return


def sections(sequence, section_size, copy=False):
    """Split a sequence into consecutive groups of `section_size` items.

    The last section contains the remaining items if the length of the
    sequence is not a multiple of `section_size`, it is never empty.

    Args:
        sequence (Iterable):
            The input sequence, possibly unbounded.
        section_size (int):
            Number of items by section, must be positive.
        copy (bool):
            Yield an independent tuple for each section instead of the
            shared buffer (default False).

    Return:
        Iterable[List]: The sections.

    .. warning::

        Unless `copy` is set, the same list object is emptied and
        refilled for every section.

    Example:

        >>> data = [1, 2, 3, 4, 5, 6, 7]
        >>> list(seqops.sections(data, 3, copy=True))
        [(1, 2, 3), (4, 5, 6), (7,)]
    """
    return Sections(sequence, section_size, copy)


class Chaining(object):
    def __init__(self, sequences):
        self.sequences = []
        for seq in sequences:
            if isinstance(seq, Chaining):
                self.sequences.extend(seq.sequences)
            else:
                self.sequences.append(seq)

    @property
    def unbounded(self):
        return any(is_unbounded(seq) for seq in self.sequences)

    def __iter__(self):
        return itertools.chain.from_iterable(self.sequences)


def chain(sequence, *others):
    """Return the concatenation of several sequences.

    Later sequences are not touched until the ones before them are
    exhausted.

    Example:

        >>> list(seqops.chain([0, 1], (2, 3), range(4, 6)))
        [0, 1, 2, 3, 4, 5]
    """
    return Chaining((sequence,) + others)


class Merging(object):
    def __init__(self, sequences):
        self.sequences = sequences

    @property
    def unbounded(self):
        return is_unbounded(self.sequences)

    def __iter__(self):
        return itertools.chain.from_iterable(self.sequences)


def merge(sequences):
    """Return the concatenation of the sequences in `sequences`.

    Unlike :func:`chain`, the sequences are themselves read from a
    (lazy) sequence, which for example reverses :func:`sections`.

    Example:

        >>> chunks = seqops.sections(range(7), 3, copy=True)
        >>> list(seqops.merge(chunks))
        [0, 1, 2, 3, 4, 5, 6]
    """
    return Merging(sequences)


class Once(object):
    unbounded = False

    def __init__(self, item):
        self.item = item

    def __iter__(self):
        yield self.item


def once(item):
    """Make a sequence containing only `item`."""
    return Once(item)


def push_to_end(sequence, item):
    """Append `item` after the last element of a sequence."""
    return chain(sequence, once(item))


def push_to_start(sequence, item):
    """Insert `item` before the first element of a sequence.

    The input sequence is only read after `item` has been consumed.
    """
    return chain(once(item), sequence)
