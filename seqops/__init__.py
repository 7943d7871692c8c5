"""
A python library of lazy operators over sequences.

The seqops package contains functions to regroup, slice, extend and
transform sequences (anything that can be iterated over, including
generators and unbounded producers such as :func:`itertools.count`).

Unless otherwise specified, all functions feature on-demand evaluation
which means items are only read from the input sequence when the result
is iterated over, and no further than what has been requested.
Operations can therefore be chained without materializing intermediate
results.
"""

from . import instrument
from .aggregation import (
    aggregate_changes, coalesce, for_each, is_empty, to_text)
from .errors import EvaluationError, InvalidArgument, SourceTooSmall, seterr
from .indexing import insert_at, seqslice, skip_where_index, subset
from .mapping import modify, modify_by_index
from .shape import (
    chain,
    merge,
    once,
    push_to_end,
    push_to_start,
    sections,
    windows,
)

__all__ = [
    "EvaluationError",
    "InvalidArgument",
    "SourceTooSmall",
    "seterr",
    "windows",
    "sections",
    "chain",
    "merge",
    "once",
    "push_to_end",
    "push_to_start",
    "seqslice",
    "subset",
    "insert_at",
    "skip_where_index",
    "modify",
    "modify_by_index",
    "aggregate_changes",
    "coalesce",
    "for_each",
    "is_empty",
    "to_text",
]
