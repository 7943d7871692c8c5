"""Miscellaneous tools for internal use."""

import itertools
import logging
import numbers
from logging import NullHandler

from .errors import InvalidArgument


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_int(value, name, minimum=0):
    """Validate an integer parameter.

    Args:
        value (int): the parameter value.
        name (str): the parameter name, used in error messages.
        minimum (int): smallest accepted value.

    Raise:
        TypeError: if `value` is not an integer.
        InvalidArgument: if `value` is below `minimum`.
    """
    if not isint(value):
        raise TypeError(
            name + " must be an integer, not " + value.__class__.__name__)
    if value < minimum:
        raise InvalidArgument(
            "{} must be greater than or equal to {}, got {}".format(
                name, minimum, value),
            name)

    return int(value)


def check_func(func, name):
    if func is None:
        raise InvalidArgument(name + " is required", name)
    if not callable(func):
        raise TypeError(name + " must be callable")


def is_unbounded(sequence):
    """Return wether `sequence` is known to never be exhausted.

    SeqOps objects report it with their `unbounded` attribute, a few
    infinite producers from :mod:`python:itertools` are recognized as
    well. Anything else is assumed to be finite.
    """
    flag = getattr(sequence, 'unbounded', None)
    if flag is not None:
        return bool(flag)

    if isinstance(sequence, (itertools.count, itertools.cycle)):
        return True

    if isinstance(sequence, itertools.repeat):
        try:
            sequence.__length_hint__()
        except TypeError:  # repeat without times
            return True

    return False
