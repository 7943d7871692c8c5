import inspect
import threading

from tblib import pickling_support


class InvalidArgument(ValueError):
    """Raised when an operator receives an invalid parameter.

    The name of the offending parameter is available as
    :attr:`argument`.
    """
    def __init__(self, message, argument=None):
        super().__init__(message)
        self.argument = argument


class SourceTooSmall(ValueError):
    """Raised when a source cannot fill the first window."""


class EvaluationError(Exception):
    """Raised when a user supplied function fails on an element."""


pickling_support.install(InvalidArgument, SourceTooSmall, EvaluationError)


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code triggered by SeqOps are
            propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through SeqOps code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def raise_evaluation_error(error, index, where, stack=None):
    """Propagate an error raised by user code on item `index`.

    Must be called from the `except` clause that caught `error`.
    """
    if seterr() == 'passthrough' or isinstance(error, EvaluationError):
        raise error

    msg = "Failed to evaluate item {} in {}".format(index, where)
    if stack:
        msg += " created at:\n" + stack
    raise EvaluationError(msg) from error


def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out
