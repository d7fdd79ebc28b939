"""Call-site location capture for the check primitives."""

import inspect

from muli.contracts.failure import SourceLocation


def caller_location(stacklevel: int = 1) -> SourceLocation:
    """Return the file and line of a frame above the caller.

    ``stacklevel`` counts like ``warnings.warn``: with 1 the location is
    that of whoever called the function that calls ``caller_location()``.
    Contract helpers that wrap a primitive pass ``stacklevel + 1`` so the
    failure points at their own caller.

    If the stack is shallower than ``stacklevel``, the climb stops at the
    outermost frame (the one that started the program) and that frame's
    location is returned. No error or warning is raised for this.

    Examples
    --------
    >>> def check():
    ...     return caller_location()
    >>> loc = check()  # points at this line, not into caller_location()
    """
    frame = inspect.currentframe()
    try:
        # skip this function's own frame, then climb to the requested level
        for _ in range(stacklevel + 1):
            if frame.f_back is None:
                break
            frame = frame.f_back
        return SourceLocation(frame.f_code.co_filename, frame.f_lineno)
    finally:
        # break the frame reference cycle
        del frame
