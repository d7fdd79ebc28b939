"""Failure types raised by the contract checks.

Every failure renders itself once, at construction, into a single
human-readable string. That string is the only payload a handler needs:
it is what ``str(exc)`` and ``exc.what()`` return.

Two kinds share the common ancestor :class:`MuliFailure`:

- ContractViolation: a precondition, postcondition or invariant did not hold
- RuntimeFailure: unconditional failure raised by ``fail()``

Catching ``MuliFailure`` (or ``RuntimeError``) observes both.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureCategory(str, Enum):
    """Category of a raised failure.

    The three contract categories render with a fixed English prefix;
    UNCONDITIONAL has none.
    """
    PRECONDITION = "precondition"
    POSTCONDITION = "postcondition"
    INVARIANT = "invariant"
    UNCONDITIONAL = "unconditional"

    @property
    def prefix(self) -> Optional[str]:
        return _PREFIXES.get(self)


_PREFIXES = {
    FailureCategory.PRECONDITION: "Precondition violation!",
    FailureCategory.POSTCONDITION: "Postcondition violation!",
    FailureCategory.INVARIANT: "Invariant violation!",
}


@dataclass(frozen=True)
class SourceLocation:
    """File and line at which a check was written."""
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def render_failure(category: FailureCategory, message: str,
                   location: Optional[SourceLocation] = None) -> str:
    """Render a failure into its canonical single-string form.

    Parameters
    ----------
    category : FailureCategory
        Failure category; selects the prefix line (if any).
    message : str
        Caller-supplied text, rendered verbatim.
    location : SourceLocation, optional
        Call-site location. Omitted in release builds.

    Returns
    -------
    str
        The rendered text. Decorated forms start and end with a newline;
        an unconditional failure without location is the bare message.

    Examples
    --------
    >>> render_failure(FailureCategory.PRECONDITION, "x>0", SourceLocation("t.x", 42))
    '\\nPrecondition violation!\\nx>0\\n(t.x:42)\\n'
    >>> render_failure(FailureCategory.UNCONDITIONAL, "bad input")
    'bad input'
    """
    prefix = category.prefix
    if location is not None:
        if prefix is None:
            return f"\n{message}\n({location})\n"
        return f"\n{prefix}\n{message}\n({location})\n"
    if prefix is None:
        return message
    return f"\n{prefix}\n{message}\n"


class MuliFailure(RuntimeError):
    """Common base of all failures raised by the check primitives.

    Instances are immutable: category, message and location are exposed
    through read-only properties and the rendered text is computed once.
    """

    def __init__(self, category: FailureCategory, message: Optional[str],
                 file: Optional[str] = None, line: Optional[int] = None):
        category = FailureCategory(category)
        message = "" if message is None else str(message)
        # a location needs both parts; a lone file or line is dropped
        if file is not None and line is not None:
            location = SourceLocation(str(file), int(line))
        else:
            location = None
        rendered = render_failure(category, message, location)

        super().__init__(rendered)
        self._category = category
        self._message = message
        self._location = location
        self._rendered = rendered

    @property
    def category(self) -> FailureCategory:
        return self._category

    @property
    def message(self) -> str:
        """Caller-supplied message, without decoration."""
        return self._message

    @property
    def location(self) -> Optional[SourceLocation]:
        """Call-site location, or None for failures raised in release builds."""
        return self._location

    @property
    def file(self) -> Optional[str]:
        return self._location.file if self._location else None

    @property
    def line(self) -> Optional[int]:
        return self._location.line if self._location else None

    @property
    def rendered(self) -> str:
        return self._rendered

    def what(self) -> str:
        """Return the rendered failure text."""
        return self._rendered

    def __str__(self) -> str:
        return self._rendered

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self._category.value!r}, "
                f"{self._message!r}, location={self._location})")


class ContractViolation(MuliFailure):
    """Raised when a precondition, postcondition or invariant does not hold.

    This indicates a bug in the calling code, not bad user input or a
    recoverable edge case. There is no local recovery: the violation
    propagates until a caller handles it.

    Key distinction:
    - ContractViolation: documented contract broken (programmer error)
    - RuntimeFailure: the code reached a state it declared unreachable
    - ValueError: configuration error (handled by Pydantic)
    """
    pass


class RuntimeFailure(MuliFailure):
    """Raised unconditionally by ``fail()``; carries no category prefix."""

    def __init__(self, message: Optional[str],
                 file: Optional[str] = None, line: Optional[int] = None):
        super().__init__(FailureCategory.UNCONDITIONAL, message, file, line)
