"""Contract check primitives.

The five primitives are the single enforcement mechanism for contracts:

    precondition(PREDICATE, MESSAGE)
    postcondition(PREDICATE, MESSAGE)
    invariant(PREDICATE, MESSAGE)
    debug_assert(PREDICATE, MESSAGE)
    fail(MESSAGE)

The first four raise ContractViolation when PREDICATE is false; ``fail``
always raises RuntimeFailure. In a checked build the failure text ends
with the file name and line number of the call. ``debug_assert`` is
identical to ``precondition`` in a checked build and is removed entirely in
a release build, which makes it suitable for checks only needed while
debugging, such as index bound checks.

PREDICATE is tested with ``bool()``. Wrap a zero-argument callable in
``deferred()`` to move a costly test into the check: it is invoked exactly
once, and never by an elided ``debug_assert``. MESSAGE may be a
zero-argument callable or a ``%`` format string with trailing arguments;
either way the text is only built when the check fails:

    precondition(info.is_grayscale(), "Input image must be grayscale")
    invariant(deferred(tree.is_balanced), lambda: f"unbalanced: {tree.dump()}")
    precondition(0 <= i < n, "index %d out of range [0, %d)", i, n)
"""

import logging
from typing import Any, Callable, Union

from muli.contracts.failure import ContractViolation, FailureCategory, RuntimeFailure
from muli.contracts.location import caller_location
from muli.schemas.build import BuildConfig, resolve_build_config

logger = logging.getLogger(__name__)

Message = Union[str, Callable[[], str]]


class deferred:
    """Predicate computed by the check itself rather than by the caller.

    Plain predicates are only ever tested with ``bool()``, so a function or
    class passed as a predicate is judged by its own truthiness. Wrapping a
    zero-argument callable in ``deferred`` asks the check to call it, once.
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[], Any]):
        self.func = func

    def __call__(self) -> Any:
        return self.func()

    def __repr__(self) -> str:
        return f"deferred({self.func!r})"


Predicate = Union[Any, deferred]


def _evaluate(predicate: Predicate) -> bool:
    if isinstance(predicate, deferred):
        predicate = predicate()
    return bool(predicate)


def _build_message(message: Message, message_args: tuple) -> str:
    if callable(message):
        message = message()
    if message_args:
        return message % message_args
    return message


def _elided(predicate: Predicate, message: Message = None, *message_args,
            stacklevel: int = 1) -> None:
    """Release-build debug_assert: neither argument is looked at."""
    return None


class CheckSurface:
    """The check primitives, specialised for one build configuration.

    The build configuration is consulted once, here; the primitives never
    branch on it per call. Library code uses the module-level functions,
    which are bound to the process-wide surface. Separate instances exist
    so both modes can be exercised in one interpreter.

    Parameters
    ----------
    config : BuildConfig
        Frozen build configuration.
    """

    def __init__(self, config: BuildConfig):
        self._config = config
        self._capture = config.capture_location
        if not config.assertions_enabled:
            self.debug_assert = _elided
        logger.debug("CheckSurface initialized: mode=%s", config.mode)

    @property
    def config(self) -> BuildConfig:
        return self._config

    @property
    def mode(self) -> str:
        return self._config.mode

    def precondition(self, predicate: Predicate, message: Message, *message_args,
                     stacklevel: int = 1) -> None:
        """Raise ContractViolation("Precondition violation!") if predicate is false.

        Parameters
        ----------
        predicate : bool-like or deferred
            Condition that must hold on entry. A ``deferred`` is invoked once.
        message : str or callable
            Failure text, built only when the check fails.
        *message_args
            Optional ``%`` arguments for ``message``.
        stacklevel : int, optional
            Frame to attribute the failure to (1 = direct caller).

        Raises
        ------
        ContractViolation
            If predicate evaluates to false.
        """
        if not _evaluate(predicate):
            self._violate(FailureCategory.PRECONDITION, message, message_args, stacklevel + 1)

    def postcondition(self, predicate: Predicate, message: Message, *message_args,
                      stacklevel: int = 1) -> None:
        """Raise ContractViolation("Postcondition violation!") if predicate is false."""
        if not _evaluate(predicate):
            self._violate(FailureCategory.POSTCONDITION, message, message_args, stacklevel + 1)

    def invariant(self, predicate: Predicate, message: Message, *message_args,
                  stacklevel: int = 1) -> None:
        """Raise ContractViolation("Invariant violation!") if predicate is false."""
        if not _evaluate(predicate):
            self._violate(FailureCategory.INVARIANT, message, message_args, stacklevel + 1)

    def debug_assert(self, predicate: Predicate, message: Message, *message_args,
                     stacklevel: int = 1) -> None:
        """Same as precondition(); replaced by a no-op in release builds."""
        if not _evaluate(predicate):
            self._violate(FailureCategory.PRECONDITION, message, message_args, stacklevel + 1)

    def fail(self, message: Message, *message_args, stacklevel: int = 1) -> None:
        """Unconditionally raise RuntimeFailure with the given message."""
        text = _build_message(message, message_args)
        if self._capture:
            location = caller_location(stacklevel)
            logger.debug("Unconditional failure raised at %s", location)
            raise RuntimeFailure(text, location.file, location.line)
        raise RuntimeFailure(text)

    def _violate(self, category, message, message_args, stacklevel):
        text = _build_message(message, message_args)
        if self._capture:
            location = caller_location(stacklevel)
            logger.debug("%s violation raised at %s", category.value.capitalize(), location)
            raise ContractViolation(category, text, location.file, location.line)
        logger.debug("%s violation raised", category.value.capitalize())
        raise ContractViolation(category, text)


BUILD_CONFIG = resolve_build_config()
BUILD_MODE = BUILD_CONFIG.mode

_surface = CheckSurface(BUILD_CONFIG)

precondition = _surface.precondition
postcondition = _surface.postcondition
invariant = _surface.invariant
debug_assert = _surface.debug_assert
fail = _surface.fail
