"""Root-level pytest fixtures for the MULI test suite.

The process-wide build mode is fixed at import, so tests that need a
specific mode build their own CheckSurface from a BuildConfig.
"""

import inspect

import pytest

from muli.contracts import CheckSurface
from muli.schemas import BuildConfig


# =============================================================================
# Check Surface Fixtures
# =============================================================================

@pytest.fixture
def checked_surface():
    """Check primitives as built for a checked build."""
    return CheckSurface(BuildConfig(mode="checked"))


@pytest.fixture
def release_surface():
    """Check primitives as built for a release build."""
    return CheckSurface(BuildConfig(mode="release"))


@pytest.fixture
def next_line():
    """Return the line number following the caller's current line.

    Examples
    --------
    >>> def test_x(next_line):
    ...     line = next_line()
    ...     precondition(False, "x")   # raised at `line`
    """
    def _next():
        return inspect.currentframe().f_back.f_lineno + 1
    return _next


# =============================================================================
# Side-effect Probes
# =============================================================================

class CallCounter:
    """Zero-argument callable that records how often it was invoked."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


@pytest.fixture
def counter():
    """Factory for CallCounter probes."""
    return CallCounter
