"""BuildConfig: build-mode selection for the contract checks.

The build mode is chosen once per process, before the check surface is
created, and never changes afterwards:

- checked: failures carry the call-site location and ``debug_assert`` is active
- release: no location is captured and ``debug_assert`` is elided

Precedence (highest to lowest):
1. Explicit ``mode`` argument to resolve_build_config()
2. ``MULI_BUILD_MODE`` environment variable
3. Interpreter optimisation flag (``python -O`` selects release)
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import field_validator

from muli.schemas.base import MuliBaseModel

BUILD_MODE_ENV = "MULI_BUILD_MODE"

BuildMode = Literal["checked", "release"]


class BuildConfig(MuliBaseModel):
    """Immutable build configuration seen by the check surface.

    Usage
    -----
        config = BuildConfig(mode="release")
        config.assertions_enabled   # False
        config.capture_location     # False
    """

    mode: BuildMode = "checked"

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def checked(self) -> bool:
        return self.mode == "checked"

    @property
    def capture_location(self) -> bool:
        """Attach file:line to raised failures."""
        return self.checked

    @property
    def assertions_enabled(self) -> bool:
        """Whether debug_assert() checks anything at all."""
        return self.checked


def default_build_mode() -> BuildMode:
    """Build mode implied by the interpreter (``-O`` clears ``__debug__``)."""
    return "checked" if __debug__ else "release"


def resolve_build_config(
    mode: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BuildConfig:
    """Resolve the build configuration.

    Parameters
    ----------
    mode : str, optional
        Explicit mode ("checked" or "release"). Wins over everything else.
    environ : mapping, optional
        Environment to read ``MULI_BUILD_MODE`` from. Defaults to ``os.environ``.

    Returns
    -------
    BuildConfig
        Frozen configuration.

    Raises
    ------
    ValidationError
        If the selected mode is not "checked" or "release".

    Examples
    --------
    >>> resolve_build_config("release").mode
    'release'
    >>> resolve_build_config(environ={"MULI_BUILD_MODE": "Checked"}).mode
    'checked'
    """
    if environ is None:
        environ = os.environ

    if mode is None:
        mode = environ.get(BUILD_MODE_ENV) or default_build_mode()

    return BuildConfig(mode=mode)
