"""Contract checks - fail-fast enforcement of preconditions and invariants.

MULI defines the following exception classes:

    MuliFailure(RuntimeError)
        ContractViolation   raised by precondition/postcondition/invariant/debug_assert
        RuntimeFailure      raised by fail

The message of a failure is retrieved via ``str(exc)`` or ``exc.what()``.
In a checked build the file name and line number of the check are
included in it.

Usage:

    try:
        image = read_image(path)
        precondition(is_grayscale(image), "Input image must be grayscale")
        ...
    except MuliFailure as e:
        print(e.what(), file=sys.stderr)
        return 1
"""

from muli.contracts.failure import (
    FailureCategory,
    SourceLocation,
    MuliFailure,
    ContractViolation,
    RuntimeFailure,
    render_failure,
)
from muli.contracts.location import caller_location
from muli.contracts.base import (
    BUILD_CONFIG,
    BUILD_MODE,
    CheckSurface,
    deferred,
    precondition,
    postcondition,
    invariant,
    debug_assert,
    fail,
)
from muli.contracts.image import (
    assert_image_2d,
    assert_grayscale,
    assert_same_shape,
    assert_label_image,
)
from muli.contracts.reporting import report_failure, exit_on_failure

__all__ = [
    # Failure types
    "FailureCategory",
    "SourceLocation",
    "MuliFailure",
    "ContractViolation",
    "RuntimeFailure",
    "render_failure",
    # Check surface
    "BUILD_CONFIG",
    "BUILD_MODE",
    "CheckSurface",
    "deferred",
    "caller_location",
    "precondition",
    "postcondition",
    "invariant",
    "debug_assert",
    "fail",
    # Image contracts
    "assert_image_2d",
    "assert_grayscale",
    "assert_same_shape",
    "assert_label_image",
    # Handlers
    "report_failure",
    "exit_on_failure",
]
