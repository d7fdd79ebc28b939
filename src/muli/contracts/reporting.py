"""Handler-side helpers for failures raised by the check primitives.

The rendered failure text is meant to be printed as-is to a diagnostic
stream. These helpers do that for the common top-level pattern:

    @exit_on_failure
    def main(argv):
        image = load(argv[1])
        precondition(is_grayscale(image), "Input image must be grayscale")
        ...
        return 0

    sys.exit(main(sys.argv))
"""

import functools
import logging
import sys
from typing import Optional

from muli.contracts.failure import ContractViolation, MuliFailure

_logger = logging.getLogger(__name__)


def report_failure(exc: MuliFailure, logger: Optional[logging.Logger] = None) -> str:
    """Log a caught failure and return its rendered text.

    Contract violations are logged at CRITICAL (a bug in the calling code);
    unconditional failures at ERROR.

    Parameters
    ----------
    exc : MuliFailure
        The caught failure.
    logger : logging.Logger, optional
        Logger to report to. Defaults to this module's logger.

    Returns
    -------
    str
        ``exc.what()``
    """
    log = logger or _logger
    if isinstance(exc, ContractViolation):
        log.critical("Contract violated (%s):%s", exc.category.value, exc.what())
    else:
        log.error("Failure:%s", exc.what())
    return exc.what()


def exit_on_failure(func):
    """Turn a MuliFailure escaping ``func`` into exit status 1.

    The rendered failure is reported via :func:`report_failure` and written
    to ``sys.stderr``. Any other exception propagates unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except MuliFailure as e:
            text = report_failure(e)
            print(text, file=sys.stderr)
            return 1

    return wrapper
