"""Image contracts.

Ready-made preconditions for image-processing entry points. Each accepts a
``numpy.ndarray`` or an ``xarray.DataArray`` and attributes failures to the
code that called the contract, not to this module.

We do NOT validate pixel values beyond what the image type promises; that
is the algorithm's responsibility.
"""

from typing import Union

import numpy as np
import xarray as xr

from muli.contracts.base import precondition

ImageLike = Union[np.ndarray, xr.DataArray]


def assert_image_2d(image: ImageLike, name: str = "image", stacklevel: int = 1) -> None:
    """Enforce a single-band 2D image.

    Parameters
    ----------
    image : np.ndarray or xr.DataArray
        Image to check.
    name : str, optional
        Name used in the failure message.
    stacklevel : int, optional
        Frame to attribute the failure to (1 = direct caller).

    Raises
    ------
    ContractViolation
        If the image is not array-like or does not have exactly 2 dims.
    """
    precondition(
        isinstance(image, (np.ndarray, xr.DataArray)),
        lambda: f"'{name}' is {type(image).__name__}, expected ndarray or DataArray",
        stacklevel=stacklevel + 1,
    )
    precondition(
        image.ndim == 2,
        lambda: f"'{name}' has {image.ndim} dims, expected 2",
        stacklevel=stacklevel + 1,
    )


def assert_grayscale(image: ImageLike, name: str = "image", stacklevel: int = 1) -> None:
    """Enforce a grayscale image: 2D, or 3D with a single trailing channel.

    Examples
    --------
    >>> assert_grayscale(np.zeros((4, 4)))
    >>> assert_grayscale(np.zeros((4, 4, 3)))
    Traceback (most recent call last):
    ...
    muli.contracts.failure.ContractViolation: ...
    """
    precondition(
        isinstance(image, (np.ndarray, xr.DataArray)),
        lambda: f"'{name}' is {type(image).__name__}, expected ndarray or DataArray",
        stacklevel=stacklevel + 1,
    )
    precondition(
        image.ndim == 2 or (image.ndim == 3 and image.shape[-1] == 1),
        lambda: f"Input image must be grayscale: '{name}' has shape {tuple(image.shape)}",
        stacklevel=stacklevel + 1,
    )


def assert_same_shape(a: ImageLike, b: ImageLike, stacklevel: int = 1) -> None:
    """Enforce that two images have identical shapes."""
    precondition(
        tuple(a.shape) == tuple(b.shape),
        lambda: f"Shape mismatch: {tuple(a.shape)} vs {tuple(b.shape)}",
        stacklevel=stacklevel + 1,
    )


def assert_label_image(labels: ImageLike, name: str = "labels", stacklevel: int = 1) -> None:
    """Enforce a label image: 2D, integer typed, 0=background, 1..N=regions.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    assert_image_2d(labels, name, stacklevel=stacklevel + 1)

    precondition(
        labels.dtype.kind in {"i", "u"},
        lambda: f"'{name}' dtype is {labels.dtype}, expected integer",
        stacklevel=stacklevel + 1,
    )

    values = np.asarray(labels)
    if values.size > 0:
        precondition(
            values.min() >= 0,
            lambda: f"'{name}' contain negative values (min={values.min()})",
            stacklevel=stacklevel + 1,
        )
