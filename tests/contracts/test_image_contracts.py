"""Tests for image contracts.

These tests verify that image contracts reject malformed inputs and that
failures point at the code calling the contract.
"""

import pytest
import xarray as xr
import numpy as np

pytestmark = pytest.mark.unit

from muli.contracts import (
    BUILD_MODE,
    ContractViolation,
    FailureCategory,
    assert_image_2d,
    assert_grayscale,
    assert_same_shape,
    assert_label_image,
)


class TestImage2D:

    def test_passes_with_2d_array(self):
        # Should not raise
        assert_image_2d(np.ones((4, 4)))

    def test_passes_with_2d_dataarray(self):
        image = xr.DataArray(np.ones((4, 4)), dims=("y", "x"))
        assert_image_2d(image)

    def test_fails_with_3d_array(self):
        with pytest.raises(ContractViolation, match="3 dims, expected 2"):
            assert_image_2d(np.ones((2, 4, 4)))

    def test_fails_with_non_array(self):
        with pytest.raises(ContractViolation, match="list, expected ndarray"):
            assert_image_2d([[0, 1], [1, 0]])

    def test_name_in_message(self):
        with pytest.raises(ContractViolation, match="'mask'"):
            assert_image_2d(np.ones(4), name="mask")


class TestGrayscale:

    def test_passes_with_2d(self):
        assert_grayscale(np.zeros((4, 4), dtype=np.uint8))

    def test_passes_with_single_channel(self):
        assert_grayscale(np.zeros((4, 4, 1), dtype=np.uint8))

    def test_fails_with_rgb(self):
        with pytest.raises(ContractViolation) as exc_info:
            assert_grayscale(np.zeros((4, 4, 3), dtype=np.uint8))
        exc = exc_info.value
        assert exc.category is FailureCategory.PRECONDITION
        assert "Input image must be grayscale" in exc.what()
        assert "(4, 4, 3)" in exc.what()

    @pytest.mark.skipif(BUILD_MODE != "checked", reason="no locations in release mode")
    def test_failure_points_at_caller(self, next_line):
        with pytest.raises(ContractViolation) as exc_info:
            line = next_line()
            assert_grayscale(np.zeros((4, 4, 3)))
        assert exc_info.value.line == line
        assert exc_info.value.file.endswith("test_image_contracts.py")


class TestSameShape:

    def test_passes_with_equal_shapes(self):
        assert_same_shape(np.ones((4, 5)), xr.DataArray(np.zeros((4, 5))))

    def test_fails_with_different_shapes(self):
        with pytest.raises(ContractViolation, match=r"\(4, 5\) vs \(5, 4\)"):
            assert_same_shape(np.ones((4, 5)), np.ones((5, 4)))


class TestLabelImage:

    def test_passes_with_valid_labels(self):
        labels = np.array([[0, 0, 1, 1], [0, 2, 2, 0]], dtype=np.int32)
        assert_label_image(labels)

    def test_passes_with_empty_labels(self):
        assert_label_image(np.zeros((0, 0), dtype=np.int32))

    def test_fails_with_float_labels(self):
        labels = np.array([[0, 0, 1, 1], [0, 1, 1, 0]], dtype=np.float32)
        with pytest.raises(ContractViolation, match="dtype"):
            assert_label_image(labels)

    def test_fails_with_negative_labels(self):
        labels = np.array([[0, -1, 1, 1], [0, 1, 1, 0]], dtype=np.int32)
        with pytest.raises(ContractViolation, match="negative"):
            assert_label_image(labels)

    def test_fails_with_wrong_dims(self):
        labels = np.array([[[0, 1], [1, 0]]], dtype=np.int32)
        with pytest.raises(ContractViolation, match="3 dims"):
            assert_label_image(labels)

    @pytest.mark.skipif(BUILD_MODE != "checked", reason="no locations in release mode")
    def test_nested_contract_points_at_caller(self, next_line):
        """assert_image_2d inside assert_label_image still reports the outer caller."""
        with pytest.raises(ContractViolation) as exc_info:
            line = next_line()
            assert_label_image(np.zeros(4, dtype=np.int32))
        assert exc_info.value.line == line
