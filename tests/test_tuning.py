#!/usr/bin/env python3
"""Tests for Tuning lookup tables."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from ascii_art import Tuning


def test_identity_maps_every_value_to_itself():
    print("\n=== Test: identity tuning ===")
    tuning = Tuning()
    for v in range(256):
        assert tuning(v) == v, f"identity({v}) = {tuning(v)}"
    assert Tuning("identity", 10, 20, 30, 40) == tuning, "identity ignores its parameters"


def test_binary_is_a_step_at_threshold():
    print("\n=== Test: binary tuning ===")
    for t in (0, 1, 63, 128, 254, 255):
        tuning = Tuning("binary", t)
        for v in range(256):
            expected = 0 if v <= t else 255
            assert tuning(v) == expected, f"binary({t})({v}) = {tuning(v)}, expected {expected}"


def test_binary_ignores_value_parameters():
    assert Tuning("binary", 100, 50, 200, 10) == Tuning("binary", 100)


def test_linear_segments():
    print("\n=== Test: linear tuning ===")
    tuning = Tuning("linear", 64, 32, 192, 224)

    assert tuning(0) == 0
    assert tuning(32) == 16, "low segment: 32 * 32 / 64"
    assert tuning(64) == 32
    assert tuning(128) == 128, "middle segment: 32 + 192 * 64 / 128"
    assert tuning(192) == 224
    assert tuning(255) == 255
    # 255 - 31 * 32 / 63 = 239.25...
    assert tuning(223) == 239


def test_linear_rounds_half_away_from_zero():
    # 1 * 1 / 2 = 0.5 rounds up
    tuning = Tuning("linear", 2, 1, 255, 255)
    assert tuning(1) == 1


def test_linear_with_zero_low_index_maps_zero_to_low_value():
    tuning = Tuning("linear", 0, 40, 255, 255)
    assert tuning(0) == 40
    assert tuning(255) == 255


def test_linear_and_identity_are_monotonic():
    print("\n=== Test: monotonicity ===")
    params = [
        (0, 0, 255, 255),
        (10, 100, 20, 110),
        (50, 0, 200, 255),
        (128, 10, 128, 250),
        (1, 255, 254, 255),
        (100, 200, 150, 50),
    ]
    for li, lv, hi, hv in params:
        for kind in ("identity", "linear"):
            table = Tuning(kind, li, lv, hi, hv).table.astype(int)
            if kind == "linear" and lv > hv:
                continue
            assert np.all(np.diff(table) >= 0), f"{kind} {li, lv, hi, hv} not monotonic"


def test_unknown_kind_falls_back_to_linear():
    assert Tuning("gamma", 64, 32, 192, 224) == Tuning("linear", 64, 32, 192, 224)


def test_malformed_index_order_still_builds_full_table():
    tuning = Tuning("linear", 200, 100, 50, 150)
    assert tuning.table.shape == (256,)
    assert tuning.table.dtype == np.uint8


def test_table_is_read_only():
    tuning = Tuning()
    with pytest.raises(ValueError):
        tuning.table[0] = 1


@pytest.mark.parametrize("value", [-1, -255, 256, 1000])
def test_out_of_range_intensity_raises(value):
    with pytest.raises(IndexError):
        Tuning()(value)


def test_apply_to_array():
    tuning = Tuning("binary", 127)
    array = np.array([[0, 127], [128, 255]], dtype=np.uint8)
    result = tuning.apply_to(array)
    assert result.tolist() == [[0, 0], [255, 255]]
    assert array.tolist() == [[0, 127], [128, 255]], "Input array must not change"


if __name__ == '__main__':
    test_identity_maps_every_value_to_itself()
    test_binary_is_a_step_at_threshold()
    test_linear_segments()
    test_linear_and_identity_are_monotonic()
    print("\nAll tuning tests passed!")
