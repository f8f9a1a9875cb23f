"""Tests for conversion of vectors to and from mappings of coordinate name to value"""

import logging

from expression import Result, result
from hypothesis import given, strategies as st
import numpy as np
import pytest

from math3d import InvalidInputError, Math3dException, Vector3, unsafe_extract_result
from hypothesis_extra_strategies import gen_non_number, gen_vector3

KEYS = ("x", "y", "z")


def test_to_mapping__simple_example():
    assert Vector3(1, 2.5, -3).to_mapping() == {"x": 1.0, "y": 2.5, "z": -3.0}


@given(original=gen_vector3())
def test_vector_roundtrips_through_mapping(original):
    match Vector3.from_mapping(original.to_mapping()):
        case result.Result(tag="ok", ok=parsed):
            assert parsed == original
            assert parsed.equal(original)
        case result.Result(tag="error", error=err):
            pytest.fail(f"Failed to parse vector: {err}")
        case unexpected:
            pytest.fail(f"Expected a Result-wrapped value but got a value of type {type(unexpected).__name__}")


def test_from_mapping__ignores_extra_keys():
    observed = Vector3.unsafe_from_mapping({"x": 1, "y": 2, "z": 3, "w": "ignored"})
    assert observed == Vector3(1, 2, 3)


def test_from_mapping__accepts_numpy_scalars():
    observed = Vector3.unsafe_from_mapping({"x": np.float64(0.5), "y": np.int32(-1), "z": np.float32(2)})
    assert observed == Vector3(0.5, -1, 2)


@pytest.mark.parametrize(["data", "exp_msg"], [
    ({"x": 1, "y": 2}, "Missing key(s) to build Vector3: z"),
    ({"y": 2}, "Missing key(s) to build Vector3: x, z"),
    ({}, "Missing key(s) to build Vector3: x, y, z"),
    ({"X": 1, "Y": 2, "Z": 3}, "Missing key(s) to build Vector3: x, y, z"),
    ({"x": "1", "y": 2, "z": 3}, "Non-numeric value(s) to build Vector3: x (str)"),
    ({"x": 1, "y": None, "z": True}, "Non-numeric value(s) to build Vector3: y (NoneType), z (bool)"),
    ([1, 2, 3], "Input to build Vector3 isn't a mapping, but list"),
    (None, "Input to build Vector3 isn't a mapping, but NoneType"),
    ])
def test_from_mapping__malformed_input_is_typed_error(data, exp_msg):
    match Vector3.from_mapping(data):
        case result.Result(tag="error", error=err):
            assert isinstance(err, InvalidInputError)
            assert str(err) == exp_msg
        case unexpected:
            pytest.fail(f"Expected error result but got: {unexpected}")
    with pytest.raises(InvalidInputError) as err_ctx:
        Vector3.unsafe_from_mapping(data)
    assert str(err_ctx.value) == exp_msg


@given(
    key=st.sampled_from(KEYS),
    bad_value=gen_non_number(),
    original=gen_vector3(),
)
def test_from_mapping__any_non_numeric_value_is_error(key, bad_value, original):
    data = {**original.to_mapping(), key: bad_value}
    res = Vector3.from_mapping(data)
    assert res.is_error()
    assert f"{key} ({type(bad_value).__name__})" in str(res.error)


def test_invalid_input_error_hierarchy():
    assert issubclass(InvalidInputError, Math3dException)
    assert issubclass(InvalidInputError, ValueError)


def test_from_mapping__logs_rejection(caplog):
    caplog.set_level(logging.DEBUG)
    Vector3.from_mapping({"x": 1})
    assert "Cannot build Vector3 from mapping" in caplog.text
    assert "y, z" in caplog.text


def test_unsafe_extract_result__ok_gives_value():
    assert unsafe_extract_result(Result.Ok(Vector3(1, 2, 3))) == Vector3(1, 2, 3)


def test_unsafe_extract_result__error_is_raised():
    with pytest.raises(InvalidInputError):
        unsafe_extract_result(Vector3.from_mapping({}))


def test_unsafe_extract_result__non_result_is_type_error():
    with pytest.raises(TypeError) as err_ctx:
        unsafe_extract_result(Vector3(1, 2, 3))
    assert str(err_ctx.value) == "Unexpected result type (Vector3), not expression.Result"
