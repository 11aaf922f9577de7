# tests/test_response.py

import pytest

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(detail="ok")

    assert response.success
    assert response.status_code == 200
    assert response.error is None
    assert response.data == {}
    assert response.kind is None


@pytest.mark.parametrize(
    "error, kind",
    [
        (ErrorCode.VALIDATION_FAILED, "validation"),
        (ErrorCode.MISSING_REQUIRED_FIELD, "validation"),
        (ErrorCode.INVALID_INPUT, "validation"),
        (ErrorCode.DUPLICATE_NAME, "conflict"),
        (ErrorCode.NOT_FOUND, "conflict"),
        (ErrorCode.HISTORY_EMPTY, "history"),
        (ErrorCode.INTERNAL_ERROR, "internal"),
    ],
)
def test_failure_kind(error, kind):
    assert Response.fail(error=error).kind == kind


def test_string_error_has_no_kind():
    assert Response.fail(error="SOMETHING_ELSE").kind is None


def test_fail_defaults():
    response = Response.fail(
        detail="Nothing to undo.",
        error=ErrorCode.HISTORY_EMPTY,
    )

    assert not response.success
    assert response.status_code == 400
    assert response.data == {}
    assert response.trace is None


def test_fail_carries_trace():
    response = Response.fail(error=ErrorCode.INTERNAL_ERROR, trace="Traceback ...")

    assert response.trace == "Traceback ..."


def test_str():
    assert str(Response.succeed(detail="Done")) == "Success: Done"
    assert str(Response.fail(error=ErrorCode.NOT_FOUND)) == "Error: NOT_FOUND"
