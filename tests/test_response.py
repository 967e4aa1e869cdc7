# tests/test_response.py

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(detail="done", data={"record": 1})

    assert response.success
    assert response.error is None
    assert response.status_code == 200
    assert response.data == {"record": 1}
    assert str(response) == "Success: done"


def test_fail_defaults():
    response = Response.fail(detail="nope", error=ErrorCode.PARENT_NOT_FOUND)

    assert not response.success
    assert response.status_code == 400
    assert response.data == {}
    assert str(response) == "Error: PARENT_NOT_FOUND"


def test_fail_with_string_error():
    response = Response.fail(detail="nope", error="CUSTOM")

    assert str(response) == "Error: CUSTOM"
