"""Error Hierarchy — verifies codes, statuses and the REST envelope."""

from app.core.errors import (
    AppError, DatabaseError, ErrorCategory, PageOutOfRangeError,
    ResourceNotFoundError, UpstreamAPIError,
)


def test_not_found_message_and_status():
    err = ResourceNotFoundError("User", 9999)
    assert str(err) == "User #9999 not found"
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.context.resource_id == "9999"


def test_page_out_of_range_is_client_error():
    err = PageOutOfRangeError(1000)
    assert err.message == "The page #1000 is greater than the total pages."
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION


def test_database_error_is_service_unavailable():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.http_status == 503
    assert "commit" in err.message


def test_database_error_exposes_constraint_in_envelope():
    err = DatabaseError(
        "Integrity constraint violated", "commit", constraint="users.email",
    )
    context = err.to_response()["error"]["context"]
    assert context == {"resource_id": None, "constraint": "users.email"}


def test_upstream_error_keeps_upstream_status():
    assert UpstreamAPIError("There is nothing here", 404).http_status == 404
    assert UpstreamAPIError("unreachable").http_status == 503


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("User", 1), PageOutOfRangeError(2),
        DatabaseError("x", "query"), UpstreamAPIError("y"),
    ):
        assert isinstance(err, AppError)


def test_to_response_envelope():
    body = ResourceNotFoundError("User", 5).to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "User #5 not found"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "error"
    assert error["context"]["resource_id"] == "5"
    assert "timestamp" in error
