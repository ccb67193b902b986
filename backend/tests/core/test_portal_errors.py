"""Error Hierarchy — status codes and the {success: false} envelope."""

import pytest

from portal.core.errors import (
    ConflictError, DatabaseError, ErrorCategory, ForbiddenError,
    RequestValidationFailed, ResourceNotFoundError, ServiceUnavailableError,
    UnauthenticatedError, UpstreamServiceError,
)


@pytest.mark.parametrize("error,status,code", [
    (UnauthenticatedError(), 401, "UNAUTHORIZED"),
    (ForbiddenError(), 403, "FORBIDDEN"),
    (RequestValidationFailed("name is required", field="name"), 400, "VALIDATION_ERROR"),
    (ResourceNotFoundError("Bookmark"), 404, "NOT_FOUND"),
    (ConflictError("Bookmark already exists"), 409, "CONFLICT"),
    (ServiceUnavailableError("YouTube API"), 503, "SERVICE_UNAVAILABLE"),
    (UpstreamServiceError("Paystack", "HTTP 502"), 500, "UPSTREAM_ERROR"),
    (DatabaseError("boom", "query"), 500, "DATABASE_ERROR"),
])
def test_status_and_code(error, status, code):
    assert error.http_status == status
    assert error.to_response()["code"] == code
    assert error.to_response()["success"] is False


def test_not_found_message_names_resource():
    assert ResourceNotFoundError("Channel").to_response()["error"] == "Channel not found"


def test_server_errors_hide_detail():
    err = DatabaseError("password authentication failed for user portal", "connect")
    assert err.to_response()["error"] == "Internal server error"
    assert "password" in err.message


def test_upstream_error_keeps_status_in_context():
    err = UpstreamServiceError(
        "Cloudinary", "HTTP 502", public_message="Failed to fetch sermons",
        status_code=502,
    )
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.context.service == "Cloudinary"
    assert err.context.debug_info == {"status_code": 502}
    assert err.to_response()["error"] == "Failed to fetch sermons"
