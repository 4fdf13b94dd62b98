"""Errors — codes, statuses and response envelope of the error hierarchy."""

from typed_api.core.errors import (
    ErrorCategory, ErrorSeverity, ResourceNotFoundError, RouteConflictError, TypedApiError,
)


def test_not_found_maps_to_404_with_resource_context():
    err = ResourceNotFoundError("User", "abc")
    assert isinstance(err, TypedApiError)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "User 'abc' not found"
    assert err.context.resource == "User"
    assert err.context.resource_id == "abc"


def test_route_conflict_lists_duplicates():
    err = RouteConflictError([("GET", "/users"), ("PUT", "/users/{id}")])
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert "GET /users" in err.message
    assert "PUT /users/{id}" in err.message


def test_to_response_envelope():
    body = ResourceNotFoundError("Company", "c1").to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "info"
    assert body["context"] == {"resource": "Company", "resource_id": "c1"}
    assert "timestamp" in body
