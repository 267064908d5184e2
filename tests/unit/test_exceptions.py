from http import HTTPStatus

import requests

from guacamole_client.core.exceptions import (
    APIError,
    OperationError,
    find_api_error,
    is_not_found,
    is_permission_denied,
)


def _wrapped(error: BaseException) -> OperationError:
    try:
        try:
            raise error
        except Exception as e:
            raise OperationError("get connection", "99", cause=e) from e
    except OperationError as wrapped:
        return wrapped


class TestAPIError:
    """Tests for the APIError class."""

    def test_init_with_defaults(self):
        # Act
        error = APIError("Test error message")

        # Assert
        assert error.message == "Test error message"
        assert error.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert error.type == ""
        assert error.details == {}

    def test_str_contains_status_and_type(self):
        error = APIError('Not found: "1"', status_code=404, type="NOT_FOUND")

        assert "404" in str(error)
        assert "NOT_FOUND" in str(error)
        assert 'Not found: "1"' in str(error)

    def test_predicates(self):
        assert APIError("x", 404, "NOT_FOUND").is_not_found()
        assert not APIError("x", 404, "NOT_FOUND").is_permission_denied()
        assert APIError("x", 403, "PERMISSION_DENIED").is_permission_denied()
        assert not APIError("x", 403, "PERMISSION_DENIED").is_not_found()

    def test_to_dict(self):
        error = APIError("Denied", 403, "PERMISSION_DENIED")

        assert error.to_dict() == {
            "error": "APIError",
            "message": "Denied",
            "type": "PERMISSION_DENIED",
            "status_code": 403,
        }


class TestOperationError:
    """Tests for operation error wrapping."""

    def test_message_names_operation_and_identifier(self):
        error = OperationError("delete user", "bob", cause=APIError("gone", 404, "NOT_FOUND"))

        assert str(error).startswith("Failed to delete user bob: ")
        assert error.operation == "delete user"
        assert error.identifier == "bob"

    def test_message_without_identifier(self):
        assert str(OperationError("list users")) == "Failed to list users"

    def test_api_error_is_recoverable(self):
        original = APIError("gone", 404, "NOT_FOUND")

        wrapped = _wrapped(original)

        assert wrapped.api_error is original
        assert find_api_error(wrapped) is original


class TestPredicates:
    """Tests for is_not_found and is_permission_denied."""

    def test_none(self):
        assert not is_not_found(None)
        assert not is_permission_denied(None)

    def test_unrelated_error(self):
        assert not is_not_found(ValueError("boom"))
        assert not is_permission_denied(requests.ConnectionError("refused"))

    def test_through_wrapping(self):
        not_found = _wrapped(APIError("Not found", 404, "NOT_FOUND"))
        denied = _wrapped(APIError("Permission Denied.", 403, "PERMISSION_DENIED"))

        assert is_not_found(not_found)
        assert not is_permission_denied(not_found)
        assert is_permission_denied(denied)
        assert not is_not_found(denied)

    def test_type_must_match_exactly(self):
        # The status code alone does not classify an error.
        assert not is_not_found(APIError("Not found", 404, ""))
        assert not is_not_found(APIError("x", 404, "not_found"))

    def test_transport_error_is_not_classified(self):
        wrapped = _wrapped(requests.Timeout("timed out"))

        assert find_api_error(wrapped) is None
        assert isinstance(wrapped.__cause__, requests.Timeout)

    def test_error_raised_from_none_is_not_classified(self):
        try:
            try:
                raise _wrapped(APIError("Not found", 404, "NOT_FOUND"))
            except OperationError:
                raise ValueError("unrelated config error") from None
        except ValueError as e:
            error = e

        assert not is_not_found(error)
        assert find_api_error(error) is None

    def test_error_raised_while_handling_is_not_classified(self):
        try:
            try:
                raise _wrapped(APIError("Permission Denied.", 403, "PERMISSION_DENIED"))
            except OperationError:
                raise KeyError("bug in handler")
        except KeyError as e:
            error = e

        # Implicit context only, no explicit cause.
        assert isinstance(error.__context__, OperationError)
        assert not is_permission_denied(error)
        assert not is_not_found(error)
