"""Tests for public exceptions."""

import pytest

from courier_sdk.exceptions import (
    CourierAbortError,
    CourierConfigError,
    CourierDecodeError,
    CourierError,
)


class TestCourierError:
    """Tests for base CourierError."""

    def test_is_exception(self):
        """CourierError should be an Exception."""
        assert issubclass(CourierError, Exception)

    def test_can_be_raised(self):
        """CourierError should be raisable with message."""
        with pytest.raises(CourierError) as exc_info:
            raise CourierError("test error")
        assert str(exc_info.value) == "test error"


class TestCourierAbortError:
    """Tests for CourierAbortError."""

    def test_inherits_from_courier_error(self):
        """CourierAbortError should inherit from CourierError."""
        assert issubclass(CourierAbortError, CourierError)

    def test_defaults(self):
        """Should default to an 'Aborted' message and ABORT_ERROR code."""
        error = CourierAbortError()
        assert str(error) == "Aborted"
        assert error.code == "ABORT_ERROR"

    def test_custom_message(self):
        """Should keep a custom message."""
        error = CourierAbortError("user navigated away")
        assert str(error) == "user navigated away"
        assert error.code == "ABORT_ERROR"


class TestCourierConfigError:
    """Tests for CourierConfigError."""

    def test_inherits_from_courier_error(self):
        """CourierConfigError should inherit from CourierError."""
        assert issubclass(CourierConfigError, CourierError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(CourierConfigError) as exc_info:
            raise CourierConfigError("Missing base URL")
        assert str(exc_info.value) == "Missing base URL"


class TestCourierDecodeError:
    """Tests for CourierDecodeError."""

    def test_inherits_from_courier_error(self):
        """CourierDecodeError should inherit from CourierError."""
        assert issubclass(CourierDecodeError, CourierError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = CourierDecodeError("bad json")
        assert str(error) == "bad json"
        assert error.status_code is None
        assert error.text is None

    def test_with_details(self):
        """Should store status code and raw text."""
        error = CourierDecodeError("bad json", status_code=200, text="<html>")
        assert error.status_code == 200
        assert error.text == "<html>"
