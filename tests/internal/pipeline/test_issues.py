"""Tests for issue classification."""

import httpx
import pytest

from courier_sdk._internal.pipeline.issues import issue_from_error, issue_from_status
from courier_sdk._internal.pipeline.models import Issue
from courier_sdk.exceptions import CourierAbortError


def _status_error(status: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://test/thing")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError("bad status", request=request, response=response)


class TestIssueFromStatus:
    """Tests for issue_from_status()."""

    @pytest.mark.parametrize("status", [200, 201, 250, 299])
    def test_success_range(self, status):
        """Should map 200-299 inclusive to NONE."""
        assert issue_from_status(status) is Issue.NONE

    @pytest.mark.parametrize("status", [400, 404, 451, 499])
    def test_client_range(self, status):
        """Should map 400-499 inclusive to CLIENT_ERROR."""
        assert issue_from_status(status) is Issue.CLIENT_ERROR

    @pytest.mark.parametrize("status", [500, 503, 599])
    def test_server_range(self, status):
        """Should map 500-599 inclusive to SERVER_ERROR."""
        assert issue_from_status(status) is Issue.SERVER_ERROR

    @pytest.mark.parametrize("status", [None, 0, 100, 199, 300, 302, 399, 600, 999])
    def test_everything_else_is_unknown(self, status):
        """Should map missing, 1xx, 3xx and out-of-range codes to UNKNOWN_ERROR."""
        assert issue_from_status(status) is Issue.UNKNOWN_ERROR


class TestIssueFromError:
    """Tests for issue_from_error()."""

    def test_abort(self):
        """Should map CourierAbortError to ABORT_ERROR."""
        assert issue_from_error(CourierAbortError()) is Issue.ABORT_ERROR

    def test_connect_error(self):
        """Should map httpx.ConnectError to CONNECTION_ERROR."""
        assert issue_from_error(httpx.ConnectError("refused")) is Issue.CONNECTION_ERROR

    def test_builtin_connection_refused(self):
        """Should map ConnectionRefusedError from custom transports to CONNECTION_ERROR."""
        assert issue_from_error(ConnectionRefusedError()) is Issue.CONNECTION_ERROR

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ReadTimeout("read"),
            httpx.ConnectTimeout("connect"),
            httpx.PoolTimeout("pool"),
            httpx.WriteTimeout("write"),
        ],
    )
    def test_timeouts(self, error):
        """Should map every httpx timeout to TIMEOUT_ERROR."""
        assert issue_from_error(error) is Issue.TIMEOUT_ERROR

    @pytest.mark.parametrize(
        ("status", "issue"),
        [(404, Issue.CLIENT_ERROR), (502, Issue.SERVER_ERROR), (301, Issue.UNKNOWN_ERROR)],
    )
    def test_status_errors(self, status, issue):
        """Should classify HTTPStatusError by its response status."""
        assert issue_from_error(_status_error(status)) is issue

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ReadError("reset"),
            httpx.RemoteProtocolError("garbled"),
            RuntimeError("Network Error"),
        ],
    )
    def test_network_errors(self, error):
        """Should map other transport failures to NETWORK_ERROR."""
        assert issue_from_error(error) is Issue.NETWORK_ERROR

    def test_unknown(self):
        """Should fall back to UNKNOWN_ERROR."""
        assert issue_from_error(ValueError("odd")) is Issue.UNKNOWN_ERROR
