"""Tests for the remote sink adapter."""

import asyncio
import json
from datetime import date

import httpx
import pytest

from expensebook.domain.errors import ValidationError
from expensebook.sink import RemoteSink, SinkFailureReason, validate_sink_url
from helpers import make_expense

URL = "https://sheets.example.com/exec"


def test_not_configured_skips_network(sent_requests, ok_transport):
    """Test that no request is made without a URL."""
    sink = RemoteSink(None, transport=ok_transport)

    result = asyncio.run(sink.send(make_expense("a", date(2024, 1, 1))))

    assert result.success is False
    assert result.reason is SinkFailureReason.NOT_CONFIGURED
    assert sent_requests == []
    assert RemoteSink("").configured is False


def test_posts_serialized_expense(sent_requests, ok_transport):
    """Test the wire format of a successful send."""
    sink = RemoteSink(URL, transport=ok_transport)
    expense = make_expense(
        "abc", date(2024, 3, 5), quantity=3, unit_price=50, recipient="Market", description="Apples"
    )

    result = asyncio.run(sink.send(expense))

    assert result.success is True
    request = sent_requests[0]
    assert request.method == "POST"
    assert str(request.url) == URL
    assert "authorization" not in request.headers
    assert json.loads(request.content) == {
        "id": "abc",
        "date": "2024-03-05",
        "category": "Food",
        "subcategory": "Groceries",
        "description": "Apples",
        "quantity": 3,
        "unitPrice": 50,
        "recipient": "Market",
        "totalAmount": 150,
    }


def test_server_error_is_failure(sent_requests, failing_transport):
    """Test that an HTTP error status is reported, not raised."""
    sink = RemoteSink(URL, transport=failing_transport)

    result = asyncio.run(sink.send(make_expense("a", date(2024, 1, 1))))

    assert result.success is False
    assert result.reason is SinkFailureReason.TRANSPORT_OR_SERVER
    assert "500" in result.detail
    assert len(sent_requests) == 1


def test_transport_error_is_failure():
    """Test that connection problems are reported, not raised."""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    sink = RemoteSink(URL, transport=httpx.MockTransport(handler))

    result = asyncio.run(sink.send(make_expense("a", date(2024, 1, 1))))

    assert result.success is False
    assert result.reason is SinkFailureReason.TRANSPORT_OR_SERVER
    assert "connection refused" in result.detail


def test_follows_redirect_to_result():
    """Test that a redirect answer is followed to its final status."""
    seen = []

    def handler(request):
        seen.append(str(request.url))
        if request.url.path == "/exec":
            return httpx.Response(302, headers={"Location": "https://sheets.example.com/result"})
        return httpx.Response(200, text="saved")

    sink = RemoteSink(URL, transport=httpx.MockTransport(handler))

    result = asyncio.run(sink.send(make_expense("a", date(2024, 1, 1))))

    assert result.success is True
    assert seen == [URL, "https://sheets.example.com/result"]


@pytest.mark.parametrize("url", ["https://script.google.com/macros/s/x/exec", "http://localhost:8080/hook"])
def test_validate_sink_url_accepts_http(url):
    """Test accepted sink URLs."""
    assert validate_sink_url(f"  {url} ") == url


@pytest.mark.parametrize("url", ["", "ftp://example.com/x", "script.google.com/exec", "https://"])
def test_validate_sink_url_rejects_others(url):
    """Test rejected sink URLs."""
    with pytest.raises(ValidationError):
        validate_sink_url(url)
