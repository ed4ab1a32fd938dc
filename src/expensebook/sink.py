"""Remote sink adapter.

Mirrors a finalized expense into an external spreadsheet endpoint with a
single HTTP POST. There is no retry; any failure is reported to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlparse

import httpx

from expensebook.database.mappers import expense_to_payload
from expensebook.domain.entities import Expense
from expensebook.domain.errors import ValidationError
from expensebook.logger import get_logger

logger = get_logger()


class SinkFailureReason(Enum):
    """Why a send did not succeed."""

    NOT_CONFIGURED = "not_configured"
    TRANSPORT_OR_SERVER = "transport_or_server"


@dataclass(frozen=True)
class SinkResult:
    """Outcome of one send."""

    success: bool
    reason: Optional[SinkFailureReason] = None
    detail: Optional[str] = None

    @classmethod
    def ok(cls) -> "SinkResult":
        return cls(success=True)

    @classmethod
    def failure(cls, reason: SinkFailureReason, detail: str) -> "SinkResult":
        return cls(success=False, reason=reason, detail=detail)


class RemoteSink:
    """Sends expenses to a configured HTTP endpoint."""

    def __init__(
        self,
        url: Optional[str],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize remote sink.

        Args:
            url: Endpoint URL, or None when the sink is disabled
            transport: Optional httpx transport (used by tests)
        """
        self.url = url or None
        self.transport = transport

    @property
    def configured(self) -> bool:
        return self.url is not None

    async def send(self, expense: Expense) -> SinkResult:
        """POST one expense as JSON.

        Args:
            expense: Finalized expense with ID and total assigned

        Returns:
            SinkResult; never raises for network or server failures
        """
        if self.url is None:
            return SinkResult.failure(SinkFailureReason.NOT_CONFIGURED, "no endpoint URL configured")

        payload = expense_to_payload(expense)
        logger.debug(f"Sending expense {expense.id} to remote sink")
        try:
            # Spreadsheet web apps answer POSTs with a redirect to the result
            async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = f"server answered {e.response.status_code}"
            logger.error(f"Error saving expense {expense.id} to remote sink: {detail}")
            return SinkResult.failure(SinkFailureReason.TRANSPORT_OR_SERVER, detail)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            detail = f"{type(e).__name__}: {e}"
            logger.error(f"Error saving expense {expense.id} to remote sink: {detail}")
            return SinkResult.failure(SinkFailureReason.TRANSPORT_OR_SERVER, detail)

        logger.info(f"Saved expense {expense.id} to remote sink")
        return SinkResult.ok()


def validate_sink_url(url: str) -> str:
    """Check that a sink URL is an absolute http(s) URL.

    Raises:
        ValidationError: If the URL has another scheme or no host
    """
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid sink URL '{url}': expected an http:// or https:// address")
    return url.strip()
