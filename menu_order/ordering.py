"""HTTP order submission."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from menu_order.config import ORDER_TIMEOUT_SECONDS
from menu_order.errors import OrderSubmissionError

logger = logging.getLogger(__name__)


class OrderClient:
    """
    Posts order payloads to the order endpoint.

    One request per submission: no retry, no cancellation. Any transport
    error or non-2xx status is raised as ``OrderSubmissionError``.

    Example:
        >>> async with OrderClient("https://example.test/orders") as client:
        ...     await client.submit({"orders": [{"dish_id": "1", "amount": 2}]})
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = ORDER_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=transport)

    async def __aenter__(self) -> "OrderClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def submit(self, payload: dict[str, Any]) -> httpx.Response:
        """
        Send an order payload as JSON.

        Args:
            payload: ``{"orders": [{"dish_id": ..., "amount": ...}, ...]}``

        Returns:
            The endpoint response (body is not interpreted)

        Raises:
            OrderSubmissionError: On network failure or a non-2xx status
        """
        lines = len(payload.get("orders", []))
        logger.info("Submitting order", extra={"endpoint": self.endpoint, "lines": lines})

        try:
            response = await self._client.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.warning("Order submission failed: %s", exc, extra={"endpoint": self.endpoint})
            raise OrderSubmissionError(f"Could not reach order service: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "Order endpoint rejected order",
                extra={"endpoint": self.endpoint, "status": response.status_code},
            )
            raise OrderSubmissionError(
                f"Order service answered HTTP {response.status_code}",
                status_code=response.status_code,
            )

        logger.info("Order submitted", extra={"endpoint": self.endpoint, "status": response.status_code})
        return response
