"""
HTTP service whose requests are susceptible to transient faults.

The retry policy watches the status code of every response; responses with a
transient 5xx status are retried with incremental backoff, anything else is
handed back to the caller as-is.
"""

import logging

import httpx

from ..exceptions import OperationError
from ..retry import RetryConfig, RetryPolicy

logger = logging.getLogger(__name__)


class FaultProneService:
    """
    Issues a GET to a fixed URL through a wait-and-retry policy.

    Features:
    - Injected httpx.AsyncClient (transport, pooling and TLS stay with httpx)
    - Retries 500, 502, 503 and 504 responses, 5 times, waiting 1s..5s
    - Transport failures surface as OperationError without retry
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str = "https://www.google.com",
        policy: RetryPolicy | None = None,
    ):
        """
        Initialize the service.

        Args:
            http_client: Client used to send every attempt
            url: Target of the GET request
            policy: Retry policy (default: incremental backoff preset)
        """
        self._http_client = http_client
        self.url = url
        self.policy = policy or RetryPolicy.from_config(RetryConfig.incremental())

    @property
    def service_name(self) -> str:
        return "FaultProneService"

    def _build_request(self) -> httpx.Request:
        """Build a fresh request for each attempt."""
        return self._http_client.build_request("GET", self.url)

    async def _send_once(self) -> httpx.Response:
        try:
            return await self._http_client.send(self._build_request())
        except httpx.TransportError as e:
            logger.warning(f"[{self.service_name}] Transport error for {self.url}: {e}")
            raise OperationError(
                f"Request to {self.url} failed: {e}",
                operation=self.service_name,
            ) from e

    async def execute_with_incremental_backoff(self) -> httpx.Response:
        """
        Send the request, retrying transient server errors.

        Returns:
            The final response: a success, a non-retryable error, or the last
            transient error once retries are exhausted

        Raises:
            OperationError: If the request fails at the transport level
        """
        logger.info(f"[{self.service_name}] GET {self.url}")
        response = await self.policy.execute_async(self._send_once)
        logger.info(
            f"[{self.service_name}] GET {self.url} finished with status {response.status_code}"
        )
        return response
