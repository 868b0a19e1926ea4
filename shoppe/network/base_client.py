"""
Shared HTTP plumbing for the remote API clients.

Each client owns one lazily created ``httpx.AsyncClient`` with connection
pooling. All requests go through ``_request``, the single place where
transport errors, non-2xx statuses and undecodable bodies are translated
into the ``NetworkFailure`` hierarchy.
"""

import time
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
import pydantic
import structlog

from ..config import settings
from ..exceptions import (
    DecodeFailure,
    NotFoundError,
    ServerError,
    TransportFailure,
    ValidationError,
)
from ..logging_config import get_request_id

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class BaseAPIClient:
    """
    Base class for clients of JSON/form HTTP APIs.

    Configuration is fixed at construction; the underlying connection pool
    is created on first use and shared by all concurrent calls.

    Attributes:
        base_url: Base URL every request path is resolved against
        timeout: Transport timeout in seconds
    """

    service_name = "backend"

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        auth: Optional[httpx.Auth] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API
            timeout: Transport timeout in seconds (defaults to settings)
            auth: Authentication applied to every request
            headers: Extra headers sent with every request
            transport: Custom transport, used by tests to stub the network
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self._auth = auth
        self._headers = dict(headers or {})
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "api_client_initialized",
            service=self.service_name,
            base_url=self.base_url,
            timeout=self.timeout,
        )

    def _get_client(self) -> httpx.AsyncClient:
        """
        Get or create the persistent HTTP client.

        Returns:
            Configured httpx.AsyncClient instance
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                auth=self._auth,
                headers=self._headers,
                transport=self._transport,
                limits=httpx.Limits(
                    max_keepalive_connections=20,
                    max_connections=100,
                    keepalive_expiry=30.0,
                ),
            )
            logger.debug("http_client_created", service=self.service_name)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("http_client_closed", service=self.service_name)
        self._client = None

    def _get_request_headers(self) -> Dict[str, str]:
        """Per-request headers, including the request ID for tracing."""
        headers = {
            "User-Agent": settings.USER_AGENT,
            "Accept": "application/json",
        }

        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        resource: str,
        identifier: Any = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Perform one HTTP round trip and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            resource: Resource name used in NotFound messages
            identifier: Resource id used in NotFound messages (defaults to the path)
            params: Query-string parameters
            json: JSON request body
            data: Form-encoded request body

        Returns:
            Parsed JSON body, or None for an empty body

        Raises:
            TransportFailure: If no response was received
            NotFoundError: On HTTP 404
            ValidationError: On HTTP 400 or 422
            ServerError: On any other non-2xx status
            DecodeFailure: If the body is not valid JSON
        """
        start_time = time.perf_counter()
        url = f"{self.base_url}/{path}"

        logger.debug(
            "sending_request",
            service=self.service_name,
            method=method,
            url=url,
            params=params,
        )

        try:
            response = await self._get_client().request(
                method,
                path,
                params=params,
                json=json,
                data=data,
                headers=self._get_request_headers(),
            )
        except (httpx.RequestError, TimeoutError) as error:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "request_failed",
                service=self.service_name,
                method=method,
                url=url,
                duration_ms=duration_ms,
                error_type=type(error).__name__,
                error_message=str(error),
            )
            raise TransportFailure(url, str(error) or type(error).__name__) from error

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "response_received",
            service=self.service_name,
            method=method,
            url=url,
            status_code=response.status_code,
            duration_ms=duration_ms,
            response_size=len(response.content),
        )

        if not response.is_success:
            raise self._status_error(
                response, resource, path if identifier is None else identifier
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as error:
            logger.error(
                "response_not_json",
                service=self.service_name,
                url=url,
                body=response.text[:200],
            )
            raise DecodeFailure(f"{resource} response", str(error)) from error

    def _status_error(
        self, response: httpx.Response, resource: str, identifier: Any
    ) -> ServerError:
        """Translate a non-2xx response into the matching exception."""
        status = response.status_code
        logger.warning(
            "error_status",
            service=self.service_name,
            status_code=status,
            response_body=response.text[:500],
        )

        if status == 404:
            return NotFoundError(resource, identifier)

        if status in (400, 422):
            try:
                body = response.json()
            except ValueError:
                body = response.text[:500]
            errors = body.get("errors", body) if isinstance(body, dict) else body
            return ValidationError(status, errors)

        return ServerError(status, details={"body": response.text[:500]})

    @staticmethod
    def _decode(payload: Any, envelope: str, model: Type[ModelT]) -> ModelT:
        """
        Decode a single resource, unwrapping its envelope when present.

        Raises:
            DecodeFailure: If the payload is empty or does not fit the model
        """
        body = payload.get(envelope, payload) if isinstance(payload, dict) else payload
        if not isinstance(body, dict) or not body:
            raise DecodeFailure(model.__name__, f"expected a '{envelope}' object")
        try:
            return model.model_validate(body)
        except pydantic.ValidationError as error:
            raise DecodeFailure(model.__name__, str(error)) from error

    @staticmethod
    def _decode_list(payload: Any, envelope: str, model: Type[ModelT]) -> List[ModelT]:
        """
        Decode a collection, unwrapping its envelope when present.

        Raises:
            DecodeFailure: If the payload is not a list or an item does not fit
        """
        items = payload.get(envelope) if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise DecodeFailure(f"list of {model.__name__}", f"expected a '{envelope}' array")
        try:
            return [model.model_validate(item) for item in items]
        except pydantic.ValidationError as error:
            raise DecodeFailure(model.__name__, str(error)) from error
