"""atoship API HTTP client.

Single dispatch point for every SDK call: builds authenticated requests,
retries transient failures with exponential backoff, maps error responses to
the exception hierarchy and turns JSON bodies into typed results.
"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from atoship.config.constants import MAX_RETRY_AFTER_SECONDS, TOO_MANY_REQUESTS
from atoship.config.settings import Configuration
from atoship.core.exceptions import (
    AtoshipError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from atoship.core.logger import setup_logger
from atoship.models.response import ApiResponse, PaginatedResponse, Pagination

logger = setup_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

Outcome = Union[httpx.Response, AtoshipError]


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop None values and render booleans the way the API expects."""
    if not params:
        return None
    cleaned: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned or None


def _normalize_details(raw: Any) -> Dict[str, List[str]]:
    """Turn the server's validation details into {field: [messages]}."""
    details: Dict[str, List[str]] = {}
    if isinstance(raw, Mapping):
        for field, messages in raw.items():
            if isinstance(messages, (list, tuple)):
                details[str(field)] = [str(m) for m in messages]
            else:
                details[str(field)] = [str(messages)]
    elif isinstance(raw, list):
        for entry in raw:
            if isinstance(entry, Mapping):
                field = str(entry.get("field") or entry.get("path") or "request")
                details.setdefault(field, []).append(str(entry.get("message", entry)))
            else:
                details.setdefault("request", []).append(str(entry))
    return details


class HttpClient:
    """Async HTTP client for the atoship API."""

    def __init__(
        self,
        config: Configuration,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client from configuration.

        Args:
            config: SDK configuration
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.config = config
        self._transport = transport
        self._retired: List[httpx.AsyncClient] = []
        self.client = self._build_client()

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self._headers(),
            timeout=httpx.Timeout(self.config.timeout),
            verify=self.config.verify_ssl,
            transport=self._transport,
        )

    def update_configuration(self, config: Configuration) -> None:
        """Apply a new configuration to subsequent requests."""
        rebuild = config.verify_ssl != self.config.verify_ssl
        self.config = config

        if rebuild:
            # TLS settings are fixed per connection pool
            self._retired.append(self.client)
            self.client = self._build_client()
        else:
            self.client.base_url = config.base_url
            self.client.headers = self._headers()
            self.client.timeout = httpx.Timeout(config.timeout)

        logger.info(f"HTTP client reconfigured: {config}")

    @property
    def _log_level(self) -> int:
        return logging.INFO if self.config.debug else logging.DEBUG

    def _retry_delay(self, attempt: int, outcome: Outcome) -> float:
        """Backoff before the next attempt: base * 2^(attempt-1), or Retry-After on 429."""
        if isinstance(outcome, httpx.Response) and outcome.status_code == TOO_MANY_REQUESTS:
            retry_after = self._parse_retry_after(outcome)
            if retry_after is not None:
                return retry_after
        return self.config.retry_backoff * (2 ** (attempt - 1))

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> Optional[float]:
        value = response.headers.get("Retry-After")
        if value is None:
            return None
        try:
            seconds = float(value)
        except ValueError:
            return None
        return max(0.0, min(seconds, MAX_RETRY_AFTER_SECONDS))

    @staticmethod
    def _is_retryable(status_code: int) -> bool:
        return status_code == TOO_MANY_REQUESTS or 500 <= status_code < 600

    async def _send(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a request, retrying transport errors, 429 and 5xx responses.

        Returns:
            The final response (possibly an error status once retries are
            exhausted)

        Raises:
            NetworkError: If the last attempt produced no response
        """
        query = _clean_params(params)
        attempts = self.config.max_retries + 1
        outcome: Optional[Outcome] = None

        for attempt in range(1, attempts + 1):
            extra = {"method": method, "path": path, "attempt": attempt}
            start = time.monotonic()
            try:
                logger.log(self._log_level, f"{method} {path} (attempt {attempt}/{attempts})", extra=extra)
                outcome = await self.client.request(method, path, json=json, params=query)
            except httpx.TimeoutException as e:
                outcome = TimeoutError(f"Request to {path} timed out: {e}")
            except httpx.RequestError as e:
                outcome = NetworkError(f"Network error calling {path}: {type(e).__name__}: {e}")
            else:
                elapsed_ms = (time.monotonic() - start) * 1000
                logger.log(
                    self._log_level,
                    f"{method} {path} -> {outcome.status_code} ({elapsed_ms:.0f}ms)",
                    extra={**extra, "status_code": outcome.status_code, "elapsed_ms": round(elapsed_ms, 1)},
                )
                if not self._is_retryable(outcome.status_code):
                    return outcome

            # Calculate backoff and wait if not last attempt
            if attempt < attempts:
                delay = self._retry_delay(attempt, outcome)
                reason = outcome.status_code if isinstance(outcome, httpx.Response) else outcome.message
                logger.warning(
                    f"{method} {path} failed ({reason}), retry {attempt}/{self.config.max_retries} in {delay:.1f}s",
                    extra=extra,
                )
                await asyncio.sleep(delay)

        if isinstance(outcome, AtoshipError):
            logger.error(f"{method} {path} failed after {attempts} attempts: {outcome.message}")
            raise outcome
        return outcome

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Parse the JSON body; fall back to text, None for empty bodies."""
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _request_id(response: httpx.Response, body: Any) -> Optional[str]:
        request_id = response.headers.get(REQUEST_ID_HEADER)
        if not request_id and isinstance(body, Mapping):
            request_id = body.get("requestId")
        return request_id

    def _raise_for_status(self, method: str, path: str, response: httpx.Response, body: Any) -> None:
        """Map a non-2xx response to the matching AtoshipError."""
        status = response.status_code
        if 200 <= status < 300:
            return

        message = None
        error_code = None
        raw_details: Any = None
        if isinstance(body, Mapping):
            error = body.get("error")
            if isinstance(error, Mapping):
                message = error.get("message")
                error_code = error.get("code")
                raw_details = error.get("details")
            elif error:
                message = str(error)
            message = message or body.get("message")
            error_code = error_code or body.get("code")
            raw_details = raw_details or body.get("details") or body.get("errors")
        elif isinstance(body, str) and body.strip():
            message = body.strip()

        message = message or response.reason_phrase or f"HTTP {status}"
        kwargs = {
            "status_code": status,
            "error_code": str(error_code) if error_code is not None else None,
            "request_id": self._request_id(response, body),
            "response_body": body,
        }

        logger.error(f"{method} {path} -> {status}: {message}", extra={"status_code": status})

        if status in (400, 422):
            raise ValidationError(message, details=_normalize_details(raw_details), **kwargs)
        if status == 401:
            raise AuthenticationError(message, **kwargs)
        if status == 403:
            raise AuthorizationError(message, **kwargs)
        if status == 404:
            raise NotFoundError(message, **kwargs)
        if status == 409:
            raise ConflictError(message, **kwargs)
        if status == TOO_MANY_REQUESTS:
            raise RateLimitError(message, retry_after=self._parse_retry_after(response), **kwargs)
        if status >= 500:
            raise ServerError(message, **kwargs)
        raise AtoshipError(message, **kwargs)

    @staticmethod
    def _unwrap(body: Any) -> Tuple[bool, Any, Optional[str], Optional[str]]:
        """Split the {success, data, error, message} envelope.

        Bodies without the envelope are the data themselves.
        """
        if not isinstance(body, Mapping) or not ({"data", "success"} & body.keys()):
            return True, body, None, None

        success = bool(body.get("success", True))
        error = body.get("error")
        if isinstance(error, Mapping):
            error = error.get("message") or str(error)
        message = body.get("message")
        if not success and not error:
            error = message or "Request failed"
        return success, body.get("data"), error, message

    @staticmethod
    def _deserialize(data: Any, model: Type[BaseModel], many: bool = False) -> Any:
        """Validate data into model instances."""
        try:
            if many:
                if isinstance(data, Mapping):
                    # Some list endpoints nest the list under a key
                    data = next(
                        (data[k] for k in ("items", "rates", "results") if isinstance(data.get(k), list)),
                        data,
                    )
                if not isinstance(data, list):
                    raise AtoshipError(f"Expected a list of {model.__name__}, got {type(data).__name__}")
                return [model.model_validate(item) for item in data]
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise AtoshipError(f"Unexpected {model.__name__} payload from API: {e}") from e

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        model: Optional[Type[BaseModel]] = None,
        many: bool = False,
    ) -> ApiResponse:
        """
        Perform a request and wrap the result.

        Args:
            method: HTTP method
            path: API path (e.g. "/api/orders")
            json: JSON body
            params: Query parameters (None values dropped)
            model: Model to deserialize ``data`` into
            many: ``data`` is a list of ``model``

        Returns:
            ApiResponse with typed data
        """
        response = await self._send(method, path, json=json, params=params)
        body = self._decode(response)
        self._raise_for_status(method, path, response, body)

        success, data, error, message = self._unwrap(body)
        if success and model is not None and data is not None:
            data = self._deserialize(data, model, many)
        elif not success:
            logger.warning(f"{method} {path} reported failure: {error}")

        return ApiResponse(
            success=success,
            data=data,
            error=error,
            message=message,
            status_code=response.status_code,
            request_id=self._request_id(response, body),
        )

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None, model=None, many: bool = False) -> ApiResponse:
        return await self.request("GET", path, params=params, model=model, many=many)

    async def post(self, path: str, json: Any = None, model=None, many: bool = False) -> ApiResponse:
        return await self.request("POST", path, json=json, model=model, many=many)

    async def put(self, path: str, json: Any = None, model=None) -> ApiResponse:
        return await self.request("PUT", path, json=json, model=model)

    async def delete(self, path: str) -> ApiResponse:
        return await self.request("DELETE", path)

    async def get_paginated(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        model: Optional[Type[BaseModel]] = None,
    ) -> PaginatedResponse:
        """GET a list endpoint and return one page of typed items."""
        response = await self._send("GET", path, params=params)
        body = self._decode(response)
        self._raise_for_status("GET", path, response, body)

        success, data, error, message = self._unwrap(body)
        pagination_raw = body.get("pagination") or body.get("meta") if isinstance(body, Mapping) else None
        if isinstance(data, Mapping):
            pagination_raw = data.get("pagination") or pagination_raw
            data = data.get("items", [])
        data = data or []
        if not isinstance(data, list):
            raise AtoshipError(f"Expected a list from {path}, got {type(data).__name__}")

        items = self._deserialize(data, model, many=True) if model is not None else data
        if pagination_raw:
            try:
                pagination = Pagination.model_validate(pagination_raw)
            except PydanticValidationError as e:
                raise AtoshipError(f"Unexpected pagination payload from {path}: {e}") from e
        else:
            pagination = Pagination(page=1, limit=len(items), total=len(items), total_pages=1)

        return PaginatedResponse(
            success=success,
            data=items,
            error=error,
            message=message,
            status_code=response.status_code,
            request_id=self._request_id(response, body),
            pagination=pagination,
        )

    async def close(self) -> None:
        """Close HTTP client connections."""
        for client in self._retired:
            await client.aclose()
        self._retired.clear()
        await self.client.aclose()
