"""Client update controller.

Drives one asynchronous widget update against a document:

1. Lock: disable the enabled interactive elements of the ajax regions scoped
   to the request (the region around the origin element, or every
   request-scoped region when there is no origin).
2. Send the request through httpx (the only suspension point).
3. On an envelope: hand it to on_success, or patch every fragment onto the
   element with the same id and render the envelope's errors.
4. On a transport failure: hand it to on_error, or render the generic message.
5. Unlock exactly the elements locked in step 1, on every exit path.

Architecture:
    - Uses httpx for async HTTP
    - Transport returns Result types (no exceptions for transport failures)
    - The document is injected via DocumentProtocol
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError as PydanticValidationError

from src.application.ajax.envelope import ResponseEnvelope
from src.core.config import settings
from src.core.result import Failure, Result, Success
from src.domain.protocols.document_protocol import DocumentProtocol, ErrorKind
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.schemas.ajax_schemas import ResponseEnvelopeSchema

type SuccessCallback = Callable[[ResponseEnvelope], Awaitable[None] | None]
type ErrorCallback = Callable[["UpdateTransportError"], Awaitable[None] | None]
type RequestData = Sequence[tuple[str, str]] | Mapping[str, str]


class UpdateTransportError(Exception):
    """The request produced no envelope.

    Attributes:
        status_code: HTTP status when a response arrived, None otherwise.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, kw_only=True)
class UpdateRequest:
    """One asynchronous update.

    Attributes:
        target_url: Command URL (absolute, or relative to the client base URL).
        method: GET (query string) or POST (form body).
        request_data: Parameters as name/value pairs or a mapping.
        error_container_selector: Where error messages are rendered.
        origin_id: Id of the element that triggered the update.
        on_success: Replaces the default patch and error rendering.
        on_error: Replaces the default generic error rendering.
    """

    target_url: str
    error_container_selector: str
    method: str = "POST"
    request_data: RequestData = ()
    origin_id: str | None = None
    on_success: SuccessCallback | None = None
    on_error: ErrorCallback | None = None

    def pairs(self) -> list[tuple[str, str]]:
        if isinstance(self.request_data, Mapping):
            return list(self.request_data.items())
        return list(self.request_data)


@dataclass(frozen=True, kw_only=True)
class UpdateOutcome:
    """What one update did.

    Attributes:
        envelope: The parsed envelope, or None on transport failure.
        transport_error: The transport failure, or None.
        locked: Ids of the elements disabled for the request (and re-enabled).
        patched: Fragment keys whose element was replaced.
        missing: Fragment keys with no matching element.
    """

    envelope: ResponseEnvelope | None = None
    transport_error: UpdateTransportError | None = None
    locked: tuple[str, ...] = ()
    patched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    @property
    def succeeded(self) -> bool:
        """True when an envelope arrived and carries no errors."""
        return self.envelope is not None and not self.envelope.has_errors


class ClientUpdateController:
    """Lock, request, patch, unlock.

    Example:
        >>> async with httpx.AsyncClient(base_url="http://localhost:8000") as client:
        ...     controller = ClientUpdateController(document, client=client)
        ...     outcome = await controller.update(
        ...         UpdateRequest(
        ...             target_url="/api/v1/ajax/update_item_quantity",
        ...             request_data=[("orderId", "1001"), ("orderItemId", "1"),
        ...                           ("quantity", "3")],
        ...             error_container_selector="#checkoutErrors",
        ...             origin_id="quantity-1",
        ...         )
        ...     )
    """

    def __init__(
        self,
        document: DocumentProtocol,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        generic_error_message: str | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            document: Page the controller patches.
            client: Shared httpx client. When None, a client is opened per
                update with the configured timeout.
            timeout: Per-update timeout in seconds (settings default).
            generic_error_message: Shown on transport failure (settings default).
            logger: Logger (container default).
        """
        if logger is None:
            from src.core.container import get_logger

            logger = get_logger()
        self._document = document
        self._client = client
        self._timeout = timeout if timeout is not None else settings.client_timeout_seconds
        self._generic_error_message = (
            generic_error_message
            if generic_error_message is not None
            else settings.system_error_message
        )
        self._logger = logger

    async def update(self, request: UpdateRequest) -> UpdateOutcome:
        """Run one update end to end.

        Exceptions raised by on_success/on_error propagate after unlocking.

        Returns:
            UpdateOutcome describing what happened.
        """
        locked: list[str] = []
        try:
            self._lock(request.origin_id, locked)
            match await self._send(request):
                case Success(value=envelope):
                    patched, missing = await self._deliver(request, envelope)
                    return UpdateOutcome(
                        envelope=envelope,
                        locked=tuple(locked),
                        patched=patched,
                        missing=missing,
                    )
                case Failure(error=error):
                    await self._report_failure(request, error)
                    return UpdateOutcome(transport_error=error, locked=tuple(locked))
        finally:
            self._document.enable(tuple(locked))

    # Locking
    def _lock(self, origin_id: str | None, locked: list[str]) -> None:
        """Disable scoped regions, appending each element to locked as it goes."""
        for region_id in self._document.ajax_regions(origin_id):
            for element_id in self._document.disable_interactive(region_id):
                if element_id not in locked:
                    locked.append(element_id)

    # Transport
    async def _send(
        self, request: UpdateRequest
    ) -> Result[ResponseEnvelope, UpdateTransportError]:
        try:
            if self._client is not None:
                response = await self._request(self._client, request)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await self._request(client, request)
        except httpx.TimeoutException as e:
            self._logger.warning(
                "Ajax update timed out", url=request.target_url, error=str(e)
            )
            return Failure(error=UpdateTransportError("The request timed out."))
        except httpx.RequestError as e:
            self._logger.warning(
                "Ajax update connection error", url=request.target_url, error=str(e)
            )
            return Failure(error=UpdateTransportError(f"Connection failed: {e}"))

        return self._parse_envelope(response, request)

    async def _request(
        self, client: httpx.AsyncClient, request: UpdateRequest
    ) -> httpx.Response:
        method = request.method.upper()
        if method == "GET":
            return await client.request(
                method, request.target_url, params=request.pairs(), timeout=self._timeout
            )
        return await client.request(
            method,
            request.target_url,
            content=urlencode(request.pairs()),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=self._timeout,
        )

    def _parse_envelope(
        self, response: httpx.Response, request: UpdateRequest
    ) -> Result[ResponseEnvelope, UpdateTransportError]:
        if response.status_code != 200:
            self._logger.warning(
                "Ajax update rejected",
                url=request.target_url,
                status_code=response.status_code,
            )
            return Failure(
                error=UpdateTransportError(
                    f"Unexpected response status {response.status_code}",
                    status_code=response.status_code,
                )
            )
        try:
            schema = ResponseEnvelopeSchema.model_validate_json(response.content)
        except PydanticValidationError as e:
            self._logger.warning(
                "Ajax update returned no envelope",
                url=request.target_url,
                error_count=e.error_count(),
            )
            return Failure(
                error=UpdateTransportError(
                    "Response is not an ajax envelope",
                    status_code=response.status_code,
                )
            )
        return Success(value=schema.to_envelope())

    # Delivery
    async def _deliver(
        self, request: UpdateRequest, envelope: ResponseEnvelope
    ) -> tuple[tuple[str, ...], tuple[str, ...]]:
        if request.on_success is not None:
            await _call(request.on_success, envelope)
            return (), ()

        patched: list[str] = []
        missing: list[str] = []
        for key, markup in envelope.html_fragments.items():
            if self._document.replace_element(key, markup):
                patched.append(key)
            else:
                missing.append(key)
        if missing:
            self._logger.debug("Ajax fragments without target", keys=missing)

        self._render_errors(
            request.error_container_selector,
            application=envelope.application_errors,
            system=envelope.system_errors,
        )
        return tuple(patched), tuple(missing)

    async def _report_failure(
        self, request: UpdateRequest, error: UpdateTransportError
    ) -> None:
        if request.on_error is not None:
            await _call(request.on_error, error)
            return
        self._render_errors(
            request.error_container_selector,
            application=(),
            system=(self._generic_error_message,),
        )

    def _render_errors(
        self,
        selector: str,
        *,
        application: Sequence[str],
        system: Sequence[str],
    ) -> None:
        self._document.clear_errors(selector)
        for message in application:
            self._document.render_error(selector, message, kind=ErrorKind.APPLICATION)
        for message in system:
            self._document.render_error(selector, message, kind=ErrorKind.SYSTEM)


async def _call(callback: Callable[[Any], Any], argument: Any) -> None:
    result = callback(argument)
    if inspect.isawaitable(result):
        await result
