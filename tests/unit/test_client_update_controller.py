"""Unit tests for ClientUpdateController.

Tests cover:
- Locking the scoped regions and unlocking exactly once on every path
- Patching fragments by element id (missing ids are no-ops)
- Rendering application and system errors, replacing earlier messages
- Transport failures: connection errors, timeouts, non-envelope responses
- on_success / on_error callbacks (sync and async)
- GET vs POST parameter encoding

Architecture:
- httpx.MockTransport stands in for the server
- FakeDocument stands in for the page
"""

import json
from urllib.parse import parse_qsl

import httpx
import pytest

from src.application.ajax.envelope import ResponseEnvelope
from src.client.update_controller import (
    ClientUpdateController,
    UpdateRequest,
    UpdateTransportError,
)
from src.domain.protocols.document_protocol import ErrorKind
from tests.utils.fake_document import FakeDocument
from tests.utils.recording_logger import RecordingLogger

URL = "http://shop.test/api/v1/ajax/update_item_quantity"
ERRORS = "#checkoutErrors"
GENERIC = "Something went wrong. Please try again."


def _envelope_body(*, html=None, data=None, application=(), exception=()) -> dict:
    return {
        "metadata": {"command": "update_item_quantity"},
        "payload": {"html": html or {}, "data": data},
        "error": {"application": list(application), "exception": list(exception)},
    }


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _controller(document, handler) -> ClientUpdateController:
    return ClientUpdateController(
        document,
        client=_client(handler),
        timeout=5.0,
        generic_error_message=GENERIC,
        logger=RecordingLogger(),
    )


def _checkout_page() -> FakeDocument:
    document = FakeDocument()
    document.add_region("orderItems", controls=["quantity-1", "quantity-2"])
    document.add_region(
        "orderSummary", controls=["placeOrder"], disabled=["placeOrder"], request_scoped=True
    )
    document.add_region("shippingAddressSection", controls=["editShippingAddress"])
    return document


def _request(**overrides) -> UpdateRequest:
    values = {
        "target_url": URL,
        "request_data": [("orderId", "1001"), ("orderItemId", "1"), ("quantity", "3")],
        "error_container_selector": ERRORS,
        "origin_id": "quantity-1",
    }
    values.update(overrides)
    return UpdateRequest(**values)


@pytest.mark.unit
class TestLocking:
    """Test region locking and unlocking."""

    async def test_locks_origin_region_while_in_flight(self):
        document = _checkout_page()
        disabled_during_request: set[str] = set()

        def handler(request):
            disabled_during_request.update(document.disabled)
            return httpx.Response(200, json=_envelope_body())

        outcome = await _controller(document, handler).update(_request())

        assert disabled_during_request == {"quantity-1", "quantity-2", "placeOrder"}
        assert outcome.locked == ("quantity-1", "quantity-2")
        assert document.enable_calls == [("quantity-1", "quantity-2")]
        assert document.disabled == {"placeOrder"}

    async def test_without_origin_locks_request_scoped_regions(self):
        document = _checkout_page()
        document.disabled.clear()

        outcome = await _controller(
            document, lambda request: httpx.Response(200, json=_envelope_body())
        ).update(_request(origin_id=None))

        assert outcome.locked == ("placeOrder",)
        assert document.disabled == set()

    async def test_unlocks_after_transport_failure(self):
        document = _checkout_page()

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        outcome = await _controller(document, handler).update(_request())

        assert outcome.transport_error is not None
        assert document.enable_calls == [("quantity-1", "quantity-2")]

    async def test_unlocks_when_callback_raises(self):
        document = _checkout_page()

        def on_success(envelope):
            raise RuntimeError("widget script failed")

        with pytest.raises(RuntimeError, match="widget script failed"):
            await _controller(
                document, lambda request: httpx.Response(200, json=_envelope_body())
            ).update(_request(on_success=on_success))

        assert document.enable_calls == [("quantity-1", "quantity-2")]
        assert document.disabled == {"placeOrder"}

    async def test_partial_lock_released_when_locking_fails(self):
        document = RegionFailingDocument(failing_region="giftMessageSection")
        document.add_region("orderSummary", controls=["placeOrder"], request_scoped=True)
        document.add_region(
            "giftMessageSection", controls=["addGiftMessage"], request_scoped=True
        )
        requests: list[httpx.Request] = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=_envelope_body())

        with pytest.raises(RuntimeError, match="region detached"):
            await _controller(document, handler).update(_request(origin_id=None))

        assert requests == []
        assert document.enable_calls == [("placeOrder",)]
        assert document.disabled == set()


class RegionFailingDocument(FakeDocument):
    """Page whose named region cannot be disabled."""

    def __init__(self, *, failing_region: str) -> None:
        super().__init__()
        self._failing_region = failing_region

    def disable_interactive(self, region_id):
        if region_id == self._failing_region:
            raise RuntimeError("region detached")
        return super().disable_interactive(region_id)


@pytest.mark.unit
class TestEnvelopeDelivery:
    """Test default handling of a parsed envelope."""

    async def test_patches_fragments_by_id_and_skips_missing(self):
        document = _checkout_page()
        body = _envelope_body(
            html={
                "orderItems": '<table id="orderItems">new</table>',
                "orderSummary": '<aside id="orderSummary">new</aside>',
                "notOnPage": "<div></div>",
            }
        )

        outcome = await _controller(
            document, lambda request: httpx.Response(200, json=body)
        ).update(_request())

        assert outcome.patched == ("orderItems", "orderSummary")
        assert outcome.missing == ("notOnPage",)
        assert document.elements["orderItems"] == '<table id="orderItems">new</table>'
        assert outcome.succeeded is True
        assert document.messages(ERRORS) == []

    async def test_renders_application_then_system_errors(self):
        document = _checkout_page()
        body = _envelope_body(
            application=["The quantity must be a whole number between 1 and 99."],
            exception=["We were unable to complete your request."],
        )

        outcome = await _controller(
            document, lambda request: httpx.Response(200, json=body)
        ).update(_request())

        assert document.errors[ERRORS] == [
            (ErrorKind.APPLICATION, "The quantity must be a whole number between 1 and 99."),
            (ErrorKind.SYSTEM, "We were unable to complete your request."),
        ]
        assert outcome.succeeded is False
        assert outcome.envelope.has_errors is True

    async def test_second_update_replaces_previous_errors(self):
        document = _checkout_page()
        responses = iter(
            [
                _envelope_body(application=["first problem"]),
                _envelope_body(application=["second problem"]),
            ]
        )
        controller = _controller(
            document, lambda request: httpx.Response(200, json=next(responses))
        )

        await controller.update(_request())
        await controller.update(_request())

        assert document.messages(ERRORS) == ["second problem"]

    async def test_successful_update_clears_previous_errors(self):
        document = _checkout_page()
        document.render_error(ERRORS, "stale", kind=ErrorKind.APPLICATION)

        await _controller(
            document, lambda request: httpx.Response(200, json=_envelope_body())
        ).update(_request())

        assert document.messages(ERRORS) == []

    async def test_on_success_replaces_default_handling(self):
        document = _checkout_page()
        received: list[ResponseEnvelope] = []

        async def on_success(envelope):
            received.append(envelope)

        body = _envelope_body(html={"orderItems": "<table></table>"}, data={"orderId": "1001"})
        outcome = await _controller(
            document, lambda request: httpx.Response(200, json=body)
        ).update(_request(on_success=on_success))

        assert received[0].data == {"orderId": "1001"}
        assert outcome.patched == ()
        assert "orderItems" in document.elements
        assert document.elements["orderItems"] != "<table></table>"


@pytest.mark.unit
class TestTransportFailures:
    """Test failures that produce no envelope."""

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(404, json={"type": "about:blank", "status": 404}),
            httpx.Response(500, text="Internal Server Error"),
            httpx.Response(200, text="<html>login</html>"),
            httpx.Response(200, json={"unexpected": True}),
        ],
        ids=["404", "500", "html", "not-envelope"],
    )
    async def test_non_envelope_renders_generic_message(self, response):
        document = _checkout_page()

        outcome = await _controller(document, lambda request: response).update(_request())

        assert isinstance(outcome.transport_error, UpdateTransportError)
        assert outcome.envelope is None
        assert document.errors[ERRORS] == [(ErrorKind.SYSTEM, GENERIC)]
        assert outcome.patched == ()

    async def test_status_code_kept_on_error(self):
        outcome = await _controller(
            _checkout_page(), lambda request: httpx.Response(503)
        ).update(_request())

        assert outcome.transport_error.status_code == 503

    async def test_timeout_is_transport_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        outcome = await _controller(_checkout_page(), handler).update(_request())

        assert str(outcome.transport_error) == "The request timed out."

    async def test_on_error_replaces_generic_message(self):
        document = _checkout_page()
        received: list[UpdateTransportError] = []

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        await _controller(document, handler).update(_request(on_error=received.append))

        assert len(received) == 1
        assert document.errors == {}


@pytest.mark.unit
class TestRequestEncoding:
    """Test how parameters are sent."""

    async def test_post_sends_form_body(self):
        captured: list[httpx.Request] = []

        def handler(request):
            captured.append(request)
            return httpx.Response(200, json=_envelope_body())

        await _controller(_checkout_page(), handler).update(_request())

        request = captured[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert parse_qsl(request.content.decode()) == [
            ("orderId", "1001"),
            ("orderItemId", "1"),
            ("quantity", "3"),
        ]

    async def test_get_sends_query_string(self):
        captured: list[httpx.Request] = []

        def handler(request):
            captured.append(request)
            return httpx.Response(200, content=json.dumps(_envelope_body()).encode())

        await _controller(_checkout_page(), handler).update(
            _request(method="get", request_data={"orderId": "1001"})
        )

        assert captured[0].method == "GET"
        assert captured[0].url.params["orderId"] == "1001"
