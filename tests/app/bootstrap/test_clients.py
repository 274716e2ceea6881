"""Testes para StarkInfraClient e factories (servidor simulado via MockTransport)."""

from __future__ import annotations

import json
from collections.abc import Iterator

import httpx
import pytest

from api.connectors.starkinfra import Organization, Project
from app.bootstrap import StarkInfraClient, create_starkinfra_client, user_from_settings
from app.domain import Event, PixDomain, PixRequest, PixRequestLog, Webhook
from app.resources import PixRequestResource
from config.settings import Environment, StarkInfraSettings
from tests.fakes.fake_starkinfra import (
    PIX_REQUEST_PAYLOAD,
    event_payload,
    generate_private_key,
    private_key_pem,
    public_key_pem,
    sign,
)
from utils.errors import ConfigurationError, InvalidSignatureError, RequestError

USER_KEY = generate_private_key()
STARK_KEY = generate_private_key()


class FakeStarkInfraApi:
    """Simula os endpoints usados pelos testes e registra as requisições."""

    def __init__(self, total_events: int = 3) -> None:
        self.requests: list[httpx.Request] = []
        self.events = [event_payload(event_id=str(i)) for i in range(total_events)]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v2/")
        params = request.url.params

        if path == "public-key":
            return httpx.Response(
                200, json={"publicKeys": [{"content": public_key_pem(STARK_KEY)}]}
            )
        if path == "event" and request.method == "GET":
            offset = int(params.get("cursor", "0"))
            size = int(params.get("limit", "100"))
            end = offset + size
            return httpx.Response(
                200,
                json={
                    "events": self.events[offset:end],
                    "cursor": str(end) if end < len(self.events) else None,
                },
            )
        if path.startswith("event/") and request.method == "PATCH":
            body = json.loads(request.content)
            event = {**event_payload(event_id=path.split("/")[1]), "is_delivered": body["isDelivered"]}
            return httpx.Response(200, json={"event": event})
        if path == "webhook" and request.method == "POST":
            return httpx.Response(200, json={"webhook": {**json.loads(request.content), "id": "42"}})
        if path == "pix-request" and request.method == "POST":
            requests = json.loads(request.content)["requests"]
            return httpx.Response(200, json={"requests": requests})
        if path == "pix-domain":
            return httpx.Response(
                200,
                json={"domains": [{"name": "pix.bank.com", "certificates": [{"content": "pem"}]}]},
            )
        if path.startswith("echo"):
            content = json.loads(request.content) if request.content else None
            return httpx.Response(
                200, json={"method": request.method, "path": path, "body": content}
            )
        return httpx.Response(404, json={"errors": []})


def _settings(**overrides) -> StarkInfraSettings:
    values = {"project_id": "5656565656565656", "private_key": private_key_pem(USER_KEY)}
    values.update(overrides)
    return StarkInfraSettings(**values)


@pytest.fixture
def api() -> FakeStarkInfraApi:
    return FakeStarkInfraApi()


@pytest.fixture
def client(api: FakeStarkInfraApi) -> Iterator[StarkInfraClient]:
    with create_starkinfra_client(_settings(), transport=httpx.MockTransport(api)) as client:
        yield client


class TestUserFromSettings:
    def test_project(self) -> None:
        user = user_from_settings(_settings())
        assert isinstance(user, Project)
        assert user.access_id == "project/5656565656565656"

    def test_organization_with_workspace(self) -> None:
        user = user_from_settings(
            _settings(project_id="", organization_id="1", workspace_id="2")
        )
        assert isinstance(user, Organization)
        assert user.access_id == "organization/1/workspace/2"

    def test_missing_credentials(self) -> None:
        with pytest.raises(ConfigurationError, match="user is required"):
            user_from_settings(StarkInfraSettings())

    def test_invalid_private_key(self) -> None:
        with pytest.raises(ConfigurationError, match="secp256k1"):
            user_from_settings(_settings(private_key="invalid"))


class TestCreateClient:
    def test_invalid_settings_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="STARKINFRA_LANGUAGE"):
            create_starkinfra_client(_settings(language="fr-FR"))

    def test_explicit_user_overrides_settings(self, api: FakeStarkInfraApi) -> None:
        user = Project(
            environment=Environment.PRODUCTION,
            id="999",
            private_key=private_key_pem(USER_KEY),
        )
        with create_starkinfra_client(
            _settings(), user=user, transport=httpx.MockTransport(api)
        ) as client:
            list(client.pix_domain.query())

        assert api.requests[0].url.host == "api.starkinfra.com"
        assert api.requests[0].headers["Access-Id"] == "project/999"


class TestEventResource:
    """Fluxo de Events via cliente completo."""

    def test_query_decodes_typed_logs(self, client: StarkInfraClient) -> None:
        events = list(client.event.query(is_delivered=False, after="2020-03-01"))

        assert [event.id for event in events] == ["0", "1", "2"]
        assert all(isinstance(event.log, PixRequestLog) for event in events)

    def test_query_sends_filters(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        list(client.event.query(limit=2, is_delivered=False, after="2020-03-01"))

        params = api.requests[0].url.params
        assert params["isDelivered"] == "false"
        assert params["after"] == "2020-03-01"
        assert params["limit"] == "2"

    def test_query_invalid_date(self, client: StarkInfraClient) -> None:
        with pytest.raises(ValueError, match="invalid datetime"):
            client.event.query(after="03/01/2020")

    def test_page(self, client: StarkInfraClient) -> None:
        events, cursor = client.event.page(limit=2)
        assert len(events) == 2
        assert cursor == "2"

        rest, cursor = client.event.page(cursor=cursor, limit=2)
        assert [event.id for event in rest] == ["2"]
        assert cursor is None

    def test_update_marks_delivered(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        event = client.event.update("123", is_delivered=True)

        request = api.requests[-1]
        assert request.method == "PATCH"
        assert request.url.path == "/v2/event/123"
        assert json.loads(request.content) == {"isDelivered": True}
        assert event.is_delivered is True

    def test_parse_fetches_key_once(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        body = json.dumps({"event": event_payload()}).encode()
        signature = sign(body, STARK_KEY)

        first = client.event.parse(body, signature)
        second = client.event.parse(body, signature)

        assert isinstance(first, Event)
        assert first == second
        key_requests = [r for r in api.requests if r.url.path == "/v2/public-key"]
        assert len(key_requests) == 1
        assert key_requests[0].url.params["limit"] == "1"

    def test_parse_forged(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        body = json.dumps({"event": event_payload()}).encode()
        forged = sign(body, USER_KEY)

        with pytest.raises(InvalidSignatureError):
            client.event.parse(body, forged)

        key_requests = [r for r in api.requests if r.url.path == "/v2/public-key"]
        assert len(key_requests) == 2


class TestOtherResources:
    def test_webhook_create(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        webhook = client.webhook.create(
            Webhook(url="https://example.com/hook", subscriptions=["pix-request.in"])
        )

        assert webhook.id == "42"
        assert json.loads(api.requests[-1].content) == {
            "url": "https://example.com/hook",
            "subscriptions": ["pix-request.in"],
        }

    def test_pix_request_create_preserves_order(self, client: StarkInfraClient) -> None:
        first = PixRequest.model_validate({**PIX_REQUEST_PAYLOAD, "externalId": "a"})
        second = PixRequest.model_validate({**PIX_REQUEST_PAYLOAD, "externalId": "b"})

        created = client.pix_request.create([first, second])

        assert [request.external_id for request in created] == ["a", "b"]

    def test_pix_request_parse_whole_document(self, client: StarkInfraClient) -> None:
        body = json.dumps(PIX_REQUEST_PAYLOAD).encode()

        request = client.pix_request.parse(body, sign(body, STARK_KEY))

        assert isinstance(request, PixRequest)
        assert request.end_to_end_id == PIX_REQUEST_PAYLOAD["endToEndId"]

    def test_pix_domain_query(self, client: StarkInfraClient) -> None:
        domains = list(client.pix_domain.query())
        assert isinstance(domains[0], PixDomain)
        assert domains[0].certificates[0].content == "pem"


class TestPixRequestResponse:
    """Corpo da resposta de autorização de PixRequests recebidas."""

    def test_denied_with_reason(self) -> None:
        body = PixRequestResource.response("denied", reason="taxIdMismatch")

        assert json.loads(body) == {
            "authorization": {"status": "denied", "reason": "taxIdMismatch"}
        }

    def test_approved_without_reason(self, client: StarkInfraClient) -> None:
        body = client.pix_request.response("approved")

        assert json.loads(body) == {"authorization": {"status": "approved", "reason": None}}


class TestRequestResource:
    """Requisições diretas por caminho, assinadas como as demais."""

    def test_get_with_query(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        response = client.request.get("/echo/", query={"limit": 1, "is_delivered": False})

        request = api.requests[-1]
        assert request.method == "GET"
        assert request.url.path == "/v2/echo"
        assert request.url.params["limit"] == "1"
        assert request.url.params["isDelivered"] == "false"
        assert request.headers["Access-Id"] == "project/5656565656565656"
        assert response.status == 200
        assert response.json() == {"method": "GET", "path": "echo", "body": None}

    @pytest.mark.parametrize("method", ["post", "patch", "put"])
    def test_methods_with_body(
        self, client: StarkInfraClient, api: FakeStarkInfraApi, method: str
    ) -> None:
        payload = {"requests": [{"amount": 100}]}

        response = getattr(client.request, method)("echo/item", payload)

        assert api.requests[-1].method == method.upper()
        assert api.requests[-1].url.path == "/v2/echo/item"
        assert json.loads(api.requests[-1].content) == payload
        assert response.json()["body"] == payload

    def test_delete(self, client: StarkInfraClient, api: FakeStarkInfraApi) -> None:
        response = client.request.delete("echo/42")

        assert api.requests[-1].method == "DELETE"
        assert api.requests[-1].content == b""
        assert response.json()["path"] == "echo/42"

    def test_non_2xx_raises_request_error(self, client: StarkInfraClient) -> None:
        with pytest.raises(RequestError):
            client.request.get("not-modeled")
