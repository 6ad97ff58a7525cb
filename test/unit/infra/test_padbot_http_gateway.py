"""PadbotHttpGateway 유닛 테스트."""

import json

import httpx
import pytest

from padbot_mapper.domain.exceptions import GatewayError, StatusParseError
from padbot_mapper.infra.http import PadbotHttpGateway
from padbot_mapper.usecase.ports.config_port import GatewayConfig


@pytest.fixture
def gateway(gateway_config, mock_http_client):
    return PadbotHttpGateway(gateway_config, client=mock_http_client)


def _failing_gateway(exc_type):
    def handler(request):
        raise exc_type("boom", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return PadbotHttpGateway(
        GatewayConfig(base_url="http://padbot.local"), client=client
    )


class TestCheckHealth:
    def test_200_is_healthy(self, gateway, fake_server):
        assert gateway.check_health() is True
        request = fake_server.requests[-1]
        assert request.method == "GET"
        assert str(request.url) == "http://padbot.local:5000/health"

    @pytest.mark.parametrize("code", [201, 204, 404, 500, 503])
    def test_non_200_is_unhealthy(self, gateway, fake_server, code):
        fake_server.health_code = code
        assert gateway.check_health() is False

    @pytest.mark.parametrize(
        "exc_type", [httpx.ConnectError, httpx.ReadTimeout]
    )
    def test_transport_error_raises(self, exc_type):
        with pytest.raises(GatewayError):
            _failing_gateway(exc_type).check_health()


class TestFetchStatus:
    def test_parses_body(self, gateway, fake_server, sample_status):
        assert gateway.fetch_status() == sample_status
        assert fake_server.requests[-1].url.path == "/status"

    def test_non_200_raises(self, gateway, fake_server):
        fake_server.status_code = 500
        with pytest.raises(GatewayError) as exc_info:
            gateway.fetch_status()
        assert not isinstance(exc_info.value, StatusParseError)

    def test_malformed_body_raises_parse_error(self, gateway, fake_server):
        fake_server.status_body = "<html>oops</html>"
        with pytest.raises(StatusParseError):
            gateway.fetch_status()

    def test_transport_error_raises(self):
        with pytest.raises(GatewayError):
            _failing_gateway(httpx.ConnectError).fetch_status()


class TestSendNavigation:
    def test_posts_target_point(self, gateway, fake_server):
        assert gateway.send_navigation("Room42") == 200

        request = fake_server.requests[-1]
        assert request.method == "POST"
        assert str(request.url) == "http://padbot.local:5000/navigation"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"targetPoint": "Room42"}

    def test_returns_error_status(self, gateway, fake_server):
        fake_server.navigation_code = 409
        assert gateway.send_navigation("Room42") == 409

    def test_transport_error_raises(self):
        with pytest.raises(GatewayError):
            _failing_gateway(httpx.ConnectError).send_navigation("Room42")


class TestBaseUrl:
    def test_trailing_slash_stripped(self, fake_server):
        client = httpx.Client(transport=httpx.MockTransport(fake_server))
        gateway = PadbotHttpGateway(
            GatewayConfig(base_url="http://padbot.local:5000/"),
            client=client,
        )
        gateway.check_health()
        assert fake_server.requests[-1].url.path == "/health"

    def test_invalid_url_raises_gateway_error(
        self, fake_server, mock_http_client,
    ):
        gateway = PadbotHttpGateway(
            GatewayConfig(base_url="http://padbot.local\x01:5000"),
            client=mock_http_client,
        )
        with pytest.raises(GatewayError):
            gateway.check_health()
        with pytest.raises(GatewayError):
            gateway.fetch_status()
        with pytest.raises(GatewayError):
            gateway.send_navigation("Room42")
        assert fake_server.requests == []

    def test_close_closes_client(self, gateway, mock_http_client):
        gateway.close()
        assert mock_http_client.is_closed

    def test_default_client_uses_request_timeout(self):
        gateway = PadbotHttpGateway(
            GatewayConfig(base_url="http://x", request_timeout_sec=1.5)
        )
        try:
            assert gateway._http.timeout.read == 1.5
        finally:
            gateway.close()
