"""
Unit tests for BackendGateway
"""

import io
import json
import logging
from unittest.mock import MagicMock, patch

import httpx
import pytest

from sigo_gateway.config import Settings
from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.logger import setup_logging


def _body(response):
    return json.loads(response.body)


@pytest.fixture
def console_output():
    """Configure logging and send the console handler to a buffer"""

    def _capture(log_format="default"):
        setup_logging(log_level="INFO", log_format=log_format)
        buffer = io.StringIO()
        logging.getLogger("sigo_gateway").handlers[0].setStream(buffer)
        return buffer

    yield _capture
    setup_logging(log_level="INFO")


class TestForwardJson:
    """Test forwarding of JSON backend responses"""

    @pytest.mark.asyncio
    async def test_normalizes_keys_and_keeps_status(self, make_gateway):
        gateway = make_gateway(lambda request: httpx.Response(
            200, json={"code": 200, "message": None, "data": [{"nome": "Ana", "endereco": {"rua": "A"}}]}
        ))

        response = await gateway.forward("Cliente/GetCliente")

        assert response.status_code == 200
        assert _body(response) == {
            "Code": 200,
            "Message": None,
            "Data": [{"Nome": "Ana", "Endereco": {"Rua": "A"}}],
        }
        assert response.headers["cache-control"] == "no-store"

    @pytest.mark.asyncio
    async def test_error_status_passed_through(self, make_gateway):
        gateway = make_gateway(lambda request: httpx.Response(
            404, json={"code": 404, "message": "cliente não encontrado", "data": None}
        ))

        response = await gateway.forward("Cliente/GetClienteById99")

        assert response.status_code == 404
        assert _body(response)["Message"] == "cliente não encontrado"

    @pytest.mark.asyncio
    async def test_builds_backend_url(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(200, json={}))

        await gateway.forward("/Veiculo/placa/ABC1234")

        assert str(backend_requests[0].url) == "https://localhost:7241/api/Veiculo/placa/ABC1234"

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(200, json=[]))

        await gateway.forward("Marca")

        request = backend_requests[0]
        assert request.method == "GET"
        assert request.content == b""
        assert request.headers["accept"] == "application/json"
        assert request.headers["cache-control"] == "no-cache"
        assert "content-type" not in request.headers

    @pytest.mark.asyncio
    async def test_body_serialized_as_json(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(201, json={"code": 201}))
        body = {"NomeMarca": "Fiat", "DescMarca": "Carros"}

        response = await gateway.forward("Marca", method="POST", body=body)

        request = backend_requests[0]
        assert response.status_code == 201
        assert request.method == "POST"
        assert json.loads(request.content) == body
        assert request.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_caller_content_type_kept(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(200, json={}))

        await gateway.forward(
            "Marca", method="POST", headers={"Content-Type": "application/json; charset=utf-8"}, body={}
        )

        assert backend_requests[0].headers["content-type"] == "application/json; charset=utf-8"

    @pytest.mark.asyncio
    async def test_caller_accept_overridden(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(200, json={}))

        await gateway.forward("Marca", headers={"Accept": "text/html", "X-Trace": "abc"})

        assert backend_requests[0].headers["accept"] == "application/json"
        assert backend_requests[0].headers["x-trace"] == "abc"

    @pytest.mark.asyncio
    async def test_null_body_is_sent(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(200, json={}))

        await gateway.forward("Marca", method="POST", body=None)

        assert backend_requests[0].content == b"null"

    @pytest.mark.asyncio
    async def test_no_content_forwarded_without_body(self, make_gateway):
        gateway = make_gateway(lambda request: httpx.Response(204))

        response = await gateway.forward("Marca/7", method="DELETE")

        assert response.status_code == 204
        assert response.body == b""


class TestForwardNonJson:
    """Test non-JSON backend responses"""

    @pytest.mark.asyncio
    async def test_text_body_wrapped(self, make_gateway, caplog):
        gateway = make_gateway(lambda request: httpx.Response(502, text="Bad Gateway"))

        with caplog.at_level(logging.ERROR, logger="sigo_gateway"):
            response = await gateway.forward("Cliente/GetCliente")

        assert response.status_code == 502
        assert _body(response) == {"message": "Bad Gateway", "backendStatus": 502}

        message = next(r.getMessage() for r in caplog.records if "non-JSON" in r.getMessage())
        assert "url='https://localhost:7241/api/Cliente/GetCliente'" in message
        assert "status=502" in message
        assert "preview='Bad Gateway'" in message
        assert "'content-type'" in message

    @pytest.mark.asyncio
    async def test_empty_body_uses_fallback_message(self, make_gateway):
        gateway = make_gateway(lambda request: httpx.Response(502))

        response = await gateway.forward("Cliente/GetCliente")

        assert response.status_code == 502
        body = _body(response)
        assert body["backendStatus"] == 502
        assert "502" in body["message"]

    @pytest.mark.asyncio
    async def test_preview_truncated(self, make_gateway, caplog):
        gateway = make_gateway(lambda request: httpx.Response(
            500, content=b"<html>" + b"x" * 1000, headers={"Content-Type": "text/html"}
        ))

        with caplog.at_level(logging.ERROR, logger="sigo_gateway"):
            response = await gateway.forward("Cor")

        assert response.status_code == 500
        message = next(r.getMessage() for r in caplog.records if "non-JSON" in r.getMessage())
        preview = "<html>" + "x" * (BackendGateway.PREVIEW_CHARS - len("<html>"))
        assert f"preview='{preview}'" in message
        assert len(_body(response)["message"]) == 1006


class TestForwardTransportFailure:
    """Test transport-level failures"""

    @pytest.mark.asyncio
    async def test_connection_refused(self, make_gateway, caplog):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        gateway = make_gateway(refuse)

        with caplog.at_level(logging.ERROR, logger="sigo_gateway"):
            response = await gateway.forward("Veiculo/tipo/Carro")

        assert response.status_code == 500
        assert _body(response) == {"message": "Connection refused"}

        message = next(r.getMessage() for r in caplog.records if "path='Veiculo/tipo/Carro'" in r.getMessage())
        assert "url='https://localhost:7241/api/Veiculo/tipo/Carro'" in message
        assert "ConnectError" in message

    @pytest.mark.asyncio
    async def test_empty_error_message_uses_fallback(self, make_gateway):
        def timeout(request):
            raise httpx.ReadTimeout("", request=request)

        gateway = make_gateway(timeout)

        response = await gateway.forward("Marca")

        assert response.status_code == 500
        assert _body(response) == {"message": "unknown error contacting backend"}

    @pytest.mark.asyncio
    async def test_malformed_json(self, make_gateway):
        gateway = make_gateway(lambda request: httpx.Response(
            200, content=b"{not json", headers={"Content-Type": "application/json"}
        ))

        response = await gateway.forward("Marca")

        assert response.status_code == 500
        assert "message" in _body(response)

    @pytest.mark.asyncio
    async def test_status_always_500(self, make_gateway):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        gateway = make_gateway(refuse)

        for path in ("Cliente/GetCliente", "Marca/7", "api/Veiculo"):
            response = await gateway.forward(path, method="DELETE")
            assert response.status_code == 500


class TestForwardWithBody:
    """Test forward_with_body"""

    @pytest.mark.asyncio
    async def test_path_built_from_body(self, make_gateway, backend_requests):
        gateway = make_gateway(lambda request: httpx.Response(200, json={"ok": True}))
        request = MagicMock()

        async def read_json():
            return {"Id": 42, "Nome": "Ana"}

        request.json = read_json

        response = await gateway.forward_with_body(
            request, lambda body: f"Cliente/PutCliente{body['Id']}", method="PUT"
        )

        assert response.status_code == 200
        assert _body(response) == {"Ok": True}
        assert str(backend_requests[0].url) == "https://localhost:7241/api/Cliente/PutCliente42"
        assert json.loads(backend_requests[0].content) == {"Id": 42, "Nome": "Ana"}


class TestDiagnosticLogOutput:
    """Test that diagnostic context reaches the formatted log lines"""

    @pytest.mark.asyncio
    async def test_non_json_context_in_default_format(self, make_gateway, console_output):
        output = console_output()
        gateway = make_gateway(lambda request: httpx.Response(502, text="SECRET_PREVIEW_BODY"))

        await gateway.forward("Cliente/GetCliente")

        line = next(l for l in output.getvalue().splitlines() if "non-JSON" in l)
        assert " - ERROR - " in line
        assert "https://localhost:7241/api/Cliente/GetCliente" in line
        assert "SECRET_PREVIEW_BODY" in line
        assert "status=502" in line

    @pytest.mark.asyncio
    async def test_transport_failure_context_in_default_format(self, make_gateway, console_output):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        output = console_output()
        gateway = make_gateway(refuse)

        await gateway.forward("Marca/7")

        line = next(l for l in output.getvalue().splitlines() if "Error communicating" in l)
        assert "path='Marca/7'" in line
        assert "https://localhost:7241/api/Marca/7" in line
        assert "ConnectError" in line

    @pytest.mark.asyncio
    async def test_non_json_context_in_json_format(self, make_gateway, console_output):
        output = console_output("json")
        gateway = make_gateway(lambda request: httpx.Response(503, text="maintenance"))

        await gateway.forward("Servico")

        entries = [json.loads(l) for l in output.getvalue().splitlines()]
        entry = next(e for e in entries if e["event"]["event"] == "Backend returned non-JSON response")
        assert entry["level"] == "ERROR"
        assert entry["logger"] == "sigo_gateway.services.backend_gateway"
        assert entry["event"]["url"] == "https://localhost:7241/api/Servico"
        assert entry["event"]["status"] == 503
        assert entry["event"]["preview"] == "maintenance"


class TestTlsClient:
    """Test selection of the shared HTTP client"""

    def test_relaxed_for_local_development(self, local_settings):
        assert BackendGateway(local_settings).tls_relaxed is True

    def test_not_relaxed_in_production(self, production_settings):
        assert BackendGateway(production_settings).tls_relaxed is False

    def test_relaxed_client_built_once(self, local_settings):
        with patch("sigo_gateway.services.backend_gateway.httpx.AsyncHTTPTransport") as mock_transport:
            with patch("sigo_gateway.services.backend_gateway.httpx.AsyncClient") as mock_client:
                gateway = BackendGateway(local_settings)

                first = gateway._get_client()
                second = gateway._get_client()

                assert first is second
                mock_transport.assert_called_once_with(verify=False, local_address="0.0.0.0")
                mock_client.assert_called_once_with(transport=mock_transport.return_value, verify=False)

    def test_default_client_for_remote_backend(self):
        settings = Settings(backend_url="https://sigo.example.com/api", environment="development")

        with patch("sigo_gateway.services.backend_gateway.httpx.AsyncHTTPTransport") as mock_transport:
            with patch("sigo_gateway.services.backend_gateway.httpx.AsyncClient") as mock_client:
                BackendGateway(settings)._get_client()

                mock_transport.assert_not_called()
                mock_client.assert_called_once_with(transport=None)

    @pytest.mark.asyncio
    async def test_close_releases_client(self, make_gateway):
        gateway = make_gateway(lambda request: httpx.Response(200, json={}))
        await gateway.forward("Marca")

        await gateway.close()

        assert gateway._client is None

    def test_relaxed_ipv6_loopback_not_bound_to_ipv4(self):
        settings = Settings(backend_url="https://[::1]:7241/api", environment="development")

        with patch("sigo_gateway.services.backend_gateway.httpx.AsyncHTTPTransport") as mock_transport:
            with patch("sigo_gateway.services.backend_gateway.httpx.AsyncClient") as mock_client:
                gateway = BackendGateway(settings)
                gateway._get_client()

                assert gateway.tls_relaxed is True
                mock_transport.assert_called_once_with(verify=False)
                mock_client.assert_called_once_with(transport=mock_transport.return_value, verify=False)

