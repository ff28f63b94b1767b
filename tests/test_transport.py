"""ABOUTME: Tests for the httpx-backed transport.

Uses httpx.MockTransport so no network access is needed.
"""

import httpx
import pytest

from aparser_client import AparserClient, ServiceError
from aparser_client.errors import TransportError
from aparser_client.transport import CONTENT_TYPE, HttpxTransport


def make_transport(handler):
    """Build an HttpxTransport over a mocked httpx client."""
    return HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpxTransport:
    """Tests for HttpxTransport.send."""

    def test_posts_body_with_headers(self):
        """Test the body is POSTed unmodified with both declared headers."""
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers["content-type"]
            seen["content_length"] = request.headers["content-length"]
            seen["body"] = request.content
            return httpx.Response(200, content=b'{"success":true,"data":"pong"}')

        body = '{"action":"ping","password":"пароль"}'.encode("utf-8")
        reply = make_transport(handler).send("http://h/API", body)

        assert reply == b'{"success":true,"data":"pong"}'
        assert seen["method"] == "POST"
        assert seen["url"] == "http://h/API"
        assert seen["content_type"] == CONTENT_TYPE == "text/plain; charset=UTF-8"
        assert seen["content_length"] == str(len(body))
        assert seen["body"] == body

    @pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
    def test_non_2xx_raises(self, status):
        """Test error statuses raise TransportError with the status code."""
        transport = make_transport(lambda request: httpx.Response(status, content=b"oops"))
        with pytest.raises(TransportError) as exc_info:
            transport.send("http://h/", b"{}")
        assert exc_info.value.status_code == status

    def test_redirect_is_not_followed(self):
        """Test a redirect is reported rather than followed."""
        def handler(request):
            return httpx.Response(302, headers={"Location": "http://elsewhere/"})

        with pytest.raises(TransportError) as exc_info:
            make_transport(handler).send("http://h/", b"{}")
        assert exc_info.value.status_code == 302

    def test_connection_error_is_chained(self):
        """Test network failures become TransportError with the cause."""
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(TransportError, match="Connection refused") as exc_info:
            make_transport(handler).send("http://h/", b"{}")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert exc_info.value.status_code is None

    def test_timeout_is_transport_error(self):
        """Test timeouts surface as TransportError."""
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError, match="timed out"):
            make_transport(handler).send("http://h/", b"{}")

    def test_close_keeps_injected_client_open(self):
        """Test close() leaves a caller-supplied client open."""
        http_client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        HttpxTransport(client=http_client).close()
        assert not http_client.is_closed

    def test_close_owned_client(self):
        """Test close() closes a client the transport created."""
        transport = HttpxTransport()
        transport.close()
        assert transport.client.is_closed


class TestClientOverHttp:
    """End-to-end tests of the client over a mocked HTTP server."""

    def test_ping_round_trip(self):
        """Test ping goes over HTTP and returns pong."""
        def handler(request):
            assert request.content == b'{"action":"ping","password":"p"}'
            return httpx.Response(200, json={"success": True, "data": "pong"})

        client = AparserClient("http://h/", "p", transport=make_transport(handler))
        assert client.ping() == "pong"

    def test_service_error_over_http(self):
        """Test a 200 reply with success: false raises ServiceError."""
        def handler(request):
            return httpx.Response(200, json={"success": False, "msg": "bad password"})

        client = AparserClient("http://h/", "p", transport=make_transport(handler))
        with pytest.raises(ServiceError, match="bad password"):
            client.info()
