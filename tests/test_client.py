"""Tests for the hub-ez tracking client."""

import json

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from hubez_tracker.exceptions import MalformedResponse, TransportError, UrlError
from hubez_tracker.tracking.client import HubEzClient, build_tracking_url
from tests.conftest import wire_event, wire_response


PATH = "/Tracking/GetTracking"


def tracking_app(responder):
    """Application answering GetTracking with ``responder(request)``."""
    async def handler(request):
        request.app["requests"].append(
            (request.method, request.query.get("trackingNumber"), await request.read())
        )
        return responder(request)
    
    app = web.Application()
    app["requests"] = []
    app.router.add_post(PATH, handler)
    return app


class TestBuildTrackingUrl:
    """Tests for build_tracking_url."""
    
    def test_default_endpoint(self):
        url = build_tracking_url("ABC123")
        
        assert str(url) == "https://www.hub-ez.com/Tracking/GetTracking?trackingNumber=ABC123"
    
    def test_tracking_number_is_encoded(self):
        url = build_tracking_url("AB C&1")
        
        assert url.query["trackingNumber"] == "AB C&1"
    
    @pytest.mark.parametrize("base", ["not a url", "ftp://example.com/x", "/relative/path"])
    def test_invalid_base(self, base):
        with pytest.raises(UrlError):
            build_tracking_url("ABC123", base)


class TestHubEzClient:
    """Tests for HubEzClient."""
    
    @pytest.mark.asyncio
    async def test_fetch_posts_empty_body(self):
        body = wire_response([wire_event("Received", "Shenzhen, CN", "T1")])
        app = tracking_app(lambda request: web.json_response(body))
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                snapshot = await client.fetch()
            finally:
                await client.close()
        
        assert app["requests"] == [("POST", "ABC123", b"")]
        assert snapshot.shipment.hawb_number == "ABC123"
        assert snapshot.events[0].location_name == "Shenzhen, CN"
    
    @pytest.mark.asyncio
    async def test_error_status_is_transport_error(self):
        app = tracking_app(lambda request: web.Response(status=503, text="down"))
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                with pytest.raises(TransportError):
                    await client.fetch()
            finally:
                await client.close()
    
    @pytest.mark.asyncio
    async def test_undecodable_error_body_is_transport_error(self):
        app = tracking_app(lambda request: web.Response(status=502, body=b"\xff\xfe gateway"))
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                with pytest.raises(TransportError, match="502"):
                    await client.fetch()
            finally:
                await client.close()
    
    @pytest.mark.asyncio
    async def test_invalid_json_is_malformed(self):
        app = tracking_app(lambda request: web.Response(text="<html>oops</html>"))
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                with pytest.raises(MalformedResponse):
                    await client.fetch()
            finally:
                await client.close()
    
    @pytest.mark.asyncio
    async def test_undecodable_body_is_malformed(self):
        """Bytes that are not UTF-8 fail as a parse error, not a crash."""
        app = tracking_app(
            lambda request: web.Response(body=b'{"AllCount": \xff\xfe}', content_type="application/json")
        )
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                with pytest.raises(MalformedResponse):
                    await client.fetch()
            finally:
                await client.close()
    
    @pytest.mark.asyncio
    async def test_unknown_charset_is_ignored(self):
        """The body is parsed as JSON bytes whatever charset is advertised."""
        body = json.dumps(wire_response([wire_event("Received", "Shenzhen, CN", "T1")])).encode()
        app = tracking_app(
            lambda request: web.Response(
                body=body,
                headers={"Content-Type": "application/json; charset=no-such-codec"},
            )
        )
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                snapshot = await client.fetch()
            finally:
                await client.close()
        
        assert snapshot.events[0].location_name == "Shenzhen, CN"
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("shipments", [0, 2])
    async def test_wrong_shipment_count_is_malformed(self, shipments):
        body = json.dumps(wire_response([], shipments=shipments))
        app = tracking_app(lambda request: web.Response(text=body, content_type="application/json"))
        
        async with TestServer(app) as server:
            client = HubEzClient("ABC123", str(server.make_url(PATH)))
            try:
                with pytest.raises(MalformedResponse):
                    await client.fetch()
            finally:
                await client.close()
    
    @pytest.mark.asyncio
    async def test_connection_refused_is_transport_error(self):
        client = HubEzClient("ABC123", "http://127.0.0.1:1/Tracking/GetTracking")
        try:
            with pytest.raises(TransportError):
                await client.fetch()
        finally:
            await client.close()
