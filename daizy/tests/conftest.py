"""Global test configuration and fixtures."""
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from daizy.api import APIClient, with_base_url, with_base_path

TEST_ORG_ID = "12345"
TEST_AUTH_TOKEN = "testtoken"

PROJECT_BODY = """{
  "name": "aProject",
  "status": "created",
  "user_id": 0,
  "republish_mqtt": true,
  "id": 32,
  "organisation_id": 12
}"""

ERROR_BODY = """{
  "success": false,
  "errors": [
    {
      "field": "deviceId",
      "type": "NUMERIC",
      "message": "A numeric value is required"
    }
  ]
}"""

@pytest.fixture
def received():
    """Requests seen by the mock server in the current test"""
    return []

@pytest_asyncio.fixture
async def serve(received):
    """
    Start a fresh mock server with the given routes and return a client
    pointed at it. Each test gets its own server and client.
    """
    servers = []
    clients = []

    async def _serve(*routes: web.RouteDef, **client_kwargs) -> APIClient:
        @web.middleware
        async def record(request, handler):
            received.append({
                "method": request.method,
                "path": request.path,
                "headers": request.headers.copy(),
                "body": await request.text()
            })
            return await handler(request)

        app = web.Application(middlewares=[record])
        app.add_routes(routes)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)

        options = list(client_kwargs.pop("options", []))
        client = APIClient(
            TEST_ORG_ID,
            TEST_AUTH_TOKEN,
            with_base_url(f"http://{server.host}:{server.port}"),
            with_base_path(""),
            *options,
            **client_kwargs
        )
        clients.append(client)
        return client

    yield _serve

    for client in clients:
        await client.close()
    for server in servers:
        await server.close()

@pytest.fixture
def respond():
    """Build a handler that answers with a fixed status and body"""
    def _respond(body: str = "", status: int = 200):
        async def handler(request):
            return web.Response(text=body, status=status, content_type="application/json")
        return handler
    return _respond

@pytest.fixture
def project_body():
    """A single project as returned by the service"""
    return PROJECT_BODY

@pytest.fixture
def error_body():
    """A validation error as returned by the service"""
    return ERROR_BODY
