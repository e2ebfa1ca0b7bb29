import httpx
import pytest
import pytest_asyncio

from api.openweather_client import OpenWeatherClient

API_KEY = "testapikey"

GEO_PATH = "/geo/1.0/direct"
ONECALL_PATH = "/data/3.0/onecall"
FORECAST_PATH = "/data/2.5/forecast"


class FakeOpenWeather:
    """Serves canned OpenWeatherMap responses per URL path and records every request."""

    def __init__(self):
        self.requests = []
        self.routes = {}

    def reply(self, path, status=200, json=None, content=None):
        self.routes[path] = {"status": status, "json": json, "content": content}

    def fail(self, path, error_type, message="boom"):
        self.routes[path] = {"error": (error_type, message)}

    def paths(self):
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"cod": 404, "message": "not mocked"})
        if "error" in route:
            error_type, message = route["error"]
            raise error_type(message, request=request)
        if route["content"] is not None:
            return httpx.Response(route["status"], content=route["content"])
        return httpx.Response(route["status"], json=route["json"])


@pytest.fixture
def fake_api():
    return FakeOpenWeather()


@pytest_asyncio.fixture
async def weather_client(fake_api):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    yield OpenWeatherClient(API_KEY, client=http_client)
    await http_client.aclose()
