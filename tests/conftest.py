import pytest
import base64
import json
import httpx
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, APIRouter, HTTPException, Request, Response
from fastapi.testclient import TestClient
from hc3.client import HC3Client

FIXTURES_DIR = Path(__file__).parent / "fixtures"

HUB_USER = "admin"
HUB_PASSWORD = "secret"


@pytest.fixture
def load_fixture():
    def _load(name):
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture
def mock_hub():
    """HC3Client backed by httpx.MockTransport.

    Tests queue responses with `hub.respond(...)` and inspect `hub.requests`.
    """
    class MockHub:
        def __init__(self):
            self.requests = []
            self.status_code = 200
            self.body = ""

        def respond(self, status_code=200, body=""):
            self.status_code = status_code
            self.body = body

        def handler(self, request):
            self.requests.append(request)
            return httpx.Response(self.status_code, text=self.body)

    hub = MockHub()
    http = httpx.Client(transport=httpx.MockTransport(hub.handler))
    hub.client = HC3Client("10.0.0.2", HUB_USER, HUB_PASSWORD, http_client=http)
    yield hub
    http.close()


# Minimal stand-in for the hub's REST API, serving the JSON fixtures
def _fixture_response(name):
    return Response(content=(FIXTURES_DIR / name).read_bytes(), media_type="application/json")


def _check_auth(request: Request):
    token = base64.b64encode(f"{HUB_USER}:{HUB_PASSWORD}".encode()).decode()
    if request.headers.get("Authorization") != f"Basic {token}":
        raise HTTPException(status_code=401, detail="Unauthorized")
    if request.headers.get("X-Fibaro-Version") != "2":
        raise HTTPException(status_code=400, detail="Missing X-Fibaro-Version")


router = APIRouter()


@router.get("/devices")
def list_devices(request: Request, roomID: Optional[int] = None):
    _check_auth(request)
    devices = json.loads((FIXTURES_DIR / "devices.json").read_text(encoding="utf-8"))
    if roomID is not None:
        devices = [d for d in devices if d["roomID"] == roomID]
    return devices


@router.get("/devices/{device_id}")
def get_device(device_id: int, request: Request):
    _check_auth(request)
    if device_id == 46:
        return _fixture_response("device_dimmer.json")
    raise HTTPException(status_code=404, detail="Device not found")


@router.get("/globalVariables/")
def list_global_variables(request: Request):
    _check_auth(request)
    return _fixture_response("global_variables.json")


@router.get("/globalVariables/{name}")
def get_global_variable(name: str, request: Request):
    _check_auth(request)
    variables = json.loads((FIXTURES_DIR / "global_variables.json").read_text(encoding="utf-8"))
    for variable in variables:
        if variable["name"] == name:
            return variable
    raise HTTPException(status_code=404, detail="Variable not found")


hub_app = FastAPI()
hub_app.include_router(router, prefix="/api")


@pytest.fixture
def hub_client():
    with TestClient(hub_app) as test_client:
        yield HC3Client("testserver", HUB_USER, HUB_PASSWORD, http_client=test_client)


@pytest.fixture
def bad_credentials_client():
    with TestClient(hub_app) as test_client:
        yield HC3Client("testserver", HUB_USER, "wrong", http_client=test_client)
