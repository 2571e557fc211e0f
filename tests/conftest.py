"""
Pytest fixtures for the airdrop checker. The external balance API is
replaced by an httpx.MockTransport so no test touches the network.
"""
import httpx
import pytest

from app.services.airdrop_service import AirdropBalanceService

BALANCE_URL = "https://balances.test/airdrop_balance"

WALLET_A = "0x1111111111111111111111111111111111111111"
WALLET_B = "0x2222222222222222222222222222222222222222"
WALLET_C = "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01"


class FakeBalanceApi:
    """Scripted stand-in for the airdrop balance API, keyed by wallet address."""
    
    def __init__(self):
        self.responses = {}
        self.failures = {}
        self.calls = []
    
    def set_balance(self, address, balance, claim=False):
        self.responses[address] = (200, {
            "code": 0,
            "message": "success",
            "data": {"balance": balance, "multiplier": 1, "extra": 0, "rules": {}, "claim": claim},
        })
    
    def set_response(self, address, status_code, payload):
        self.responses[address] = (status_code, payload)
    
    def set_failure(self, address, exc_class=httpx.ConnectError):
        self.failures[address] = exc_class
    
    def handler(self, request: httpx.Request) -> httpx.Response:
        address = request.url.params.get("user")
        self.calls.append(address)
        if address in self.failures:
            raise self.failures[address]("lookup failed", request=request)
        if address not in self.responses:
            raise httpx.ConnectError("service unreachable", request=request)
        status_code, payload = self.responses[address]
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)
    
    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class RecordingLogger:
    """Collects log events passed to it instead of writing them out."""
    
    def __init__(self):
        self.events = []
    
    def _record(self, level, event, **kw):
        self.events.append((level, event, kw))
    
    def info(self, event, **kw):
        self._record("info", event, **kw)
    
    def warning(self, event, **kw):
        self._record("warning", event, **kw)
    
    def error(self, event, **kw):
        self._record("error", event, **kw)
    
    def exception(self, event, **kw):
        self._record("exception", event, **kw)
    
    def named(self, event):
        return [entry for entry in self.events if entry[1] == event]


@pytest.fixture
def balance_api():
    return FakeBalanceApi()


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def client(balance_api, recording_logger):
    """FastAPI TestClient whose balance lookups go to the fake API."""
    from fastapi.testclient import TestClient
    
    from app.api.routes.wallets import get_airdrop_service, get_request_logger
    from app.main import app
    
    async def override_service():
        async with balance_api.http_client() as http_client:
            yield AirdropBalanceService(BALANCE_URL, client=http_client, logger=recording_logger)
    
    app.dependency_overrides[get_airdrop_service] = override_service
    app.dependency_overrides[get_request_logger] = lambda: recording_logger
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
