import asyncio
import logging

import pytest

from contracts import ABI, CONTRACT_ADDRESS
from handlers.contract_handlers import register_contract_handlers
from rest_models import ContractRESTRequest


class _FakeContext:
    def __init__(self):
        self.logger = logging.getLogger("test.contract_handlers")


class _FakeAgent:
    """Captures handlers registered through the agent REST decorators."""

    def __init__(self):
        self.get_routes = {}
        self.post_routes = {}

    def on_rest_get(self, endpoint, response_model):
        def decorator(func):
            self.get_routes[endpoint] = (func, response_model)
            return func
        return decorator

    def on_rest_post(self, endpoint, request_model, response_model):
        def decorator(func):
            self.post_routes[endpoint] = (func, request_model, response_model)
            return func
        return decorator


@pytest.fixture
def agent(monkeypatch):
    monkeypatch.delenv("FUND_ME_NETWORK", raising=False)
    fake = _FakeAgent()
    register_contract_handlers(fake)
    return fake


def test_routes_are_registered(agent):
    assert set(agent.get_routes) == {"/api/contract", "/api/contract/networks"}
    assert set(agent.post_routes) == {"/api/contract"}


def test_get_contract_returns_active_descriptor(agent):
    handler, _ = agent.get_routes["/api/contract"]
    resp = asyncio.run(handler(_FakeContext()))
    assert resp.success
    assert resp.network == "default"
    assert resp.address == CONTRACT_ADDRESS
    assert resp.abi == list(ABI)
    assert resp.error is None


def test_post_contract_selects_network(agent):
    handler, _, _ = agent.post_routes["/api/contract"]
    resp = asyncio.run(handler(_FakeContext(), ContractRESTRequest(network="zksync")))
    assert resp.success
    assert resp.network == "zksync"
    assert resp.address == "0x4B5DF730c2e6b28E17013A1485E5d9BC41Efe021"


def test_post_contract_unknown_network_reports_error(agent):
    handler, _, _ = agent.post_routes["/api/contract"]
    resp = asyncio.run(handler(_FakeContext(), ContractRESTRequest(network="mainnet")))
    assert not resp.success
    assert resp.address is None
    assert resp.abi == []
    assert resp.error.startswith("No Fund Me deployment for network 'mainnet'")


def test_networks_lists_deployments(agent, monkeypatch):
    monkeypatch.setenv("FUND_ME_NETWORK", "anvil")
    handler, _ = agent.get_routes["/api/contract/networks"]
    resp = asyncio.run(handler(_FakeContext()))
    assert resp.success
    assert resp.active == "anvil"
    assert resp.networks["default"] == CONTRACT_ADDRESS
    assert set(resp.networks) == {"default", "anvil", "zksync"}
