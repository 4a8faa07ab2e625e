"""Attestation proxy endpoints via aiohttp test client."""

from __future__ import annotations

import pytest
from aiohttp import test_utils

from faucet_relay.api.server import create_app

from tests.conftest import IRIS_URL, make_poller
from tests.factories import SIGNED_ATTESTATION, not_found, pending, ready
from tests.mocks import FakeClock, MockAttestationSource


class ExplodingSource(MockAttestationSource):
    async def fetch(self, identifier):
        raise RuntimeError("source exploded")


@pytest.fixture
async def make_client():
    clients: list[test_utils.TestClient] = []

    async def _make(source: MockAttestationSource, clock: FakeClock, **kwargs) -> test_utils.TestClient:
        poller = make_poller(source, clock, **kwargs)
        client = test_utils.TestClient(test_utils.TestServer(create_app(poller, IRIS_URL)))
        await client.start_server()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.close()


async def test_attestation_ready(make_client, clock):
    source = MockAttestationSource([not_found(), pending(), ready()], clock=clock)
    client = await make_client(source, clock)

    resp = await client.get("/attestations/0xabc")

    assert resp.status == 200
    body = await resp.json()
    assert body == {"status": "complete", "attestation": SIGNED_ATTESTATION}
    assert source.fetch_calls == ["0xabc"] * 3
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


async def test_attestation_timeout(make_client, clock):
    source = MockAttestationSource(default=pending(), clock=clock)
    client = await make_client(source, clock, timeout=30.0)

    resp = await client.get("/attestations/0xabc")

    assert resp.status == 504
    body = await resp.json()
    assert "0xabc" in body["error"]
    assert "more confirmations" in body["error"]


async def test_attestation_unexpected_failure(make_client, clock):
    client = await make_client(ExplodingSource(clock=clock), clock)

    resp = await client.get("/attestations/0xabc")

    assert resp.status == 500
    assert (await resp.json()) == {"error": "source exploded"}


async def test_health(make_client, clock):
    client = await make_client(MockAttestationSource(clock=clock), clock)

    resp = await client.get("/health")

    assert resp.status == 200
    assert (await resp.json()) == {"status": "ok", "attestation_api": IRIS_URL}


async def test_cors_preflight(make_client, clock):
    client = await make_client(MockAttestationSource(clock=clock), clock)

    resp = await client.options("/attestations/0xabc")

    assert resp.status == 204
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
