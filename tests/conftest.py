"""
Pytest fixtures for evaluator tests. Network access is replaced by an
in-memory transport serving canned metadata documents.
"""

import base64
import json
from typing import Dict, List, Optional

import pytest

from nft_evaluator import NFTEvaluator, Settings, FetchFailure

GATEWAY = "https://gateway.test/ipfs/"


class FakeTransport:
    """Serves documents by URL and records every request."""

    def __init__(self, documents: Optional[Dict[str, str]] = None):
        self.documents = documents or {}
        self.requested: List[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.documents:
            raise FetchFailure(url, "connection refused")
        return self.documents[url]


def encode_metadata(metadata, prefix: str = "data:application/json;base64,") -> str:
    """Build an inline token URI for a metadata document."""
    payload = base64.b64encode(json.dumps(metadata).encode("utf-8")).decode("ascii")
    return f"{prefix}{payload}"


@pytest.fixture
def settings():
    return Settings(IPFS_GATEWAY=GATEWAY, FETCH_TIMEOUT=5.0)


@pytest.fixture
def make_evaluator(settings):
    """Build an evaluator whose transport serves the given documents."""
    def _make(documents: Optional[Dict[str, str]] = None):
        transport = FakeTransport(documents)
        return NFTEvaluator(settings=settings, transport=transport), transport
    return _make


@pytest.fixture
def evaluator(make_evaluator):
    return make_evaluator()[0]
