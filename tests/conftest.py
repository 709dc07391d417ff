import os

import httpx
import pytest

import bunnystream


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BUNNYSTREAM_* variables of the host out of every Config"""
    for name in list(os.environ):
        if name.upper().startswith('BUNNYSTREAM_'):
            monkeypatch.delenv(name)


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def make_client(requests_seen):
    """Build a client whose transport answers every call with a fixed response"""
    def make(status_code=200, body=b'{}', **config):
        def handler(request: httpx.Request):
            request.read()
            requests_seen.append(request)
            return httpx.Response(status_code, content=body)

        http = httpx.Client(transport=httpx.MockTransport(handler))
        config.setdefault('api_key', 'test-key')
        config.setdefault('library_id', '123')
        return bunnystream.Client(bunnystream.Config(http_client=http, **config))

    return make


@pytest.fixture
def client(make_client):
    return make_client()
