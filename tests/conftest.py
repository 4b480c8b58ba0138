import json

import pytest
from fastapi.testclient import TestClient

from serendibgo.config import Config
from serendibgo.server import create_server


@pytest.fixture
def config() -> Config:
    return Config(port="127.0.0.1:0", env="test")


@pytest.fixture
def server(config):
    return create_server(config)


@pytest.fixture
def client(server):
    with TestClient(server.create_app()) as c:
        yield c


@pytest.fixture
def write_config(tmp_path):
    def _write(content, name="config.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return _write
