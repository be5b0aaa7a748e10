import pytest
from fastapi.testclient import TestClient

from docseal.core import DocumentEngine, FieldSelector, KeyPair
from docseal.main import app
from docseal.routers.dependencies import get_engine


@pytest.fixture(scope="session")
def key_pair():
    # RSA generation is slow, one pair serves the whole session
    return KeyPair.generate()


@pytest.fixture(scope="session")
def other_key_pair():
    return KeyPair.generate()


@pytest.fixture
def selector():
    return FieldSelector()


@pytest.fixture
def engine(key_pair, selector):
    return DocumentEngine(key_pair, selector)


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
