"""Shared fixtures built on the stub transport."""
import pytest

from nasa_api.client import NASAAPIClient
from stubs import TEST_KEY, StubSession


@pytest.fixture
def stub_session() -> StubSession:
    return StubSession()


@pytest.fixture
def client(stub_session: StubSession) -> NASAAPIClient:
    return NASAAPIClient(TEST_KEY, session=stub_session)
