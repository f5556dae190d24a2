"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest
from faker import Faker

from fake_server import FakeLedger
from micropay_client.client import MicropayClient
from micropay_client.config import ClientConfig, HttpConfig, SessionConfig
from micropay_client.session import MemorySessionStorage, Session


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker for user profiles."""
    faker = Faker("en_US")
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def profile(fake: Faker) -> dict[str, str]:
    """A registration profile."""
    return {
        "email": fake.unique.email(),
        "password": fake.password(length=12),
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
    }


@pytest.fixture
def ledger() -> FakeLedger:
    """Empty fake ledger service."""
    return FakeLedger()


@pytest.fixture
def config() -> ClientConfig:
    """Config pointing at the fake service, with nothing persisted."""
    return ClientConfig(
        http=HttpConfig(base_url="http://ledger.test"),
        session=SessionConfig(persist=False),
    )


@pytest.fixture
def session() -> Session:
    """Fresh in-memory session."""
    return Session(MemorySessionStorage())


@pytest.fixture
def client(config: ClientConfig, session: Session, ledger: FakeLedger):
    """Client wired to the fake ledger."""
    with MicropayClient(config, session=session, http_transport=ledger.transport) as c:
        yield c


@pytest.fixture
def alice(ledger: FakeLedger, profile: dict[str, str]) -> dict[str, str]:
    """Registered user with 100.00 in the wallet."""
    user_id = ledger.add_user(profile["email"], profile["password"], Decimal("100.00"))
    return {**profile, "user_id": user_id}


@pytest.fixture
def bob(ledger: FakeLedger, fake: Faker) -> dict[str, str]:
    """Second user, used as payee."""
    email, password = fake.unique.email(), fake.password(length=12)
    user_id = ledger.add_user(email, password, Decimal("0"))
    return {"email": email, "password": password, "user_id": user_id}


@pytest.fixture
def logged_in(client: MicropayClient, alice: dict[str, str], ledger: FakeLedger) -> MicropayClient:
    """Client with alice logged in and the request log cleared."""
    outcome = client.flows.auth.login(alice["email"], alice["password"])
    assert outcome.ok, outcome.message
    ledger.requests.clear()
    return client
