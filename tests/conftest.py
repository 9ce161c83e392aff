# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.api import create_app
from marketplace.api.routers.products import get_image_resolver
from marketplace.data.database import get_db, init_db, make_engine
from marketplace.services.image_resolver import ImageResolution, ResolutionOutcome


class StubResolver:
    """Resolver bez sieci; zapamietuje o co go pytano."""

    def __init__(self, mapping=None):
        self.mapping = mapping or {}
        self.calls = []

    def resolve(self, url):
        self.calls.append(url)
        if url in self.mapping:
            return ImageResolution(url=self.mapping[url], outcome=ResolutionOutcome.RESOLVED)
        return ImageResolution(url=url, outcome=ResolutionOutcome.UNCHANGED)


@pytest.fixture()
def session_factory():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    init_db(bind=engine, session_factory=factory)
    yield factory
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def resolver():
    return StubResolver()


@pytest.fixture()
def client(session_factory, resolver):
    app = create_app(init_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_resolver] = lambda: resolver

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def product_payload():
    return {
        "name": "Conta CPM Full",
        "price": 49.9,
        "description": "Conta com tudo desbloqueado",
        "image": "https://example.com/car.png",
        "category": "CPM",
        "whatsapp_number": "+55 (11) 99999-9999",
        "admin_password": "admin123",
    }
