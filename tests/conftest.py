# tests/conftest.py
import os

# Settings are read once at import time; pin them before importing the app.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin-pass"
os.environ.pop("STRIPE_SECRET_KEY", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from app.core.payment_client import PaymentGatewayError, stripe_gateway  # noqa: E402
from app.database import get_session  # noqa: E402
from app.main import app  # noqa: E402
from app.models.product import Product  # noqa: E402
from app.repositories.user_repo import UserRepository  # noqa: E402
from app.schemas.auth import RegisterRequest  # noqa: E402
from app.services.auth_service import AuthService  # noqa: E402

CHECKOUT_URL = "https://checkout.stripe.test/c/pay/cs_test_123"


def register_payload(**overrides) -> dict:
    data = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "s3cret-pass",
        "confirm_password": "s3cret-pass",
        "house_no": "12",
        "street": "Baker Street",
        "city": "London",
        "state": "Greater London",
        "pincode": "NW16XE",
        "country": "UK",
        "phone": "+44 20 7946 0000",
    }
    data.update(overrides)
    return data


class FakeGateway:
    """Records checkout requests instead of calling Stripe."""

    def __init__(self):
        self.calls: list[dict] = []
        self.error: str | None = None

    def create_session(self, line_items, customer_email):
        if self.error:
            raise PaymentGatewayError(self.error)
        self.calls.append({"line_items": line_items, "customer_email": customer_email})
        return CHECKOUT_URL


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="gateway")
def gateway_fixture():
    return FakeGateway()


@pytest.fixture(name="client")
def client_fixture(session, gateway):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[stripe_gateway] = lambda: gateway
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="user")
def user_fixture(session):
    service = AuthService(UserRepository())
    return service.register(session, RegisterRequest(**register_payload()))


@pytest.fixture(name="product")
def product_fixture(session):
    product = Product(img="a.png", name="Widget", price=10, category="tools")
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


@pytest.fixture(name="admin_headers")
def admin_headers_fixture(client):
    resp = client.post(
        "/adminlogin", json={"username": "admin", "password": "admin-pass"}
    )
    assert resp.status_code == 200
    return {"x-access-token": resp.json()["token"]}
