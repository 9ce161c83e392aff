# marketplace/client/api_client.py
import requests

from marketplace.client.state import Product, SessionUser
from marketplace.utils.settings import API_BASE_URL
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MarketplaceClient:
    def __init__(self, base_url: str | None = None, timeout: int = 10, session=None):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.http = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        logger.debug(f"MarketplaceClient {method} {url}")

        resp = self.http.request(method, url, timeout=self.timeout, **kwargs)
        if not resp.ok:
            try:
                message = resp.json().get("error") or resp.reason
            except ValueError:
                message = resp.reason or f"HTTP {resp.status_code}"
            raise ApiError(message, resp.status_code)
        return resp.json()

    def fetch_products(self) -> list[Product]:
        return [Product.from_dict(p) for p in self._request("GET", "/api/products")]

    def login(self, username: str, password: str) -> SessionUser:
        data = self._request(
            "POST", "/api/auth/login", json={"username": username, "password": password}
        )
        return SessionUser.from_dict(data["user"])

    def register(self, username: str, password: str) -> None:
        self._request(
            "POST", "/api/auth/register", json={"username": username, "password": password}
        )

    def add_product(self, fields: dict, admin_password: str) -> int:
        data = self._request(
            "POST", "/api/products", json={**fields, "admin_password": admin_password}
        )
        return int(data["id"])

    def delete_product(self, product_id: int, admin_password: str) -> None:
        self._request(
            "DELETE", f"/api/products/{product_id}", json={"admin_password": admin_password}
        )
