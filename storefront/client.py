"""
HTTP client for the catalog API.

Every call is a single request with no caching or retries. Failures never
raise: they come back as a ``FetchResult`` carrying an error message, which
is what the renderer shows to the user.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union
from urllib.parse import quote
import logging

import httpx

from storefront.config import client_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one API call: either ``data`` or an ``error`` message"""

    data: Any = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CatalogClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[httpx.Client] = None
    ):
        self.base_url = (base_url or client_settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else client_settings.TIMEOUT
        self.http = http or httpx.Client(timeout=self.timeout)

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> FetchResult:
        url = f"{self.base_url}{path}"
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            return FetchResult(error=f"Network error: {e}")

        try:
            body = response.json()
        except ValueError:
            logger.error(f"{method} {url} returned non-JSON body ({response.status_code})")
            return FetchResult(
                error=f"Unexpected response from server (HTTP {response.status_code})",
                status_code=response.status_code
            )

        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            message = error.get("message") if isinstance(error, dict) else None
            return FetchResult(
                error=message or f"Request failed (HTTP {response.status_code})",
                status_code=response.status_code
            )

        return FetchResult(data=body.get("data"), status_code=response.status_code)

    def list_categories(self) -> FetchResult:
        return self._request("GET", "/categories")

    def create_category(self, name: str, description: str = "") -> FetchResult:
        return self._request("POST", "/categories", json={"name": name, "description": description})

    def list_products(self, category_id: Optional[str] = None, featured: Optional[bool] = None) -> FetchResult:
        params: Dict[str, str] = {}
        if category_id:
            params["categoryId"] = category_id
        if featured is not None:
            params["featured"] = "true" if featured else "false"
        return self._request("GET", "/products", params=params)

    def featured_products(self) -> FetchResult:
        return self._request("GET", "/products/featured")

    def products_by_category(self, category_id: str) -> FetchResult:
        return self._request("GET", f"/products/category/{quote(category_id, safe='')}")

    def get_product(self, product_id: str) -> FetchResult:
        return self._request("GET", f"/products/{quote(product_id, safe='')}")

    def create_product(
        self,
        title: str,
        price: Union[float, Decimal],
        category_id: str,
        description: Optional[str] = None,
        stock: Optional[int] = None,
        is_featured: Optional[bool] = None,
        product_image: Optional[str] = None
    ) -> FetchResult:
        payload: Dict[str, Any] = {
            "title": title,
            "price": float(price),
            "categoryId": category_id,
        }
        optional = {
            "description": description,
            "stock": stock,
            "isFeatured": is_featured,
            "productImage": product_image,
        }
        payload.update({k: v for k, v in optional.items() if v is not None})
        return self._request("POST", "/products", json=payload)
