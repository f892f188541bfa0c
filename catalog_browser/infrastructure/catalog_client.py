"""Catalog HTTP client for the remote product service.

Fetches the product list and single products from a FakeStore-compatible
API and normalizes them into domain products.
"""

from typing import Any

import httpx
import structlog

from catalog_browser.domain.exceptions import InvalidProductError
from catalog_browser.domain.models import Product
from catalog_browser.infrastructure.config import settings

logger = structlog.get_logger()


class CatalogClientError(Exception):
    """Error from catalog API call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CatalogClient:
    """HTTP client for the catalog service.

    Provides methods for calling catalog endpoints with error handling
    and response normalization.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        request_id: str | None = None,
    ) -> None:
        """Initialize catalog client.

        Args:
            base_url: Catalog service base URL.
            timeout: Request timeout in seconds.
            request_id: Optional request ID for correlation.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.request_id = request_id
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.request_id:
                headers["X-Request-ID"] = self.request_id
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def health_check(self) -> bool:
        """Check catalog service health.

        Returns:
            True if the product list endpoint answers.
        """
        try:
            client = await self._get_client()
            response = await client.get("/products", params={"limit": 1})
            return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning("Catalog health check failed", error=str(e))
            return False

    async def list_products(self) -> list[Product]:
        """Fetch the full product list.

        Returns:
            Products in service order.

        Raises:
            CatalogClientError: On API error, transport failure or a
                malformed payload.
        """
        try:
            client = await self._get_client()
            response = await client.get("/products")

            if response.status_code != 200:
                raise CatalogClientError(
                    f"Failed to list products: {response.text}",
                    response.status_code,
                )

            data = response.json()
            if not isinstance(data, list):
                raise CatalogClientError("Failed to list products: expected a JSON array")

            products = [Product.from_api_response(item) for item in data]
            logger.info("Catalog fetched", product_count=len(products))
            return products

        except httpx.RequestError as e:
            logger.error("Catalog API request failed", error=str(e))
            raise CatalogClientError(f"Request failed: {str(e)}") from e
        except (ValueError, InvalidProductError) as e:
            logger.error("Catalog API returned malformed data", error=str(e))
            raise CatalogClientError(f"Malformed catalog response: {str(e)}") from e

    async def get_product(self, product_id: int) -> Product | None:
        """Get product by ID.

        The service answers unknown ids either with 404 or with an empty
        200 body; both mean the product does not exist.

        Args:
            product_id: Product identifier.

        Returns:
            Product if found, None otherwise.

        Raises:
            CatalogClientError: On API error (except 404).
        """
        try:
            client = await self._get_client()
            response = await client.get(f"/products/{product_id}")

            if response.status_code == 404:
                return None

            if response.status_code != 200:
                raise CatalogClientError(
                    f"Failed to get product: {response.text}",
                    response.status_code,
                )

            if not response.content.strip():
                return None

            data: Any = response.json()
            if not data:
                return None
            return Product.from_api_response(data)

        except httpx.RequestError as e:
            logger.error(
                "Catalog API request failed",
                product_id=product_id,
                error=str(e),
            )
            raise CatalogClientError(f"Request failed: {str(e)}") from e
        except (ValueError, InvalidProductError) as e:
            logger.error(
                "Catalog API returned malformed product",
                product_id=product_id,
                error=str(e),
            )
            raise CatalogClientError(f"Malformed product response: {str(e)}") from e


# Global client instance
_catalog_client: CatalogClient | None = None


def get_catalog_client() -> CatalogClient:
    """Get the catalog client singleton.

    Returns:
        CatalogClient configured from settings.
    """
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient(
            base_url=settings.catalog_api_url,
            timeout=settings.catalog_timeout_seconds,
        )
    return _catalog_client
