"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest

# Add src to Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from eventcatalog_mcp.catalog.fetch import CatalogClient  # noqa: E402
from eventcatalog_mcp.catalog.service import CatalogService  # noqa: E402
from eventcatalog_mcp.context import HandlerContext  # noqa: E402

BASE_URL = "https://catalog.example.com"

SAMPLE_MANIFEST = """# EventCatalog

Some introductory prose that is not a resource.

## Events
- [Order Placed - OrderPlaced - 1.0.0](https://catalog.example.com/docs/events/OrderPlaced/1.0.0.mdx) - Raised when a customer places an order
- [Payment Processed - PaymentProcessed - 0.0.2](https://catalog.example.com/docs/events/PaymentProcessed/0.0.2.mdx) - Payment went through
- [Inventory Adjusted - InventoryAdjusted - 2.1.0](https://catalog.example.com/docs/events/InventoryAdjusted/2.1.0.mdx)

## Commands
- [Place Order - PlaceOrder - 1.0.0](https://catalog.example.com/docs/commands/PlaceOrder/1.0.0.mdx) - Ask the order service to place an order

## Queries
- [Get Order - GetOrder - 1.0.0](https://catalog.example.com/docs/queries/GetOrder/1.0.0.mdx) - Fetch order details

## Services
- [Orders Service - OrdersService - 1.2.0](https://catalog.example.com/docs/services/OrdersService/1.2.0.mdx) - Owns the order lifecycle
- [Payment Service - PaymentService - 0.1.0](https://catalog.example.com/docs/services/PaymentService/0.1.0.mdx) - Takes payments

## Domains
- [Orders - Orders - 1.0.0](https://catalog.example.com/docs/domains/Orders/1.0.0.mdx) - Everything about orders

## Flows
- [Checkout Flow - CheckoutFlow - 1.0.0](https://catalog.example.com/docs/flows/CheckoutFlow/1.0.0.mdx) - From cart to paid order

## Teams
- [orders-team](https://catalog.example.com/docs/teams/orders-team.mdx) - Orders Team

## Users
- [dboyne](https://catalog.example.com/docs/users/dboyne.mdx) - David Boyne
- [jdoe](https://catalog.example.com/docs/users/jdoe.mdx)
"""

SAMPLE_RESOURCE_COUNT = 12


class CatalogStub:
    """Serves canned responses keyed by request path and records requests."""

    def __init__(self, routes: Optional[dict[str, tuple[int, str]]] = None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, "Not Found"))
        return httpx.Response(status, text=body)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def catalog_stub() -> CatalogStub:
    return CatalogStub({"/docs/llm/llms.txt": (200, SAMPLE_MANIFEST)})


@pytest.fixture
def make_service() -> Callable[..., CatalogService]:
    """Build a CatalogService whose HTTP traffic goes to a stub handler."""

    def _make(handler, base_url: str = BASE_URL, page_size: int = 50) -> CatalogService:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = CatalogClient(base_url, http_client=http_client)
        return CatalogService(client, page_size=page_size)

    return _make


@pytest.fixture
def service(catalog_stub, make_service) -> CatalogService:
    return make_service(catalog_stub)


@pytest.fixture
def installed_service(service):
    """Install ``service`` for tool and resource handlers."""
    HandlerContext.set(service)
    yield service
    HandlerContext.set(None)
