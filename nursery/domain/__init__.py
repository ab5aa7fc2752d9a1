"""Domain package exports for request configuration and backend records."""

from .api_config import (
    ApiConfig,
    DIRECT_BACKEND_ORIGIN,
    PROXY_BASE_PATH,
    build_url,
    fallback_target,
    resolve_base_url,
    should_fallback,
)
from .models import (
    ORDER_STATUSES,
    AuthSession,
    Employee,
    InventoryItem,
    LowStockItem,
    ManagerOverview,
    Message,
    Notification,
    Order,
    Plant,
    SalesSummary,
    Supplier,
    TopSeller,
)
from .ports import UseCaseError

__all__ = [
    "ApiConfig",
    "AuthSession",
    "DIRECT_BACKEND_ORIGIN",
    "Employee",
    "InventoryItem",
    "LowStockItem",
    "ManagerOverview",
    "Message",
    "Notification",
    "ORDER_STATUSES",
    "Order",
    "PROXY_BASE_PATH",
    "Plant",
    "SalesSummary",
    "Supplier",
    "TopSeller",
    "UseCaseError",
    "build_url",
    "fallback_target",
    "resolve_base_url",
    "should_fallback",
]
