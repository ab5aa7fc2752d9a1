"""Typed records returned by the nursery REST backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple


OrderStatus = Literal["pending", "approved", "processing", "shipped", "delivered", "cancelled"]
ORDER_STATUSES: Tuple[str, ...] = (
    "pending",
    "approved",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
)


@dataclass(frozen=True)
class AuthSession:
    """Token and user profile returned by `/auth/login`."""

    token: str
    user_id: str
    email: str
    full_name: str = ""
    role: str = ""
    roles: Tuple[str, ...] = ()

    def has_role(self, role: str) -> bool:
        return role in self.roles or role == self.role


@dataclass(frozen=True)
class Order:
    id: str
    status: str
    total_amount: float = 0.0
    customer_id: str = ""
    customer_name: str = ""
    customer_email: str = ""
    payment_status: str = ""
    delivery_address: str = ""
    notes: str = ""
    placed_at: str = ""
    updated_at: str = ""
    items: Tuple[Dict[str, Any], ...] = ()


@dataclass(frozen=True)
class Plant:
    id: str
    name: str
    category: str = ""
    latin_name: str = ""
    description: str = ""
    base_price: float = 0.0
    sku: str = ""
    image_url: str = ""
    quantity: int = 0
    is_popular: bool = False
    is_active: bool = True


@dataclass(frozen=True)
class InventoryItem:
    """Stock record; ``is_low_stock`` is the server's flag, not recomputed."""

    id: str
    name: str
    sku: str = ""
    kind: str = ""
    plant_id: str = ""
    plant_name: str = ""
    unit: str = ""
    quantity_on_hand: int = 0
    reorder_level: int = 0
    location: str = ""
    is_low_stock: bool = False


@dataclass(frozen=True)
class LowStockItem:
    id: str
    name: str
    sku: str = ""
    quantity_on_hand: int = 0
    reorder_level: int = 0
    plant_name: str = ""


@dataclass(frozen=True)
class Message:
    id: str
    sender: str
    subject: str
    body: str
    created_at: str = ""
    is_read: bool = False
    kind: str = "general"


@dataclass(frozen=True)
class Notification:
    id: str
    title: str
    body: str
    channel: str = ""
    is_read: bool = False
    created_at: str = ""


@dataclass(frozen=True)
class Employee:
    id: str
    email: str
    full_name: str = ""
    phone: str = ""
    role: str = ""
    title: str = ""
    is_active: bool = True
    hired_at: str = ""


@dataclass(frozen=True)
class Supplier:
    id: str
    company_name: str
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class SalesSummary:
    total_sales: float = 0.0
    since: Optional[str] = None


@dataclass(frozen=True)
class TopSeller:
    plant_id: str
    plant_name: str
    total_sold: int = 0
    total_revenue: float = 0.0
    order_count: int = 0


@dataclass(frozen=True)
class ManagerOverview:
    """Figures shown on the manager dashboard, as reported by the server."""

    employee_count: int = 0
    sales: SalesSummary = field(default_factory=SalesSummary)
    large_orders: Tuple[Order, ...] = ()
    low_stock: Tuple[LowStockItem, ...] = ()
    top_sellers: Tuple[TopSeller, ...] = ()
