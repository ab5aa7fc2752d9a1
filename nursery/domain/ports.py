from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from nursery.domain.models import (
        AuthSession,
        Employee,
        InventoryItem,
        LowStockItem,
        Message,
        Notification,
        Order,
        Plant,
        SalesSummary,
        Supplier,
        TopSeller,
    )

RecordId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, *, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


# ---- Configuration ----
class ConfigProvider(Protocol):
    """Source of the startup values that decide the API base URL."""

    def get_override(self) -> Optional[str]: ...
    def get_current_host(self) -> str: ...
    def get_site_origin(self) -> str: ...


class TokenStorePort(Protocol):
    """Persistence for the bearer token and the signed-in user record."""

    def load_token(self) -> Optional[str]: ...
    def load_user(self) -> Optional[Dict[str, Any]]: ...
    def save_session(self, token: str, user: Mapping[str, Any]) -> None: ...
    def clear(self) -> None: ...


# ---- Ports (Hexagonal boundaries) ----
class AuthPort(Protocol):
    def login(self, email: str, password: str) -> "AuthSession": ...
    def verify(self) -> Dict[str, Any]: ...


class OrdersPort(Protocol):
    """Order listing and status workflow for staff and managers."""

    def list_orders(self, status: Optional[str] = None) -> List["Order"]: ...
    def list_large_orders(self) -> List["Order"]: ...
    def get_order(self, order_id: RecordId) -> "Order": ...
    def create_order(self, payload: Mapping[str, Any]) -> "Order": ...
    def update_status(self, order_id: RecordId, status: str) -> "Order": ...
    def resolve_order(self, order_id: RecordId, resolution: str) -> Dict[str, Any]: ...


class PlantsPort(Protocol):
    def list_plants(
        self, *, category: Optional[str] = None, search: Optional[str] = None
    ) -> List["Plant"]: ...
    def list_all_plants(self) -> List["Plant"]: ...
    def get_plant(self, plant_id: RecordId) -> "Plant": ...
    def create_plant(self, payload: Mapping[str, Any]) -> "Plant": ...
    def update_plant(self, plant_id: RecordId, payload: Mapping[str, Any]) -> "Plant": ...
    def delete_plant(self, plant_id: RecordId) -> None: ...
    def health_status(self, plant_id: RecordId) -> Dict[str, Any]: ...


class InventoryPort(Protocol):
    def list_items(self) -> List["InventoryItem"]: ...
    def create_item(self, payload: Mapping[str, Any]) -> "InventoryItem": ...
    def update_item(self, item_id: RecordId, payload: Mapping[str, Any]) -> "InventoryItem": ...
    def list_receiving(self) -> List[Dict[str, Any]]: ...


class MessagesPort(Protocol):
    """Inbox messages and per-user notifications."""

    def list_messages(self) -> List["Message"]: ...
    def reply(self, message_id: RecordId, reply: str) -> Dict[str, Any]: ...
    def list_notifications(self) -> List["Notification"]: ...
    def mark_read(self, notification_id: RecordId) -> None: ...
    def mark_all_read(self) -> None: ...


class StaffPort(Protocol):
    def list_employees(self) -> List["Employee"]: ...
    def count_employees(self) -> int: ...
    def create_employee(self, payload: Mapping[str, Any]) -> "Employee": ...
    def set_employee_status(self, employee_id: RecordId, is_active: bool) -> None: ...
    def delete_employee(self, employee_id: RecordId) -> None: ...
    def list_suppliers(self) -> List["Supplier"]: ...


class ReportsPort(Protocol):
    """Server-computed report figures; the client never aggregates."""

    def sales(self, since: Optional[str] = None) -> "SalesSummary": ...
    def top_selling(
        self, *, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> List["TopSeller"]: ...
    def inventory_low(self) -> List["LowStockItem"]: ...
