from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from requests import exceptions as req_exc

from nursery.adapters.api_errors import ApiClientError, ApiError, ApiServerError
from nursery.domain.models import AuthSession, LowStockItem, Order, SalesSummary, TopSeller
from nursery.domain.ports import UseCaseError
from nursery.usecases.error_mapping import map_api_error
from nursery.usecases.load_manager_overview import LoadManagerOverview
from nursery.usecases.login import Login
from nursery.usecases.reply_to_message import ReplyToMessage
from nursery.usecases.update_order_status import UpdateOrderStatus


class _OrdersPortDouble:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def update_status(self, order_id: str, status: str) -> Order:
        self.calls.append({"order_id": order_id, "status": status})
        if self.error:
            raise self.error
        return Order(id=order_id, status=status)

    def list_large_orders(self) -> List[Order]:
        self.calls.append({"method": "list_large_orders"})
        return [Order(id="1", status="pending", total_amount=900.0)]


class _StaffPortDouble:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error

    def count_employees(self) -> int:
        if self.error:
            raise self.error
        return 4


class _ReportsPortDouble:
    def sales(self, since: Optional[str] = None) -> SalesSummary:
        return SalesSummary(total_sales=150.0, since=since)

    def inventory_low(self) -> List[LowStockItem]:
        return [LowStockItem(id="3", name="Pots", quantity_on_hand=1, reorder_level=4)]

    def top_selling(self, **_: Any) -> List[TopSeller]:
        return [TopSeller(plant_id="1", plant_name="Rose", total_sold=12)]


class _AuthPortDouble:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls: List[tuple] = []

    def login(self, email: str, password: str) -> AuthSession:
        self.calls.append((email, password))
        if self.error:
            raise self.error
        return AuthSession(token="t", user_id="1", email=email, role="manager", roles=("manager",))


class _MessagesPortDouble:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def reply(self, message_id: str, reply: str) -> Dict[str, Any]:
        self.calls.append((message_id, reply))
        return {"success": True}


def test_update_order_status_normalizes_and_calls_port() -> None:
    port = _OrdersPortDouble()

    order = UpdateOrderStatus(port)(" 12 ", "Shipped")

    assert port.calls == [{"order_id": "12", "status": "shipped"}]
    assert order.status == "shipped"


def test_update_order_status_rejects_unknown_status_without_calling_port() -> None:
    port = _OrdersPortDouble()

    with pytest.raises(UseCaseError) as info:
        UpdateOrderStatus(port)("12", "lost")

    assert info.value.code == "INVALID_STATUS"
    assert port.calls == []


def test_update_order_status_requires_id() -> None:
    with pytest.raises(UseCaseError) as info:
        UpdateOrderStatus(_OrdersPortDouble())("", "pending")

    assert info.value.code == "ORDER_ID_MISSING"


def test_update_order_status_maps_not_found() -> None:
    port = _OrdersPortDouble(error=ApiClientError("API call failed: 404 Not Found", status=404, hint="Order not found"))

    with pytest.raises(UseCaseError) as info:
        UpdateOrderStatus(port)("99", "approved")

    assert info.value.code == "NOT_FOUND"
    assert info.value.message == "Not found: Order not found"
    assert info.value.meta == {"status": 404}


def test_manager_overview_collects_server_figures() -> None:
    orders = _OrdersPortDouble()

    overview = LoadManagerOverview(_StaffPortDouble(), orders, _ReportsPortDouble())(since="2024-01-01")

    assert overview.employee_count == 4
    assert overview.sales.total_sales == 150.0
    assert overview.sales.since == "2024-01-01"
    assert [o.id for o in overview.large_orders] == ["1"]
    assert overview.low_stock[0].name == "Pots"
    assert overview.top_sellers[0].plant_name == "Rose"


def test_manager_overview_surfaces_failures_instead_of_placeholders() -> None:
    staff = _StaffPortDouble(error=req_exc.ConnectionError("refused"))

    with pytest.raises(UseCaseError) as info:
        LoadManagerOverview(staff, _OrdersPortDouble(), _ReportsPortDouble())()

    assert info.value.code == "NETWORK_ERROR"


def test_login_lowercases_email() -> None:
    port = _AuthPortDouble()

    session = Login(port)(" Mia@Nursery.Test ", "pw")

    assert port.calls == [("mia@nursery.test", "pw")]
    assert session.role == "manager"


def test_login_requires_credentials() -> None:
    port = _AuthPortDouble()

    with pytest.raises(UseCaseError) as info:
        Login(port)("", "pw")

    assert info.value.code == "LOGIN_INVALID"
    assert port.calls == []


def test_login_maps_invalid_credentials() -> None:
    port = _AuthPortDouble(error=ApiClientError("x", status=401, hint="Invalid email or password"))

    with pytest.raises(UseCaseError) as info:
        Login(port)("a@b.c", "bad")

    assert info.value.code == "AUTH_FAILED"
    assert "Invalid email or password" in info.value.message


def test_reply_rejects_blank_text() -> None:
    port = _MessagesPortDouble()

    with pytest.raises(UseCaseError) as info:
        ReplyToMessage(port)("1", "   ")

    assert info.value.code == "REPLY_EMPTY"
    assert port.calls == []


def test_reply_strips_text() -> None:
    port = _MessagesPortDouble()

    result = ReplyToMessage(port)("1", "  On its way  ")

    assert port.calls == [("1", "On its way")]
    assert result == {"success": True}


@pytest.mark.parametrize(
    "exc, code",
    [
        (ApiClientError("x", status=401), "AUTH_FAILED"),
        (ApiClientError("x", status=403), "AUTH_FAILED"),
        (ApiClientError("x", status=404), "NOT_FOUND"),
        (ApiClientError("x", status=400), "INVALID_REQUEST"),
        (ApiClientError("x", status=429), "REQUEST_FAILED"),
        (ApiServerError("x", status=500), "SERVER_ERROR"),
        (ApiError("x", status=302), "API_ERROR"),
        (req_exc.Timeout("slow"), "NETWORK_ERROR"),
        (RuntimeError("bad json"), "FALLBACK"),
    ],
)
def test_map_api_error_codes(exc: Exception, code: str) -> None:
    assert map_api_error(exc, default_code="FALLBACK").code == code


def test_map_api_error_keeps_server_status() -> None:
    err = map_api_error(ApiServerError("x", status=500), default_code="X")

    assert err.meta == {"status": 500}


def test_map_api_error_passes_use_case_errors_through() -> None:
    original = UseCaseError("SOME", "thing")

    assert map_api_error(original, default_code="X") is original
