"""Collect the manager dashboard figures from the server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nursery.domain.models import ManagerOverview
from nursery.domain.ports import OrdersPort, ReportsPort, StaffPort
from nursery.usecases.error_mapping import map_api_error


@dataclass
class LoadManagerOverview:
    """Gather employee count, sales, large orders, low stock and top sellers.

    Every figure comes from the backend as-is. Any failing call aborts the
    whole overview with a ``UseCaseError``; no placeholder data is substituted.
    """

    staff_port: StaffPort
    orders_port: OrdersPort
    reports_port: ReportsPort

    def __call__(self, *, since: Optional[str] = None) -> ManagerOverview:
        try:
            employee_count = self.staff_port.count_employees()
            sales = self.reports_port.sales(since=since)
            large_orders = self.orders_port.list_large_orders()
            low_stock = self.reports_port.inventory_low()
            top_sellers = self.reports_port.top_selling()
        except Exception as exc:
            raise map_api_error(exc, default_code="OVERVIEW_FAILED") from exc

        return ManagerOverview(
            employee_count=employee_count,
            sales=sales,
            large_orders=tuple(large_orders),
            low_stock=tuple(low_stock),
            top_sellers=tuple(top_sellers),
        )
