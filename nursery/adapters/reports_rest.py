"""REST adapter for `/reports/*` endpoints."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import LowStockItem, SalesSummary, TopSeller
from nursery.domain.ports import ReportsPort


class ReportsRestAdapter(RestAdapter, ReportsPort):
    """Fetch report figures exactly as the backend computed them."""

    def sales(self, since: Optional[str] = None) -> SalesSummary:
        resp = self.api.get(
            "/reports/sales",
            headers=self._headers(),
            params=self._optional_params(since=since),
        )
        payload = self._json_dict(resp, "reports_sales")
        return SalesSummary(total_sales=self._float(payload.get("total_sales")), since=since)

    def top_selling(
        self, *, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> List[TopSeller]:
        resp = self.api.get(
            "/reports/top-selling",
            headers=self._headers(),
            params=self._optional_params(startDate=start_date, endDate=end_date),
        )
        return [self._parse_top_seller(t) for t in self._json_list(resp, "reports_top_selling")]

    def inventory_low(self) -> List[LowStockItem]:
        resp = self.api.get("/reports/inventory-low", headers=self._headers())
        return [self._parse_low_stock(i) for i in self._json_list(resp, "reports_inventory_low")]

    @classmethod
    def _parse_top_seller(cls, raw: Mapping[str, Any]) -> TopSeller:
        return TopSeller(
            plant_id=cls._str(raw.get("plant_id")),
            plant_name=cls._str(raw.get("plant_name")),
            total_sold=cls._int(raw.get("total_sold")),
            total_revenue=cls._float(raw.get("total_revenue")),
            order_count=cls._int(raw.get("order_count")),
        )

    @classmethod
    def _parse_low_stock(cls, raw: Mapping[str, Any]) -> LowStockItem:
        return LowStockItem(
            id=cls._str(raw.get("id")),
            name=cls._str(raw.get("name")),
            sku=cls._str(raw.get("sku")),
            quantity_on_hand=cls._int(raw.get("quantity_on_hand")),
            reorder_level=cls._int(raw.get("reorder_level")),
            plant_name=cls._str(raw.get("plant_name")),
        )
