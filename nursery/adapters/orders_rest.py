"""REST adapter for `/orders*` endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import Order
from nursery.domain.ports import OrdersPort, RecordId


class OrdersRestAdapter(RestAdapter, OrdersPort):
    """HTTP adapter for order listing, creation and the status workflow."""

    def list_orders(self, status: Optional[str] = None) -> List[Order]:
        resp = self.api.get(
            "/orders",
            headers=self._headers(),
            params=self._optional_params(status=status),
        )
        return [self._parse_order(o) for o in self._json_list(resp, "orders")]

    def list_large_orders(self) -> List[Order]:
        resp = self.api.get("/orders/large", headers=self._headers())
        return [self._parse_order(o) for o in self._json_list(resp, "orders_large")]

    def get_order(self, order_id: RecordId) -> Order:
        oid = self._require_id(order_id, "order_id")
        resp = self.api.get(f"/orders/{oid}", headers=self._headers())
        return self._parse_order(self._json_dict(resp, f"order[{oid}]"))

    def create_order(self, payload: Mapping[str, Any]) -> Order:
        resp = self.api.post("/orders", headers=self._headers(), json_body=dict(payload))
        return self._parse_order(self._json_dict(resp, "create_order"))

    def update_status(self, order_id: RecordId, status: str) -> Order:
        oid = self._require_id(order_id, "order_id")
        resp = self.api.patch(
            f"/orders/{oid}/status",
            headers=self._headers(),
            json_body={"status": status},
        )
        return self._parse_order(self._json_dict(resp, f"order_status[{oid}]"))

    def resolve_order(self, order_id: RecordId, resolution: str) -> Dict[str, Any]:
        oid = self._require_id(order_id, "order_id")
        resp = self.api.post(
            f"/orders/{oid}/resolve",
            headers=self._headers(),
            json_body={"resolution": resolution},
        )
        return self._json_dict(resp, f"order_resolve[{oid}]")

    @classmethod
    def _parse_order(cls, raw: Mapping[str, Any]) -> Order:
        items = raw.get("items")
        return Order(
            id=cls._str(raw.get("id")),
            status=cls._str(raw.get("status")),
            total_amount=cls._float(raw.get("total_amount")),
            customer_id=cls._str(raw.get("customer_id")),
            customer_name=cls._str(raw.get("customer_name")),
            customer_email=cls._str(raw.get("customer_email")),
            payment_status=cls._str(raw.get("payment_status")),
            delivery_address=cls._str(raw.get("delivery_address")),
            notes=cls._str(raw.get("notes")),
            placed_at=cls._str(raw.get("placed_at")),
            updated_at=cls._str(raw.get("updated_at")),
            items=tuple(dict(i) for i in items if isinstance(i, dict)) if isinstance(items, list) else (),
        )
