"""REST adapter for `/inventory*` endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import InventoryItem
from nursery.domain.ports import InventoryPort, RecordId


class InventoryRestAdapter(RestAdapter, InventoryPort):
    """HTTP adapter for stock items and goods receiving."""

    def list_items(self) -> List[InventoryItem]:
        resp = self.api.get("/inventory", headers=self._headers())
        return [self._parse_item(i) for i in self._json_list(resp, "inventory")]

    def create_item(self, payload: Mapping[str, Any]) -> InventoryItem:
        resp = self.api.post("/inventory", headers=self._headers(), json_body=dict(payload))
        return self._parse_item(self._json_dict(resp, "create_inventory_item"))

    def update_item(self, item_id: RecordId, payload: Mapping[str, Any]) -> InventoryItem:
        iid = self._require_id(item_id, "item_id")
        resp = self.api.patch(
            f"/inventory/{iid}",
            headers=self._headers(),
            json_body=dict(payload),
        )
        return self._parse_item(self._json_dict(resp, f"update_inventory_item[{iid}]"))

    def list_receiving(self) -> List[Dict[str, Any]]:
        resp = self.api.get("/inventory/receiving", headers=self._headers())
        return self._json_list(resp, "inventory_receiving")

    @classmethod
    def _parse_item(cls, raw: Mapping[str, Any]) -> InventoryItem:
        plant = raw.get("plant") if isinstance(raw.get("plant"), Mapping) else {}
        return InventoryItem(
            id=cls._str(raw.get("id")),
            name=cls._str(raw.get("name")),
            sku=cls._str(raw.get("sku")),
            kind=cls._str(raw.get("kind")),
            plant_id=cls._str(raw.get("plant_id")),
            plant_name=cls._str(raw.get("plant_name") or plant.get("name")),
            unit=cls._str(raw.get("unit")),
            quantity_on_hand=cls._int(raw.get("quantity_on_hand")),
            reorder_level=cls._int(raw.get("reorder_level")),
            location=cls._str(raw.get("location")),
            is_low_stock=cls._bool(raw.get("isLowStock", raw.get("is_low_stock"))),
        )
