"""REST adapter for `/plants*` endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import Plant
from nursery.domain.ports import PlantsPort, RecordId


class PlantsRestAdapter(RestAdapter, PlantsPort):
    """HTTP adapter for the plant catalog."""

    def list_plants(
        self, *, category: Optional[str] = None, search: Optional[str] = None
    ) -> List[Plant]:
        resp = self.api.get(
            "/plants",
            headers=self._headers(),
            params=self._optional_params(category=category, search=search),
        )
        return [self._parse_plant(p) for p in self._json_list(resp, "plants")]

    def list_all_plants(self) -> List[Plant]:
        """Manager view, including inactive plants."""
        resp = self.api.get("/plants/all", headers=self._headers())
        return [self._parse_plant(p) for p in self._json_list(resp, "plants_all")]

    def get_plant(self, plant_id: RecordId) -> Plant:
        pid = self._require_id(plant_id, "plant_id")
        resp = self.api.get(f"/plants/{pid}", headers=self._headers())
        return self._parse_plant(self._json_dict(resp, f"plant[{pid}]"))

    def create_plant(self, payload: Mapping[str, Any]) -> Plant:
        resp = self.api.post("/plants", headers=self._headers(), json_body=dict(payload))
        return self._parse_plant(self._json_dict(resp, "create_plant"))

    def update_plant(self, plant_id: RecordId, payload: Mapping[str, Any]) -> Plant:
        pid = self._require_id(plant_id, "plant_id")
        resp = self.api.put(f"/plants/{pid}", headers=self._headers(), json_body=dict(payload))
        return self._parse_plant(self._json_dict(resp, f"update_plant[{pid}]"))

    def delete_plant(self, plant_id: RecordId) -> None:
        pid = self._require_id(plant_id, "plant_id")
        self.api.delete(f"/plants/{pid}", headers=self._headers())

    def health_status(self, plant_id: RecordId) -> Dict[str, Any]:
        pid = self._require_id(plant_id, "plant_id")
        resp = self.api.get(f"/plants/{pid}/health-status", headers=self._headers())
        return self._json_dict(resp, f"plant_health[{pid}]")

    @classmethod
    def _parse_plant(cls, raw: Mapping[str, Any]) -> Plant:
        # The public listing adds camelCase aliases next to the column names.
        return Plant(
            id=cls._str(raw.get("id")),
            name=cls._str(raw.get("name")),
            category=cls._str(raw.get("category")),
            latin_name=cls._str(raw.get("latin_name")),
            description=cls._str(raw.get("description")),
            base_price=cls._float(raw.get("base_price")),
            sku=cls._str(raw.get("sku")),
            image_url=cls._str(raw.get("image_url") or raw.get("imageUrl")),
            quantity=cls._int(raw.get("quantity")),
            is_popular=cls._bool(raw.get("is_popular", raw.get("isPopular"))),
            is_active=cls._bool(raw.get("is_active"), default=True),
        )
