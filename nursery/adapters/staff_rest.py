"""REST adapter for `/employees*` and `/suppliers` endpoints."""

from __future__ import annotations

from typing import Any, List, Mapping

from nursery.adapters.rest_base import RestAdapter
from nursery.domain.models import Employee, Supplier
from nursery.domain.ports import RecordId, StaffPort


class StaffRestAdapter(RestAdapter, StaffPort):
    """HTTP adapter for manager-side employee and supplier administration."""

    def list_employees(self) -> List[Employee]:
        resp = self.api.get("/employees", headers=self._headers())
        return [self._parse_employee(e) for e in self._json_list(resp, "employees")]

    def count_employees(self) -> int:
        resp = self.api.get("/employees/count", headers=self._headers())
        return self._int(self._json_dict(resp, "employees_count").get("count"))

    def create_employee(self, payload: Mapping[str, Any]) -> Employee:
        resp = self.api.post("/employees", headers=self._headers(), json_body=dict(payload))
        return self._parse_employee(self._json_dict(resp, "create_employee"))

    def set_employee_status(self, employee_id: RecordId, is_active: bool) -> None:
        eid = self._require_id(employee_id, "employee_id")
        self.api.patch(
            f"/employees/{eid}/status",
            headers=self._headers(),
            json_body={"is_active": bool(is_active)},
        )

    def delete_employee(self, employee_id: RecordId) -> None:
        eid = self._require_id(employee_id, "employee_id")
        self.api.delete(f"/employees/{eid}", headers=self._headers())

    def list_suppliers(self) -> List[Supplier]:
        resp = self.api.get("/suppliers", headers=self._headers())
        return [self._parse_supplier(s) for s in self._json_list(resp, "suppliers")]

    @classmethod
    def _parse_employee(cls, raw: Mapping[str, Any]) -> Employee:
        user = raw.get("user") if isinstance(raw.get("user"), Mapping) else {}
        return Employee(
            id=cls._str(raw.get("id") or raw.get("user_id") or user.get("id")),
            email=cls._str(raw.get("email") or user.get("email")),
            full_name=cls._str(raw.get("full_name") or user.get("full_name")),
            phone=cls._str(raw.get("phone") or user.get("phone")),
            role=cls._str(raw.get("role")),
            title=cls._str(raw.get("title")),
            is_active=cls._bool(raw.get("is_active"), default=True),
            hired_at=cls._str(raw.get("hired_at")),
        )

    @classmethod
    def _parse_supplier(cls, raw: Mapping[str, Any]) -> Supplier:
        return Supplier(
            id=cls._str(raw.get("id")),
            company_name=cls._str(raw.get("company_name")),
            contact_name=cls._str(raw.get("contact_name")),
            email=cls._str(raw.get("email")),
            phone=cls._str(raw.get("phone")),
            address=cls._str(raw.get("address")),
            is_active=cls._bool(raw.get("is_active"), default=True),
        )
