"""Use case for moving an order through its status workflow."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nursery.domain.models import ORDER_STATUSES, Order
from nursery.domain.ports import OrdersPort, RecordId, UseCaseError
from nursery.usecases.error_mapping import map_api_error

log = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatus:
    """Validate the target status locally, then patch the order.

    Unknown statuses are rejected before any request so the backend's
    validation error never has to round-trip.
    """

    orders_port: OrdersPort

    def __call__(self, order_id: RecordId, status: str) -> Order:
        oid = str(order_id or "").strip()
        if not oid:
            raise UseCaseError("ORDER_ID_MISSING", "Order id is required.")
        target = (status or "").strip().lower()
        if target not in ORDER_STATUSES:
            raise UseCaseError(
                "INVALID_STATUS",
                f"Unknown order status '{status}'. Expected one of: {', '.join(ORDER_STATUSES)}.",
            )
        try:
            order = self.orders_port.update_status(oid, target)
        except Exception as exc:
            raise map_api_error(exc, default_code="ORDER_STATUS_FAILED") from exc
        log.info("Order %s moved to %s", oid, target)
        return order
