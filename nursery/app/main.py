"""Composition root and command-line entry point.

``build_services`` resolves the API configuration exactly once and wires the
shared ``ApiSession`` into every resource adapter. The CLI is a thin shell
over those services for scripting against a running backend.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import requests
from requests import exceptions as req_exc

from nursery.adapters.api_errors import ApiError
from nursery.adapters.auth_rest import AuthRestAdapter
from nursery.adapters.env_config import EnvConfigProvider, StaticConfigProvider
from nursery.adapters.http_client import ApiSession, HttpConfig
from nursery.adapters.inventory_rest import InventoryRestAdapter
from nursery.adapters.messages_rest import MessagesRestAdapter
from nursery.adapters.orders_rest import OrdersRestAdapter
from nursery.adapters.plants_rest import PlantsRestAdapter
from nursery.adapters.reports_rest import ReportsRestAdapter
from nursery.adapters.rest_base import bearer_headers
from nursery.adapters.staff_rest import StaffRestAdapter
from nursery.adapters.token_store import LocalTokenStore
from nursery.domain.api_config import ApiConfig
from nursery.domain.ports import ConfigProvider, TokenStorePort, UseCaseError
from nursery.usecases.error_mapping import map_api_error
from nursery.usecases.load_manager_overview import LoadManagerOverview
from nursery.usecases.login import Login
from nursery.usecases.update_order_status import UpdateOrderStatus
from nursery.utils.logging import configure_root

log = logging.getLogger(__name__)


@dataclass
class Services:
    """Adapters sharing one resolved ``ApiConfig`` and one ``ApiSession``."""

    config: ApiConfig
    session: ApiSession
    tokens: TokenStorePort
    auth: AuthRestAdapter
    orders: OrdersRestAdapter
    plants: PlantsRestAdapter
    inventory: InventoryRestAdapter
    messages: MessagesRestAdapter
    staff: StaffRestAdapter
    reports: ReportsRestAdapter


def build_services(
    provider: ConfigProvider,
    *,
    tokens: TokenStorePort,
    http: Optional[HttpConfig] = None,
) -> Services:
    config = ApiConfig.from_provider(provider)
    log.debug("API base URL resolved to %s (host=%s)", config.base_url, config.current_host)
    session = ApiSession(config, http)
    return Services(
        config=config,
        session=session,
        tokens=tokens,
        auth=AuthRestAdapter(session, tokens),
        orders=OrdersRestAdapter(session, tokens),
        plants=PlantsRestAdapter(session, tokens),
        inventory=InventoryRestAdapter(session, tokens),
        messages=MessagesRestAdapter(session, tokens),
        staff=StaffRestAdapter(session, tokens),
        reports=ReportsRestAdapter(session, tokens),
    )


def _provider_from_args(args: argparse.Namespace) -> ConfigProvider:
    env = EnvConfigProvider()
    if args.api_url is None and args.origin is None:
        return env
    return StaticConfigProvider(
        override=args.api_url if args.api_url is not None else env.get_override(),
        site_origin=args.origin or env.get_site_origin(),
    )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for the nursery API client."""
    parser = argparse.ArgumentParser(description="Nursery REST API client.")
    parser.add_argument("--api-url", default=None, help="Explicit API base URL override.")
    parser.add_argument("--origin", default=None, help="Site origin, e.g. http://localhost:3000.")
    parser.add_argument("--session-dir", default=".", help="Directory holding session.json.")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds.")
    parser.add_argument("--debug", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("resolve", help="Print the resolved API base URL.")

    get_p = sub.add_parser("get", help="GET an endpoint and print the body.")
    get_p.add_argument("endpoint")

    post_p = sub.add_parser("post", help="POST JSON to an endpoint and print the body.")
    post_p.add_argument("endpoint")
    post_p.add_argument("--json", dest="json_body", default=None)

    login_p = sub.add_parser("login", help="Sign in and store the session token.")
    login_p.add_argument("email")
    login_p.add_argument("password")

    sub.add_parser("logout", help="Forget the stored session token.")
    sub.add_parser("overview", help="Print the manager dashboard figures.")

    status_p = sub.add_parser("order-status", help="Update an order's status.")
    status_p.add_argument("order_id")
    status_p.add_argument("status")
    return parser.parse_args(argv)


def _print_body(resp: requests.Response) -> None:
    try:
        print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
    except ValueError:
        print(resp.text)


def _run(args: argparse.Namespace, services: Services) -> Any:
    if args.command == "resolve":
        print(services.config.base_url)
        return None
    if args.command == "logout":
        services.tokens.clear()
        return None
    if args.command in ("get", "post"):
        headers = bearer_headers(services.tokens.load_token())
        body = None
        if args.command == "post" and args.json_body:
            try:
                body = json.loads(args.json_body)
            except ValueError as exc:
                raise UseCaseError("INVALID_JSON", f"--json is not valid JSON: {exc}") from exc
        try:
            if args.command == "get":
                resp = services.session.get(args.endpoint, headers=headers)
            else:
                resp = services.session.post(args.endpoint, headers=headers, json_body=body)
        except (ApiError, req_exc.RequestException) as exc:
            raise map_api_error(exc, default_code="REQUEST_FAILED") from exc
        _print_body(resp)
        return None
    if args.command == "login":
        session = Login(services.auth)(args.email, args.password)
        print(f"Signed in as {session.email} ({session.role or 'no role'})")
        return session
    if args.command == "overview":
        overview = LoadManagerOverview(services.staff, services.orders, services.reports)()
        print(f"Employees:    {overview.employee_count}")
        print(f"Total sales:  {overview.sales.total_sales:.2f}")
        print(f"Large orders: {len(overview.large_orders)}")
        print(f"Low stock:    {len(overview.low_stock)}")
        for seller in overview.top_sellers:
            print(f"  {seller.plant_name}: {seller.total_sold} sold")
        return overview
    if args.command == "order-status":
        order = UpdateOrderStatus(services.orders)(args.order_id, args.status)
        print(f"Order {order.id or args.order_id}: {order.status or args.status}")
        return order
    raise UseCaseError("UNKNOWN_COMMAND", f"Unknown command '{args.command}'")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = _parse_args(argv)
    configure_root(debug=args.debug)
    services = build_services(
        _provider_from_args(args),
        tokens=LocalTokenStore(args.session_dir),
        http=HttpConfig(request_timeout_s=args.timeout),
    )
    try:
        _run(args, services)
    except UseCaseError as exc:
        print(f"error [{exc.code}]: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
