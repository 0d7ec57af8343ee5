#!/usr/bin/env python3
"""Command-line front end: log in and print dashboard, products, categories or sellers."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys

from inventory_client.core.config import get_settings
from inventory_client.core.errors import ValidationError
from inventory_client.core.log import configure_logging
from inventory_client.main import InventoryClient, create_client


def _print_table(headers: list[str], rows: list[list[object]]) -> None:
    cells = [[str(value) if value is not None else "" for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        widths = [max(width, len(value)) for width, value in zip(widths, row)]
    print("  ".join(header.ljust(width) for header, width in zip(headers, widths)))
    print("  ".join("-" * width for width in widths))
    for row in cells:
        print("  ".join(value.ljust(width) for value, width in zip(row, widths)))


async def _show_dashboard(client: InventoryClient) -> int:
    screen = client.dashboard_screen()
    if not await screen.load():
        print(screen.message, file=sys.stderr)
        return 1
    stats = screen.view.stats
    print("=" * 60)
    print("Dashboard Overview")
    print("=" * 60)
    print(f"   Total Products:  {stats.total_products}")
    print(f"   Categories:      {stats.total_categories}")
    print(f"   Inventory Value: {stats.total_inventory_value:,.2f}")
    print(f"   Total Stock:     {stats.total_stock}")
    print("\nProduct Categories: " + ", ".join(c.name for c in screen.view.categories))
    print("\nProducts Available:")
    _print_table(
        ["ID", "Name", "Category", "Price", "Stock", "Status", "Image"],
        [
            [
                card.product.id,
                card.product.name,
                card.product.category_name,
                f"{card.product.price:,.2f}",
                card.product.stock,
                card.stock_status,
                card.image_uri,
            ]
            for card in screen.view.cards
        ],
    )
    return 0


async def _show_products(client: InventoryClient) -> int:
    screen = client.admin_screen()
    if not await screen.load():
        print(screen.message, file=sys.stderr)
        return 1
    _print_table(
        ["ID", "Product Name", "Category", "Price", "Stock"],
        [[p.id, p.name, p.category_name, f"{p.price:,.2f}", p.stock] for p in screen.rows],
    )
    print(f"\nTotal: {len(screen.rows)} products")
    return 0


async def _show_categories(client: InventoryClient) -> int:
    screen = client.admin_screen()
    if not await screen.load() or not client.categories.loaded:
        print(screen.message or "Failed to load categories", file=sys.stderr)
        return 1
    _print_table(["ID", "Name"], [[c.id, c.name] for c in client.categories.snapshot])
    return 0


async def _show_sellers(client: InventoryClient) -> int:
    screen = client.sellers_screen()
    if not await screen.load():
        print(screen.message, file=sys.stderr)
        return 1
    _print_table(
        ["ID", "Name", "Email", "Phone", "Address", "Status"],
        [[s.id, s.name, s.email, s.phone, s.address, s.status_id] for s in screen.rows],
    )
    return 0


async def _delete_product(client: InventoryClient, product_id: int, assume_yes: bool) -> int:
    screen = client.admin_screen()
    if not await screen.load():
        print(screen.message, file=sys.stderr)
        return 1

    async def confirm(prompt: str) -> bool:
        if assume_yes:
            return True
        answer = await asyncio.to_thread(input, f"{prompt} [y/N] ")
        return answer.strip().lower() in {"y", "yes"}

    if not await screen.confirm_delete(product_id, confirm):
        if screen.message:
            print(screen.message, file=sys.stderr)
            return 1
        print("Cancelled")
        return 0
    print(f"Deleted product {product_id}; {len(screen.rows)} remaining")
    return 0


async def run(args: argparse.Namespace) -> int:
    async with create_client() as client:
        try:
            session = await client.sessions.login(args.username or "", args.password or "")
        except ValidationError as e:
            print(e.message, file=sys.stderr)
            return 2
        if session is None:
            print(client.sessions.message, file=sys.stderr)
            return 1

        if args.command == "login":
            print("Login successful!")
            return 0
        if args.command == "dashboard":
            return await _show_dashboard(client)
        if args.command == "products":
            return await _show_products(client)
        if args.command == "categories":
            return await _show_categories(client)
        if args.command == "sellers":
            return await _show_sellers(client)
        if args.command == "delete-product":
            return await _delete_product(client, args.id, args.yes)
    return 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="inventory-client", description=__doc__)
    parser.add_argument("-u", "--username", help="login name (prompted when omitted)")
    parser.add_argument("-p", "--password", help="password (prompted when omitted)")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("login", help="check credentials against the backend")
    sub.add_parser("dashboard", help="stats, categories and product cards")
    sub.add_parser("products", help="product table")
    sub.add_parser("categories", help="category list")
    sub.add_parser("sellers", help="seller table")
    delete = sub.add_parser("delete-product", help="delete one product after confirmation")
    delete.add_argument("id", type=int)
    delete.add_argument("-y", "--yes", action="store_true", help="skip the confirmation prompt")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # Credentials are read before the event loop starts
    if not args.username:
        args.username = input("Username: ")
    if not args.password:
        args.password = getpass.getpass("Password: ")
    configure_logging(args.log_level or get_settings().log_level)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
