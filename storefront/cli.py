import argparse
import sys
from typing import List, Optional

from rich.console import Console

from storefront.client import CatalogClient, FetchResult
from storefront.config import client_settings
from storefront.render import (
    render_cart,
    render_categories,
    render_category_products,
    render_error,
    render_products,
)
from storefront.state import AddToCart, AppState, CartItem, SetTheme, Theme, reduce


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description=f"{client_settings.APP_NAME} catalog browser")
    parser.add_argument("--api-url", default=client_settings.API_URL, help="Catalog API base URL")
    parser.add_argument("--theme", choices=[t.value for t in Theme], default=Theme.LIGHT.value)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("categories", help="List categories")

    products = sub.add_parser("products", help="List products")
    products.add_argument("--category", dest="category_id", help="Only products in this category")
    products.add_argument("--featured", action="store_true", help="Only featured products")

    category = sub.add_parser("category", help="Show a category and its products")
    category.add_argument("category_id")

    add = sub.add_parser("add-product", help="Create a product")
    add.add_argument("--title", required=True)
    add.add_argument("--price", required=True, type=float)
    add.add_argument("--category-id", required=True)
    add.add_argument("--description")
    add.add_argument("--stock", type=int)
    add.add_argument("--featured", action="store_true", default=None)

    cart = sub.add_parser("cart", help="Build a cart from product ids (PRODUCT_ID[:QTY])")
    cart.add_argument("items", nargs="+", type=cart_entry)

    return parser


def cart_entry(entry: str):
    """Parse PRODUCT_ID or PRODUCT_ID:QTY"""
    product_id, _, qty = entry.partition(":")
    if not product_id:
        raise argparse.ArgumentTypeError(f"invalid cart entry: {entry!r}")
    try:
        return product_id, int(qty) if qty else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid quantity in {entry!r}")


def run(args: argparse.Namespace, client: CatalogClient, console: Console) -> int:
    state = reduce(AppState(), SetTheme(Theme(args.theme)))

    if args.command == "categories":
        result = client.list_categories()
        render_categories(console, result, state)
    elif args.command == "products":
        featured = True if args.featured else None
        result = client.list_products(category_id=args.category_id, featured=featured)
        render_products(console, result, state)
    elif args.command == "category":
        result = client.products_by_category(args.category_id)
        render_category_products(console, result, state)
    elif args.command == "add-product":
        result = client.create_product(
            title=args.title,
            price=args.price,
            category_id=args.category_id,
            description=args.description,
            stock=args.stock,
            is_featured=args.featured,
        )
        if result.ok:
            render_products(console, FetchResult(data=[result.data]), state, title="Created")
        else:
            render_error(console, result.error, state)
    elif args.command == "cart":
        result = None
        for product_id, quantity in args.items:
            result = client.get_product(product_id)
            if not result.ok:
                render_error(console, f"{product_id}: {result.error}", state)
                continue
            state = reduce(state, AddToCart(CartItem.from_product(result.data, quantity)))
        render_cart(console, state)
        return 0 if state.cart else 1
    else:
        return 2

    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    with CatalogClient(base_url=args.api_url) as client:
        return run(args, client, console)


if __name__ == "__main__":
    sys.exit(main())
