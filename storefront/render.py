from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from storefront.client import FetchResult
from storefront.state import AppState, Theme

STYLES = {
    Theme.LIGHT: {
        "header": "bold blue",
        "title": "bold magenta",
        "price": "green",
        "muted": "dim",
        "error": "bold red",
        "featured": "yellow",
    },
    Theme.DARK: {
        "header": "bold cyan",
        "title": "bold bright_white",
        "price": "bright_green",
        "muted": "grey62",
        "error": "bold bright_red",
        "featured": "bright_yellow",
    },
}


def _styles(state: Optional[AppState]) -> Dict[str, str]:
    return STYLES[state.theme if state else Theme.LIGHT]


def render_error(console: Console, message: str, state: Optional[AppState] = None):
    console.print(f"[{_styles(state)['error']}]Error:[/] {escape(message)}")


def render_categories(console: Console, result: FetchResult, state: Optional[AppState] = None):
    if not result.ok:
        render_error(console, result.error, state)
        return

    styles = _styles(state)
    categories: List[Dict[str, Any]] = result.data or []
    if not categories:
        console.print(f"[{styles['muted']}]No categories found[/]")
        return

    table = Table(title="Categories", box=box.ROUNDED, header_style=styles["header"], title_style=styles["title"])
    table.add_column("ID", style=styles["muted"], overflow="fold")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    for category in categories:
        table.add_row(category["id"], escape(category["name"]), escape(category.get("description") or ""))
    console.print(table)


def render_products(
    console: Console,
    result: FetchResult,
    state: Optional[AppState] = None,
    title: str = "Products"
):
    if not result.ok:
        render_error(console, result.error, state)
        return

    styles = _styles(state)
    products: List[Dict[str, Any]] = result.data or []
    if not products:
        console.print(f"[{styles['muted']}]No products found[/]")
        return

    table = Table(title=title, box=box.ROUNDED, header_style=styles["header"], title_style=styles["title"])
    table.add_column("ID", style=styles["muted"], overflow="fold")
    table.add_column("Title", style="bold")
    table.add_column("Price", justify="right", style=styles["price"])
    table.add_column("Stock", justify="right")
    table.add_column("Featured", justify="center", style=styles["featured"])
    for product in products:
        table.add_row(
            product["id"],
            escape(product["title"]),
            f"${product['price']:.2f}",
            str(product.get("stock", 0)),
            "*" if product.get("isFeatured") else "",
        )
    console.print(table)


def render_category_products(console: Console, result: FetchResult, state: Optional[AppState] = None):
    if not result.ok:
        render_error(console, result.error, state)
        return

    payload = result.data or {}
    render_products(
        console,
        FetchResult(data=payload.get("products", [])),
        state,
        title=payload.get("categoryName", "Products"),
    )


def render_cart(console: Console, state: AppState):
    styles = _styles(state)
    if not state.cart:
        console.print(Panel(f"[{styles['muted']}]Your cart is empty[/]", title="Cart"))
        return

    table = Table(box=box.SIMPLE, header_style=styles["header"])
    table.add_column("Item", style="bold")
    table.add_column("Qty", justify="right")
    table.add_column("Subtotal", justify="right", style=styles["price"])
    for item in state.cart:
        table.add_row(escape(item.title), str(item.quantity), f"${item.subtotal:.2f}")
    table.add_row("[bold]Total[/]", str(state.item_count), f"[bold]${state.total:.2f}[/]")
    console.print(Panel(table, title=f"Cart ({state.item_count})"))
