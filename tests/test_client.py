import httpx
import pytest
from rich.console import Console

from storefront.cli import build_parser, run
from storefront.client import CatalogClient, FetchResult
from storefront.render import render_cart, render_categories, render_products
from storefront.state import AddToCart, AppState, CartItem, reduce


@pytest.fixture
def catalog(client):
    return CatalogClient(base_url="http://testserver/api", http=client)


@pytest.fixture
def seeded(catalog):
    kitchen = catalog.create_category("Kitchen").data
    mug = catalog.create_product(title="Mug", price=9.99, category_id=kitchen["id"], is_featured=True).data
    pan = catalog.create_product(title="Pan", price=25, category_id=kitchen["id"], stock=3).data
    return kitchen, mug, pan


def test_list_categories(catalog, seeded):
    kitchen, _, _ = seeded

    result = catalog.list_categories()

    assert result.ok
    assert [c["id"] for c in result.data] == [kitchen["id"]]


def test_create_product(catalog, seeded):
    kitchen, mug, pan = seeded

    assert mug["price"] == 9.99
    assert mug["isFeatured"] is True
    assert pan["stock"] == 3
    assert pan["categoryId"] == kitchen["id"]


def test_create_product_error_becomes_message(catalog):
    result = catalog.create_product(title="Mug", price=9.99, category_id="missing")

    assert not result.ok
    assert result.data is None
    assert result.error == "Category not found"
    assert result.status_code == 404


def test_filters(catalog, seeded):
    kitchen, mug, pan = seeded

    assert [p["id"] for p in catalog.featured_products().data] == [mug["id"]]
    assert [p["id"] for p in catalog.list_products(featured=True).data] == [mug["id"]]
    assert {p["id"] for p in catalog.list_products(category_id=kitchen["id"]).data} == {mug["id"], pan["id"]}


def test_products_by_category(catalog, seeded):
    kitchen, _, _ = seeded

    result = catalog.products_by_category(kitchen["id"])
    assert result.data["categoryName"] == "Kitchen"

    missing = catalog.products_by_category("does-not-exist")
    assert missing.error == "Category not found"


def test_network_failure_becomes_message():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(transport=httpx.MockTransport(refuse))
    catalog = CatalogClient(base_url="http://catalog.invalid/api", http=http)

    result = catalog.list_categories()

    assert not result.ok
    assert "connection refused" in result.error


def test_non_json_response_becomes_message():
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(502, text="Bad gateway")))
    catalog = CatalogClient(base_url="http://catalog.invalid/api", http=http)

    result = catalog.list_products()

    assert result.error == "Unexpected response from server (HTTP 502)"
    assert result.status_code == 502


def _recording_console():
    return Console(record=True, width=120, color_system=None)


def test_render_products_and_error():
    console = _recording_console()

    render_products(console, FetchResult(data=[
        {"id": "p1", "title": "Mug", "price": 9.99, "stock": 4, "isFeatured": True},
    ]))
    render_categories(console, FetchResult(error="Network error: boom"))

    output = console.export_text()
    assert "Mug" in output
    assert "$9.99" in output
    assert "Error: Network error: boom" in output


def test_render_cart_totals():
    console = _recording_console()
    state = reduce(AppState(), AddToCart(CartItem.from_product({"id": "p1", "title": "Mug", "price": 9.99}, 2)))

    render_cart(console, state)

    output = console.export_text()
    assert "Cart (2)" in output
    assert "$19.98" in output


def test_cli_category_command(catalog, seeded):
    kitchen, _, _ = seeded
    console = _recording_console()
    args = build_parser().parse_args(["--theme", "dark", "category", kitchen["id"]])

    assert run(args, catalog, console) == 0
    output = console.export_text()
    assert "Kitchen" in output
    assert "Pan" in output


def test_cli_cart_command(catalog, seeded):
    _, mug, pan = seeded
    console = _recording_console()
    args = build_parser().parse_args(["cart", f"{mug['id']}:2", pan["id"], "ghost"])

    assert run(args, catalog, console) == 0
    output = console.export_text()
    assert "Cart (3)" in output
    assert "$44.98" in output
    assert "ghost: Product not found" in output


def test_cli_reports_failures(catalog):
    console = _recording_console()
    args = build_parser().parse_args(["category", "does-not-exist"])

    assert run(args, catalog, console) == 1
    assert "Category not found" in console.export_text()


def test_ids_are_escaped_in_paths():
    seen = []

    def record(request):
        seen.append(request.url)
        return httpx.Response(404, json={"success": False, "error": {"message": "Category not found"}})

    http = httpx.Client(transport=httpx.MockTransport(record))
    catalog = CatalogClient(base_url="http://catalog.invalid/api", http=http)

    catalog.products_by_category("x?y=1")
    catalog.get_product("a/b")

    assert seen[0].path == "/api/products/category/x?y=1"
    assert seen[0].query == b""
    assert seen[1].path == "/api/products/a/b"
    assert seen[1].raw_path == b"/api/products/a%2Fb"


def test_ids_with_reserved_characters_reach_the_api(catalog):
    result = catalog.products_by_category("x?y=1")
    assert result.status_code == 404
    assert result.error == "Category not found"


def test_cli_categories_command(catalog, seeded):
    kitchen, _, _ = seeded
    console = _recording_console()
    args = build_parser().parse_args(["categories"])

    assert run(args, catalog, console) == 0
    output = console.export_text()
    assert "Categories" in output
    assert "Kitchen" in output


def test_cli_products_command_filters(catalog, seeded):
    kitchen, _, _ = seeded
    console = _recording_console()
    args = build_parser().parse_args(["products", "--category", kitchen["id"], "--featured"])

    assert run(args, catalog, console) == 0
    output = console.export_text()
    assert "Mug" in output
    assert "Pan" not in output


def test_cli_add_product_command(catalog, seeded):
    kitchen, _, _ = seeded
    console = _recording_console()
    args = build_parser().parse_args([
        "add-product", "--title", "Kettle", "--price", "35.5",
        "--category-id", kitchen["id"], "--stock", "7", "--featured",
    ])

    assert run(args, catalog, console) == 0
    output = console.export_text()
    assert "Created" in output
    assert "Kettle" in output
    assert "$35.50" in output

    titles = {p["title"] for p in catalog.list_products(featured=True).data}
    assert titles == {"Mug", "Kettle"}


def test_cli_add_product_reports_unknown_category(catalog):
    console = _recording_console()
    args = build_parser().parse_args([
        "add-product", "--title", "Kettle", "--price", "35.5", "--category-id", "ghost",
    ])

    assert run(args, catalog, console) == 1
    assert "Error: Category not found" in console.export_text()
