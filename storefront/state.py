"""
Client-side application state: the cart and the colour theme.

State is an immutable ``AppState`` value. Every change goes through
``reduce(state, action)``, which returns a new state; nothing is sent to
the server and nothing survives the process.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class CartItem:
    product_id: str
    title: str
    price: Decimal
    quantity: int = 1
    product_image: Optional[str] = None

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Dict[str, Any], quantity: int = 1) -> "CartItem":
        """Build a cart line from a product as returned by the API"""
        return cls(
            product_id=product["id"],
            title=product["title"],
            price=Decimal(str(product["price"])),
            quantity=quantity,
            product_image=product.get("productImage"),
        )


@dataclass(frozen=True)
class AppState:
    cart: Tuple[CartItem, ...] = ()
    theme: Theme = Theme.LIGHT

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.cart)

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.cart), Decimal("0"))

    def find(self, product_id: str) -> Optional[CartItem]:
        for item in self.cart:
            if item.product_id == product_id:
                return item
        return None


# Actions

@dataclass(frozen=True)
class AddToCart:
    item: CartItem


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class SetTheme:
    theme: Theme


Action = Union[AddToCart, RemoveFromCart, UpdateQuantity, ClearCart, ToggleTheme, SetTheme]


def _add(state: AppState, new_item: CartItem) -> AppState:
    if new_item.quantity <= 0:
        return state
    existing = state.find(new_item.product_id)
    if existing is None:
        return replace(state, cart=state.cart + (new_item,))
    merged = replace(existing, quantity=existing.quantity + new_item.quantity)
    return replace(state, cart=tuple(
        merged if item.product_id == new_item.product_id else item for item in state.cart
    ))


def _remove(state: AppState, product_id: str) -> AppState:
    return replace(state, cart=tuple(item for item in state.cart if item.product_id != product_id))


def _set_quantity(state: AppState, product_id: str, quantity: int) -> AppState:
    if quantity <= 0:
        return _remove(state, product_id)
    return replace(state, cart=tuple(
        replace(item, quantity=quantity) if item.product_id == product_id else item
        for item in state.cart
    ))


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that results from applying ``action`` to ``state``"""
    if isinstance(action, AddToCart):
        return _add(state, action.item)
    if isinstance(action, RemoveFromCart):
        return _remove(state, action.product_id)
    if isinstance(action, UpdateQuantity):
        return _set_quantity(state, action.product_id, action.quantity)
    if isinstance(action, ClearCart):
        return replace(state, cart=())
    if isinstance(action, ToggleTheme):
        return replace(state, theme=Theme.DARK if state.theme is Theme.LIGHT else Theme.LIGHT)
    if isinstance(action, SetTheme):
        return replace(state, theme=Theme(action.theme))
    raise TypeError(f"Unknown action: {action!r}")
