# marketplace/client/state.py
"""
Stan aplikacji klienckiej jako niemutowalne drzewo + czyste przejscia.

Kazda akcja zwraca NOWY ClientState; nic tu nie dotyka sieci ani dysku,
efekty uboczne (fetch, localStorage, otwieranie linku) robi MarketplaceApp.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace, asdict
from decimal import Decimal
from typing import Any, Callable, Dict, Literal, Optional, Tuple

CategoryFilter = Literal["All", "CPM", "Marketplace"]
CATEGORY_FILTERS: Tuple[str, ...] = ("All", "CPM", "Marketplace")


@dataclass(frozen=True)
class SessionUser:
    id: int
    username: str
    role: str  # "user" or "admin"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionUser":
        return cls(id=int(data["id"]), username=data["username"], role=data.get("role", "user"))


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    description: str
    image: str
    category: str  # "CPM" or "Marketplace"
    whatsapp_number: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            price=float(data["price"]),
            description=data.get("description") or "",
            image=data.get("image") or "",
            category=data["category"],
            whatsapp_number=data["whatsapp_number"],
        )


@dataclass(frozen=True)
class CartItem(Product):
    quantity: int = 1

    @classmethod
    def of(cls, product: Product, quantity: int = 1) -> "CartItem":
        return cls(**{**asdict(product), "quantity": quantity})

    @property
    def line_total(self) -> Decimal:
        return Decimal(str(self.price)) * self.quantity


@dataclass(frozen=True)
class ClientState:
    user: Optional[SessionUser] = None
    products: Tuple[Product, ...] = ()
    cart: Tuple[CartItem, ...] = ()
    is_cart_open: bool = False
    is_menu_open: bool = False
    is_login_open: bool = False
    is_register: bool = False
    is_admin_panel_open: bool = False
    active_category: CategoryFilter = "All"
    dark_mode: bool = False


# ---------------------------
# Cart
# ---------------------------


def add_to_cart(state: ClientState, product: Product) -> ClientState:
    """Merge-or-append po id produktu; zawsze otwiera koszyk."""
    if any(item.id == product.id for item in state.cart):
        cart = tuple(
            replace(item, quantity=item.quantity + 1) if item.id == product.id else item
            for item in state.cart
        )
    else:
        cart = state.cart + (CartItem.of(product),)
    return replace(state, cart=cart, is_cart_open=True)


def remove_from_cart(state: ClientState, product_id: int) -> ClientState:
    return replace(state, cart=tuple(item for item in state.cart if item.id != product_id))


def update_quantity(state: ClientState, product_id: int, delta: int) -> ClientState:
    # minimum 1, bez gornego limitu
    cart = tuple(
        replace(item, quantity=max(1, item.quantity + delta)) if item.id == product_id else item
        for item in state.cart
    )
    return replace(state, cart=cart)


def cart_total(state: ClientState) -> Decimal:
    return sum((item.line_total for item in state.cart), Decimal("0.00"))


# ---------------------------
# Catalog
# ---------------------------


def set_products(state: ClientState, products) -> ClientState:
    return replace(state, products=tuple(products))


def set_category(state: ClientState, category: str) -> ClientState:
    if category not in CATEGORY_FILTERS:
        raise ValueError(f"Unknown category filter: {category}")
    return replace(state, active_category=category)


def filtered_products(state: ClientState) -> Tuple[Product, ...]:
    if state.active_category == "All":
        return state.products
    return tuple(p for p in state.products if p.category == state.active_category)


# ---------------------------
# Session & UI
# ---------------------------


def login(state: ClientState, user: SessionUser) -> ClientState:
    return replace(state, user=user, is_login_open=False)


def logout(state: ClientState) -> ClientState:
    return replace(state, user=None, is_admin_panel_open=False)


def toggle_theme(state: ClientState) -> ClientState:
    return replace(state, dark_mode=not state.dark_mode)


def set_theme(state: ClientState, dark_mode: bool) -> ClientState:
    return replace(state, dark_mode=dark_mode)


def toggle_cart(state: ClientState, open: Optional[bool] = None) -> ClientState:
    return replace(state, is_cart_open=not state.is_cart_open if open is None else open)


def toggle_menu(state: ClientState, open: Optional[bool] = None) -> ClientState:
    return replace(state, is_menu_open=not state.is_menu_open if open is None else open)


def open_login(state: ClientState) -> ClientState:
    return replace(state, is_login_open=True)


def close_login(state: ClientState) -> ClientState:
    return replace(state, is_login_open=False)


def toggle_register_mode(state: ClientState) -> ClientState:
    return replace(state, is_register=not state.is_register)


def set_register_mode(state: ClientState, is_register: bool) -> ClientState:
    return replace(state, is_register=is_register)


def toggle_admin_panel(state: ClientState, open: Optional[bool] = None) -> ClientState:
    # panel tylko dla admina
    if state.user is None or not state.user.is_admin:
        return replace(state, is_admin_panel_open=False)
    return replace(
        state, is_admin_panel_open=not state.is_admin_panel_open if open is None else open
    )


# ---------------------------
# Actions
# ---------------------------


@dataclass(frozen=True)
class AddToCart:
    product: Product


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: int


@dataclass(frozen=True)
class UpdateQuantity:
    product_id: int
    delta: int


@dataclass(frozen=True)
class SetProducts:
    products: Tuple[Product, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SetCategory:
    category: str


@dataclass(frozen=True)
class Login:
    user: SessionUser


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class SetTheme:
    dark_mode: bool


@dataclass(frozen=True)
class ToggleCart:
    open: Optional[bool] = None


@dataclass(frozen=True)
class ToggleMenu:
    open: Optional[bool] = None


@dataclass(frozen=True)
class OpenLogin:
    pass


@dataclass(frozen=True)
class CloseLogin:
    pass


@dataclass(frozen=True)
class SetRegisterMode:
    is_register: Optional[bool] = None


@dataclass(frozen=True)
class ToggleAdminPanel:
    open: Optional[bool] = None


def _register_mode(state: ClientState, action: SetRegisterMode) -> ClientState:
    if action.is_register is None:
        return toggle_register_mode(state)
    return set_register_mode(state, action.is_register)


_HANDLERS: Dict[type, Callable[[ClientState, Any], ClientState]] = {
    AddToCart: lambda s, a: add_to_cart(s, a.product),
    RemoveFromCart: lambda s, a: remove_from_cart(s, a.product_id),
    UpdateQuantity: lambda s, a: update_quantity(s, a.product_id, a.delta),
    SetProducts: lambda s, a: set_products(s, a.products),
    SetCategory: lambda s, a: set_category(s, a.category),
    Login: lambda s, a: login(s, a.user),
    Logout: lambda s, a: logout(s),
    ToggleTheme: lambda s, a: toggle_theme(s),
    SetTheme: lambda s, a: set_theme(s, a.dark_mode),
    ToggleCart: lambda s, a: toggle_cart(s, a.open),
    ToggleMenu: lambda s, a: toggle_menu(s, a.open),
    OpenLogin: lambda s, a: open_login(s),
    CloseLogin: lambda s, a: close_login(s),
    SetRegisterMode: _register_mode,
    ToggleAdminPanel: lambda s, a: toggle_admin_panel(s, a.open),
}


def reduce(state: ClientState, action) -> ClientState:
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unsupported action: {type(action).__name__}")
    return handler(state, action)
