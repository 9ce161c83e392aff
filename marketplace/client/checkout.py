# marketplace/client/checkout.py
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

from marketplace.client.state import CartItem
from marketplace.utils.settings import CHAT_BASE_URL, SUPPORT_CONTACT

GREETING = "Olá! Gostaria de comprar os seguintes itens:"
CURRENCY = "R$"

# znaki ktorych encodeURIComponent nie koduje
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class CheckoutLink:
    contact: str
    message: str
    url: str
    items: Tuple[CartItem, ...]
    total: Decimal
    skipped_items: Tuple[CartItem, ...] = ()
    new_tab: bool = True


def format_money(amount) -> str:
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY} {value}"


def digits_only(contact: str) -> str:
    return re.sub(r"\D", "", contact or "")


def chat_link(contact: str, message: Optional[str] = None, base_url: str = CHAT_BASE_URL) -> str:
    url = f"{base_url.rstrip('/')}/{digits_only(contact)}"
    if message is not None:
        url += f"?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
    return url


def support_link(base_url: str = CHAT_BASE_URL) -> str:
    return chat_link(SUPPORT_CONTACT, base_url=base_url)


def group_by_seller(cart: Sequence[CartItem]) -> Dict[str, List[CartItem]]:
    # dict zachowuje kolejnosc pierwszego wystapienia
    groups: Dict[str, List[CartItem]] = {}
    for item in cart:
        groups.setdefault(item.whatsapp_number, []).append(item)
    return groups


def build_message(items: Sequence[CartItem]) -> str:
    lines = [
        f"- {i.name} ({i.quantity}x) - {format_money(i.line_total)}" for i in items
    ]
    total = sum((i.line_total for i in items), Decimal("0.00"))
    return f"{GREETING}\n\n" + "\n".join(lines) + f"\n\nTotal: {format_money(total)}"


def compose_checkout(
    cart: Sequence[CartItem], base_url: str = CHAT_BASE_URL
) -> Optional[CheckoutLink]:
    """
    Buduje link do czatu z podsumowaniem zamowienia.

    Uzywana jest tylko PIERWSZA grupa sprzedawcy (kolejnosc dodania do koszyka),
    pozostale pozycje trafiaja do skipped_items. Pusty koszyk -> None.
    """
    if not cart:
        return None

    groups = group_by_seller(cart)
    first_contact = next(iter(groups))
    items = tuple(groups[first_contact])
    skipped = tuple(i for i in cart if i.whatsapp_number != first_contact)

    message = build_message(items)
    return CheckoutLink(
        contact=digits_only(first_contact),
        message=message,
        url=chat_link(first_contact, message, base_url=base_url),
        items=items,
        total=sum((i.line_total for i in items), Decimal("0.00")),
        skipped_items=skipped,
    )
