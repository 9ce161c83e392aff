from decimal import Decimal
from urllib.parse import parse_qs, unquote, urlparse

from marketplace.client.checkout import (
    build_message,
    chat_link,
    compose_checkout,
    digits_only,
    format_money,
    support_link,
)
from marketplace.client.state import CartItem


def item(pid, name, price, quantity, seller):
    return CartItem(
        id=pid,
        name=name,
        price=price,
        description="",
        image="",
        category="CPM",
        whatsapp_number=seller,
        quantity=quantity,
    )


def test_empty_cart_is_noop():
    assert compose_checkout([]) is None


def test_first_seller_group_wins():
    cart = [
        item(1, "A", 10, 2, "5511999999999"),
        item(2, "B", 5, 1, "5511888888888"),
    ]

    link = compose_checkout(cart)

    assert link.contact == "5511999999999"
    assert link.total == Decimal("20")
    assert "- A (2x) - R$ 20.00" in link.message
    assert link.message.endswith("Total: R$ 20.00")
    assert "B" not in link.message.split("\n", 1)[1]
    assert [i.name for i in link.skipped_items] == ["B"]
    assert link.url.startswith("https://wa.me/5511999999999?text=")
    assert link.new_tab


def test_message_layout():
    message = build_message([item(1, "A", 10, 2, "1"), item(2, "C", 1.5, 3, "1")])
    assert message == (
        "Olá! Gostaria de comprar os seguintes itens:\n\n"
        "- A (2x) - R$ 20.00\n"
        "- C (3x) - R$ 4.50\n\n"
        "Total: R$ 24.50"
    )


def test_items_of_first_seller_grouped_across_cart():
    cart = [
        item(1, "A", 1, 1, "111"),
        item(2, "B", 1, 1, "222"),
        item(3, "C", 1, 1, "111"),
    ]
    link = compose_checkout(cart)
    assert [i.name for i in link.items] == ["A", "C"]
    assert [i.name for i in link.skipped_items] == ["B"]


def test_url_round_trips_message():
    link = compose_checkout([item(1, "Conta & Carro", 10, 1, "+55 (11) 99999-9999")])

    parsed = urlparse(link.url)
    assert parsed.path == "/5511999999999"
    assert parse_qs(parsed.query)["text"] == [link.message]
    assert "%C3%A1" in link.url
    assert " " not in link.url


def test_encoding_matches_uri_component_rules():
    url = chat_link("1", "a b!(x)*'~")
    assert url == "https://wa.me/1?text=a%20b!(x)*'~"
    assert unquote(url.split("text=")[1]) == "a b!(x)*'~"


def test_digits_only():
    assert digits_only("+55 (11) 98888-7777") == "5511988887777"
    assert digits_only("") == ""


def test_money_formatting():
    assert format_money(20) == "R$ 20.00"
    assert format_money(Decimal("0.125")) == "R$ 0.13"
    assert format_money(0.1 * 3) == "R$ 0.30"


def test_support_link():
    assert support_link() == "https://wa.me/5511999999999"
