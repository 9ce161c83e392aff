from decimal import Decimal

import pytest

from marketplace.client import state as st


def product(pid, category="CPM", price=10.0, seller="5511999999999"):
    return st.Product(
        id=pid,
        name=f"P{pid}",
        price=price,
        description="",
        image="",
        category=category,
        whatsapp_number=seller,
    )


def test_add_same_product_twice_merges():
    s = st.ClientState()
    s = st.add_to_cart(s, product(1))
    s = st.add_to_cart(s, product(1))

    assert len(s.cart) == 1
    assert s.cart[0].quantity == 2


def test_add_opens_cart():
    s = st.add_to_cart(st.ClientState(), product(1))
    assert s.is_cart_open


def test_add_keeps_insertion_order():
    s = st.ClientState()
    for pid in (3, 1, 2, 1):
        s = st.add_to_cart(s, product(pid))
    assert [i.id for i in s.cart] == [3, 1, 2]
    assert [i.quantity for i in s.cart] == [1, 2, 1]


def test_transitions_do_not_mutate_input():
    before = st.add_to_cart(st.ClientState(), product(1))
    after = st.update_quantity(before, 1, 5)
    assert before.cart[0].quantity == 1
    assert after.cart[0].quantity == 6


@pytest.mark.parametrize("delta", [-1, -5, -100])
def test_quantity_clamped_to_one(delta):
    s = st.add_to_cart(st.ClientState(), product(1))
    s = st.update_quantity(s, 1, delta)
    assert s.cart[0].quantity == 1


def test_quantity_has_no_upper_bound():
    s = st.add_to_cart(st.ClientState(), product(1))
    s = st.update_quantity(s, 1, 999)
    assert s.cart[0].quantity == 1000


def test_update_quantity_only_touches_target():
    s = st.ClientState()
    s = st.add_to_cart(s, product(1))
    s = st.add_to_cart(s, product(2))
    s = st.update_quantity(s, 2, 3)
    assert [i.quantity for i in s.cart] == [1, 4]


def test_remove_from_cart():
    s = st.ClientState()
    s = st.add_to_cart(s, product(1))
    s = st.add_to_cart(s, product(2))
    s = st.remove_from_cart(s, 1)
    assert [i.id for i in s.cart] == [2]
    assert st.remove_from_cart(s, 42).cart == s.cart


def test_cart_total():
    s = st.ClientState()
    s = st.add_to_cart(s, product(1, price=10.0))
    s = st.add_to_cart(s, product(1, price=10.0))
    s = st.add_to_cart(s, product(2, price=0.1))
    assert st.cart_total(s) == Decimal("20.1")


def test_category_filter_preserves_order():
    products = [
        product(1, "CPM"),
        product(2, "Marketplace"),
        product(3, "CPM"),
        product(4, "Marketplace"),
    ]
    s = st.set_products(st.ClientState(), products)

    assert [p.id for p in st.filtered_products(st.set_category(s, "CPM"))] == [1, 3]
    assert [p.id for p in st.filtered_products(st.set_category(s, "Marketplace"))] == [2, 4]
    assert [p.id for p in st.filtered_products(st.set_category(s, "All"))] == [1, 2, 3, 4]


def test_unknown_category_rejected():
    with pytest.raises(ValueError):
        st.set_category(st.ClientState(), "Cars")


def test_login_logout():
    admin = st.SessionUser(id=1, username="admin", role="admin")
    s = st.open_login(st.ClientState())
    s = st.login(s, admin)
    assert s.user == admin
    assert not s.is_login_open

    s = st.toggle_admin_panel(s)
    assert s.is_admin_panel_open

    s = st.logout(s)
    assert s.user is None
    assert not s.is_admin_panel_open


def test_admin_panel_needs_admin():
    s = st.login(st.ClientState(), st.SessionUser(id=2, username="bob", role="user"))
    assert not st.toggle_admin_panel(s).is_admin_panel_open


def test_toggle_theme():
    s = st.toggle_theme(st.ClientState())
    assert s.dark_mode
    assert not st.toggle_theme(s).dark_mode


def test_reduce_dispatches_actions():
    s = st.ClientState()
    s = st.reduce(s, st.SetProducts((product(1), product(2, "Marketplace"))))
    s = st.reduce(s, st.AddToCart(product(1)))
    s = st.reduce(s, st.UpdateQuantity(1, -3))
    s = st.reduce(s, st.SetCategory("Marketplace"))
    s = st.reduce(s, st.ToggleCart(open=False))
    s = st.reduce(s, st.SetRegisterMode())

    assert s.cart[0].quantity == 1
    assert [p.id for p in st.filtered_products(s)] == [2]
    assert not s.is_cart_open
    assert s.is_register


def test_reduce_rejects_unknown_action():
    with pytest.raises(TypeError):
        st.reduce(st.ClientState(), object())
