# marketplace/client/app.py
import json
import webbrowser
from typing import Callable, Optional

from marketplace.client import state as st
from marketplace.client.api_client import ApiError, MarketplaceClient
from marketplace.client.checkout import CheckoutLink, compose_checkout
from marketplace.client.storage import LocalStorage
from marketplace.utils.settings import ADMIN_PASSWORD
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

USER_KEY = "user"
DARK_MODE_KEY = "darkMode"


def _default_alert(message: str) -> None:
    logger.info(f"[ALERT] {message}")
    print(message)


class MarketplaceApp:
    """
    Kontroler klienta: trzyma aktualny ClientState, przepuszcza akcje przez
    reducer i wykonuje efekty uboczne (API, LocalStorage, otwieranie linku).
    """

    def __init__(
        self,
        client: MarketplaceClient,
        storage: LocalStorage,
        alert: Callable[[str], None] = _default_alert,
        confirm: Callable[[str], bool] = lambda _msg: True,
        admin_password: str = ADMIN_PASSWORD,
    ):
        self.client = client
        self.storage = storage
        self.alert = alert
        self.confirm = confirm
        self.admin_password = admin_password
        self.state = st.ClientState()

    def dispatch(self, action) -> st.ClientState:
        self.state = st.reduce(self.state, action)
        return self.state

    # ---------- startup ----------

    def load(self) -> st.ClientState:
        self.refresh_products()

        saved_user = self.storage.get(USER_KEY)
        if saved_user:
            try:
                self.dispatch(st.Login(st.SessionUser.from_dict(json.loads(saved_user))))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(f"Dropping corrupt saved session: {e}")
                self.storage.remove(USER_KEY)

        self.dispatch(st.SetTheme(self.storage.get(DARK_MODE_KEY) == "true"))
        return self.state

    def refresh_products(self) -> st.ClientState:
        return self.dispatch(st.SetProducts(tuple(self.client.fetch_products())))

    # ---------- session ----------

    def handle_login(self, username: str, password: str) -> Optional[st.SessionUser]:
        try:
            user = self.client.login(username, password)
        except ApiError as e:
            self.alert(e.message)
            return None

        self.dispatch(st.Login(user))
        self.storage.set(USER_KEY, json.dumps(user.to_dict()))
        return user

    def handle_register(self, username: str, password: str) -> bool:
        try:
            self.client.register(username, password)
        except ApiError as e:
            self.alert(e.message)
            return False

        self.dispatch(st.SetRegisterMode(False))
        self.alert("Registration successful! Please login.")
        return True

    def logout(self) -> st.ClientState:
        self.storage.remove(USER_KEY)
        return self.dispatch(st.Logout())

    def toggle_theme(self) -> st.ClientState:
        self.dispatch(st.ToggleTheme())
        self.storage.set(DARK_MODE_KEY, "true" if self.state.dark_mode else "false")
        return self.state

    # ---------- catalog & cart ----------

    def set_category(self, category: str) -> st.ClientState:
        return self.dispatch(st.SetCategory(category))

    @property
    def visible_products(self):
        return st.filtered_products(self.state)

    def add_to_cart(self, product: st.Product) -> st.ClientState:
        return self.dispatch(st.AddToCart(product))

    def update_quantity(self, product_id: int, delta: int) -> st.ClientState:
        return self.dispatch(st.UpdateQuantity(product_id, delta))

    def remove_from_cart(self, product_id: int) -> st.ClientState:
        return self.dispatch(st.RemoveFromCart(product_id))

    def checkout(
        self, opener: Callable[[str], object] = webbrowser.open_new_tab
    ) -> Optional[CheckoutLink]:
        link = compose_checkout(self.state.cart)
        if link is None:
            return None

        if link.skipped_items:
            logger.warning(
                f"Checkout covers seller {link.contact} only, "
                f"{len(link.skipped_items)} item(s) from other sellers left out"
            )
        # koszyk nie jest czyszczony po checkout
        opener(link.url)
        return link

    # ---------- admin ----------

    def add_product(self, fields: dict) -> Optional[int]:
        try:
            product_id = self.client.add_product(fields, self.admin_password)
        except ApiError as e:
            self.alert(e.message)
            return None

        self.refresh_products()
        self.alert("Product added!")
        return product_id

    def delete_product(self, product_id: int) -> bool:
        if not self.confirm("Are you sure?"):
            return False
        try:
            self.client.delete_product(product_id, self.admin_password)
        except ApiError as e:
            self.alert(e.message)
            return False

        self.refresh_products()
        return True
