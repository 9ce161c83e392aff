# marketplace/services/catalog_service.py
import hmac

from sqlalchemy.orm import Session

from marketplace.data.models.product import ProductModel
from marketplace.domain.errors import Unauthorized
from marketplace.domain.schemas import ProductFields
from marketplace.repos.product_repo import ProductRepo
from marketplace.services.image_resolver import ImageResolver
from marketplace.utils.settings import ADMIN_PASSWORD
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    list - odczyt bez filtrow i paginacji
    create/delete - tylko z poprawnym sekretem admina
    """

    def __init__(
        self,
        db: Session,
        image_resolver: ImageResolver,
        admin_password: str = ADMIN_PASSWORD,
    ):
        self.repo = ProductRepo(db)
        self.image_resolver = image_resolver
        self.admin_password = admin_password

    def _check_admin(self, admin_password: str | None) -> None:
        # porownanie tylko po stronie serwera, stalo-czasowe
        supplied = (admin_password or "").encode()
        if not hmac.compare_digest(supplied, self.admin_password.encode()):
            logger.warning("Rejected catalog mutation: bad admin secret")
            raise Unauthorized()

    #query
    def list_products(self) -> list[ProductModel]:
        return self.repo.list_products()

    #commands
    def create_product(self, fields: ProductFields, admin_password: str | None) -> int:
        self._check_admin(admin_password)

        resolution = self.image_resolver.resolve(fields.image)

        created = self.repo.create_product(
            ProductModel(
                name=fields.name,
                price=fields.price,
                description=fields.description,
                image=resolution.url,
                category=fields.category,
                whatsapp_number=fields.whatsapp_number,
            )
        )

        logger.info(
            f"Created product {created.id} '{created.name}' "
            f"(image {resolution.outcome.value})"
        )
        return created.id

    def delete_product(self, product_id: int, admin_password: str | None) -> None:
        self._check_admin(admin_password)

        #brak produktu to no-op
        rowcount = self.repo.delete_product(product_id)
        logger.info(f"Delete product {product_id}: {rowcount} row(s) removed")
