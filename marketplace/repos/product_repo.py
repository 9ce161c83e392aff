# marketplace/repos/product_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from marketplace.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[ProductModel]:
        return list(self.db.execute(select(ProductModel)).scalars().all())

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> int:
        result = self.db.execute(delete(ProductModel).where(ProductModel.id == product_id))
        self.db.commit()
        return result.rowcount
