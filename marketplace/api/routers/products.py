# marketplace/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from marketplace.data.database import get_db
from marketplace.domain.schemas import (
    AdminAuthIn,
    ErrorOut,
    ProductCreate,
    ProductCreated,
    ProductOut,
    SuccessOut,
)
from marketplace.services.catalog_service import CatalogService
from marketplace.services.image_resolver import ImageResolver

router = APIRouter(prefix="/api/products", tags=["products"])


def get_image_resolver() -> ImageResolver:
    return ImageResolver()


def get_service(
    db: Session = Depends(get_db),
    image_resolver: ImageResolver = Depends(get_image_resolver),
) -> CatalogService:
    return CatalogService(db=db, image_resolver=image_resolver)


@router.get("", response_model=List[ProductOut])
def list_products(svc: CatalogService = Depends(get_service)):
    return svc.list_products()


@router.post("", response_model=ProductCreated, responses={403: {"model": ErrorOut}})
def create_product(payload: ProductCreate, svc: CatalogService = Depends(get_service)):
    """
    Dodaje produkt (tylko admin). Link do obrazka jest rozwiazywany
    przed zapisem, bledy rozwiazywania nie blokuja zapisu.
    """
    product_id = svc.create_product(payload, payload.admin_password)
    return ProductCreated(id=product_id)


@router.delete("/{product_id}", response_model=SuccessOut, responses={403: {"model": ErrorOut}})
def delete_product(
    product_id: int,
    payload: AdminAuthIn | None = None,
    svc: CatalogService = Depends(get_service),
):
    svc.delete_product(product_id, payload.admin_password if payload else None)
    return SuccessOut()
