# marketplace/domain/schemas.py
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict

Role = Literal["user", "admin"]
Category = Literal["CPM", "Marketplace"]


class Credentials(BaseModel):
    """Schema dla rejestracji i logowania."""

    username: str = Field(..., min_length=1, description="Nazwa uzytkownika")
    password: str = Field(..., min_length=1, description="Haslo (plaintext)")


class UserRead(BaseModel):
    """Schema dla uzytkownika (response). Bez hasla."""

    id: int
    username: str
    role: Role

    model_config = ConfigDict(from_attributes=True)


class SuccessOut(BaseModel):
    success: bool = True


class LoginOut(SuccessOut):
    user: UserRead


class AdminAuthIn(BaseModel):
    admin_password: str = ""


class ProductFields(BaseModel):
    """Pola produktu podawane przez admina."""

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, description="Cena (nieujemna)")
    description: str = ""
    image: str = ""
    category: Category
    whatsapp_number: str = Field(..., min_length=1, description="Kontakt sprzedawcy")


class ProductCreate(ProductFields, AdminAuthIn):
    """Schema dla tworzenia produktu (z sekretem admina)."""


class ProductOut(ProductFields):
    """Schema dla produktu (response)."""

    id: int

    model_config = ConfigDict(from_attributes=True)


class ProductCreated(SuccessOut):
    id: int


class ErrorOut(BaseModel):
    error: str
