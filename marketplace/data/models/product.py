# marketplace/data/models/product.py
from sqlalchemy import Column, Integer, String, Float, Text

from marketplace.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False, default="")
    image = Column(String, nullable=False, default="")
    category = Column(String, nullable=False)  # CPM, Marketplace
    whatsapp_number = Column(String, nullable=False)
