#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from marketplace.data.models.user import UserModel
from marketplace.data.models.product import ProductModel

__all__ = ["UserModel", "ProductModel"]
