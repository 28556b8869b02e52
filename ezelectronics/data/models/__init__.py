#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from ezelectronics.data.models.user import UserModel
from ezelectronics.data.models.product import ProductModel
from ezelectronics.data.models.cart import CartModel
from ezelectronics.data.models.cart_line import CartLineModel
from ezelectronics.data.models.review import ReviewModel

__all__ = ["UserModel", "ProductModel", "CartModel", "CartLineModel", "ReviewModel"]
