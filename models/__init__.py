from models.product import Product
from models.product_image import ProductImage

__all__ = ["Product", "ProductImage"]
