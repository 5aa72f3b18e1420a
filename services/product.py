from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from models.product import Product
from schemas.product import ProductCreate
from core.exceptions import PersistenceError, ResourceNotFoundError
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

# Signed 64-bit range accepted by the database drivers
MIN_IDENTIFIER = -2**63
MAX_IDENTIFIER = 2**63 - 1

def parse_identifier(value, resource: str = "Product") -> int:
    """Turn a path identifier into an integer id; malformed or out-of-range ids count as not found"""
    try:
        identifier = int(value)
    except (TypeError, ValueError):
        raise ResourceNotFoundError(resource, str(value))
    if not MIN_IDENTIFIER <= identifier <= MAX_IDENTIFIER:
        raise ResourceNotFoundError(resource, str(value))
    return identifier

def get_all_products(db: Session) -> List[Product]:
    """Get every product, in whatever order the database returns them"""
    try:
        return db.query(Product).all()
    except SQLAlchemyError as e:
        logger.error(f"Error listing products: {str(e)}")
        raise PersistenceError()

def get_product_by_id(db: Session, product_id) -> Optional[Product]:
    """Get a product by ID"""
    product_id = parse_identifier(product_id)
    try:
        return db.query(Product).filter(Product.id == product_id).first()
    except SQLAlchemyError as e:
        logger.error(f"Error getting product {product_id}: {str(e)}")
        raise PersistenceError()

def create_product(db: Session, product_data: ProductCreate) -> Product:
    """Insert a product; the id is assigned by the database"""
    try:
        product = Product(
            name=product_data.name,
            description=product_data.description,
            category=product_data.category,
            price=product_data.price,
            amazon_price=product_data.amazon_price,
            available_quantity=product_data.available_quantity
        )

        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info(f"Product created: {product.id} ({product.name})")
        return product

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating product: {str(e)}")
        raise PersistenceError()

def delete_product(db: Session, product_id) -> bool:
    """Delete a product row. Returns False when no row was affected.

    Image rows for the product are left untouched; use
    ``services.product_image.delete_images`` to remove them.
    """
    try:
        product_id = parse_identifier(product_id)
    except ResourceNotFoundError:
        return False

    try:
        deleted = db.query(Product).filter(Product.id == product_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting product {product_id}: {str(e)}")
        raise PersistenceError()

    if deleted:
        logger.info(f"Product deleted: {product_id}")
    return deleted > 0
