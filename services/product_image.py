from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from models.product_image import ProductImage
from services.product import parse_identifier
from core.exceptions import PersistenceError, ValidationError
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

MAX_URL_LENGTH = 255

def get_first_image(db: Session, product_id) -> Optional[ProductImage]:
    """Get one image row for a product.

    Rows are ordered by product id only, so among the rows of a single
    product any one of them may come back.
    """
    product_id = parse_identifier(product_id)
    try:
        return (
            db.query(ProductImage)
            .filter(ProductImage.product_id == product_id)
            .order_by(ProductImage.product_id.asc())
            .limit(1)
            .first()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error getting first image of product {product_id}: {str(e)}")
        raise PersistenceError()

def get_image_urls(db: Session, product_id) -> List[str]:
    """Get the URLs of every image of a product"""
    product_id = parse_identifier(product_id)
    try:
        rows = db.query(ProductImage.url).filter(ProductImage.product_id == product_id).all()
    except SQLAlchemyError as e:
        logger.error(f"Error listing images of product {product_id}: {str(e)}")
        raise PersistenceError()
    return [row.url for row in rows]

def add_image(db: Session, url: str, product_id) -> ProductImage:
    """Associate a URL with a product"""
    product_id = parse_identifier(product_id)
    if not url or not url.strip():
        raise ValidationError("Image URL cannot be empty", field="url")
    if len(url) > MAX_URL_LENGTH:
        raise ValidationError(f"Image URL longer than {MAX_URL_LENGTH} characters", field="url")

    try:
        image = ProductImage(url=url, product_id=product_id)
        db.add(image)
        db.commit()
        db.refresh(image)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error adding image {url} to product {product_id}: {str(e)}")
        raise PersistenceError()

    logger.info(f"Image {url} added to product {product_id}")
    return image

def delete_images(db: Session, product_id) -> Optional[List[str]]:
    """Delete every image row of a product.

    Returns the removed URLs, or None when the product had no images.
    """
    product_id = parse_identifier(product_id)
    try:
        images = db.query(ProductImage).filter(ProductImage.product_id == product_id).all()
        if not images:
            return None

        # Delete exactly the rows that were read
        urls = [image.url for image in images]
        db.query(ProductImage).filter(
            ProductImage.id.in_([image.id for image in images])
        ).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting images of product {product_id}: {str(e)}")
        raise PersistenceError()

    logger.info(f"Deleted {len(urls)} images of product {product_id}")
    return urls
