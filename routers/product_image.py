from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db
from core.response import ERROR_RESPONSES
from core.exceptions import ResourceNotFoundError
from services.product_image import (
    get_first_image,
    get_image_urls,
    add_image,
    delete_images
)
from schemas.product_image import ProductImageResponse

router = APIRouter()

@router.get("/producto-images/{product_id}", response_model=List[str])
def list_product_images(product_id: str, db: Session = Depends(get_db)):
    """URLs of every image of a product"""
    return get_image_urls(db, product_id)

@router.get("/producto-firstImage/{product_id}", response_model=ProductImageResponse)
def read_first_image(product_id: str, db: Session = Depends(get_db)):
    image = get_first_image(db, product_id)
    if image is None:
        return Response(status_code=status.HTTP_200_OK)
    return image

@router.post("/images/{url}/{producto_id}", response_model=ProductImageResponse, responses=ERROR_RESPONSES)
def add_product_image(url: str, producto_id: str, db: Session = Depends(get_db)):
    """Associate an image URL with a product"""
    return add_image(db, url, producto_id)

@router.delete("/productos-images/{producto_id}", response_model=List[str], responses=ERROR_RESPONSES)
def delete_product_images(producto_id: str, db: Session = Depends(get_db)):
    """Delete every image row of a product and return the removed URLs"""
    urls = delete_images(db, producto_id)
    if urls is None:
        raise ResourceNotFoundError("Images of product", producto_id)
    return urls
