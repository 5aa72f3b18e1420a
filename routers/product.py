from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from database.connection import get_db
from core.response import success_response, ERROR_RESPONSES
from core.exceptions import ResourceNotFoundError
from services.product import (
    create_product,
    get_product_by_id,
    get_all_products,
    delete_product
)
from schemas.product import ProductCreate, ProductResponse, ProductCreated


router = APIRouter()

@router.get("/productos", response_model=List[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    """List every product"""
    return get_all_products(db)

@router.get("/productos/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
def read_product(product_id: str, db: Session = Depends(get_db)):
    """Get one product; an unknown id yields an empty 200 response"""
    product = get_product_by_id(db, product_id)
    if product is None:
        return Response(status_code=status.HTTP_200_OK)
    return product

@router.post(
    "/productos",
    response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES
)
def create_catalog_product(product_data: ProductCreate, db: Session = Depends(get_db)):
    """Create a product"""
    product = create_product(db, product_data)
    return ProductCreated(id=product.id, name=product.name, description=product.description)

@router.delete("/productos/{product_id}", responses=ERROR_RESPONSES)
def delete_catalog_product(product_id: str, db: Session = Depends(get_db)):
    """Delete a product. Its image rows are kept."""
    if not delete_product(db, product_id):
        raise ResourceNotFoundError("Product", product_id)

    return success_response(
        data={"id": int(product_id)},
        message="Product deleted successfully"
    )
