from pydantic import AliasChoices, BaseModel, Field, validator
from typing import Optional

# Limits of the NUMERIC(10,2) and INT columns
MAX_PRICE = 99999999.99
MAX_QUANTITY = 2147483647

class ProductCreate(BaseModel):
    """Body of POST /productos; the Spanish column names are accepted as aliases"""
    name: str = Field(
        ..., min_length=1, max_length=255,
        validation_alias=AliasChoices("name", "nombre"),
        description="Product name"
    )
    description: Optional[str] = Field(
        None, max_length=2000,
        validation_alias=AliasChoices("description", "descripcion")
    )
    category: Optional[str] = Field(
        None, max_length=100,
        validation_alias=AliasChoices("category", "categoria")
    )
    price: float = Field(
        ..., ge=0, le=MAX_PRICE,
        validation_alias=AliasChoices("price", "precio"),
        description="Price must be non-negative"
    )
    amazon_price: Optional[float] = Field(
        None, ge=0, le=MAX_PRICE,
        validation_alias=AliasChoices("amazonPrice", "precioAmazon", "amazon_price")
    )
    available_quantity: int = Field(
        default=0, ge=0, le=MAX_QUANTITY,
        validation_alias=AliasChoices("availableQuantity", "cantidadDisponible", "available_quantity"),
        description="Available quantity must be non-negative"
    )

    @validator('name')
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('Product name cannot be empty')
        return v.strip()

    @validator('description', 'category')
    def strip_text(cls, v):
        if v is not None:
            return v.strip()
        return v

class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    amazon_price: Optional[float] = Field(None, alias="amazonPrice")
    available_quantity: int = Field(0, alias="availableQuantity")

    class Config:
        from_attributes = True
        populate_by_name = True

class ProductCreated(BaseModel):
    """Identity echoed back after an insert"""
    id: int
    name: str
    description: Optional[str] = None
