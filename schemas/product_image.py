from pydantic import BaseModel, Field

class ProductImageResponse(BaseModel):
    url: str
    product_id: int = Field(..., alias="productId")

    class Config:
        from_attributes = True
        populate_by_name = True
