from sqlalchemy import Column, String, Integer
from database.base import Base

class ProductImage(Base):
    __tablename__ = "productos_imagenes"

    id = Column("idImagen", Integer, primary_key=True, autoincrement=True)
    url = Column(String(255), nullable=False)  # not unique
    product_id = Column("productoId", Integer, nullable=False, index=True)

    def __repr__(self):
        return f"<ProductImage(url={self.url}, product_id={self.product_id})>"
