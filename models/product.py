from sqlalchemy import Column, String, Integer, Text, Numeric
from database.base import Base

class Product(Base):
    __tablename__ = "productos"

    id = Column("idProducto", Integer, primary_key=True, autoincrement=True, index=True)
    name = Column("nombre", String(255), nullable=False)
    description = Column("descripcion", Text, nullable=True)
    category = Column("categoria", String(100), nullable=True)
    available_quantity = Column("cantidadDisponible", Integer, nullable=False, default=0)
    price = Column("precio", Numeric(10, 2, asdecimal=False), nullable=False)
    amazon_price = Column("precioAmazon", Numeric(10, 2, asdecimal=False), nullable=True)

    # Image rows reference idProducto without a database-level foreign key,
    # so deleting a product leaves its images in place.

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name})>"
