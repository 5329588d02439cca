from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from storefront.db.base import TimestampedModel


class Category(TimestampedModel):
    __tablename__ = "categories"

    name = Column(String(255), nullable=False)
    description = Column(String(512), nullable=False)

    products = relationship("Product", back_populates="category")
