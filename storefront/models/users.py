from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from storefront.db.base import TimestampedModel


class User(TimestampedModel):
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True)

    cart = relationship("Cart", back_populates="user", uselist=False)
    orders = relationship("Order", back_populates="user")
