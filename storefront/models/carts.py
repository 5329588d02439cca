from sqlalchemy import Boolean, Column, ForeignKey, Integer, false
from sqlalchemy.orm import relationship

from storefront.db.base import TimestampedModel


class Cart(TimestampedModel):
    """One cart per user; cart items hang off it."""

    __tablename__ = "carts"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    cod_available = Column(Boolean, nullable=False, default=False, server_default=false())

    user = relationship("User", back_populates="cart")
    items = relationship("CartItem", back_populates="cart")
