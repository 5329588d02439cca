from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from storefront.db.base import TimestampedModel


class CartItem(TimestampedModel):
    __tablename__ = "cart_items"

    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    quantity = Column(Integer, nullable=False, default=1)

    cart = relationship("Cart", back_populates="items")
