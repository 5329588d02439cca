from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from storefront.db.base import TimestampedModel


class OrderItem(TimestampedModel):
    __tablename__ = "order_items"

    order_id = Column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False
    )
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False
    )
    quantity = Column(Integer, nullable=False, default=1)

    order = relationship("Order", back_populates="items")
