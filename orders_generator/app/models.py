import random

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, String

from .database import Base, DEFAULT_SCHEMA

CITIES = ("New Delhi", "Seattle", "New York", "Austin", "Chicago", "Cleveland")


# Defines the ORM model for a generated order row.
class Order(Base):
    # The name of the database table, created at startup and dropped at shutdown.
    __tablename__ = "orders_info"
    __table_args__ = {"schema": DEFAULT_SCHEMA}

    # Define the table columns.
    order_id = Column(Integer, primary_key=True, autoincrement=True) # Assigned by the database (SERIAL).
    customer_id = Column(Integer, nullable=False)
    amount = Column(Integer, nullable=False)
    city = Column(String(255), nullable=False)


class NewOrder(BaseModel):
    """Field values of one order before the database assigns its order_id."""
    customer_id: int = Field(ge=1, le=1000)
    amount: int = Field(ge=100, le=199)
    city: str = Field(min_length=1, max_length=255)


def random_order(rng=random):
    """Picks uniformly random values for a new order."""
    return NewOrder(
        customer_id=rng.randint(1, 1000),
        amount=rng.randint(100, 199),
        city=rng.choice(CITIES),
    )
