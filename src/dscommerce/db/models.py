"""
dscommerce.db.models

Relational schema backing identity and order lookups.

Responsibilities:
- Users and roles (many-to-many through `tb_user_role`).
- Orders, order items and the products they reference.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Column, Enum, ForeignKey, Numeric, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dscommerce.db.base import Base
from dscommerce.orders.models import OrderStatus

user_role = Table(
    "tb_user_role",
    Base.metadata,
    Column("user_id", ForeignKey("tb_user.id"), primary_key=True),
    Column("role_id", ForeignKey("tb_role.id"), primary_key=True),
)


class RoleModel(Base):
    __tablename__ = "tb_role"

    id: Mapped[int] = mapped_column(primary_key=True)
    authority: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)


class UserModel(Base):
    __tablename__ = "tb_user"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(nullable=True)
    # Stored as produced by the authorization server's encoder; never verified here.
    password: Mapped[str] = mapped_column(String(256), nullable=False)

    roles: Mapped[list[RoleModel]] = relationship(secondary=user_role, order_by=RoleModel.id)
    orders: Mapped[list[OrderModel]] = relationship(back_populates="client")


class ProductModel(Base):
    __tablename__ = "tb_product"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2, asdecimal=True), nullable=False)
    img_url: Mapped[str | None] = mapped_column(String(512), nullable=True)


class OrderModel(Base):
    __tablename__ = "tb_order"

    id: Mapped[int] = mapped_column(primary_key=True)
    moment: Mapped[datetime] = mapped_column(nullable=False)
    status: Mapped[OrderStatus] = mapped_column(Enum(OrderStatus), nullable=False)
    client_id: Mapped[int] = mapped_column(ForeignKey("tb_user.id"), nullable=False, index=True)

    client: Mapped[UserModel] = relationship(back_populates="orders")
    items: Mapped[list[OrderItemModel]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.product_id",
    )


class OrderItemModel(Base):
    __tablename__ = "tb_order_item"

    order_id: Mapped[int] = mapped_column(ForeignKey("tb_order.id"), primary_key=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("tb_product.id"), primary_key=True)
    quantity: Mapped[int] = mapped_column(nullable=False)
    # Price at purchase time; the product's list price may change later.
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2, asdecimal=True), nullable=False)

    order: Mapped[OrderModel] = relationship(back_populates="items")
    product: Mapped[ProductModel] = relationship()


# --- Module Notes -----------------------------------------------------------
# Money columns are Numeric so reads come back as `Decimal`, matching `orders.totals`.
