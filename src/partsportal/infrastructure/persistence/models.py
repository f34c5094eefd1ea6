"""SQLAlchemy models for the parts portal database."""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import Session, declarative_base, relationship, sessionmaker

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Catalog & entitlement (read-only for the core) --------------------------


class DealerAccountRow(Base):
    """Dealer account model."""

    __tablename__ = "dealer_accounts"

    id = Column(String, primary_key=True)
    account_no = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    status = Column(String, nullable=False, default="ACTIVE")
    entitlement = Column(String, nullable=False, default="SHOW_ALL")

    band_assignments = relationship(
        "BandAssignmentRow", back_populates="dealer", cascade="all, delete-orphan"
    )


class BandAssignmentRow(Base):
    """Dealer band per part type."""

    __tablename__ = "dealer_band_assignments"

    id = Column(Integer, primary_key=True)
    dealer_account_id = Column(String, ForeignKey("dealer_accounts.id"), nullable=False)
    part_type = Column(String, nullable=False)
    band_code = Column(String, nullable=False)

    __table_args__ = (
        UniqueConstraint("dealer_account_id", "part_type", name="uq_dealer_part_type"),
    )

    dealer = relationship("DealerAccountRow", back_populates="band_assignments")


class ProductRow(Base):
    """Catalog product model."""

    __tablename__ = "products"

    id = Column(String, primary_key=True)
    product_code = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=False, default="")
    part_type = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    reference_price = relationship(
        "ReferencePriceRow", uselist=False, back_populates="product",
        cascade="all, delete-orphan",
    )
    band_prices = relationship(
        "BandPriceRow", back_populates="product", cascade="all, delete-orphan"
    )


class ReferencePriceRow(Base):
    """Reference prices for a product; carries the minimum price floor."""

    __tablename__ = "product_reference_prices"

    product_id = Column(String, ForeignKey("products.id"), primary_key=True)
    minimum_price = Column(Numeric(12, 2), nullable=True)

    product = relationship("ProductRow", back_populates="reference_price")


class BandPriceRow(Base):
    """Unit price of a product for one band."""

    __tablename__ = "product_band_prices"

    id = Column(Integer, primary_key=True)
    product_id = Column(String, ForeignKey("products.id"), nullable=False)
    band_code = Column(String, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)

    __table_args__ = (
        UniqueConstraint("product_id", "band_code", name="uq_product_band"),
    )

    product = relationship("ProductRow", back_populates="band_prices")


# --- Cart (mutable working state) --------------------------------------------


class CartRow(Base):
    """One live cart per dealer user."""

    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    dealer_user_id = Column(String, unique=True, nullable=False)
    dealer_account_id = Column(String, ForeignKey("dealer_accounts.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    items = relationship(
        "CartItemRow", back_populates="cart", cascade="all, delete-orphan",
        order_by="CartItemRow.id",
    )


class CartItemRow(Base):
    """Cart line model.  No price column by design of the cart."""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False)
    product_id = Column(String, ForeignKey("products.id"), nullable=False)
    qty = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", name="uq_cart_product"),
        CheckConstraint("qty > 0", name="ck_cart_item_qty"),
    )

    cart = relationship("CartRow", back_populates="items")


# --- Orders (immutable history) ----------------------------------------------


class OrderHeaderRow(Base):
    """Placed order model."""

    __tablename__ = "order_headers"

    id = Column(Integer, primary_key=True)
    order_no = Column(String, unique=True, nullable=False)
    dealer_account_id = Column(String, ForeignKey("dealer_accounts.id"), nullable=False)
    dealer_user_id = Column(String, nullable=False)
    status = Column(String, nullable=False)
    po_ref = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    currency = Column(String(3), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    lines = relationship(
        "OrderLineRow", back_populates="order", cascade="all, delete-orphan",
        order_by="OrderLineRow.line_no",
    )


class OrderLineRow(Base):
    """Order line snapshot.  ``product_id`` is informational, not a price source."""

    __tablename__ = "order_lines"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("order_headers.id"), nullable=False)
    line_no = Column(Integer, nullable=False)
    product_id = Column(String, nullable=False)
    product_code_snapshot = Column(String, nullable=False)
    description_snapshot = Column(String, nullable=False)
    part_type_snapshot = Column(String, nullable=False)
    qty = Column(Integer, nullable=False)
    unit_price_snapshot = Column(Numeric(12, 2), nullable=False)
    band_code_snapshot = Column(String, nullable=False)
    min_price_applied = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("order_id", "line_no", name="uq_order_line_no"),
    )

    order = relationship("OrderHeaderRow", back_populates="lines")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory, creating tables if needed."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
