"""SQLAlchemy models for costureira database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    CheckConstraint,
    Index,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Profile(Base):
    """Account model, keyed by the authenticated user id."""

    __tablename__ = "profiles"

    id = Column(String, primary_key=True)
    full_name = Column(String, nullable=True)
    business_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    clients = relationship("Client", back_populates="profile", cascade="all, delete-orphan")


class Client(Base):
    """Client model with denormalized service statistics."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    normalized_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    is_favorite = Column(Boolean, default=False, nullable=False)
    total_spent = Column(Numeric(10, 2), default=0, nullable=False)
    last_service_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # One client per case-insensitive name within an account
    __table_args__ = (
        UniqueConstraint("user_id", "normalized_name", name="uq_client_user_name"),
        Index("idx_clients_favorite", "user_id", "is_favorite"),
    )

    # Relationships
    profile = relationship("Profile", back_populates="clients")
    services = relationship("Service", back_populates="client", cascade="all, delete-orphan")
    piece_counters = relationship(
        "PieceCounter", back_populates="client", cascade="all, delete-orphan"
    )


class Service(Base):
    """Service order model."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    client_name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    value = Column(Numeric(10, 2), nullable=False)
    delivery_date = Column(Date, nullable=True)
    status = Column(String, default="progress", nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("status IN ('progress', 'delivered', 'paid')", name="ck_service_status"),
        CheckConstraint("value >= 0", name="ck_service_value"),
        Index("idx_services_client_id", "client_id"),
        Index("idx_services_created_at", "created_at"),
    )

    # Relationships
    client = relationship("Client", back_populates="services")


class PieceCounter(Base):
    """Running piece total per client."""

    __tablename__ = "piece_counters"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    client_name = Column(String, nullable=False)
    total_pieces = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "client_id", name="uq_counter_user_client"),)

    # Relationships
    client = relationship("Client", back_populates="piece_counters")
    history = relationship(
        "PieceCounterHistory", back_populates="counter", cascade="all, delete-orphan"
    )


class PieceCounterHistory(Base):
    """Append-only ledger of piece movements."""

    __tablename__ = "piece_counter_history"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    counter_id = Column(
        Integer, ForeignKey("piece_counters.id", ondelete="CASCADE"), nullable=False
    )
    client_name = Column(String, nullable=False)
    pieces_added = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (Index("idx_piece_counter_history_counter_id", "counter_id"),)

    # Relationships
    counter = relationship("PieceCounter", back_populates="history")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine: Engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
