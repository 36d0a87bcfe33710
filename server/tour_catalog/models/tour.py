"""Tour, Destination, and Accommodation model definitions."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base


class Tour(Base):
    """Tour entity representing a bookable travel package."""

    __tablename__ = "tours"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    # Tour information
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[str | None] = mapped_column(String(64), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    # Relationships
    destinations: Mapped[list["Destination"]] = relationship(
        "Destination",
        back_populates="tour",
        cascade="all, delete-orphan",
        order_by="Destination.position",
        lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<Tour(id={self.id}, title='{self.title}', start_date={self.start_date})>"


class Destination(Base):
    """Destination entity representing one stop within a tour."""

    __tablename__ = "destinations"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    tour_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("tours.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    dest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Order within the owning tour
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    tour: Mapped["Tour"] = relationship("Tour", back_populates="destinations")
    accommodation: Mapped["Accommodation | None"] = relationship(
        "Accommodation",
        back_populates="destination",
        cascade="all, delete-orphan",
        uselist=False,
        lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<Destination(id={self.id}, dest_name='{self.dest_name}', tour_id={self.tour_id})>"


class Accommodation(Base):
    """Accommodation entity holding lodging detail for a destination."""

    __tablename__ = "accommodations"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    destination_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("destinations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    check_in: Mapped[str | None] = mapped_column(String(32), nullable=True)
    check_out: Mapped[str | None] = mapped_column(String(32), nullable=True)

    destination: Mapped["Destination"] = relationship("Destination", back_populates="accommodation")

    def __repr__(self) -> str:
        return f"<Accommodation(id={self.id}, name='{self.name}', destination_id={self.destination_id})>"
