# This project was developed with assistance from AI tools.
"""
Land bank compliance -- domain models

Parcels sold under a program, their buyers, and the outreach log used to
decide which compliance step is due. The compliance engine only reads
these tables.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import CommunicationStatus, ComplianceAction, PropertyStatus


class Buyer(Base):
    """Purchaser of one or more land bank parcels."""

    __tablename__ = "buyers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    properties = relationship("Property", back_populates="buyer")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def __repr__(self):
        return f"<Buyer(id={self.id}, name='{self.full_name}')>"


class Property(Base):
    """A parcel sold under a program and subject to compliance follow-up."""

    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parcel_id = Column(String(50), unique=True, nullable=False, index=True)
    address = Column(Text, nullable=False)
    # Free text: unrecognized programs must still load.
    program_type = Column(String(50), nullable=False, index=True)
    date_sold = Column(Date, nullable=True)
    compliance_1st_attempt = Column(Date, nullable=True)
    compliance_2nd_attempt = Column(Date, nullable=True)
    last_contact_date = Column(Date, nullable=True)
    enforcement_level = Column(Integer, nullable=False, default=0, server_default="0")

    # Milestone evidence
    insurance_received = Column(Boolean, nullable=False, default=False, server_default="false")
    occupancy_established = Column(Boolean, nullable=False, default=False, server_default="false")
    building_permit_obtained = Column(Boolean, nullable=False, default=False, server_default="false")
    scope_of_work_approved = Column(Boolean, nullable=False, default=False, server_default="false")
    percent_complete = Column(Integer, nullable=False, default=0, server_default="0")
    date_proof_of_invest_provided = Column(Date, nullable=True)
    demo_final_cert_date = Column(Date, nullable=True)
    # VIP check-in completion dates keyed by milestone key, e.g. {"RC15": "2025-02-01"}
    rc_completed = Column(JSON, nullable=True)

    status = Column(
        String(20),
        nullable=False,
        default=PropertyStatus.ACTIVE.value,
        server_default=PropertyStatus.ACTIVE.value,
    )
    buyer_id = Column(Integer, ForeignKey("buyers.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    buyer = relationship("Buyer", back_populates="properties")
    communications = relationship(
        "Communication", back_populates="property", cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Property(id={self.id}, parcel_id='{self.parcel_id}')>"


class Communication(Base):
    """One outreach event to a buyer about a property."""

    __tablename__ = "communications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(
        Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    action = Column(
        Enum(ComplianceAction, name="compliance_action", native_enum=False),
        nullable=True,
    )
    channel = Column(String(20), nullable=True)
    template_name = Column(String(255), nullable=True)
    status = Column(
        Enum(CommunicationStatus, name="communication_status", native_enum=False),
        nullable=False,
        default=CommunicationStatus.LOGGED,
    )
    sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    property = relationship("Property", back_populates="communications")

    def __repr__(self):
        return f"<Communication(id={self.id}, action='{self.action}', status='{self.status}')>"
