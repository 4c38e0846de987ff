# This project was developed with assistance from AI tools.
"""Demo data seeding service.

Upserts buyers, properties, and sent communications keyed on parcel id so
re-running is safe. ``force`` deletes the demo parcels first.

Simulated for demonstration purposes -- not real buyers or parcels.
"""

import logging
from datetime import UTC, datetime

from landbank_db import Buyer, Communication, Property
from landbank_db.enums import CommunicationStatus, PropertyStatus
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..compliance.dates import to_date
from .fixtures import DEMO_PROPERTIES

logger = logging.getLogger(__name__)

# Milestone evidence columns and the value used when a fixture omits them.
_EVIDENCE_DEFAULTS = {
    "insurance_received": False,
    "occupancy_established": False,
    "building_permit_obtained": False,
    "scope_of_work_approved": False,
    "percent_complete": 0,
    "rc_completed": None,
}


def _sent_at(value: str) -> datetime:
    return datetime.combine(to_date(value), datetime.min.time(), tzinfo=UTC)


async def _clear_demo_data(session: AsyncSession) -> int:
    parcel_ids = [p["parcel_id"] for p in DEMO_PROPERTIES]
    result = await session.execute(delete(Property).where(Property.parcel_id.in_(parcel_ids)))
    return result.rowcount or 0


async def seed_demo_data(session: AsyncSession, force: bool = False) -> dict:
    """Seed demo parcels.

    Returns:
        Summary dict with created / updated / cleared counts.
    """
    cleared = await _clear_demo_data(session) if force else 0

    created = updated = 0
    for fixture in DEMO_PROPERTIES:
        result = await session.execute(
            select(Property)
            .options(selectinload(Property.buyer), selectinload(Property.communications))
            .where(Property.parcel_id == fixture["parcel_id"])
        )
        prop = result.scalar_one_or_none()
        if prop is None:
            prop = Property(parcel_id=fixture["parcel_id"], communications=[])
            session.add(prop)
            created += 1
        else:
            updated += 1

        prop.address = fixture["address"]
        prop.program_type = fixture["program_type"]
        prop.date_sold = to_date(fixture.get("date_sold"))
        prop.compliance_1st_attempt = to_date(fixture.get("compliance_1st_attempt"))
        prop.compliance_2nd_attempt = to_date(fixture.get("compliance_2nd_attempt"))
        prop.last_contact_date = to_date(fixture.get("last_contact_date"))
        prop.enforcement_level = fixture["enforcement_level"]
        for key, default in _EVIDENCE_DEFAULTS.items():
            setattr(prop, key, fixture.get(key, default))
        prop.date_proof_of_invest_provided = to_date(fixture.get("date_proof_of_invest_provided"))
        prop.demo_final_cert_date = to_date(fixture.get("demo_final_cert_date"))
        prop.status = fixture.get(
            "status",
            PropertyStatus.COMPLIANT.value if fixture["enforcement_level"] == 0 else PropertyStatus.ACTIVE.value,
        )

        if prop.buyer is None:
            prop.buyer = Buyer()
        for key, value in fixture["buyer"].items():
            setattr(prop.buyer, key, value)

        prop.communications = [
            Communication(
                action=comm["action"],
                channel=comm["channel"],
                template_name=comm["template_name"],
                status=CommunicationStatus.SENT,
                sent_at=_sent_at(comm["sent_at"]),
            )
            for comm in fixture["communications"]
        ]

    await session.commit()
    logger.info("Seeded demo data: %d created, %d updated, %d cleared", created, updated, cleared)
    return {"status": "seeded", "created": created, "updated": updated, "cleared": cleared}
