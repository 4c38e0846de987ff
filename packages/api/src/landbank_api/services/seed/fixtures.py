# This project was developed with assistance from AI tools.
"""
Demo fixture data for the compliance portal.

One entry per parcel; ``parcel_id`` is the idempotency key. Dates are ISO
strings so the fixtures read like the FileMaker export they imitate.

Simulated for demonstration purposes -- not real buyers or parcels.
"""

from landbank_db.enums import ComplianceAction, ProgramType

DEMO_PROPERTIES: list[dict] = [
    {
        "parcel_id": "DEMO-0001",
        "address": "100 Example Pl, Flint, MI 48503",
        "program_type": ProgramType.FEATURED_HOMES.value,
        "date_sold": "2025-06-15",
        "compliance_1st_attempt": "2025-11-01",
        "enforcement_level": 1,
        "buyer": {"first_name": "Jordan", "last_name": "Example", "email": ""},
        "communications": [
            {"sent_at": "2025-11-01", "channel": "email", "action": ComplianceAction.ATTEMPT_1,
             "template_name": "1st Request for Proof of Renovations"},
        ],
    },
    {
        "parcel_id": "DEMO-0002",
        "address": "200 Sample St, Flint, MI 48504",
        "program_type": ProgramType.READY4REHAB.value,
        "date_sold": "2025-03-10",
        "compliance_1st_attempt": "2025-09-15",
        "compliance_2nd_attempt": "2025-11-20",
        "last_contact_date": "2025-11-20",
        "enforcement_level": 2,
        "insurance_received": True,
        "building_permit_obtained": True,
        "percent_complete": 50,
        "buyer": {"first_name": "Avery", "last_name": "Sample", "email": "avery.sample@example.com"},
        "communications": [
            {"sent_at": "2025-09-15", "channel": "email", "action": ComplianceAction.ATTEMPT_1,
             "template_name": "1st Request for Proof of Renovations"},
            {"sent_at": "2025-11-20", "channel": "email", "action": ComplianceAction.ATTEMPT_2,
             "template_name": "2nd Request for Proof of Renovations"},
        ],
    },
    {
        "parcel_id": "DEMO-0003",
        "address": "300 Test Ave, Flint, MI 48502",
        "program_type": ProgramType.VIP.value,
        "date_sold": "2024-10-25",
        "enforcement_level": 1,
        "rc_completed": {"RC15": "2024-11-09", "RC45": "2024-12-09"},
        "buyer": {"first_name": "Riley", "last_name": "Placeholder", "email": "riley@example.com"},
        "communications": [
            {"sent_at": "2025-04-25", "channel": "email", "action": ComplianceAction.ATTEMPT_1,
             "template_name": "VIP Compliance Check-In"},
        ],
    },
    {
        "parcel_id": "DEMO-0004",
        "address": "400 Demo Rd, Flint, MI 48504",
        "program_type": ProgramType.DEMOLITION.value,
        "date_sold": "2025-04-20",
        "compliance_1st_attempt": "2025-10-20",
        "enforcement_level": 1,
        "buyer": {"first_name": "Casey", "last_name": "Fixture", "email": ""},
        "communications": [
            {"sent_at": "2025-10-20", "channel": "mail", "action": ComplianceAction.ATTEMPT_1,
             "template_name": "Proof of Demo Investment"},
        ],
    },
    {
        "parcel_id": "DEMO-0005",
        "address": "500 Mock Blvd, Flint, MI 48507",
        "program_type": ProgramType.FEATURED_HOMES.value,
        "date_sold": "2025-08-01",
        "enforcement_level": 0,
        "insurance_received": True,
        "occupancy_established": True,
        "buyer": {"first_name": "Morgan", "last_name": "Stub", "email": "morgan.stub@example.com"},
        "communications": [],
    },
    {
        "parcel_id": "DEMO-0006",
        "address": "600 Sandbox Ct, Flint, MI 48503",
        "program_type": ProgramType.READY4REHAB.value,
        "date_sold": None,
        "enforcement_level": 0,
        "status": "active",
        "buyer": {"first_name": "Quinn", "last_name": "Draft", "email": "quinn.draft@example.com"},
        "communications": [],
    },
]
