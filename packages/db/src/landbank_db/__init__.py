# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, SessionLocal, create_all, engine, get_db
from .enums import (
    CommunicationStatus,
    ComplianceAction,
    EnforcementLevel,
    ProgramType,
    PropertyStatus,
)
from .models import Buyer, Communication, Property

__all__ = [
    "Base",
    "SessionLocal",
    "create_all",
    "engine",
    "get_db",
    "__version__",
    # Enums
    "CommunicationStatus",
    "ComplianceAction",
    "EnforcementLevel",
    "ProgramType",
    "PropertyStatus",
    # Models
    "Buyer",
    "Communication",
    "Property",
]
