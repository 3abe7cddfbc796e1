"""
Enumerations used by catalog columns and request schemas.

Values are the strings stored in the database and exchanged over the API
(note the spaces in ProjectStatus).
"""

from enum import Enum as PyEnum

from sqlalchemy import Enum as SQLEnum


class ResourceType(str, PyEnum):
    WAREHOUSE = "warehouse"
    RESEARCH_PROJECT = "research_project"
    RESOURCE_PROJECT = "resource_project"
    EQP = "eqp"
    SOURCE_SYSTEM = "source_system"


class ProjectActive(str, PyEnum):
    COMPLETED = "completed"
    ACTIVE = "active"


class ProjectStatus(str, PyEnum):
    ON_HOLD = "on hold"
    IN_REVIEW = "in review"
    IN_PROGRESS = "in progress"
    DELIVERED = "delivered"


class EntityType(str, PyEnum):
    PATIENT = "patient"
    OBSERVATION = "observation"
    DIAGNOSIS = "diagnosis"
    MEDICATION = "medication"
    PROCEDURE = "procedure"
    EPISODE = "episode"
    ENCOUNTER = "encounter"
    DELIVERY = "delivery"
    PREGNANCY = "pregnancy"


class Domain(str, PyEnum):
    TRANSFUSION = "transfusion"
    IMAGING = "imaging"
    MEDICATION = "medication"
    PATHOLOGY = "pathology"
    MICROBIOLOGY = "microbiology"
    LABORATORY = "laboratory"
    SOCIODEMOGRAPHICS = "sociodemographics"
    DIAGNOSIS = "diagnosis"
    PREGNANCY = "pregnancy"
    MEDICAL_HISTORY = "medical_history"


class ValueType(str, PyEnum):
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"


class VariableStatus(str, PyEnum):
    TO_DO = "to_do"
    ON_HOLD = "on_hold"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DELIVERED = "delivered"
    REMOVED = "removed"


class RollingVersion(str, PyEnum):
    OBSOLETE = "obsolete"
    CURRENT = "current"
    FUTURE = "future"


def enum_column_type(enum_cls: type[PyEnum]) -> SQLEnum:
    """
    VARCHAR-backed enum storing member *values* ("on hold"), not member names.
    """
    return SQLEnum(
        enum_cls,
        native_enum=False,
        length=50,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
