from catalog_api.repositories.analyst_repository import AnalystRepository
from catalog_api.repositories.resource_repository import ResourceRepository
from catalog_api.schemas.resource import ResourceRead
from catalog_api.validators.write_validators import ReferenceCheck
from .base_service import CatalogService


class ResourceService(CatalogService):
    """Resources optionally point at the analyst in charge; `code` is the business key."""

    repository_class = ResourceRepository
    read_schema = ResourceRead
    label = "Resource"
    empty_message = "No resources found"
    references = (
        ReferenceCheck("analyst_id", AnalystRepository, "Analyst"),
    )
    unique_fields = ("code",)
