"""
Factories for catalog entities.

Each factory inserts one row through its repository (no protocol checks) and
commits, so the row survives a rollback performed by the code under test.
Every unique column gets a random suffix unless overridden.

Usage:
    analyst = await make_analyst(name="Alice")
    resource = await make_resource(analyst_id=analyst.id)
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.enums import (
    EntityType,
    ResourceType,
    RollingVersion,
    ValueType,
    VariableStatus,
)
from catalog_api.repositories import (
    AnalystRepository,
    DictionaryRepository,
    DictTableRepository,
    MappingRepository,
    ResourceRepository,
    ValueSetCodeRepository,
    ValueSetRepository,
    VariableRepository,
)


@pytest.fixture
def unique_suffix():
    def _suffix() -> str:
        return uuid.uuid4().hex[:8]

    return _suffix


def _factory(db_session: AsyncSession, repository_class, defaults):
    repository = repository_class(db_session)

    async def _create(**overrides):
        data = defaults()
        data.update(overrides)
        entity = await repository.create(**data)
        await db_session.commit()
        return entity

    return _create


@pytest.fixture
def make_analyst(db_session: AsyncSession, unique_suffix):
    return _factory(db_session, AnalystRepository, lambda: {"name": f"analyst_{unique_suffix()}"})


@pytest.fixture
def make_resource(db_session: AsyncSession, unique_suffix):
    return _factory(
        db_session,
        ResourceRepository,
        lambda: {
            "code": f"R{unique_suffix()}",
            "name": "Cardiology warehouse",
            "resource_type": ResourceType.WAREHOUSE,
            "description_en": "Cardiology data",
            "description_fr": "Données de cardiologie",
        },
    )


@pytest.fixture
def make_dictionary(db_session: AsyncSession, make_resource):
    repository = DictionaryRepository(db_session)

    async def _create(**overrides):
        if "resource_id" not in overrides:
            overrides["resource_id"] = (await make_resource()).id
        data = {"current_version": 1.0}
        data.update(overrides)
        entity = await repository.create(**data)
        await db_session.commit()
        return entity

    return _create


@pytest.fixture
def make_dict_table(db_session: AsyncSession, make_dictionary, unique_suffix):
    repository = DictTableRepository(db_session)

    async def _create(**overrides):
        if "dictionary_id" not in overrides:
            overrides["dictionary_id"] = (await make_dictionary()).id
        data = {
            "name": f"table_{unique_suffix()}",
            "entity_type": EntityType.PATIENT,
            "label_en": "Patients",
            "label_fr": "Patients",
        }
        data.update(overrides)
        entity = await repository.create(**data)
        await db_session.commit()
        return entity

    return _create


@pytest.fixture
def make_value_set(db_session: AsyncSession, unique_suffix):
    return _factory(db_session, ValueSetRepository, lambda: {"name": f"value_set_{unique_suffix()}"})


@pytest.fixture
def make_value_set_code(db_session: AsyncSession, make_value_set, unique_suffix):
    repository = ValueSetCodeRepository(db_session)

    async def _create(**overrides):
        if "value_set_id" not in overrides:
            overrides["value_set_id"] = (await make_value_set()).id
        data = {
            "code": f"C{unique_suffix()}",
            "label_en": "Male",
            "label_fr": "Homme",
        }
        data.update(overrides)
        entity = await repository.create(**data)
        await db_session.commit()
        return entity

    return _create


@pytest.fixture
def make_variable(db_session: AsyncSession, make_dict_table, unique_suffix):
    repository = VariableRepository(db_session)

    async def _create(**overrides):
        if "table_id" not in overrides:
            overrides["table_id"] = (await make_dict_table()).id
        data = {
            "name": "age",
            "path": f"patients.age_{unique_suffix()}",
            "value_type": ValueType.INTEGER,
            "label_en": "Age",
            "label_fr": "Âge",
            "variable_status": VariableStatus.TO_DO,
            "rolling_version": RollingVersion.CURRENT,
        }
        data.update(overrides)
        entity = await repository.create(**data)
        await db_session.commit()
        return entity

    return _create


@pytest.fixture
def make_mapping(db_session: AsyncSession, make_value_set_code, unique_suffix):
    repository = MappingRepository(db_session)

    async def _create(**overrides):
        if "value_set_code_id" not in overrides:
            overrides["value_set_code_id"] = (await make_value_set_code()).id
        data = {"original_value": f"M_{unique_suffix()}"}
        data.update(overrides)
        entity = await repository.create(**data)
        await db_session.commit()
        return entity

    return _create
