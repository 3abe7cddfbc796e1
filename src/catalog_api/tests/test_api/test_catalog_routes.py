"""
End-to-end tests of the catalog routes through the ASGI app: envelope shape,
status codes, query parameters and the fallback error handlers.
"""

import httpx
import pytest

from catalog_api.services.analyst_service import AnalystService

RESOURCE_BODY = {
    "code": "R1",
    "name": "Cardiology warehouse",
    "resource_type": "warehouse",
    "description_en": "Cardiology data",
    "description_fr": "Données de cardiologie",
}


@pytest.mark.asyncio
class TestEnvelope:

    async def test_create_returns_201_envelope(self, client, auth_headers):
        response = await client.post("/analysts", json={"name": "A"}, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"success", "message", "responseObject", "statusCode"}
        assert body["success"] is True
        assert body["message"] == "Analyst created successfully"
        assert body["statusCode"] == 201
        assert body["responseObject"]["name"] == "A"
        assert isinstance(body["responseObject"]["id"], int)
        assert body["responseObject"]["last_update"]

    async def test_duplicate_is_409(self, client, auth_headers):
        await client.post("/analysts", json={"name": "A"}, headers=auth_headers)

        response = await client.post("/analysts", json={"name": "A"}, headers=auth_headers)

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "An Analyst with name A already exists.",
            "responseObject": None,
            "statusCode": 409,
        }

    async def test_dangling_reference_is_400(self, client, auth_headers):
        response = await client.post("/resources", json={**RESOURCE_BODY, "analyst_id": 999}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Analyst with ID 999 does not exist"

    async def test_empty_list_semantics_differ_per_entity(self, client, auth_headers):
        analysts = await client.get("/analysts", headers=auth_headers)
        mappings = await client.get("/mappings", headers=auth_headers)

        assert analysts.status_code == 404
        assert analysts.json()["message"] == "No analysts found"
        assert mappings.status_code == 200
        assert mappings.json()["responseObject"] == []


@pytest.mark.asyncio
class TestRequestValidation:

    async def test_non_positive_id_is_400(self, client, auth_headers):
        response = await client.get("/analysts/0", headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["statusCode"] == 400
        assert body["message"].startswith("Invalid input: id:")

    async def test_non_integer_id_is_400(self, client, auth_headers):
        response = await client.delete("/analysts/abc", headers=auth_headers)

        assert response.status_code == 400

    async def test_missing_body_field_is_400(self, client, auth_headers):
        response = await client.post("/resources", json={"code": "R1"}, headers=auth_headers)

        assert response.status_code == 400
        assert "name: Field required" in response.json()["message"]

    async def test_unknown_enum_value_is_400(self, client, auth_headers):
        response = await client.post(
            "/resources", json={**RESOURCE_BODY, "resource_type": "spaceship"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert "resource_type" in response.json()["message"]

    async def test_bad_sort_order_is_400(self, client, auth_headers):
        response = await client.get("/analysts", params={"sortOrder": "sideways"}, headers=auth_headers)

        assert response.status_code == 400

    async def test_variable_limit_bounds(self, client, auth_headers):
        response = await client.get("/variables", params={"limit": 0}, headers=auth_headers)

        assert response.status_code == 400


@pytest.mark.asyncio
class TestCrudRoutes:

    async def test_full_lifecycle(self, client, auth_headers):
        """
        Behavior:
                - POST, GET by id, PUT, DELETE, then GET by id again on one value set.
        """
        created = await client.post("/value-sets", json={"name": "sex"}, headers=auth_headers)
        value_set_id = created.json()["responseObject"]["id"]

        found = await client.get(f"/value-sets/{value_set_id}", headers=auth_headers)
        assert found.status_code == 200
        assert found.json()["message"] == "Value set found"

        updated = await client.put(
            f"/value-sets/{value_set_id}", json={"url": "https://example.org/sex"}, headers=auth_headers
        )
        assert updated.status_code == 200
        assert updated.json()["message"] == "Value set updated successfully"
        assert updated.json()["responseObject"]["name"] == "sex"
        assert updated.json()["responseObject"]["url"] == "https://example.org/sex"

        deleted = await client.delete(f"/value-sets/{value_set_id}", headers=auth_headers)
        assert deleted.status_code == 200
        assert deleted.json()["responseObject"] is None

        gone = await client.get(f"/value-sets/{value_set_id}", headers=auth_headers)
        assert gone.status_code == 404
        assert gone.json()["message"] == "Value set not found"

    async def test_delete_missing_is_200(self, client, auth_headers):
        response = await client.delete("/dict-tables/999", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "DictTable deleted successfully"

    async def test_update_missing_is_404(self, client, auth_headers):
        response = await client.put("/analysts/999", json={"name": "Ghost"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Analyst not found"

    async def test_search_and_sort_query_parameters(self, client, auth_headers, make_analyst):
        for name in ("beta-x", "alpha-x", "gamma"):
            await make_analyst(name=name)

        response = await client.get(
            "/analysts",
            params={"searchField": "name", "searchValue": "-x", "sortBy": "name", "sortOrder": "asc"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert [a["name"] for a in response.json()["responseObject"]] == ["alpha-x", "beta-x"]

    async def test_variables_are_paginated(self, client, auth_headers, make_dict_table, make_variable):
        table = await make_dict_table()
        for _ in range(3):
            await make_variable(table_id=table.id)

        response = await client.get("/variables", params={"limit": 2}, headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()["responseObject"]) == 2

    async def test_dict_table_chain(self, client, auth_headers):
        """
        Behavior:
                - Build resource -> dictionary -> dict table through the API.
                - A second table on the same dictionary is rejected on dictionary_id.
        """
        resource = await client.post("/resources", json=RESOURCE_BODY, headers=auth_headers)
        resource_id = resource.json()["responseObject"]["id"]

        dictionary = await client.post(
            "/dictionaries", json={"resource_id": resource_id, "current_version": 1.2}, headers=auth_headers
        )
        assert dictionary.status_code == 201
        dictionary_id = dictionary.json()["responseObject"]["id"]

        table_body = {
            "dictionary_id": dictionary_id,
            "name": "patients",
            "entity_type": "patient",
            "label_en": "Patients",
            "label_fr": "Patients",
        }
        first = await client.post("/dict-tables", json=table_body, headers=auth_headers)
        second = await client.post("/dict-tables", json={**table_body, "name": "other"}, headers=auth_headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["message"] == f"A Dict Table with dictionary_id {dictionary_id} already exists."


@pytest.mark.asyncio
class TestMiddlewareAndFallbacks:

    async def test_request_id_is_echoed(self, client):
        response = await client.get("/health-check", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    async def test_request_id_is_generated(self, client):
        response = await client.get("/health-check")

        assert response.headers.get("X-Request-ID")

    async def test_unhandled_exception_is_500_envelope(self, app, auth_headers, monkeypatch):
        """
        Behavior:
                - An exception escaping the service layer reaches the last-resort handler.
                - The client still receives the envelope with a generic message.
        """
        async def explode(self, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr(AnalystService, "find_all", explode)

        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as raw_client:
            response = await raw_client.get("/analysts", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "An unexpected error occurred",
            "responseObject": None,
            "statusCode": 500,
        }

    async def test_openapi_lists_catalog_paths(self, client):
        response = await client.get("/openapi.json")

        paths = response.json()["paths"]
        for path in ("/analysts", "/resources/{id}", "/dict-tables", "/value-set-codes/{id}", "/users/login"):
            assert path in paths
