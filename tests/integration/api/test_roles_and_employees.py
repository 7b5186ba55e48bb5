"""
Integration tests for /roles and /employees
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient

from tests.fixtures.api_helpers import API, onboard_admin


@pytest_asyncio.fixture
async def headers(client, email_sender, test_data):
    return await onboard_admin(client, email_sender, test_data.get_copy("register_payload"))


async def post(client, path, payload, headers) -> dict:
    response = await client.post(f"{API}{path}", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest_asyncio.fixture
async def org(client, headers, test_data):
    """An Engineering department with one role"""
    department = await post(client, "/departments", {"name": "Engineering"}, headers)
    role_payload = test_data.get_copy("role_payload")
    role_payload["department"] = department["id"]
    role = await post(client, "/roles", role_payload, headers)
    return {"department": department, "role": role}


def employee_payload(test_data, org, **overrides) -> dict:
    payload = test_data.get_copy("employee_payload")
    payload["department"] = org["department"]["id"]
    payload["role"] = org["role"]["id"]
    payload.update(overrides)
    return payload


# ============================================================================
# Roles
# ============================================================================


@pytest.mark.asyncio
async def test_role_carries_department_summary(org):
    role = org["role"]

    assert role["title"] == "Backend Engineer"
    assert role["responsibilities"] == "APIs and storage"
    assert role["department"] == {
        "id": org["department"]["id"],
        "name": "Engineering",
    }


@pytest.mark.asyncio
async def test_list_roles_by_department(client: AsyncClient, headers, org):
    other = await post(client, "/departments", {"name": "Sales"}, headers)
    await post(client, "/roles", {"title": "Account Exec", "department": other["id"]}, headers)

    everything = await client.get(f"{API}/roles", headers=headers)
    engineering = await client.get(
        f"{API}/roles/department/{org['department']['id']}", headers=headers
    )

    assert everything.json()["count"] == 2
    assert engineering.json()["count"] == 1
    assert engineering.json()["data"][0]["id"] == org["role"]["id"]


@pytest.mark.asyncio
async def test_create_role_unknown_department(client: AsyncClient, headers):
    bad_ids = ["not-a-uuid", "00000000-0000-0000-0000-000000000000"]
    for department_id in bad_ids:
        response = await client.post(
            f"{API}/roles", json={"title": "X", "department": department_id}, headers=headers
        )
        assert response.status_code == 404
        assert response.json()["code"] == "DEPARTMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_role(client: AsyncClient, headers, org):
    response = await client.put(
        f"{API}/roles/{org['role']['id']}",
        json={"title": "Staff Engineer", "department": org["department"]["id"]},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Staff Engineer"
    assert "responsibilities" not in response.json()["data"]


@pytest.mark.asyncio
async def test_delete_role_in_use(client: AsyncClient, headers, org, test_data):
    await post(client, "/employees", employee_payload(test_data, org), headers)

    response = await client.delete(f"{API}/roles/{org['role']['id']}", headers=headers)

    assert response.status_code == 400
    assert response.json()["code"] == "ROLE_IN_USE"


@pytest.mark.asyncio
async def test_delete_role(client: AsyncClient, headers, org):
    response = await client.delete(f"{API}/roles/{org['role']['id']}", headers=headers)

    assert response.status_code == 200
    missing = await client.get(f"{API}/roles/{org['role']['id']}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["code"] == "ROLE_NOT_FOUND"


# ============================================================================
# Employees
# ============================================================================


@pytest.mark.asyncio
async def test_create_employee(client: AsyncClient, headers, org, test_data):
    employee = await post(client, "/employees", employee_payload(test_data, org), headers)

    assert employee["firstName"] == "Alan"
    assert employee["email"] == "alan@acme.com"
    assert employee["startDate"] == "2024-02-01"
    assert employee["department"]["name"] == "Engineering"
    assert employee["role"]["title"] == "Backend Engineer"

    fetched = await client.get(f"{API}/employees/{employee['id']}", headers=headers)
    assert fetched.json()["data"] == employee


@pytest.mark.asyncio
async def test_list_employees_by_department_and_role(client: AsyncClient, headers, org, test_data):
    await post(client, "/employees", employee_payload(test_data, org), headers)

    everyone = await client.get(f"{API}/employees", headers=headers)
    by_department = await client.get(
        f"{API}/employees/department/{org['department']['id']}", headers=headers
    )
    by_role = await client.get(f"{API}/employees/role/{org['role']['id']}", headers=headers)

    assert everyone.json()["count"] == 1
    assert by_department.json()["count"] == 1
    assert by_role.json()["count"] == 1


@pytest.mark.asyncio
async def test_employee_role_must_match_department(client: AsyncClient, headers, org, test_data):
    sales = await post(client, "/departments", {"name": "Sales"}, headers)

    response = await client.post(
        f"{API}/employees",
        json=employee_payload(test_data, org, department=sales["id"]),
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "ROLE_DEPARTMENT_MISMATCH"


@pytest.mark.asyncio
async def test_employee_email_unique_within_company(client: AsyncClient, headers, org, test_data):
    await post(client, "/employees", employee_payload(test_data, org), headers)

    response = await client.post(
        f"{API}/employees",
        json=employee_payload(test_data, org, email="ALAN@acme.com", firstName="Al"),
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "EMPLOYEE_EMAIL_IN_USE"


@pytest.mark.asyncio
async def test_employee_validation_lists_every_field(client: AsyncClient, headers):
    response = await client.post(f"{API}/employees", json={"email": "bad"}, headers=headers)

    assert response.status_code == 400
    errors = {e["field"]: e["message"] for e in response.json()["errors"]}
    assert errors["email"] == "Please enter a valid email address"
    assert errors["firstName"] == "firstName is required"
    assert errors["startDate"] == "startDate is required"
    assert set(errors) == {"firstName", "lastName", "email", "department", "role", "startDate"}


@pytest.mark.asyncio
async def test_update_and_delete_employee(client: AsyncClient, headers, org, test_data):
    employee = await post(client, "/employees", employee_payload(test_data, org), headers)

    updated = await client.put(
        f"{API}/employees/{employee['id']}",
        json=employee_payload(test_data, org, phone="", lastName="Mathison Turing"),
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["lastName"] == "Mathison Turing"
    assert "phone" not in updated.json()["data"]

    deleted = await client.delete(f"{API}/employees/{employee['id']}", headers=headers)
    assert deleted.status_code == 200
    missing = await client.get(f"{API}/employees/{employee['id']}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["code"] == "EMPLOYEE_NOT_FOUND"


@pytest.mark.asyncio
async def test_employees_are_tenant_scoped(client: AsyncClient, headers, org, test_data, email_sender):
    employee = await post(client, "/employees", employee_payload(test_data, org), headers)
    other = await onboard_admin(client, email_sender, test_data.get_copy("other_register_payload"))

    listed = await client.get(f"{API}/employees", headers=other)
    fetched = await client.get(f"{API}/employees/{employee['id']}", headers=other)
    borrowed = await client.post(
        f"{API}/employees", json=employee_payload(test_data, org), headers=other
    )

    assert listed.json()["count"] == 0
    assert fetched.status_code == 404
    assert borrowed.status_code == 404
    assert borrowed.json()["code"] == "DEPARTMENT_NOT_FOUND"
