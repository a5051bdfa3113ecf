from __future__ import annotations

import io

import pytest
from flask.testing import FlaskClient

from empdir.infrastructure.container import Container

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _form(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "mobile": "5550100",
        "designation": "HR",
        "gender": "F",
        "course": ["MCA", "BSC"],
        "image": (io.BytesIO(PNG_BYTES), "my photo.png", "image/png"),
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}


def _create(client: FlaskClient, **overrides: object):
    return client.post(
        "/api/employees", data=_form(**overrides), content_type="multipart/form-data"
    )


def test_employee_routes_require_session(client: FlaskClient) -> None:
    assert client.get("/api/employees").status_code == 401
    assert _create(client).status_code == 401
    assert client.delete("/api/employees/1").status_code == 401


def test_create_and_fetch_employee(logged_in_client: FlaskClient, container: Container) -> None:
    response = _create(logged_in_client)

    assert response.status_code == 201
    body = response.get_json()
    assert body["msg"] == "Employee created successfully"
    employee = body["employee"]
    assert employee["course"] == ["MCA", "BSC"]
    assert employee["image"].endswith("-my_photo.png")
    assert "createdAt" in employee and "updatedAt" in employee

    stored = container.image_storage.directory / employee["image"]
    assert stored.read_bytes() == PNG_BYTES

    fetched = logged_in_client.get(f"/api/employees/{employee['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json()["email"] == "jane@example.com"


def test_list_is_newest_first(logged_in_client: FlaskClient) -> None:
    _create(logged_in_client, email="first@example.com")
    _create(logged_in_client, email="second@example.com")

    emails = [item["email"] for item in logged_in_client.get("/api/employees").get_json()]

    assert emails == ["second@example.com", "first@example.com"]


def test_create_duplicate_email_is_rejected(logged_in_client: FlaskClient) -> None:
    _create(logged_in_client)

    response = _create(logged_in_client)

    assert response.status_code == 400
    assert response.get_json()["msg"] == "Email already exists"


def test_create_without_image_is_rejected(logged_in_client: FlaskClient) -> None:
    response = _create(logged_in_client, image=None)

    assert response.status_code == 400
    assert response.get_json()["msg"] == "Image upload failed or missing"


def test_create_with_unsupported_image_type_is_rejected(logged_in_client: FlaskClient) -> None:
    response = _create(
        logged_in_client, image=(io.BytesIO(b"GIF89a"), "anim.gif", "image/gif")
    )

    assert response.status_code == 400
    assert response.get_json()["msg"] == "Only jpg and png files allowed"


@pytest.mark.parametrize("missing", ["name", "email", "mobile", "designation", "gender", "course"])
def test_create_with_missing_field_is_400(logged_in_client: FlaskClient, missing: str) -> None:
    response = _create(logged_in_client, **{missing: None})

    assert response.status_code == 400
    assert response.get_json()["msg"] == "All fields are required"


def test_update_applies_only_supplied_fields(logged_in_client: FlaskClient) -> None:
    created = _create(logged_in_client).get_json()["employee"]

    response = logged_in_client.put(
        f"/api/employees/{created['id']}",
        data={"designation": "Manager", "name": ""},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    updated = response.get_json()["employee"]
    assert updated["designation"] == "Manager"
    assert updated["name"] == "Jane Doe"
    assert updated["image"] == created["image"]


def test_update_replaces_image(logged_in_client: FlaskClient) -> None:
    created = _create(logged_in_client).get_json()["employee"]

    response = logged_in_client.put(
        f"/api/employees/{created['id']}",
        data={"image": (io.BytesIO(b"\xff\xd8\xff"), "new.jpg", "image/jpeg")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    assert response.get_json()["employee"]["image"].endswith("-new.jpg")


def test_update_to_taken_email_is_rejected(logged_in_client: FlaskClient) -> None:
    _create(logged_in_client, email="taken@example.com")
    other = _create(logged_in_client, email="other@example.com").get_json()["employee"]

    response = logged_in_client.put(
        f"/api/employees/{other['id']}",
        data={"email": "taken@example.com"},
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert response.get_json()["msg"] == "Email already exists"


def test_update_missing_employee_is_404(logged_in_client: FlaskClient) -> None:
    response = logged_in_client.put(
        "/api/employees/999", data={"name": "X"}, content_type="multipart/form-data"
    )

    assert response.status_code == 404
    assert response.get_json()["msg"] == "Employee not found"


def test_delete_employee(logged_in_client: FlaskClient) -> None:
    created = _create(logged_in_client).get_json()["employee"]

    deleted = logged_in_client.delete(f"/api/employees/{created['id']}")

    assert deleted.status_code == 200
    assert deleted.get_json() == {"msg": "Employee deleted successfully"}
    assert logged_in_client.get(f"/api/employees/{created['id']}").status_code == 404
    assert logged_in_client.delete(f"/api/employees/{created['id']}").status_code == 404
