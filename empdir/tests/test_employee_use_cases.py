from __future__ import annotations

import io
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from empdir.application.use_cases.employees.create_employee import CreateEmployeeUseCase
from empdir.application.use_cases.employees.update_employee import UpdateEmployeeUseCase
from empdir.domain.employees.entities import (
    Employee,
    EmployeeFields,
    EmployeeUpdate,
    ImageUpload,
)
from empdir.domain.employees.exceptions import DuplicateEmployeeEmailError
from empdir.domain.employees.repositories import EmployeeRepository
from empdir.infrastructure.storage import LocalImageStorage


class RacingEmployeeRepository(EmployeeRepository):
    """The email check passes, then the unique constraint fires on write."""

    def __init__(self) -> None:
        now = datetime.now(UTC)
        self.existing = Employee(
            id=1,
            name="Jane Doe",
            email="jane@example.com",
            mobile="5550100",
            designation="HR",
            gender="F",
            course=("MCA",),
            image=None,
            created_at=now,
            updated_at=now,
        )

    def list_newest_first(self) -> Sequence[Employee]:
        return [self.existing]

    def find_by_id(self, employee_id: int) -> Employee | None:
        return self.existing if employee_id == self.existing.id else None

    def find_by_email(self, email: str) -> Employee | None:
        return None

    def create(self, employee: EmployeeFields) -> Employee:
        raise DuplicateEmployeeEmailError()

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Employee | None:
        raise DuplicateEmployeeEmailError()

    def delete(self, employee_id: int) -> bool:
        return False


def _upload() -> ImageUpload:
    return ImageUpload(filename="photo.png", content_type="image/png", stream=io.BytesIO(b"png"))


@pytest.fixture()
def storage(tmp_path: Path) -> LocalImageStorage:
    return LocalImageStorage(tmp_path / "uploads")


def test_create_losing_email_race_removes_saved_image(storage: LocalImageStorage) -> None:
    use_case = CreateEmployeeUseCase(employees=RacingEmployeeRepository(), images=storage)
    fields = EmployeeFields(
        name="John Roe",
        email="taken@example.com",
        mobile="5550101",
        designation="Sales",
        gender="M",
        course=("BCA",),
    )

    with pytest.raises(DuplicateEmployeeEmailError):
        use_case.execute(fields, _upload())

    assert list(storage.directory.iterdir()) == []


def test_update_losing_email_race_removes_new_image(storage: LocalImageStorage) -> None:
    use_case = UpdateEmployeeUseCase(employees=RacingEmployeeRepository(), images=storage)

    with pytest.raises(DuplicateEmployeeEmailError):
        use_case.execute(1, EmployeeUpdate(email="taken@example.com"), _upload())

    assert list(storage.directory.iterdir()) == []


def test_storage_delete_ignores_missing_file(storage: LocalImageStorage) -> None:
    stored = storage.save(_upload())
    assert (storage.directory / stored).exists()

    storage.delete(stored)
    storage.delete(stored)

    assert not (storage.directory / stored).exists()
