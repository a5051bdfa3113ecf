# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from empdir.domain.employees.entities import Employee, EmployeeUpdate, ImageUpload
from empdir.domain.employees.exceptions import (
    DuplicateEmployeeEmailError,
    EmployeeNotFoundError,
    UnsupportedImageError,
)
from empdir.domain.employees.repositories import EmployeeRepository, ImageStorage


class UpdateEmployeeUseCase:
    def __init__(self, *, employees: EmployeeRepository, images: ImageStorage) -> None:
        self._employees = employees
        self._images = images

    def execute(
        self, employee_id: int, update: EmployeeUpdate, image: ImageUpload | None = None
    ) -> Employee:
        current = self._employees.find_by_id(employee_id)
        if current is None:
            raise EmployeeNotFoundError(context={"employee_id": employee_id})

        changes = update.changes()
        email = changes.get("email")
        if email and email != current.email:
            other = self._employees.find_by_email(email)
            if other is not None and other.id != employee_id:
                raise DuplicateEmployeeEmailError()

        if image is not None and image.filename:
            if not image.is_allowed_type:
                raise UnsupportedImageError()
            changes["image"] = self._images.save(image)

        try:
            updated = self._employees.update(employee_id, changes)
        except DuplicateEmployeeEmailError:
            if "image" in changes:
                self._images.delete(changes["image"])
            raise

        if updated is None:
            raise EmployeeNotFoundError(context={"employee_id": employee_id})
        return updated
