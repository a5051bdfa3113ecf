# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace

from empdir.domain.employees.entities import Employee, EmployeeFields, ImageUpload
from empdir.domain.employees.exceptions import (
    DuplicateEmployeeEmailError,
    ImageRequiredError,
    UnsupportedImageError,
)
from empdir.domain.employees.repositories import EmployeeRepository, ImageStorage


class CreateEmployeeUseCase:
    def __init__(self, *, employees: EmployeeRepository, images: ImageStorage) -> None:
        self._employees = employees
        self._images = images

    def execute(self, fields: EmployeeFields, image: ImageUpload | None) -> Employee:
        if self._employees.find_by_email(fields.email):
            raise DuplicateEmployeeEmailError()
        if image is None or not image.filename:
            raise ImageRequiredError()
        if not image.is_allowed_type:
            raise UnsupportedImageError()

        stored_name = self._images.save(image)
        try:
            return self._employees.create(replace(fields, image=stored_name))
        except DuplicateEmployeeEmailError:
            # Lost a race on the email constraint.
            self._images.delete(stored_name)
            raise
