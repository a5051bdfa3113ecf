# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from empdir.shared.errors.base import DomainError


class EmployeeNotFoundError(DomainError):
    code = "employee_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Employee not found"


class DuplicateEmployeeEmailError(DomainError):
    code = "duplicate_email"
    message = "Email already exists"


class ImageRequiredError(DomainError):
    code = "image_required"
    message = "Image upload failed or missing"


class UnsupportedImageError(DomainError):
    code = "unsupported_image"
    message = "Only jpg and png files allowed"
