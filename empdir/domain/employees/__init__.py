# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import ALLOWED_IMAGE_TYPES, Employee, EmployeeFields, EmployeeUpdate, ImageUpload
from .exceptions import (
    DuplicateEmployeeEmailError,
    EmployeeNotFoundError,
    ImageRequiredError,
    UnsupportedImageError,
)
from .repositories import EmployeeRepository, ImageStorage

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "DuplicateEmployeeEmailError",
    "Employee",
    "EmployeeFields",
    "EmployeeNotFoundError",
    "EmployeeRepository",
    "EmployeeUpdate",
    "ImageRequiredError",
    "ImageStorage",
    "ImageUpload",
    "UnsupportedImageError",
]
