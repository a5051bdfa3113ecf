# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import Employee, EmployeeFields, ImageUpload


class EmployeeRepository(Protocol):
    def list_newest_first(self) -> Sequence[Employee]: ...
    def find_by_id(self, employee_id: int) -> Employee | None: ...
    def find_by_email(self, email: str) -> Employee | None: ...
    def create(self, employee: EmployeeFields) -> Employee: ...
    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Employee | None: ...
    def delete(self, employee_id: int) -> bool: ...


class ImageStorage(Protocol):
    def save(self, upload: ImageUpload) -> str: ...
    def delete(self, stored_name: str) -> None: ...
