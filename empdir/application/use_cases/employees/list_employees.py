# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from empdir.domain.employees.entities import Employee
from empdir.domain.employees.repositories import EmployeeRepository


class ListEmployeesUseCase:
    def __init__(self, *, employees: EmployeeRepository) -> None:
        self._employees = employees

    def execute(self) -> Sequence[Employee]:
        return self._employees.list_newest_first()
