# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from empdir.domain.employees.exceptions import EmployeeNotFoundError
from empdir.domain.employees.repositories import EmployeeRepository


class DeleteEmployeeUseCase:
    def __init__(self, *, employees: EmployeeRepository) -> None:
        self._employees = employees

    def execute(self, employee_id: int) -> None:
        if not self._employees.delete(employee_id):
            raise EmployeeNotFoundError(context={"employee_id": employee_id})
