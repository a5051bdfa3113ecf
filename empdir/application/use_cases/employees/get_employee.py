# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from empdir.domain.employees.entities import Employee
from empdir.domain.employees.exceptions import EmployeeNotFoundError
from empdir.domain.employees.repositories import EmployeeRepository


class GetEmployeeUseCase:
    def __init__(self, *, employees: EmployeeRepository) -> None:
        self._employees = employees

    def execute(self, employee_id: int) -> Employee:
        employee = self._employees.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(context={"employee_id": employee_id})
        return employee
