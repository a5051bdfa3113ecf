# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from empdir.domain.employees.entities import Employee as DomainEmployee
from empdir.domain.employees.entities import EmployeeFields
from empdir.domain.employees.exceptions import DuplicateEmployeeEmailError
from empdir.domain.employees.repositories import EmployeeRepository
from empdir.infrastructure.db.models import Employee
from empdir.infrastructure.unit_of_work import unit_of_work_scope

_UPDATABLE = frozenset(
    {"name", "email", "mobile", "designation", "gender", "course", "image"}
)


def _to_domain(row: Employee) -> DomainEmployee:
    return DomainEmployee(
        id=row.id,
        name=row.name,
        email=row.email,
        mobile=row.mobile,
        designation=row.designation,
        gender=row.gender,
        course=tuple(row.course or ()),
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_newest_first(self) -> Sequence[DomainEmployee]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Employee)
                .order_by(Employee.created_at.desc(), Employee.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def find_by_id(self, employee_id: int) -> DomainEmployee | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Employee, employee_id)
            return _to_domain(row) if row else None

    def find_by_email(self, email: str) -> DomainEmployee | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Employee).filter(Employee.email == email).first()
            return _to_domain(row) if row else None

    def create(self, employee: EmployeeFields) -> DomainEmployee:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Employee(
                    name=employee.name,
                    email=employee.email,
                    mobile=employee.mobile,
                    designation=employee.designation,
                    gender=employee.gender,
                    course=list(employee.course),
                    image=employee.image,
                )
                session.add(row)
                session.flush()
                created = _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateEmployeeEmailError() from exc
        return created

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> DomainEmployee | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(Employee, employee_id)
                if row is None:
                    return None
                for key, value in changes.items():
                    if key not in _UPDATABLE:
                        continue
                    setattr(row, key, list(value) if key == "course" else value)
                session.flush()
                updated = _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateEmployeeEmailError() from exc
        return updated

    def delete(self, employee_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Employee, employee_id)
            if row is None:
                return False
            session.delete(row)
            return True
