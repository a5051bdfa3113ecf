from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from werkzeug.datastructures import MultiDict

from empdir.domain.employees.entities import Employee, EmployeeFields, EmployeeUpdate

_TEXT_FIELDS = ("name", "email", "mobile", "designation", "gender")


def _course_values(form: MultiDict) -> list[str]:
    values = form.getlist("course") or form.getlist("course[]")
    return [value.strip() for value in values if value and value.strip()]


class EmployeeFormDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=3, max_length=256)
    mobile: str = Field(min_length=1, max_length=32)
    designation: str = Field(min_length=1, max_length=64)
    gender: str = Field(min_length=1, max_length=16)
    course: list[str] = Field(min_length=1)

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def from_form(cls, form: MultiDict) -> EmployeeFormDTO:
        payload: dict[str, object] = {key: form.get(key) for key in _TEXT_FIELDS}
        payload["course"] = _course_values(form)
        return cls.model_validate(payload)

    def to_fields(self) -> EmployeeFields:
        return EmployeeFields(
            name=self.name,
            email=self.email,
            mobile=self.mobile,
            designation=self.designation,
            gender=self.gender,
            course=tuple(self.course),
        )


class EmployeeUpdateDTO(BaseModel):
    """Only non-empty fields are applied."""

    name: str | None = Field(None, max_length=128)
    email: str | None = Field(None, max_length=256)
    mobile: str | None = Field(None, max_length=32)
    designation: str | None = Field(None, max_length=64)
    gender: str | None = Field(None, max_length=16)
    course: list[str] | None = None

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @classmethod
    def from_form(cls, form: MultiDict) -> EmployeeUpdateDTO:
        payload: dict[str, object] = {key: form.get(key) for key in _TEXT_FIELDS}
        payload["course"] = _course_values(form) or None
        return cls.model_validate(payload)

    def to_update(self) -> EmployeeUpdate:
        return EmployeeUpdate(
            name=self.name,
            email=self.email,
            mobile=self.mobile,
            designation=self.designation,
            gender=self.gender,
            course=tuple(self.course) if self.course else None,
        )


class EmployeeDTO(BaseModel):
    id: int
    name: str
    email: str
    mobile: str
    designation: str
    gender: str
    course: list[str]
    image: str | None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_domain(cls, employee: Employee) -> EmployeeDTO:
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            mobile=employee.mobile,
            designation=employee.designation,
            gender=employee.gender,
            course=list(employee.course),
            image=employee.image,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )

    def to_json(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
