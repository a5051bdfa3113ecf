# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP controller for the employee directory."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from empdir.application.use_cases.employees.create_employee import CreateEmployeeUseCase
from empdir.application.use_cases.employees.delete_employee import DeleteEmployeeUseCase
from empdir.application.use_cases.employees.get_employee import GetEmployeeUseCase
from empdir.application.use_cases.employees.list_employees import ListEmployeesUseCase
from empdir.application.use_cases.employees.update_employee import UpdateEmployeeUseCase
from empdir.domain.accounts.entities import Principal
from empdir.domain.employees.entities import ImageUpload
from empdir.infrastructure.audit import AuditAction, audit_log
from empdir.interfaces.http.authorization import AuthorizationGate
from empdir.interfaces.http.dto.employees import EmployeeDTO, EmployeeFormDTO, EmployeeUpdateDTO
from empdir.shared.errors.validation import raise_validation_error
from empdir.shared.logging import logger


def _image_from_request() -> ImageUpload | None:
    upload = request.files.get("image")
    if upload is None or not upload.filename:
        return None
    return ImageUpload(
        filename=upload.filename,
        content_type=upload.mimetype,
        stream=upload.stream,
    )


class EmployeesController:
    def __init__(
        self,
        *,
        create_use_case: CreateEmployeeUseCase,
        list_use_case: ListEmployeesUseCase,
        get_use_case: GetEmployeeUseCase,
        update_use_case: UpdateEmployeeUseCase,
        delete_use_case: DeleteEmployeeUseCase,
        gate: AuthorizationGate,
    ) -> None:
        self._create = create_use_case
        self._list = list_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._gate = gate

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("employees", __name__, url_prefix="/api/employees")
        protect = self._gate.verify_token

        bp.add_url_rule(
            "", view_func=protect(self.list_employees), methods=["GET"], endpoint="employees_list"
        )
        bp.add_url_rule(
            "", view_func=protect(self.create), methods=["POST"], endpoint="employee_create"
        )
        bp.add_url_rule(
            "/<int:employee_id>",
            view_func=protect(self.get),
            methods=["GET"],
            endpoint="employee_get",
        )
        bp.add_url_rule(
            "/<int:employee_id>",
            view_func=protect(self.update),
            methods=["PUT"],
            endpoint="employee_update",
        )
        bp.add_url_rule(
            "/<int:employee_id>",
            view_func=protect(self.delete),
            methods=["DELETE"],
            endpoint="employee_delete",
        )
        return bp

    def list_employees(self, principal: Principal) -> Response:
        items = self._list.execute()
        logger.info(f"employees.list: ok (user_id={principal.account_id}, n={len(items)})")
        return jsonify([EmployeeDTO.from_domain(item).to_json() for item in items])

    def create(self, principal: Principal) -> tuple[Response, int]:
        try:
            dto = EmployeeFormDTO.from_form(request.form)
        except ValidationError as exc:
            raise_validation_error(exc)

        employee = self._create.execute(dto.to_fields(), _image_from_request())

        audit_log(
            AuditAction.EMPLOYEE_CREATED,
            user_id=principal.account_id,
            details={"employee_id": employee.id},
        )
        payload = {
            "msg": "Employee created successfully",
            "employee": EmployeeDTO.from_domain(employee).to_json(),
        }
        return jsonify(payload), HTTPStatus.CREATED

    def get(self, employee_id: int, principal: Principal) -> Response:
        employee = self._get.execute(employee_id)
        return jsonify(EmployeeDTO.from_domain(employee).to_json())

    def update(self, employee_id: int, principal: Principal) -> Response:
        try:
            dto = EmployeeUpdateDTO.from_form(request.form)
        except ValidationError as exc:
            raise_validation_error(exc)

        employee = self._update.execute(employee_id, dto.to_update(), _image_from_request())

        audit_log(
            AuditAction.EMPLOYEE_UPDATED,
            user_id=principal.account_id,
            details={"employee_id": employee_id},
        )
        return jsonify(
            {
                "msg": "Employee updated successfully",
                "employee": EmployeeDTO.from_domain(employee).to_json(),
            }
        )

    def delete(self, employee_id: int, principal: Principal) -> Response:
        self._delete.execute(employee_id)

        audit_log(
            AuditAction.EMPLOYEE_DELETED,
            user_id=principal.account_id,
            details={"employee_id": employee_id},
        )
        return jsonify({"msg": "Employee deleted successfully"})
