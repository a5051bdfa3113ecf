# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from empdir.application.services.password_hashing import WerkzeugPasswordHasher
from empdir.application.services.session_tokens import JwtSessionTokenCodec
from empdir.application.use_cases.accounts.login_account import LoginAccountUseCase
from empdir.application.use_cases.accounts.logout_account import LogoutAccountUseCase
from empdir.application.use_cases.accounts.register_account import RegisterAccountUseCase
from empdir.application.use_cases.accounts.who_am_i import WhoAmIUseCase
from empdir.application.use_cases.employees.create_employee import CreateEmployeeUseCase
from empdir.application.use_cases.employees.delete_employee import DeleteEmployeeUseCase
from empdir.application.use_cases.employees.get_employee import GetEmployeeUseCase
from empdir.application.use_cases.employees.list_employees import ListEmployeesUseCase
from empdir.application.use_cases.employees.update_employee import UpdateEmployeeUseCase
from empdir.infrastructure.db import Database
from empdir.infrastructure.repositories.accounts.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from empdir.infrastructure.repositories.employees.sqlalchemy_employee_repository import (
    SqlAlchemyEmployeeRepository,
)
from empdir.infrastructure.storage import LocalImageStorage
from empdir.interfaces.http.authorization import AuthorizationGate, SessionCookie
from empdir.interfaces.http.controllers.admin_controller import AdminController
from empdir.interfaces.http.controllers.auth_controller import AuthController
from empdir.interfaces.http.controllers.employees_controller import EmployeesController
from empdir.interfaces.http.controllers.misc_controller import MiscController
from empdir.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.password_hash_method)

    @cached_property
    def session_token_codec(self) -> JwtSessionTokenCodec:
        if not self.config.jwt_secret:
            raise RuntimeError("JWT_SECRET is not configured")
        return JwtSessionTokenCodec(self.config.jwt_secret)

    @cached_property
    def session_cookie(self) -> SessionCookie:
        return SessionCookie(
            secure=self.config.cookie_secure,
            max_age=int(self.session_token_codec.ttl.total_seconds()),
        )

    @cached_property
    def authorization_gate(self) -> AuthorizationGate:
        return AuthorizationGate(self.session_token_codec, self.session_cookie)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.database.session_factory)

    @cached_property
    def employee_repository(self) -> SqlAlchemyEmployeeRepository:
        return SqlAlchemyEmployeeRepository(self.database.session_factory)

    @cached_property
    def image_storage(self) -> LocalImageStorage:
        return LocalImageStorage(self.config.storage.upload_dir)

    # Account use cases

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.session_token_codec,
        )

    @cached_property
    def logout_account_use_case(self) -> LogoutAccountUseCase:
        return LogoutAccountUseCase(tokens=self.session_token_codec)

    @cached_property
    def who_am_i_use_case(self) -> WhoAmIUseCase:
        return WhoAmIUseCase(accounts=self.account_repository)

    # Employee use cases

    @cached_property
    def create_employee_use_case(self) -> CreateEmployeeUseCase:
        return CreateEmployeeUseCase(
            employees=self.employee_repository, images=self.image_storage
        )

    @cached_property
    def list_employees_use_case(self) -> ListEmployeesUseCase:
        return ListEmployeesUseCase(employees=self.employee_repository)

    @cached_property
    def get_employee_use_case(self) -> GetEmployeeUseCase:
        return GetEmployeeUseCase(employees=self.employee_repository)

    @cached_property
    def update_employee_use_case(self) -> UpdateEmployeeUseCase:
        return UpdateEmployeeUseCase(
            employees=self.employee_repository, images=self.image_storage
        )

    @cached_property
    def delete_employee_use_case(self) -> DeleteEmployeeUseCase:
        return DeleteEmployeeUseCase(employees=self.employee_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
            logout_use_case=self.logout_account_use_case,
            who_am_i_use_case=self.who_am_i_use_case,
            gate=self.authorization_gate,
            cookie=self.session_cookie,
        )

    @cached_property
    def employees_controller(self) -> EmployeesController:
        return EmployeesController(
            create_use_case=self.create_employee_use_case,
            list_use_case=self.list_employees_use_case,
            get_use_case=self.get_employee_use_case,
            update_use_case=self.update_employee_use_case,
            delete_use_case=self.delete_employee_use_case,
            gate=self.authorization_gate,
        )

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(gate=self.authorization_gate)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
