# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.accounts.login_account import LoginAccountUseCase
from .use_cases.accounts.logout_account import LogoutAccountUseCase
from .use_cases.accounts.register_account import RegisterAccountUseCase
from .use_cases.accounts.who_am_i import WhoAmIUseCase
from .use_cases.employees.create_employee import CreateEmployeeUseCase
from .use_cases.employees.delete_employee import DeleteEmployeeUseCase
from .use_cases.employees.get_employee import GetEmployeeUseCase
from .use_cases.employees.list_employees import ListEmployeesUseCase
from .use_cases.employees.update_employee import UpdateEmployeeUseCase

__all__ = [
    "LoginAccountUseCase",
    "LogoutAccountUseCase",
    "RegisterAccountUseCase",
    "WhoAmIUseCase",
    "CreateEmployeeUseCase",
    "DeleteEmployeeUseCase",
    "GetEmployeeUseCase",
    "ListEmployeesUseCase",
    "UpdateEmployeeUseCase",
]
