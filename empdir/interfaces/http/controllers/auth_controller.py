# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from empdir.application.use_cases.accounts.login_account import LoginAccountUseCase
from empdir.application.use_cases.accounts.logout_account import LogoutAccountUseCase
from empdir.application.use_cases.accounts.register_account import RegisterAccountUseCase
from empdir.application.use_cases.accounts.who_am_i import WhoAmIUseCase
from empdir.domain.accounts.entities import Principal
from empdir.domain.accounts.exceptions import InvalidCredentialsError
from empdir.infrastructure.audit import AuditAction, audit_log
from empdir.interfaces.http.authorization import AuthorizationGate, SessionCookie
from empdir.interfaces.http.dto.auth import (
    CurrentUserDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    MessageDTO,
    RegisterRequestDTO,
)
from empdir.shared.errors.validation import raise_validation_error
from empdir.shared.logging import logger


def _get_client_ip() -> str | None:
    return request.remote_addr


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterAccountUseCase,
        login_use_case: LoginAccountUseCase,
        logout_use_case: LogoutAccountUseCase,
        who_am_i_use_case: WhoAmIUseCase,
        gate: AuthorizationGate,
        cookie: SessionCookie,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._who_am_i_use_case = who_am_i_use_case
        self._gate = gate
        self._cookie = cookie

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        account = self._register_use_case.execute(dto.sequence_id, dto.username, dto.secret)

        audit_log(
            AuditAction.REGISTER,
            user_id=account.id,
            ip_address=_get_client_ip(),
            details={"username": dto.username},
            success=True,
        )

        logger.info(f"auth.register: ok account_id={account.id}")
        payload = MessageDTO(msg="User registered successfully").model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()

        try:
            session = self._login_use_case.execute(dto.username, dto.secret)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=session.account_id,
            ip_address=ip_address,
            details={"username": session.username},
            success=True,
        )

        response = jsonify(LoginResponseDTO(username=session.username).model_dump())
        self._cookie.attach(response, session.token)
        logger.info(f"auth.login: ok account_id={session.account_id}")
        return response, HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        account_id = self._logout_use_case.execute(request.cookies.get(self._cookie.name))

        audit_log(
            AuditAction.LOGOUT,
            user_id=account_id,
            ip_address=_get_client_ip(),
            success=True,
        )

        response = jsonify(MessageDTO(msg="Logged out successfully").model_dump())
        self._cookie.clear(response)
        return response, HTTPStatus.OK

    def me(self, principal: Principal) -> tuple[Response, int]:
        account = self._who_am_i_use_case.execute(principal)
        return jsonify(CurrentUserDTO.for_username(account.username).model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule(
            "/me", view_func=self._gate.verify_token(self.me), methods=["GET"], endpoint="me"
        )
        return bp
