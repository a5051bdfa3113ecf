# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from empdir.domain.accounts.entities import Principal
from empdir.interfaces.http.authorization import AuthorizationGate


class AdminController:
    def __init__(self, *, gate: AuthorizationGate) -> None:
        self._gate = gate

    def welcome(self, principal: Principal):
        return jsonify(
            {
                "msg": f"Welcome Admin, user ID: {principal.account_id}",
                "username": principal.username or "Admin",
            }
        )

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/admin",
            view_func=self._gate.verify_token(self.welcome),
            methods=["GET"],
            endpoint="admin_welcome",
        )
        return bp
