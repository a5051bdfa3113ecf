# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify

from empdir.infrastructure.db import Database
from empdir.infrastructure.health import check_database


class MiscController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        if check_database(self._database):
            return jsonify({"ok": True, "database": "ok"}), HTTPStatus.OK
        return jsonify({"ok": False, "database": "unavailable"}), HTTPStatus.SERVICE_UNAVAILABLE
