# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os
import sys

from flask import Flask
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.middleware.proxy_fix import ProxyFix

from empdir.infrastructure.container import Container
from empdir.shared.config import AppConfig, load_config
from empdir.shared.logging import logger, setup_logging
from empdir.shared.middleware.error_handler import configure_error_handling
from empdir.shared.middleware.rate_limit import configure_rate_limiting
from empdir.shared.middleware.request_logger import configure_request_logging

CONTAINER_KEY = "empdir.container"


def _init_storage(container: Container) -> None:
    try:
        container.database.init_schema()
    except SQLAlchemyError as exc:
        logger.critical(f"startup: database unreachable ({type(exc).__name__}), exiting")
        sys.exit(1)


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    container = Container(config)
    _init_storage(container)

    app = Flask(__name__)
    app.config.update(MAX_CONTENT_LENGTH=config.storage.max_upload_bytes)
    app.extensions[CONTAINER_KEY] = container

    if config.security.trust_proxy:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)  # type: ignore[method-assign]

    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_rate_limiting(app, config.security)
    configure_error_handling(app, debug_mode=config.debug_logging)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        supports_credentials=True,
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())
    app.register_blueprint(container.employees_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "5000")))


if __name__ == "__main__":
    main()
