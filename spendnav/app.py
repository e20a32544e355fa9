# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from spendnav.infrastructure.container import Container, container as default_container
from spendnav.infrastructure.db import init_db
from spendnav.shared.config import load_config
from spendnav.shared.logging import logger, setup_logging
from spendnav.shared.middleware.error_handler import configure_error_handling
from spendnav.shared.middleware.request_logger import configure_request_logging

_config = load_config()


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container

    setup_logging(debug_mode=_config.debug_logging)
    init_db(container.engine)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    CORS(app, resources={r"/api/*": {"origins": _config.security.allowed_origins}})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.budget_controller.as_blueprint())
    app.register_blueprint(container.expenses_controller.as_blueprint())
    app.register_blueprint(container.analytics_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=_config.port, debug=_config.debug_logging)


if __name__ == "__main__":
    main()
