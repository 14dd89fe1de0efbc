from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..auth.guard import auth_required
from ..container import Container
from ..core.constants import AUTH_COOKIE_NAME
from ..core.exceptions import AuthenticationError, StorageError, ValidationError

logger = logging.getLogger(__name__)

STORAGE_DOWN_MESSAGE = "Database connection failed. Using demo mode."


def register(app: Flask, container: Container) -> None:
    def cookie_name() -> str:
        return app.config.get("AUTH_COOKIE_NAME", AUTH_COOKIE_NAME)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            result = container.auth_service.authenticate(data.get("email"), data.get("password"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except StorageError:
            logger.exception("Login lookup failed")
            # Legacy clients expect 200 here; see LOGIN_STORAGE_ERROR_STATUS.
            status = int(app.config.get("LOGIN_STORAGE_ERROR_STATUS", 200))
            return jsonify({"error": STORAGE_DOWN_MESSAGE}), status
        except Exception:
            logger.exception("Login error")
            return jsonify({"error": "Internal server error"}), 500

        response = jsonify(result.to_dict())
        response.set_cookie(
            cookie_name(),
            result.token,
            max_age=int(app.config.get("TOKEN_TTL_HOURS", 24)) * 3600,
            samesite="Strict",
            httponly=True,
        )
        return response

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        response = jsonify({"success": True})
        response.delete_cookie(cookie_name())
        return response

    @app.route("/me", methods=["GET"], endpoint="me")
    @auth_required(container.token_service)
    def me():
        return jsonify({"success": True, "user": g.principal.to_dict()})
