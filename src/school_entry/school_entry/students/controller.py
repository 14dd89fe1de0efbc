from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.guard import auth_required
from ..container import Container
from ..core.enums import Role

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["GET"], endpoint="list_students")
    @auth_required(container.token_service, Role.TEACHER)
    def list_students():
        try:
            listing = container.student_service.list_all()
        except Exception:
            logger.exception("Student listing error")
            return jsonify({"error": "Internal server error"}), 500
        return jsonify(listing.to_dict())
