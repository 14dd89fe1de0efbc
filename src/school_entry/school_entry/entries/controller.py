from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..auth.guard import auth_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/entry", methods=["POST"], endpoint="record_entry")
    @auth_required(container.token_service, Role.TEACHER)
    def record_entry():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            confirmation = container.entry_service.record(g.principal, data.get("studentId"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Entry recording error")
            return jsonify({"error": "Internal server error"}), 500
        return jsonify(confirmation.to_dict())

    @app.route("/entry", methods=["GET"], endpoint="list_entries")
    @auth_required(container.token_service, Role.TEACHER)
    def list_entries():
        try:
            listing = container.entry_service.list_for_date(g.principal, request.args.get("date"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Entries retrieval error")
            return jsonify({"error": "Internal server error"}), 500
        return jsonify(listing.to_dict())
