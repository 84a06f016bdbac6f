from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container
from .model import ManualEntryForm

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.manual_service

    @app.route("/api/manual/roles", methods=["GET"], endpoint="api_manual_roles")
    def api_manual_roles():
        return jsonify({"success": True, "roles": list(service.roles)})

    @app.route("/api/manual", methods=["POST"], endpoint="api_manual_submit")
    def api_manual_submit():
        try:
            form = ManualEntryForm.from_payload(request.get_json(silent=True) or {})
            record = service.submit(form)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        except Exception:
            logger.exception("Manual entry failed")
            return jsonify({"success": False, "message": "Error del sistema al guardar el registro"}), 500

        return jsonify({
            "success": True,
            "message": f"El registro se GUARDÓ correctamente {record.name}",
            "record": record.to_dict(),
        }), 201
