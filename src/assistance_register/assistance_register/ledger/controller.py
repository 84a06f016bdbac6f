from __future__ import annotations

import logging

from flask import Flask, jsonify, send_file

from ..core.enums import ResetOutcome
from ..core.exceptions import PersistenceError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger

    @app.route("/api/ledger/rows", methods=["GET"], endpoint="api_ledger_rows")
    def api_ledger_rows():
        try:
            records = ledger.read_records()
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify({"success": True, "count": len(records), "rows": [r.to_dict() for r in records]})

    @app.route("/api/ledger/reset", methods=["POST"], endpoint="api_ledger_reset")
    def api_ledger_reset():
        try:
            outcome = ledger.reset()
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500

        if outcome == ResetOutcome.NOTHING_TO_RESET:
            return jsonify({"success": True, "outcome": outcome.value, "message": "No hay archivo para resetear"})
        return jsonify({"success": True, "outcome": outcome.value, "message": "Archivo reseteado correctamente"})

    @app.route("/api/ledger/export", methods=["POST"], endpoint="api_ledger_export")
    def api_ledger_export():
        try:
            target = ledger.export_copy(container.export_dir)
        except PersistenceError as e:
            status = 404 if not ledger.exists() else 500
            return jsonify({"success": False, "message": str(e)}), status
        return jsonify({"success": True, "message": f"Archivo guardado: {target.name}", "path": str(target)}), 201

    @app.route("/api/ledger/download", methods=["GET"], endpoint="api_ledger_download")
    def api_ledger_download():
        """Export a copy, then stream that copy (the live ledger keeps growing)."""
        try:
            target = ledger.export_copy(container.export_dir)
        except PersistenceError as e:
            status = 404 if not ledger.exists() else 500
            return jsonify({"success": False, "message": str(e)}), status

        return send_file(
            target.resolve(),
            mimetype="text/csv",
            as_attachment=True,
            download_name=target.name,
        )
