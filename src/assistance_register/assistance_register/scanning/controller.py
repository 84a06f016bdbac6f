from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.constants import DEFAULT_NOTICE_LIMIT
from ..core.enums import ScanMode
from ..container import Container

logger = logging.getLogger(__name__)


def _json_object() -> dict | None:
    """Request body as a dict; an absent or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def register(app: Flask, container: Container) -> None:
    controller = container.scan_controller
    capture = container.capture

    def _feed(code: str):
        if not code:
            return jsonify({"success": False, "message": "El código QR no puede estar vacío"}), 400
        if not capture.submit_code(code):
            return jsonify({
                "success": False,
                "message": "El escáner no está esperando un código",
                "session": controller.snapshot().to_dict(),
            }), 409
        return jsonify({"success": True, "message": "Código recibido"}), 202

    @app.route("/api/scan/start", methods=["POST"], endpoint="api_scan_start")
    def api_scan_start():
        data = _json_object()
        if data is None:
            return jsonify({"success": False, "message": "El cuerpo de la solicitud debe ser un objeto JSON"}), 400
        raw_mode = str(data.get("mode", ScanMode.SINGLE.value)).lower()
        try:
            mode = ScanMode(raw_mode)
        except ValueError:
            return jsonify({"success": False, "message": f"Modo inválido: {raw_mode}"}), 400

        controller.start_scan(mode)
        return jsonify({"success": True, "message": "Escaneo solicitado", "mode": mode.value}), 202

    @app.route("/api/scan/stop", methods=["POST"], endpoint="api_scan_stop")
    def api_scan_stop():
        controller.stop_scan()
        return jsonify({"success": True, "message": "Detención solicitada"}), 202

    @app.route("/api/scan/code", methods=["POST"], endpoint="api_scan_code")
    def api_scan_code():
        data = _json_object()
        if data is None:
            return jsonify({"success": False, "message": "El cuerpo de la solicitud debe ser un objeto JSON"}), 400
        return _feed(str(data.get("code", "")).strip())

    @app.route("/api/scan/image", methods=["POST"], endpoint="api_scan_image")
    def api_scan_image():
        """Accept an uploaded photo, decode the QR and feed it to the scan cycle."""
        if "image" not in request.files:
            return jsonify({"success": False, "message": "Falta el archivo de imagen"}), 400

        from .image_decoder import decode_image

        try:
            code = decode_image(request.files["image"].stream)
        except Exception:
            logger.exception("Could not decode uploaded image")
            return jsonify({"success": False, "message": "No se pudo leer la imagen"}), 400

        if not code:
            return jsonify({"success": False, "message": "No se detectó un código QR en la imagen"}), 400
        return _feed(code)

    @app.route("/api/scan/cancel", methods=["POST"], endpoint="api_scan_cancel")
    def api_scan_cancel():
        if not capture.user_cancel():
            return jsonify({"success": False, "message": "No hay un escaneo pendiente"}), 409
        return jsonify({"success": True, "message": "Escaneo cancelado"}), 202

    @app.route("/api/scan/enable", methods=["POST"], endpoint="api_scan_enable")
    def api_scan_enable():
        controller.enable_capture()
        return jsonify({"success": True, "message": "Escaneo automático habilitado"}), 202

    @app.route("/api/scan/status", methods=["GET"], endpoint="api_scan_status")
    def api_scan_status():
        return jsonify({"success": True, "session": controller.snapshot().to_dict(), "waiting": capture.waiting})

    @app.route("/api/notices", methods=["GET"], endpoint="api_notices")
    def api_notices():
        limit = request.args.get("limit", type=int) or DEFAULT_NOTICE_LIMIT
        notices = container.notices.recent(limit)
        return jsonify({"success": True, "notices": [n.to_dict() for n in notices]})
