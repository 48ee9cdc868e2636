from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_jsonable
from ..common.validators import require_int
from ..core.constants import OVERTIME_LIMIT_HOURS
from ..core.exceptions import ValidationError
from ..overtime.alerts import (
    OVERTIME_ALERT_INFO,
    get_overtime_alert_level,
    is_overtime_on_pace_to_exceed,
    needs_medical_guidance,
)
from ..reports.violation_types import VIOLATION_DISPLAY_INFO, VIOLATION_URGENCY
from .payload import record_from_dict, records_from_payload


def register(app: Flask, container) -> None:
    service = container.analysis_service

    @app.route("/api/attendance/daily", methods=["POST"], endpoint="api_attendance_daily")
    def api_attendance_daily():
        try:
            record = record_from_dict(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        analysis = service.analyze_daily_record(record)
        return jsonify({"success": True, "analysis": to_jsonable(analysis)}), 200

    @app.route("/api/attendance/analyze", methods=["POST"], endpoint="api_attendance_analyze")
    def api_attendance_analyze():
        payload = request.get_json(silent=True)
        try:
            records = records_from_payload(payload)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        include_today = payload.get("include_today")
        result = service.analyze_extended(
            records,
            include_today=None if include_today is None else bool(include_today),
        )
        return jsonify({"success": True, "result": to_jsonable(result)}), 200

    @app.route("/api/attendance/missing-entries", methods=["POST"], endpoint="api_attendance_missing_entries")
    def api_attendance_missing_entries():
        try:
            records = records_from_payload(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        results = service.detect_missing_entries(records)
        return jsonify({
            "success": True,
            "employees": [
                {**to_jsonable(r), "total_missing_days": r.total_missing_days}
                for r in results
            ],
        }), 200

    @app.route("/api/overtime/alert", methods=["GET"], endpoint="api_overtime_alert")
    def api_overtime_alert():
        try:
            minutes = require_int(request.args.get("minutes"), "minutes")
            day = request.args.get("day")
            day_of_month = require_int(day, "day", minimum=1) if day is not None else None
            limit = require_int(request.args.get("limit", OVERTIME_LIMIT_HOURS * 60), "limit")
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        level = get_overtime_alert_level(minutes)
        body = {
            "success": True,
            "level": level.value,
            "info": to_jsonable(OVERTIME_ALERT_INFO[level]),
            "needs_medical_guidance": needs_medical_guidance(minutes),
        }
        if day_of_month is not None:
            body["on_pace_to_exceed"] = is_overtime_on_pace_to_exceed(minutes, day_of_month, limit)
        return jsonify(body), 200

    @app.route("/api/violations/types", methods=["GET"], endpoint="api_violation_types")
    def api_violation_types():
        return jsonify({
            "success": True,
            "types": [
                {
                    "type": violation_type.value,
                    "urgency": VIOLATION_URGENCY[violation_type].value,
                    **to_jsonable(info),
                }
                for violation_type, info in VIOLATION_DISPLAY_INFO.items()
            ],
        }), 200
