from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.time_utils import parse_iso_date
from ..core.constants import WEEKEND_DAYS
from ..core.exceptions import ValidationError
from ..container import Container
from ..validation.break_validator import validate_day
from .model import DayEntry, Timesheet, to_bool
from .policy import reason_required


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service
    calculation = container.calculation_service

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _timesheet_payload(timesheet: Timesheet, totals) -> dict:
        return {
            "success": True,
            "timesheet": timesheet.to_dict(),
            "totals": totals.to_dict(),
            "outOfTownHours": service.out_of_town_total(timesheet),
        }

    def _bad_request(e: ValidationError):
        return jsonify({"success": False, "message": str(e), "errors": e.errors}), 400

    def _server_error():
        app.logger.exception("Unhandled error in timesheet API")
        return jsonify({"success": False, "message": "Internal error while processing timesheet"}), 500

    @app.route("/api/timesheets/calculate", methods=["POST"], endpoint="timesheet_calculate")
    def calculate():
        try:
            timesheet = Timesheet.from_dict(_json_body())
            totals = service.recalculate(timesheet)
            return jsonify(_timesheet_payload(timesheet, totals)), 200
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error()

    @app.route("/api/timesheets/validate", methods=["POST"], endpoint="timesheet_validate")
    def validate():
        try:
            timesheet = Timesheet.from_dict(_json_body())
            service.recalculate(timesheet)
            errors = service.validate_week(timesheet)
            reasons = {
                name: reason_required(name, entry)
                for name, entry in timesheet.iter_days()
            }
            return jsonify({"valid": not errors, "errors": errors, "reasonRequired": reasons}), 200
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error()

    @app.route("/api/timesheets/submit", methods=["POST"], endpoint="timesheet_submit")
    def submit():
        try:
            timesheet = Timesheet.from_dict(_json_body())
            totals = service.submit(timesheet)
            return jsonify(_timesheet_payload(timesheet, totals)), 200
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error()

    @app.route("/api/timesheets/certify", methods=["POST"], endpoint="timesheet_certify")
    def certify():
        try:
            timesheet = Timesheet.from_dict(_json_body())
            totals = service.certify(timesheet)
            return jsonify(_timesheet_payload(timesheet, totals)), 200
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error()

    @app.route("/api/days/classify", methods=["POST"], endpoint="day_classify")
    def classify():
        """Classify a single day.

        Body: {"day": {...}, "dayName": "saturday"} or explicit
        "isWeekend"/"isSeventhConsecutiveDay" flags, which win over dayName.
        """
        try:
            data = _json_body()
            entry = DayEntry.from_dict(data.get("day") or {})
            day_name = str(data.get("dayName") or "").lower()
            is_weekend = to_bool(data.get("isWeekend", day_name in WEEKEND_DAYS))
            is_seventh = to_bool(data.get("isSeventhConsecutiveDay", entry.is_seventh_consecutive_day))

            hours = calculation.classify_day(entry, is_weekend, is_seventh)
            return jsonify({
                "success": True,
                "hours": hours.to_dict(),
                "validation": validate_day(entry).to_dict(),
            }), 200
        except ValidationError as e:
            return _bad_request(e)
        except Exception:
            return _server_error()

    @app.route("/api/weeks/<week_start>/template", methods=["GET"], endpoint="week_template")
    def week_template(week_start: str):
        try:
            start = parse_iso_date(week_start)
        except ValueError:
            return jsonify({"success": False, "message": "Invalid date, expected YYYY-MM-DD"}), 400

        user_id = request.args.get("user_id", type=int)
        timesheet = service.new_week(user_id=user_id, week_start=start)
        totals = service.recalculate(timesheet)
        return jsonify(_timesheet_payload(timesheet, totals)), 200
