from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from .presenters import active_data_to_dict, daily_data_to_dict, period_data_to_dict, validation_data_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _date_arg(name: str) -> Optional[date]:
        value = request.args.get(name)
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError as e:
            raise ValidationError(f"{name} inválido") from e

    def _error(message: str, status: int):
        return jsonify({"success": False, "error": message}), status

    @app.route("/api/reports/period", methods=["GET"], endpoint="api_reports_period")
    def api_reports_period():
        try:
            data = container.report_service.period_report(
                start=_date_arg("startDate"),
                end=_date_arg("endDate"),
                employee_id=(request.args.get("employeeNumber") or "").strip() or None,
            )
            return jsonify(period_data_to_dict(data))
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Error generando reporte por periodo")
            return _error("Error interno al generar reporte", 500)

    @app.route("/api/reports/daily", methods=["GET"], endpoint="api_reports_daily")
    def api_reports_daily():
        try:
            start = _date_arg("startDate") or _date_arg("date") or date.today()
            data = container.report_service.daily_report(
                start=start,
                end=_date_arg("endDate"),
                employee_id=(request.args.get("employeeNumber") or "").strip() or None,
            )
            return jsonify(daily_data_to_dict(data))
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Error en reporte diario")
            return _error("Error al generar reporte diario", 500)

    @app.route("/api/reports/validation", methods=["GET"], endpoint="api_reports_validation")
    def api_reports_validation():
        try:
            work_date = _date_arg("date") or date.today()
            data = container.report_service.validation_report(work_date=work_date)
            return jsonify(validation_data_to_dict(data))
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Error en validación")
            return _error("Error al realizar validación", 500)

    @app.route("/api/reports/active", methods=["GET"], endpoint="api_reports_active")
    def api_reports_active():
        try:
            data = container.report_service.active_report()
            return jsonify(active_data_to_dict(data))
        except Exception:
            logger.exception("Error en reporte de empleados activos")
            return _error("Error al obtener empleados activos", 500)
