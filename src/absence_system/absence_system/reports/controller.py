from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "date",
    "absent_teacher",
    "absent_subject",
    "replacement_teacher",
    "replacement_subject",
    "hours",
    "coverage_type",
]


def register(app: Flask, container: Container) -> None:
    def _month_year() -> tuple[int, int]:
        """Read zero-based ``month`` and ``year`` query args, defaulting to today."""
        today = today_local()
        month_s = request.args.get("month") or str(today.month - 1)
        year_s = request.args.get("year") or str(today.year)
        try:
            return int(month_s), int(year_s)
        except ValueError as e:
            raise ValidationError("Mes o año inválido") from e

    def _write_report_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="api_monthly_report")
    def api_monthly_report():
        try:
            month, year = _month_year()
            data = container.monthly_report_service.build_monthly_report(month=month, year=year)
            payload = data.report.to_dict()
            payload["summary"] = data.summary
            return jsonify(payload)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            return jsonify({"success": False, "message": "Error al cargar los registros."}), 503
        except Exception:
            logger.exception("Unexpected error building monthly report")
            return jsonify({"success": False, "message": "Error del sistema al generar el consolidado"}), 500

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="api_monthly_report_csv")
    def api_monthly_report_csv():
        try:
            month, year = _month_year()
            data = container.monthly_report_service.build_monthly_report(month=month, year=year)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            return jsonify({"success": False, "message": "Error al cargar los registros."}), 503
        except Exception:
            logger.exception("Unexpected error exporting monthly report")
            return jsonify({"success": False, "message": "Error del sistema al exportar el consolidado"}), 500

        filename = f"consolidado_{year}_{month + 1:02d}.csv"
        return _write_report_csv(rows=data.rows, filename=filename)
