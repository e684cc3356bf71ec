from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.auth import manager_required
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from .model import DailyReport

_CSV_FIELDS = ["date", "employee_id", "name", "role", "hourly_rate", "hours_worked", "wages", "tip_share"]


def register(app: Flask, container: Container) -> None:
    def _write_report_csv(*, report: DailyReport, filename: str):
        """Write per-employee rows plus a totals line as a CSV download."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS)
        writer.writeheader()
        day = report.report_date.strftime("%Y-%m-%d")
        for row in report.per_employee:
            writer.writerow(
                {
                    "date": day,
                    "employee_id": row.employee_id,
                    "name": row.name,
                    "role": row.role,
                    "hourly_rate": f"{row.hourly_rate:.2f}",
                    "hours_worked": f"{row.hours_worked:.2f}",
                    "wages": f"{row.wages:.2f}",
                    "tip_share": f"{row.tip_share:.2f}",
                }
            )
        writer.writerow(
            {
                "date": day,
                "name": "TOTAL",
                "hours_worked": f"{report.total_hours:.2f}",
                "wages": f"{report.total_wages:.2f}",
                "tip_share": f"{report.total_tips:.2f}",
            }
        )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/daily", methods=["GET"], endpoint="reports_daily")
    @manager_required
    def reports_daily():
        report_date = parse_iso_date(request.args.get("date", ""))
        return jsonify(container.payroll_report_service.daily_report(report_date).to_dict())

    @app.route("/api/reports/daily.csv", methods=["GET"], endpoint="reports_daily_csv")
    @manager_required
    def reports_daily_csv():
        report_date = parse_iso_date(request.args.get("date", ""))
        report = container.payroll_report_service.daily_report(report_date)
        return _write_report_csv(report=report, filename=f"wages-tips-{report_date:%Y-%m-%d}.csv")

    @app.route("/api/reports/weekly", methods=["GET"], endpoint="reports_weekly")
    @manager_required
    def reports_weekly():
        reference = parse_iso_date(request.args.get("date", ""))
        return jsonify(container.payroll_report_service.weekly_report(reference).to_dict())

    @app.route("/api/reports/overview", methods=["GET"], endpoint="reports_overview")
    @manager_required
    def reports_overview():
        return jsonify(container.payroll_report_service.overview())
