from __future__ import annotations

import csv
import io
import logging
from functools import wraps

import pandas as pd
from flask import Flask, jsonify, request, send_file

from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = {
    "date": "Ngày",
    "weekday": "Thứ",
    "check_in": "Giờ vào",
    "check_out": "Giờ ra",
    "status": "Trạng thái",
    "late_minutes": "Phút đi muộn",
    "early_minutes": "Phút về sớm",
    "note": "Ghi chú",
}


def register(app: Flask, container: Container) -> None:
    service = container.ledger_service

    def json_errors(message: str):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                try:
                    return view(*args, **kwargs)
                except ValidationError as e:
                    return jsonify({"success": False, "message": str(e)}), 400
                except Exception:
                    logger.exception("%s failed", view.__name__)
                    return jsonify({"success": False, "message": message}), 500

            return wrapper

        return decorator

    def _analyze_from_request():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError("Dữ liệu gửi lên phải là một đối tượng JSON")
        return service.analyze_text(
            text=str(data.get("text") or ""),
            shift_id=data.get("shift_id"),
            start=data.get("start"),
            end=data.get("end"),
        )

    def _filename(report, ext: str) -> str:
        if not report.records:
            return f"bang_cong.{ext}"
        first, last = report.records[0].date, report.records[-1].date
        return f"bang_cong_{first.strftime('%Y%m%d')}_{last.strftime('%Y%m%d')}.{ext}"

    def _export_rows(report) -> list[dict]:
        return [{label: row[key] for key, label in EXPORT_COLUMNS.items()} for row in service.get_rows_ui(report)]

    @app.route("/api/shifts", methods=["GET"], endpoint="api_shifts")
    def api_shifts():
        return jsonify(
            {
                "success": True,
                "shifts": [
                    {
                        "id": s.shift_id.value,
                        "name": s.shift_name,
                        "start_time": s.start_time.strftime("%H:%M"),
                        "end_time": s.end_time.strftime("%H:%M"),
                        "grace_minutes": s.grace_minutes,
                        "label": s.describe(),
                    }
                    for s in service.list_shifts()
                ],
            }
        )

    @app.route("/api/ledger/analyze", methods=["POST"], endpoint="api_ledger_analyze")
    @json_errors("Lỗi hệ thống khi phân tích dữ liệu chấm công")
    def api_ledger_analyze():
        report = _analyze_from_request()

        return jsonify(
            {
                "success": True,
                "shift": report.shift.describe(),
                "punch_count": len(report.punches),
                "rows": service.get_rows_ui(report),
                "summary": service.summary_ui(report.summary),
            }
        )

    @app.route("/api/ledger/export.csv", methods=["POST"], endpoint="api_ledger_export_csv")
    @json_errors("Lỗi xuất file CSV")
    def api_ledger_export_csv():
        report = _analyze_from_request()

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(EXPORT_COLUMNS.values()))
        writer.writeheader()
        writer.writerows(_export_rows(report))

        # BOM so Excel opens Vietnamese text correctly.
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return send_file(
            io.BytesIO(csv_bytes),
            mimetype="text/csv",
            as_attachment=True,
            download_name=_filename(report, "csv"),
        )

    @app.route("/api/ledger/export.xlsx", methods=["POST"], endpoint="api_ledger_export_xlsx")
    @json_errors("Lỗi xuất file Excel")
    def api_ledger_export_xlsx():
        report = _analyze_from_request()

        df = pd.DataFrame(_export_rows(report), columns=list(EXPORT_COLUMNS.values()))
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Bảng công")
        out.seek(0)
        return send_file(
            out,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=_filename(report, "xlsx"),
        )
