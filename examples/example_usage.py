"""Ví dụ: dùng service layer (không qua Flask).

Dán log xuất từ máy chấm công, nhận bảng công theo ngày và bảng tổng hợp.
"""

import importlib

from config import get_settings_module

from src.timesheet_ledger.timesheet_ledger.container import build_container, settings_dict

SAMPLE_LOG = """
NV001  13/01/2024 08:05:00 SA  Vân tay
NV001  13/01/2024 06:10:00 CH  Vân tay
NV001  15/01/2024 08:25:00 AM  Thẻ
NV001  15/01/2024 05:30:00 PM  Thẻ
NV001  19/01/2024 04:40:00 PM  Thẻ
"""


def main():
    settings = settings_dict(importlib.import_module(get_settings_module()))
    container = build_container(settings=settings)
    service = container.ledger_service

    report = service.analyze_text(text=SAMPLE_LOG, shift_id="SHIFT_1")
    for row in service.get_rows_ui(report):
        print(row["date"], row["weekday"], row["check_in"], row["check_out"], row["status"], row["note"])
    print(service.summary_ui(report.summary))


if __name__ == "__main__":
    main()
