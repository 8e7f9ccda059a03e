from __future__ import annotations

from datetime import time

import pytest

from src.timesheet_ledger.timesheet_ledger.core.enums import ShiftType
from src.timesheet_ledger.timesheet_ledger.ledger.engine import LedgerEngine
from src.timesheet_ledger.timesheet_ledger.shifts.model import QuotaPolicy, ShiftPolicy


@pytest.fixture
def shift_1() -> ShiftPolicy:
    return ShiftPolicy(
        shift_id=ShiftType.SHIFT_1,
        shift_name="Ca 1",
        start_time=time(8, 0),
        end_time=time(18, 0),
        grace_minutes=10,
    )


@pytest.fixture
def quota() -> QuotaPolicy:
    return QuotaPolicy(friday_early_minutes=60, incident_cap_minutes=90, monthly_incident_cap=2)


@pytest.fixture
def engine(quota) -> LedgerEngine:
    return LedgerEngine(quota)


@pytest.fixture
def shift_settings() -> list[dict]:
    return [
        {"id": "SHIFT_1", "name": "Ca 1", "start_time": "08:00", "end_time": "18:00", "grace_minutes": 10},
        {"id": "SHIFT_2", "name": "Ca 2", "start_time": "08:30", "end_time": "18:30", "grace_minutes": 10},
        {"id": "SHIFT_3", "name": "Ca 3", "start_time": "09:00", "end_time": "19:00", "grace_minutes": 10},
    ]
