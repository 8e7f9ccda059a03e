from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .core import constants
from .ledger.engine import LedgerEngine
from .ledger.factory import PunchStrategyFactory
from .ledger.service import LedgerService
from .punches.extractor import PunchExtractor
from .shifts.config_shift_repository import ConfigShiftRepository
from .shifts.model import QuotaPolicy


@dataclass(frozen=True)
class Container:
    shifts_repo: ConfigShiftRepository
    quota: QuotaPolicy

    extractor: PunchExtractor
    ledger_engine: LedgerEngine
    ledger_service: LedgerService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    shifts_repo = ConfigShiftRepository(settings.get("SHIFTS", []))
    quota = QuotaPolicy(
        friday_early_minutes=int(settings.get("FRIDAY_EARLY_MINUTES", constants.FRIDAY_EARLY_MINUTES)),
        incident_cap_minutes=int(settings.get("QUOTA_EARLY_LEAVE_MINUTES", constants.QUOTA_EARLY_LEAVE_MINUTES)),
        monthly_incident_cap=int(settings.get("QUOTA_EARLY_LEAVE_COUNT", constants.QUOTA_EARLY_LEAVE_COUNT)),
    )

    extractor = PunchExtractor(year_cutoff=int(settings.get("TWO_DIGIT_YEAR_CUTOFF", constants.TWO_DIGIT_YEAR_CUTOFF)))
    ledger_engine = LedgerEngine(quota, strategy_factory=PunchStrategyFactory())
    ledger_service = LedgerService(
        shifts_repo,
        ledger_engine,
        extractor=extractor,
        default_shift_id=settings.get("DEFAULT_SHIFT_ID"),
    )

    return Container(
        shifts_repo=shifts_repo,
        quota=quota,
        extractor=extractor,
        ledger_engine=ledger_engine,
        ledger_service=ledger_service,
    )


def settings_dict(settings_module) -> dict:
    """Upper-case attributes of a settings module as a plain dict."""
    return {k: getattr(settings_module, k) for k in dir(settings_module) if k.isupper()}
