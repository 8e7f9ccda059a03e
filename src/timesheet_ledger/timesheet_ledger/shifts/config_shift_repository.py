from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.enums import ShiftType
from ..core.exceptions import ConfigurationError, ValidationError
from .model import ShiftPolicy
from .repository import ShiftRepository


class ConfigShiftRepository(ShiftRepository):
    """Shift table read from the settings module (no database)."""

    def __init__(self, entries: Iterable[Mapping[str, Any]]):
        shifts: dict[ShiftType, ShiftPolicy] = {}
        for raw in entries:
            try:
                shift = ShiftPolicy.from_config(raw)
            except ValidationError as e:
                raise ConfigurationError(f"Cấu hình ca không hợp lệ: {e}") from e
            shifts[shift.shift_id] = shift
        self._shifts = shifts

    def list_all(self) -> Sequence[ShiftPolicy]:
        return sorted(self._shifts.values(), key=lambda s: s.shift_id.value)

    def get_by_id(self, shift_id: str) -> Optional[ShiftPolicy]:
        try:
            return self._shifts.get(ShiftType(shift_id))
        except ValueError:
            return None
