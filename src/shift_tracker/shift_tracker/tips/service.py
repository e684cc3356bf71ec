from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.validators import require_positive_amount
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, MissingField
from ..timecalc.clock import round2
from .model import TipEntry
from .repository import TipRepository

logger = logging.getLogger(__name__)


class TipService:
    def __init__(self, tips: TipRepository):
        self._tips = tips

    def list_tips(self, *, tip_date: Optional[date] = None) -> Sequence[TipEntry]:
        return self._tips.list_tips(tip_date=tip_date)

    def record(self, *, current_role: Role, amount: Any, tip_date: Optional[date], notes: Optional[str] = None) -> TipEntry:
        if not current_role.can_manage:
            raise AuthorizationError("Only managers can record tips")
        if tip_date is None:
            raise MissingField("Amount and date required")

        value = round2(require_positive_amount(amount, "amount"))
        notes = notes.strip() if notes else None

        tip_id = self._tips.create(amount=value, tip_date=tip_date, notes=notes)
        logger.info("Tip %s recorded: %.2f on %s", tip_id, value, tip_date)
        return self._tips.get_by_id(tip_id) or TipEntry(tip_id=tip_id, amount=value, tip_date=tip_date, notes=notes)
