"""
Pydantic models for UTC lookup key derivation.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from tempmap.config import RejectionReason


class LookupKeyResult(BaseModel):
    """
    Outcome of deriving a dataset key for a (date, slot) selection.

    Exactly one of `key` and `rejection` is set.
    """
    date: date
    slot: int
    utc_instant: Optional[datetime] = None
    key: Optional[str] = None              # X%Y.%m.%d.%H.%M.%S (UTC)
    local_date_key: Optional[str] = None   # X%Y.%m.%d (NY local)
    fall_back_corrected: bool = False
    rejection: Optional[RejectionReason] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None
