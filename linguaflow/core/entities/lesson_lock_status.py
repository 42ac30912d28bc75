from typing import Optional

from pydantic import BaseModel

from linguaflow.core.enums import LockReason


class LessonLockStatus(BaseModel):
    is_locked: bool
    lock_reason: Optional[LockReason] = None
    can_edit: bool
    can_delete: bool
    total_assigned: int
    total_completed: int
    completion_rate: int
