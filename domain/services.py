import datetime
import logging
from typing import Any

from domain.models import (
    MAX_SESSION_MINUTES,
    MIN_SESSION_MINUTES,
    CookingSession,
    CookingTask,
)
from domain.scheduler import Conflict, estimate_duration, find_conflicts, schedule_tasks


logger = logging.getLogger(__name__)


class SessionPlan:
    def __init__(
        self,
        *,
        session: CookingSession,
        tasks: list[CookingTask],
        conflicts: list[Conflict],
        overflowed: list[CookingTask],
        estimated_minutes: int,
    ) -> None:
        self.session = session
        self.tasks = tasks
        self.conflicts = conflicts
        self.overflowed = overflowed
        self.estimated_minutes = estimated_minutes

    def __repr__(self) -> str:
        return (
            f"<SessionPlan(tasks={len(self.tasks)}, "
            f"conflicts={len(self.conflicts)}, overflowed={len(self.overflowed)})>"
        )

    @property
    def ok(self) -> bool:
        return not (self.conflicts or self.overflowed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "session": self.session.to_dict(),
            "tasks": [t.to_dict() for t in self.tasks],
            "conflicts": [[a.to_dict(), b.to_dict()] for a, b in self.conflicts],
            "overflowed": [t.task_name for t in self.overflowed],
            "estimated_minutes": self.estimated_minutes,
            "ok": self.ok,
        }


def size_session(tasks: list[CookingTask], *, on: datetime.date) -> CookingSession:
    """A planned session long enough for `tasks`, within the allowed range."""
    minutes = estimate_duration(tasks)
    minutes = max(MIN_SESSION_MINUTES, min(MAX_SESSION_MINUTES, minutes))
    return CookingSession(date=on, duration_minutes=minutes)


def plan_session(session: CookingSession, tasks: list[CookingTask]) -> SessionPlan:
    estimated = estimate_duration(tasks)
    if estimated > session.duration_minutes:
        logger.info(
            "Tasks need about %s minutes but the session has %s.",
            estimated,
            session.duration_minutes,
        )

    overflowed: list[CookingTask] = []
    scheduled = schedule_tasks(tasks, session.duration_minutes, overflowed=overflowed)
    conflicts = find_conflicts(scheduled)

    plan = SessionPlan(
        session=session,
        tasks=scheduled,
        conflicts=conflicts,
        overflowed=overflowed,
        estimated_minutes=estimated,
    )
    logger.debug(plan)
    return plan
