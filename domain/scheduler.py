"""Greedy kitchen scheduling.

Every appliance is tracked by the minute it next becomes free. Tasks are placed,
in priority order, at that minute. Exclusive tasks push the appliance's free
minute on by their duration, parallel tasks on the counter or in the fridge
leave it where it is.
"""

from itertools import combinations
import logging

from domain.models import Appliance, CookingTask


logger = logging.getLogger(__name__)


# A typical session, used when there is nothing to size it from.
DEFAULT_SESSION_MINUTES = 120
TRANSITION_BUFFER_MINUTES = 15


type ApplianceSlots = dict[Appliance, int]
type Conflict = tuple[CookingTask, CookingTask]


def appliance_slots() -> ApplianceSlots:
    return {appliance: 0 for appliance in Appliance}


def accumulate(appliance: Appliance, total: int, task: CookingTask) -> int:
    """Minutes `appliance` is occupied once `task` is added to `total`.

    Parallel tasks overlap each other, so only the longest one counts.
    """
    if task.parallel:
        return max(total, task.duration_minutes)
    return total + task.duration_minutes


def schedule_tasks(
    tasks: list[CookingTask],
    session_duration_minutes: int,
    *,
    overflowed: list[CookingTask] | None = None,
) -> list[CookingTask]:
    """Assign a `start_time` to every task, returned in priority order.

    Tasks that would run past the end of the session are pinned against it
    and appended to `overflowed` when given. The pinned start is not fed back
    into the appliance tracker, so a pinned task can overlap whatever follows
    it on the same appliance.
    """
    if (
        isinstance(session_duration_minutes, bool)
        or not isinstance(session_duration_minutes, int)
        or session_duration_minutes <= 0
    ):
        raise ValueError(
            f"Session duration must be a positive integer, got {session_duration_minutes!r}"
        )

    slots = appliance_slots()
    ordered = sorted(tasks, key=lambda task: task.order_priority)

    for task in ordered:
        start = slots[task.appliance]
        task.start_time = start
        if not task.parallel:
            slots[task.appliance] = accumulate(task.appliance, start, task)

        if start + task.duration_minutes > session_duration_minutes:
            task.start_time = max(0, session_duration_minutes - task.duration_minutes)
            logger.warning(
                "Task %r would exceed the %s minute session. Scheduling at the limit.",
                task.task_name,
                session_duration_minutes,
            )
            if overflowed is not None:
                overflowed.append(task)

    return ordered


def find_conflicts(tasks: list[CookingTask]) -> list[Conflict]:
    """Pairs of tasks holding the same appliance at the same time."""
    conflicts: list[Conflict] = []
    for task1, task2 in combinations(tasks, 2):
        if task1.appliance != task2.appliance:
            continue
        if task1.parallel and task2.parallel:
            continue

        start1 = task1.start_time or 0
        start2 = task2.start_time or 0
        if start1 < task2.end_time and start2 < task1.end_time:
            conflicts.append((task1, task2))

    return conflicts


def estimate_duration(tasks: list[CookingTask]) -> int:
    """Minutes a session needs so the busiest appliance fits, plus a buffer."""
    if not tasks:
        return DEFAULT_SESSION_MINUTES

    totals: dict[Appliance, int] = {}
    for task in tasks:
        totals[task.appliance] = accumulate(
            task.appliance, totals.get(task.appliance, 0), task
        )

    return max(totals.values()) + TRANSITION_BUFFER_MINUTES


def timeline(tasks: list[CookingTask]) -> list[CookingTask]:
    return sorted(tasks, key=lambda task: (task.start_time or 0, task.order_priority))
