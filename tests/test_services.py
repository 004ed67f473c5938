import datetime
import logging

import pytest

from domain.models import CookingSession, SessionStatus
from domain.services import plan_session, size_session


DAY = datetime.date(2024, 3, 2)


def test_plan_session(make_task) -> None:
    prep = make_task("Prep", "counter", 15, 1, can_parallel=True)
    roast = make_task("Roast", "oven", 75, 2)
    session = CookingSession(date=DAY, duration_minutes=180)

    plan = plan_session(session, [roast, prep])

    assert plan.tasks == [prep, roast]
    assert plan.conflicts == []
    assert plan.overflowed == []
    assert plan.estimated_minutes == 90
    assert plan.ok


def test_plan_session_reports_overflow(make_task, caplog: pytest.LogCaptureFixture) -> None:
    roast = make_task("Roast", "oven", 100, 1)
    bake = make_task("Bake", "oven", 40, 2)
    session = CookingSession(date=DAY, duration_minutes=120)

    with caplog.at_level(logging.INFO):
        plan = plan_session(session, [roast, bake])

    assert plan.overflowed == [bake]
    assert bake.start_time == 80
    assert plan.conflicts == [(roast, bake)]
    assert not plan.ok
    assert "155 minutes" in caplog.text


def test_plan_session_to_dict(make_task) -> None:
    roast = make_task("Roast", "oven", 200, 1, id="t1")
    session = CookingSession(date=DAY, duration_minutes=180)

    got = plan_session(session, [roast]).to_dict()

    assert got["session"]["date"] == "2024-03-02"
    assert got["tasks"][0]["start_time"] == 0
    assert got["tasks"][0]["appliance"] == "oven"
    assert got["overflowed"] == ["Roast"]
    assert got["conflicts"] == []
    assert got["estimated_minutes"] == 215
    assert got["ok"] is False


def test_plan_session_empty() -> None:
    plan = plan_session(CookingSession(date=DAY, duration_minutes=120), [])
    assert plan.tasks == []
    assert plan.estimated_minutes == 120
    assert plan.ok


@pytest.mark.parametrize(
    "durations,expected",
    (
        ([], 120),
        ([5], 30),
        ([60, 45], 120),
        ([200, 200], 360),
    ),
)
def test_size_session(make_task, durations: list[int], expected: int) -> None:
    tasks = [make_task(f"T{i}", "oven", d, i + 1) for i, d in enumerate(durations)]

    session = size_session(tasks, on=DAY)

    assert session.duration_minutes == expected
    assert session.date == DAY
    assert session.status == SessionStatus.planned
