from typing import Any, Callable

import pytest

from domain.models import CookingTask


type TaskFactory = Callable[..., CookingTask]


@pytest.fixture
def make_task() -> TaskFactory:
    def factory(
        task_name: str,
        appliance: str,
        duration_minutes: int,
        order_priority: int,
        **kwargs: Any,
    ) -> CookingTask:
        return CookingTask(
            session_id=kwargs.pop("session_id", "s1"),
            recipe_id=kwargs.pop("recipe_id", "r1"),
            task_name=task_name,
            appliance=appliance,
            duration_minutes=duration_minutes,
            order_priority=order_priority,
            **kwargs,
        )

    return factory
