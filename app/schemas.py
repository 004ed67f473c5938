"""Request bodies. Validated here, turned into domain objects for the routes."""

import datetime

from pydantic import BaseModel, Field

from domain.models import CookingSession, CookingTask, InvalidAppliance, SessionStatus


class InvalidRequest(Exception):
    pass


class TaskIn(BaseModel):
    id: str | None = None
    session_id: str = ""
    recipe_id: str = ""
    task_name: str
    duration_minutes: int = Field(gt=0, strict=True)
    appliance: str
    order_priority: int = Field(gt=0, strict=True)
    start_time: int | None = Field(default=None, strict=True)
    can_parallel: bool = False

    def to_task(self) -> CookingTask:
        try:
            return CookingTask(**self.model_dump())
        except InvalidAppliance:
            raise
        except ValueError as e:
            raise InvalidRequest(str(e)) from e


class SessionIn(BaseModel):
    id: str | None = None
    date: datetime.date
    duration_minutes: int = Field(strict=True)
    status: SessionStatus = SessionStatus.planned

    def to_session(self) -> CookingSession:
        try:
            return CookingSession(**self.model_dump())
        except ValueError as e:
            raise InvalidRequest(str(e)) from e


class TasksIn(BaseModel):
    tasks: list[TaskIn] = []

    def to_tasks(self) -> list[CookingTask]:
        return [t.to_task() for t in self.tasks]


class ScheduleIn(TasksIn):
    session_duration_minutes: int = Field(gt=0, strict=True)


class PlanIn(TasksIn):
    session: SessionIn
