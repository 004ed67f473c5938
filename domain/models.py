import datetime
from enum import Enum
from typing import Any, Self


MIN_SESSION_MINUTES = 30
MAX_SESSION_MINUTES = 360


class InvalidAppliance(ValueError):
    pass


class Appliance(Enum):
    oven = "oven"
    stovetop_1 = "stovetop_1"
    stovetop_2 = "stovetop_2"
    microwave = "microwave"
    counter = "counter"
    fridge = "fridge"

    @classmethod
    def parse(cls, value: "Appliance | str") -> "Appliance":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidAppliance(f"Unknown appliance: {value!r}") from None

    @property
    def shareable(self) -> bool:
        """Counter space and the fridge can hold several tasks at once."""
        return self in (Appliance.counter, Appliance.fridge)


class SessionStatus(Enum):
    planned = "planned"
    in_progress = "in_progress"
    completed = "completed"


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


class CookingTask:
    def __init__(
        self,
        *,
        session_id: str,
        recipe_id: str,
        task_name: str,
        duration_minutes: int,
        appliance: Appliance | str,
        order_priority: int,
        start_time: int | None = None,
        can_parallel: bool = False,
        id: str | None = None,
    ) -> None:
        self.id = id
        self.session_id = session_id
        self.recipe_id = recipe_id
        self.task_name = task_name
        self.duration_minutes = _positive_int("duration_minutes", duration_minutes)
        self.appliance = appliance
        self.order_priority = _positive_int("order_priority", order_priority)
        self.start_time = start_time
        self.can_parallel = can_parallel

    def __repr__(self) -> str:
        return (
            f"<CookingTask(task_name={self.task_name}, "
            f"appliance={self.appliance.value}, start_time={self.start_time})>"
        )

    @property
    def appliance(self) -> Appliance:
        return self._appliance

    @appliance.setter
    def appliance(self, value: Appliance | str) -> None:
        self._appliance = Appliance.parse(value)

    @property
    def parallel(self) -> bool:
        """Shares its appliance rather than holding it exclusively."""
        return self.appliance.shareable and self.can_parallel

    @property
    def end_time(self) -> int:
        return (self.start_time or 0) + self.duration_minutes

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "session_id": self.session_id,
            "recipe_id": self.recipe_id,
            "task_name": self.task_name,
            "duration_minutes": self.duration_minutes,
            "appliance": self.appliance.value,
            "start_time": self.start_time,
            "order_priority": self.order_priority,
            "can_parallel": self.can_parallel,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            id=data.get("id"),
            session_id=data["session_id"],
            recipe_id=data["recipe_id"],
            task_name=data["task_name"],
            duration_minutes=data["duration_minutes"],
            appliance=data["appliance"],
            order_priority=data["order_priority"],
            start_time=data.get("start_time"),
            can_parallel=bool(data.get("can_parallel", False)),
        )


class CookingSession:
    def __init__(
        self,
        *,
        date: datetime.date,
        duration_minutes: int,
        status: SessionStatus | str = SessionStatus.planned,
        id: str | None = None,
    ) -> None:
        duration_minutes = _positive_int("duration_minutes", duration_minutes)
        if not MIN_SESSION_MINUTES <= duration_minutes <= MAX_SESSION_MINUTES:
            raise ValueError(
                f"Session length must be between {MIN_SESSION_MINUTES} and "
                f"{MAX_SESSION_MINUTES} minutes, got {duration_minutes}"
            )
        self.id = id
        self.date = date
        self.duration_minutes = duration_minutes
        self.status = SessionStatus(status)

    def __repr__(self) -> str:
        return f"<CookingSession(date={self.date}, duration={self.duration_minutes})>"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "duration_minutes": self.duration_minutes,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        date = data["date"]
        if isinstance(date, str):
            date = datetime.date.fromisoformat(date)
        return cls(
            id=data.get("id"),
            date=date,
            duration_minutes=data["duration_minutes"],
            status=data.get("status", SessionStatus.planned),
        )
