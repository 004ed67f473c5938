from jinja2 import Environment

from domain.models import Appliance, CookingTask
from domain.scheduler import timeline
from domain.services import SessionPlan


class Timetable:
    def __init__(
        self,
        plan: SessionPlan,
        *,
        environment: Environment,
        template_name: str = "timetable.html",
    ) -> None:
        self.plan = plan
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return f"Cooking session {self.plan.session.date.isoformat()}"

    @property
    def rows(self) -> list[CookingTask]:
        return timeline(self.plan.tasks)

    @property
    def appliances(self) -> list[Appliance]:
        used = {t.appliance for t in self.plan.tasks}
        return [a for a in Appliance if a in used]

    def clashes(self, task: CookingTask) -> bool:
        return any(task is a or task is b for a, b in self.plan.conflicts)

    def render(self) -> str:
        return self.env.get_template(self.name).render(timetable=self)
