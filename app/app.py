import contextlib
import functools
import json
import logging
from typing import Any, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from app import config
from app.html.timetable import Timetable
from app.schemas import InvalidRequest, PlanIn, ScheduleIn, TasksIn
from domain.models import InvalidAppliance
from domain.scheduler import estimate_duration, find_conflicts, schedule_tasks
from domain.services import plan_session


CONFIG = config.Config()

logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def aJSONResponse(route: Callable[..., Awaitable[Any]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> JSONResponse:
        return JSONResponse(await route(*args, **kwargs))

    return wrapper


async def read_body[M: BaseModel](request: Request, model: type[M]) -> M:
    body = model.model_validate(await request.json())
    if isinstance(body, TasksIn) and len(body.tasks) > CONFIG.max_tasks:
        raise InvalidRequest(f"Too many tasks, at most {CONFIG.max_tasks} per request.")
    return body


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@aJSONResponse
async def schedule(request: Request) -> dict[str, Any]:
    body = await read_body(request, ScheduleIn)
    tasks = schedule_tasks(body.to_tasks(), body.session_duration_minutes)
    return {"tasks": [t.to_dict() for t in tasks]}


@aJSONResponse
async def conflicts(request: Request) -> dict[str, Any]:
    body = await read_body(request, TasksIn)
    found = find_conflicts(body.to_tasks())
    return {"conflicts": [[a.to_dict(), b.to_dict()] for a, b in found]}


@aJSONResponse
async def estimate(request: Request) -> dict[str, Any]:
    body = await read_body(request, TasksIn)
    return {"duration_minutes": estimate_duration(body.to_tasks())}


@aJSONResponse
async def plan(request: Request) -> dict[str, Any]:
    body = await read_body(request, PlanIn)
    return plan_session(body.session.to_session(), body.to_tasks()).to_dict()


@aHTMLResponse
async def timetable(request: Request) -> str:
    body = await read_body(request, PlanIn)
    session_plan = plan_session(body.session.to_session(), body.to_tasks())
    return Timetable(session_plan, environment=TEMPLATES).render()


async def bad_json(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": "Body is not valid JSON.", "detail": str(exc)}, 400)


async def invalid_body(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ValidationError)
    detail = json.loads(exc.json(include_url=False))
    return JSONResponse({"error": "Invalid request body.", "detail": detail}, 422)


async def invalid_value(request: Request, exc: Exception) -> JSONResponse:
    error = "Unknown appliance." if isinstance(exc, InvalidAppliance) else "Invalid value."
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": error, "detail": str(exc)}, 422)


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    logging.basicConfig(level=CONFIG.log_level)
    yield


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/health", health),
        Route("/schedule", schedule, methods=["POST"]),
        Route("/conflicts", conflicts, methods=["POST"]),
        Route("/estimate", estimate, methods=["POST"]),
        Route("/plan", plan, methods=["POST"]),
        Route("/timetable", timetable, methods=["POST"]),
    ],
    exception_handlers={
        json.JSONDecodeError: bad_json,
        ValidationError: invalid_body,
        InvalidAppliance: invalid_value,
        InvalidRequest: invalid_value,
    },
    lifespan=lifespan,
)
