from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = Path(__file__).resolve().parent.parent / "assets" / "html"
    log_level: str = "INFO"
    max_tasks: int = 200
