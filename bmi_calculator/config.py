import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()  # load environment variables from .env

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SERVER_NAME = "BMI Server"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    server_name: str = DEFAULT_SERVER_NAME


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("BMI_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        server_name=os.getenv("BMI_SERVER_NAME", DEFAULT_SERVER_NAME),
    )
