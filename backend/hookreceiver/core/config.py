from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    user: str = ""  # USER, only used to annotate log lines
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
