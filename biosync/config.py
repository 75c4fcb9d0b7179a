from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_key: str | None = None
    log_level: str = "INFO"

    # Seed for meal suggestions and set jitter. None = fresh entropy per request.
    random_seed: int | None = None

    model_config = {"env_prefix": "BIOSYNC_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
