from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "ROI_PRO_"}

    app_name: str = "ROI Pro"

    # Saved scenarios
    database_url: str = "sqlite:///./data/scenarios.db"

    # API
    cors_origins: list[str] = ["*"]

    # CSV export
    export_decimal_places: int = 2

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
