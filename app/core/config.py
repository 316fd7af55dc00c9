from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    database_url: str = "sqlite+aiosqlite:///./food_log.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    auto_create_schema: bool = True

    snapshot_key: str = "food-tracker-local-db-v1"

    rating_up_min: float = 0.33
    rating_down_max: float = -0.33

    api_title: str = "Food Log API"
    api_version: str = "1.0.0"
    api_debug: bool = False


settings = Settings()
