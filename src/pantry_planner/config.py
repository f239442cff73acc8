"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    max_meal_count: int = 14
    meal_plan_generators: str = "spoonacular,themealdb,openai"
    spoonacular_api_key: str | None = None
    spoonacular_base_url: str = "https://api.spoonacular.com"
    spoonacular_timeout_seconds: float = 15
    mealdb_base_url: str = "https://www.themealdb.com/api/json/v1/1"
    mealdb_timeout_seconds: float = 8
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_timeout_seconds: float = 60
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_generator_names(raw: str | None) -> list[str]:
    """Parse the ordered generator list from env, dropping duplicates."""
    if raw is None:
        return []
    names: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value and value not in names:
            names.append(value)
    return names
