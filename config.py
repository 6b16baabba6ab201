from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 4000
    GRAPHQL_PATH: str = "/"
    GRAPHQL_IDE: str | None = "graphiql"
    CORS_ORIGINS: List[str] = ["http://localhost:4000"]
    LOG_FILE: str = "file_main.log"
    LOG_RETENTION: str = "7 days"


settings = Settings()
