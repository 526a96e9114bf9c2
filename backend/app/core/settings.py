from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Token Issuer"
    DATABASE_URL: str = "sqlite:///./tokens.db"

    # Shared secret expected in the x-api-key header
    TOKENS_API_KEY: str | None = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()

def get_settings() -> Settings:
    return settings
