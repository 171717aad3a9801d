from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Configuration for the summary service.
    Read from environment variables (and an optional .env file), e.g. API_KEY, EMAIL_USER.
    """
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    LOG_LEVEL: str = "INFO"

    API_KEY: str = ""

    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    GEMINI_MODEL: str = "gemini-2.5-flash-preview-05-20"

    GENERATION_TIMEOUT_SECONDS: float = 300.0

    EMAIL_USER: str = ""

    EMAIL_PASS: str = ""

    SMTP_HOST: str = "smtp.gmail.com"

    SMTP_PORT: int = 465

    SMTP_USE_SSL: bool = True

    CORS_ORIGINS: List[str] = ["*"]

    @property
    def generate_content_url(self) -> str:
        return f"{self.GEMINI_BASE_URL.rstrip('/')}/models/{self.GEMINI_MODEL}:generateContent"


settings = Settings()
