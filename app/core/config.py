from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "EduAssist"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "*"

    # Simulated latency of the external grading service
    GRADING_DELAY_SECONDS: float = 2.0
    GRADING_TIMEOUT_SECONDS: float = 30.0

    TOAST_DURATION_SECONDS: float = 5.0

    # Demo student the student dashboard renders for
    ACTIVE_STUDENT_ID: str = "s1"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
