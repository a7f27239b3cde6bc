import os

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost:5432")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "<PASSWORD>")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "gym_crm")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PASSWORD_MIN_LENGTH: int = int(os.getenv("PASSWORD_MIN_LENGTH", 6))
    USERNAME_MAX_ATTEMPTS: int = int(os.getenv("USERNAME_MAX_ATTEMPTS", 100))

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        extra = "ignore"

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        # DATABASE_URL wins, e.g. sqlite for local runs
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}/{self.POSTGRES_DB}"


config = Config()
