from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./accounts.db"
    DB_ECHO: bool = False
    CREATE_SCHEMA: bool = True
    LOG_LEVEL: str = "INFO"
    # first scheme hashes new passwords, the rest are only verified
    PASSWORD_SCHEMES: list[str] = ["sha256_b64"]
    VERIFY_PASSWORD_ON_LOGIN: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
