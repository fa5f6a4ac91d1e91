# taskhub/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Taskhub API"
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend (comma separated in env)
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000",
        ).split(",")
        if origin.strip()
    ]

    # Session cookie carrying the access token
    cookie_name: str = os.getenv("COOKIE_NAME", "userToken")
    cookie_secure: bool = _env_bool("COOKIE_SECURE", "false")

    # Who may read tasks of a collection besides its creator:
    #   membership - any user holding a rights row
    #   any_right  - a rights row with at least one flag set
    read_access_policy: str = os.getenv("READ_ACCESS_POLICY", "membership")

    # Create tables on startup instead of running Aerich migrations (dev only)
    generate_schemas: bool = _env_bool("GENERATE_SCHEMAS", "false")


settings = Settings()  # Instantiate configuration
