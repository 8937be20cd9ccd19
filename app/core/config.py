from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List
from dotenv import load_dotenv



# Get the path to the .env file
CONFIG_DIR = Path(__file__).resolve().parent
# Assuming .env is in the project root (two levels up from app/core)
PROJECT_ROOT = CONFIG_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / '.env'

# Load environment variables from .env file
load_dotenv(ENV_FILE_PATH)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding='utf-8',
        extra='ignore'
    )


    DEBUG_MODE: bool = False
    # Structured JSON lines in logs/app.log instead of plain text
    LOG_JSON: bool = False
    ENVIRONMENT: str = "development"

    # Generation service
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash-001"

    # Firebase service account (Admin SDK)
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_CLIENT_EMAIL: str = ""
    FIREBASE_PRIVATE_KEY: str = ""

    # Session cookie
    SESSION_COOKIE_NAME: str = "session"
    SESSION_DURATION_SECONDS: int = 60 * 60 * 24 * 7  # 1 week

    # Collections
    INTERVIEWS_COLLECTION: str = "interviews"
    USERS_COLLECTION: str = "users"

    # Comma separated list of allowed origins
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    @property
    def firebase_private_key(self) -> str:
        # .env files usually carry the PEM with literal "\n" sequences
        return self.FIREBASE_PRIVATE_KEY.replace("\\n", "\n")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Initialize settings
settings = Settings()
