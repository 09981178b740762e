import os
from typing import List
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173,"
    "https://job-portal-4b52d.web.app,"
    "https://job-portal-4b52d.firebaseapp.com"
)


class Settings(BaseSettings):
    # Server
    PORT: int = int(os.getenv("PORT", "5000"))
    NODE_ENV: str = os.getenv("NODE_ENV", "development")

    # MongoDB (jobs / applications)
    DB_USER: str = os.getenv("DB_USER", os.getenv("DB_User", ""))
    DB_PASS: str = os.getenv("DB_PASS", os.getenv("DB_Pass", ""))
    MONGO_HOST: str = os.getenv("MONGO_HOST", "cluster0.dr5qw.mongodb.net")
    MONGO_URI: str = os.getenv("MONGO_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "jobPortalDB")

    # Session token
    JWT_SECRET: str = os.getenv("JWT_SECRET", "SUPERSECRETKEY")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", "60"))

    # CORS
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    AVAILABLE_JOBS_LIMIT: int = 6

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    @property
    def mongo_uri(self) -> str:
        """Full connection string; MONGO_URI wins over the assembled SRV URI."""
        if self.MONGO_URI:
            return self.MONGO_URI
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.MONGO_HOST}/?retryWrites=true&w=majority&appName=Cluster0"
        )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
