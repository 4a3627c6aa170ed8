import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

class Settings(BaseSettings):
    # MongoDB (jobs, users and counters)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "mongodb://localhost:27017")
    # Used when DATABASE_URL does not name a database
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "job_board")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Password hashing cost factor
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "8"))

    # Visitor counter
    VISITOR_COUNT_START: int = int(os.getenv("VISITOR_COUNT_START", "905"))
    VISITOR_INCREMENT_INTERVAL_SECONDS: int = int(
        os.getenv("VISITOR_INCREMENT_INTERVAL_SECONDS", "3600")
    )

    @property
    def cors_origin_list(self) -> list:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
