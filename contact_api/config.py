import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"


class Settings(BaseModel):
    mongo_uri: Optional[str] = None
    mongo_db_name: str = "contact-api"
    mongo_collection: str = "contacts"
    mongo_timeout_ms: int = 5000
    host: str = "127.0.0.1"
    port: int = 3000
    static_dir: Path = DEFAULT_STATIC_DIR
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        # .env values never override variables already set in the process
        load_dotenv(env_file)

        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            mongo_uri=os.getenv("MONGO_URI") or None,
            mongo_db_name=os.getenv("MONGO_DB_NAME", "contact-api"),
            mongo_collection=os.getenv("MONGO_COLLECTION", "contacts"),
            mongo_timeout_ms=os.getenv("MONGO_TIMEOUT_MS", "5000"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=os.getenv("PORT", "3000"),
            static_dir=os.getenv("STATIC_DIR") or DEFAULT_STATIC_DIR,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
