from pydantic_settings import BaseSettings
from typing import List, Optional
import os

class Settings(BaseSettings):
    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "llama3.2:3b"
    OLLAMA_ALTERNATIVE_MODEL: str = "llama3.2:1b"
    OLLAMA_TIMEOUT: Optional[float] = None  # seconds; unset means wait on the socket
    ALLOWED_ORIGINS: str = "*"
    FIREBASE_PROJECT_ID: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

settings = Settings(_env_file=os.getenv("ENV_FILE", ".env"), _env_file_encoding="utf-8")
