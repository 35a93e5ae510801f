from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    backend_cors_origins: str = "http://localhost:5173"
    rfp_service_url: str = "http://localhost:5000"
    rfp_service_timeout: int = 30
    processing_delay_seconds: float = 1.5
    session_ttl_minutes: int = 120
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "allow"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",") if origin.strip()]
