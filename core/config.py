from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    INVENTORY_API_URL: str = os.getenv("INVENTORY_API_URL", "http://localhost:7070")
    INVENTORY_API_TIMEOUT_S: float = float(os.getenv("INVENTORY_API_TIMEOUT_S", "10"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def latest_data_url(self) -> str:
        return f"{self.INVENTORY_API_URL.rstrip('/')}/api/latest_data"


settings = Settings()
