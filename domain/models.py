from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class OsVersion(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    version: str = ""
    platform: str = ""


class InstalledApp(BaseModel):
    """One row of the osquery `apps` table as served by the collector."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    path: str = ""
    bundle_identifier: str = ""
    bundle_name: str = ""
    bundle_short_version: str = ""
    display_name: str = ""
    minimum_system_version: Optional[str] = None
    last_opened_time: Optional[float] = 0
    end_time: Optional[float] = None

    @property
    def is_deleted(self) -> bool:
        return self.end_time is not None


class ApiResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    os_version: OsVersion = OsVersion()
    osquery_version: str = ""
    installed_apps: List[InstalledApp]
    last_updated: Optional[str] = None
