from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VersionInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    commit: str
    build_date: str
    # Key kept for consumers of the original report shape
    runtime_version: str = Field(serialization_alias="go_version")
    platform: str
