from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class VersionResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    version: Optional[str] = Field(default=None, alias="Version")
    api_version: Optional[str] = Field(default=None, alias="ApiVersion")
    min_api_version: Optional[str] = Field(default=None, alias="MinAPIVersion")
    git_commit: Optional[str] = Field(default=None, alias="GitCommit")
    go_version: Optional[str] = Field(default=None, alias="GoVersion")
    os: Optional[str] = Field(default=None, alias="Os")
    arch: Optional[str] = Field(default=None, alias="Arch")
    kernel_version: Optional[str] = Field(default=None, alias="KernelVersion")


class SystemInfoResponse(BaseModel):
    """Subset of `GET /info`; remaining fields are kept as extras."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="ID")
    name: Optional[str] = Field(default=None, alias="Name")
    containers: Optional[int] = Field(default=None, alias="Containers")
    containers_running: Optional[int] = Field(default=None, alias="ContainersRunning")
    images: Optional[int] = Field(default=None, alias="Images")
    server_version: Optional[str] = Field(default=None, alias="ServerVersion")
    operating_system: Optional[str] = Field(default=None, alias="OperatingSystem")


class Actor(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="ID")
    attributes: Optional[Dict[str, str]] = Field(default=None, alias="Attributes")


class Message(BaseModel):
    """One entry of the daemon event stream."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    type: Optional[str] = Field(default=None, alias="Type")
    action: Optional[str] = Field(default=None, alias="Action")
    actor: Optional[Actor] = Field(default=None, alias="Actor")
    scope: Optional[str] = Field(default=None, alias="scope")
    time: Optional[int] = Field(default=None, alias="time")
    time_nano: Optional[int] = Field(default=None, alias="timeNano")
