"""Response models for the gridwalk-web API."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SuccessResponse(BaseModel):
    """Bare acknowledgement."""

    success: bool = True
    message: str | None = None


class DataResponse(BaseModel):
    """Acknowledgement wrapping the upstream payload."""

    success: bool = True
    data: Any = None


class RemoteFileUploadResponse(BaseModel):
    success: bool = True
    message: str
    url: str


class Workspace(BaseModel):
    id: str
    name: str


class Project(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    workspace_id: str
    uploaded_by: str | None = None
    created_at: str | None = None


class Source(BaseModel):
    name: str


class WorkspaceConnection(BaseModel):
    """A workspace's connection together with the layers it serves."""

    id: str
    layer: str
    sources: list[Source] = Field(default_factory=list)


class Connection(BaseModel):
    """A data connection row read from DynamoDB."""

    id: str
    name: str | None = None
    connector: str | None = None


class WorkspaceMember(BaseModel):
    email: str
    role: Literal["Admin", "Read"]


class Profile(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
