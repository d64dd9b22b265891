"""Request bodies accepted by the gridwalk-web routes."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    def split_name(self) -> tuple[str, str]:
        """Returns (first name, everything after the first word)."""
        first_name, _, last_name = self.name.strip().partition(" ")
        return first_name, last_name.strip()


class NewWorkspaceRequest(BaseModel):
    name: Any = None


class CreateProjectRequest(BaseModel):
    name: str = Field(..., min_length=1)
    workspace_id: str | None = None


class AddMemberRequest(BaseModel):
    email: str = Field(..., min_length=1)
    role: Literal["Admin", "Read"]


class RemoteFileUploadRequest(BaseModel):
    """JSON layer data to be written to the remote file bucket."""

    layerName: str | None = None
    data: Any = None


class LeadRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)


class ChunkInfo(BaseModel):
    """Position of an uploaded chunk, as sent by the chunked uploader."""

    model_config = ConfigDict(populate_by_name=True)

    current_chunk: int = Field(0, alias="currentChunk", ge=0)
    total_chunks: int = Field(1, alias="totalChunks", ge=1)
    file_size: int = Field(0, alias="fileSize", ge=0)

    @property
    def is_final(self) -> bool:
        return self.current_chunk == self.total_chunks - 1


class LayerInfo(BaseModel):
    """Layer metadata sent upstream with the final chunk."""

    workspace_id: str
    name: str
    file_type: str | None = None
