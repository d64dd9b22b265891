"""Project endpoints."""

from fastapi import APIRouter, status
from gridwalk_common import ErrorKind
from gridwalk_common.logging import setup_logging

from dependencies import ApiClientDep, AuthTokenDep
from exceptions import AuthenticationError, InvalidRequestError, UpstreamError
from request_models import CreateProjectRequest
from response_models import DataResponse, SuccessResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["projects"])

DEFAULT_WORKSPACE_ID = "426c93a3-fcca-42cb-b668-d6e3344d3dcf"


@router.get("/get_projects")
def get_projects(token: AuthTokenDep, api: ApiClientDep, workspace_id: str | None = None):
    """Relays the upstream project listing of a workspace."""
    if not workspace_id:
        raise InvalidRequestError("Workspace ID is required")
    return api.list_projects(token, workspace_id)


@router.post(
    "/project",
    response_model=DataResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_project(
    body: CreateProjectRequest,
    token: AuthTokenDep,
    api: ApiClientDep,
) -> DataResponse:
    """
    Creates a project.

    Rejections other than an expired session are reported as bad requests
    carrying the upstream message.
    """
    if not body.name.strip():
        raise InvalidRequestError("Project name is required")
    workspace_id = body.workspace_id or DEFAULT_WORKSPACE_ID

    try:
        project = api.create_project(token, workspace_id, body.name)
    except UpstreamError as e:
        logger.error(
            f"Project creation error: {e}",
            extra={"workspace_id": workspace_id, "kind": e.kind.value},
        )
        if e.kind is ErrorKind.UNAUTHENTICATED:
            raise AuthenticationError("Authentication failed. Please log in again.")
        raise InvalidRequestError(e.message or "Failed to create project")

    return DataResponse(data=project)


@router.delete("/projects", response_model=SuccessResponse)
def delete_project(
    token: AuthTokenDep,
    api: ApiClientDep,
    workspace_id: str | None = None,
    project_id: str | None = None,
) -> SuccessResponse:
    if not workspace_id:
        raise InvalidRequestError("Workspace ID is required")
    if not project_id:
        raise InvalidRequestError("Project ID is required")

    api.delete_project(token, workspace_id, project_id)
    logger.info(
        "Project deleted",
        extra={"workspace_id": workspace_id, "project_id": project_id},
    )
    return SuccessResponse(message="Project deleted successfully")
