"""Workspace and workspace membership endpoints."""

from typing import List

from fastapi import APIRouter
from gridwalk_common.logging import setup_logging

from dependencies import ApiClientDep, AuthTokenDep
from exceptions import InvalidRequestError
from request_models import AddMemberRequest, NewWorkspaceRequest
from response_models import SuccessResponse, Workspace, WorkspaceMember

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["workspaces"])


@router.get("/workspaces", response_model=List[Workspace])
def list_workspaces(token: AuthTokenDep, api: ApiClientDep):
    """Returns the workspaces the user belongs to."""
    return api.list_workspaces(token) or []


@router.post("/new_workspace", response_model=SuccessResponse)
def create_workspace(
    body: NewWorkspaceRequest,
    token: AuthTokenDep,
    api: ApiClientDep,
) -> SuccessResponse:
    """Creates a workspace named after the trimmed ``name`` field."""
    name = body.name
    if not isinstance(name, str) or not name.strip():
        raise InvalidRequestError("Workspace name is required")

    api.create_workspace(token, name.strip())
    logger.info("Workspace created", extra={"workspace_name": name.strip()})
    return SuccessResponse(message="Workspace created successfully")


@router.delete("/workspaces/{workspace_id}", response_model=SuccessResponse)
def delete_workspace(workspace_id: str, token: AuthTokenDep, api: ApiClientDep):
    api.delete_workspace(token, workspace_id)
    logger.info("Workspace deleted", extra={"workspace_id": workspace_id})
    return SuccessResponse(message="Workspace deleted successfully")


@router.get("/workspaces/{workspace_id}/members", response_model=List[WorkspaceMember])
def list_members(workspace_id: str, token: AuthTokenDep, api: ApiClientDep):
    return api.list_members(token, workspace_id) or []


@router.post("/workspaces/{workspace_id}/members", response_model=SuccessResponse)
def add_member(
    workspace_id: str,
    body: AddMemberRequest,
    token: AuthTokenDep,
    api: ApiClientDep,
) -> SuccessResponse:
    """Adds a user to the workspace with the given role."""
    if not body.email.strip():
        raise InvalidRequestError("Email is required")
    api.add_member(token, workspace_id, body.email, body.role)
    return SuccessResponse(message="Member added successfully")


@router.delete("/workspaces/{workspace_id}/members/{email}", response_model=SuccessResponse)
def remove_member(workspace_id: str, email: str, token: AuthTokenDep, api: ApiClientDep):
    api.remove_member(token, workspace_id, email)
    return SuccessResponse(message="Member removed successfully")
