"""Connection and data source endpoints."""

from typing import List

from fastapi import APIRouter
from gridwalk_common import GridwalkError, TableAccessError
from gridwalk_common.logging import setup_logging

from dependencies import ApiClientDep, AuthTokenDep, ConnectionStoreDep
from exceptions import InvalidRequestError
from response_models import Connection, WorkspaceConnection

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["connections"])


@router.get("/connections")
def list_workspace_connections(
    token: AuthTokenDep,
    api: ApiClientDep,
    workspace_id: str | None = None,
):
    """Relays the connections configured for a workspace."""
    if not workspace_id:
        raise InvalidRequestError("Workspace ID is required")
    return api.list_connections(token, workspace_id) or []


@router.get("/workspaces/{workspace_id}/sources", response_model=List[WorkspaceConnection])
def list_workspace_sources(workspace_id: str, token: AuthTokenDep, api: ApiClientDep):
    """Returns the layers available through the workspace's primary connection."""
    return api.list_sources(token, workspace_id) or []


@router.get("/connections-modal", response_model=List[Connection])
def list_stored_connections(store: ConnectionStoreDep):
    """Returns the connections recorded in DynamoDB."""
    try:
        return store.list_connections()
    except TableAccessError:
        raise GridwalkError("Internal Server Error")
