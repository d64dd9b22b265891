"""HTTP client for the upstream GridWalk REST API."""

from typing import Any
from urllib.parse import quote

import requests
from gridwalk_common import ErrorKind
from gridwalk_common.logging import setup_logging

from exceptions import UpstreamError

logger = setup_logging()

_STATUS_KINDS = {
    400: ErrorKind.INVALID_INPUT,
    401: ErrorKind.UNAUTHENTICATED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
}


class GridwalkApiClient:
    """
    Thin wrapper over the GridWalk API.

    Every method forwards one call, attaching the caller's session token as
    a bearer token, and turns failures into ``UpstreamError`` with an
    explicit ``ErrorKind`` derived from the upstream status.
    """

    def __init__(self, session: requests.Session, base_url: str, timeout: float = 30.0):
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def login(self, email: str, password: str) -> str:
        """Exchanges credentials for an API key."""
        data = self._request(
            "POST",
            "/login",
            json={"email": email, "password": password},
            fallback="Login failed",
        )
        api_key = (data or {}).get("apiKey")
        if not api_key:
            raise UpstreamError("Login failed", ErrorKind.UNAUTHENTICATED)
        return api_key

    def register(self, email: str, password: str, first_name: str, last_name: str) -> None:
        self._request(
            "POST",
            "/register",
            json={
                "email": email,
                "password": password,
                "first_name": first_name,
                "last_name": last_name,
            },
            fallback="Registration failed",
        )

    def logout(self, token: str) -> None:
        self._request("POST", "/logout", token=token, fallback="Logout failed")

    def get_profile(self, token: str) -> dict[str, Any]:
        return self._request("GET", "/profile", token=token, fallback="Profile retrieval failed")

    def list_workspaces(self, token: str) -> list[dict[str, Any]]:
        return self._request("GET", "/workspaces", token=token, fallback="Failed to fetch workspaces")

    def create_workspace(self, token: str, name: str) -> Any:
        return self._request(
            "POST",
            "/workspace",
            token=token,
            json={"name": name},
            fallback="Failed to create workspace",
        )

    def delete_workspace(self, token: str, workspace_id: str) -> None:
        self._request(
            "DELETE",
            f"/workspace/{quote(workspace_id, safe='')}",
            token=token,
            fallback="Failed to delete workspace",
            not_found="Workspace not found",
        )

    def list_members(self, token: str, workspace_id: str) -> list[dict[str, Any]]:
        return self._request(
            "GET",
            f"/workspace/{quote(workspace_id, safe='')}/members",
            token=token,
            fallback="Failed to fetch workspace members",
            not_found="Workspace not found",
        )

    def add_member(self, token: str, workspace_id: str, email: str, role: str) -> None:
        self._request(
            "POST",
            "/workspace/members",
            token=token,
            json={"workspace_id": workspace_id, "email": email.strip(), "role": role},
            fallback="Failed to add workspace member",
        )

    def remove_member(self, token: str, workspace_id: str, email: str) -> None:
        self._request(
            "DELETE",
            f"/workspace/{quote(workspace_id, safe='')}/members/{quote(email, safe='')}",
            token=token,
            json={"workspace_id": workspace_id, "email": email},
            fallback="Failed to remove workspace member",
            not_found="Workspace or member not found",
        )

    def list_projects(self, token: str, workspace_id: str) -> Any:
        return self._request(
            "GET",
            "/projects",
            token=token,
            params={"workspace_id": workspace_id},
            fallback="Failed to fetch projects",
        )

    def create_project(self, token: str, workspace_id: str, name: str) -> Any:
        return self._request(
            "POST",
            "/create_project",
            token=token,
            json={"workspace_id": workspace_id, "name": name.strip()},
            fallback="Project creation failed",
        )

    def delete_project(self, token: str, workspace_id: str, project_id: str) -> None:
        self._request(
            "DELETE",
            "/projects",
            token=token,
            params={"workspace_id": workspace_id, "project_id": project_id},
            fallback="Failed to delete project",
            not_found="Project or workspace not found",
        )

    def list_connections(self, token: str, workspace_id: str) -> list[dict[str, Any]]:
        return self._request(
            "GET",
            f"/workspaces/{quote(workspace_id, safe='')}/connections",
            token=token,
            fallback="Failed to fetch workspace connections",
            not_found="Workspace not found",
        )

    def list_sources(self, token: str, workspace_id: str) -> list[dict[str, Any]]:
        return self._request(
            "GET",
            f"/workspaces/{quote(workspace_id, safe='')}/connections/primary/sources",
            token=token,
            fallback="Failed to fetch workspace connections",
            not_found="Workspace not found",
        )

    def upload_layer_chunk(
        self,
        token: str,
        file_name: str,
        data: bytes,
        content_type: str,
        headers: dict[str, str],
        layer_info: str | None = None,
    ) -> Any:
        """Forwards one chunk of a layer file to the v2 upload endpoint."""
        form = {"layer_info": layer_info} if layer_info is not None else None
        return self._request(
            "POST",
            "/upload_layer_v2",
            token=token,
            files={"file": (file_name, data, content_type)},
            data=form,
            headers={"Accept": "application/json", **headers},
            fallback="Internal server error during upload",
        )

    def _request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        fallback: str = "Upstream request failed",
        not_found: str | None = None,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> Any:
        url = f"{self._base_url}{path}"
        request_headers = dict(headers or {})
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._session.request(
                method, url, headers=request_headers, timeout=self._timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.exception(
                "GridWalk API unreachable",
                extra={"method": method, "path": path},
            )
            raise UpstreamError(fallback, cause=e) from e

        if not response.ok:
            raise self._error_for(response, method, path, fallback, not_found)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.exception(
                "GridWalk API returned invalid JSON",
                extra={"method": method, "path": path},
            )
            raise UpstreamError(fallback, cause=e) from e

    @staticmethod
    def _error_for(
        response: requests.Response,
        method: str,
        path: str,
        fallback: str,
        not_found: str | None,
    ) -> UpstreamError:
        status = response.status_code
        kind = _STATUS_KINDS.get(status, ErrorKind.UPSTREAM)
        body = response.text.strip()

        if kind is ErrorKind.UNAUTHENTICATED:
            message = "Authentication failed"
        elif kind is ErrorKind.FORBIDDEN:
            message = "Insufficient permissions"
        elif kind is ErrorKind.NOT_FOUND and not_found:
            message = not_found
        else:
            message = body or fallback

        logger.error(
            "GridWalk API call failed",
            extra={"method": method, "path": path, "status": status, "body": body[:500]},
        )
        return UpstreamError(message, kind, status_code=status)
