"""Landing page lead capture endpoint."""

from fastapi import APIRouter, Request
from gridwalk_common import GridwalkError, TableAccessError

from dependencies import LeadStoreDep
from request_models import LeadRequest
from response_models import SuccessResponse

router = APIRouter(prefix="/api", tags=["leads"])


def client_ip(request: Request) -> str:
    """First address of ``X-Forwarded-For``, which the load balancer prepends."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if not forwarded_for:
        return "unknown"
    return forwarded_for.split(",")[0].strip() or "unknown"


@router.post("/leads", response_model=SuccessResponse)
def save_lead(body: LeadRequest, request: Request, store: LeadStoreDep) -> SuccessResponse:
    try:
        store.save_email(body.email, client_ip(request))
    except TableAccessError:
        raise GridwalkError("Failed to save email")
    return SuccessResponse()
