"""Session endpoints: login, registration, logout and profile."""

from fastapi import APIRouter, Response
from gridwalk_common.logging import setup_logging

from config import AppConfig
from dependencies import ApiClientDep, ConfigDep, OptionalTokenDep
from exceptions import AuthenticationError, InvalidRequestError, UpstreamError
from request_models import LoginRequest, RegisterRequest
from response_models import DataResponse, Profile, SuccessResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["auth"])


def _set_session_cookie(response: Response, api_key: str, config: AppConfig) -> None:
    cookie = config.session_cookie
    response.set_cookie(
        key=cookie.name,
        value=api_key,
        path="/",
        secure=cookie.secure,
        httponly=False,
        samesite="lax",
    )


@router.post("/auth/login", response_model=SuccessResponse)
def login(
    body: LoginRequest,
    response: Response,
    api: ApiClientDep,
    config: ConfigDep,
) -> SuccessResponse:
    """Logs in against the GridWalk API and stores the API key as ``sid``."""
    try:
        api_key = api.login(body.email, body.password)
    except UpstreamError:
        logger.warning("Login failed", extra={"email": body.email})
        raise AuthenticationError("Login failed. Please try again.")

    _set_session_cookie(response, api_key, config)
    logger.info("User logged in", extra={"email": body.email})
    return SuccessResponse()


@router.post("/auth/register", response_model=SuccessResponse)
def register(
    body: RegisterRequest,
    response: Response,
    api: ApiClientDep,
    config: ConfigDep,
) -> SuccessResponse:
    """Registers a new account, then logs it in."""
    first_name, last_name = body.split_name()
    try:
        api.register(body.email, body.password, first_name, last_name)
        api_key = api.login(body.email, body.password)
    except UpstreamError as e:
        logger.error(f"Registration error: {e}", extra={"email": body.email})
        raise InvalidRequestError("Registration failed. Please try again.")

    _set_session_cookie(response, api_key, config)
    logger.info("User registered", extra={"email": body.email})
    return SuccessResponse()


@router.post("/auth/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    api: ApiClientDep,
    config: ConfigDep,
    token: OptionalTokenDep,
) -> SuccessResponse:
    """Ends the upstream session; the cookie is dropped even if that fails."""
    if token:
        try:
            api.logout(token)
        except UpstreamError as e:
            logger.error(f"Logout error: {e}")
    response.delete_cookie(config.session_cookie.name, path="/")
    return SuccessResponse()


@router.get("/profile", response_model=DataResponse)
def get_profile(api: ApiClientDep, token: OptionalTokenDep) -> DataResponse:
    """Returns the signed-in user's profile."""
    if not token:
        raise AuthenticationError("Profile retrieval failed.")
    try:
        data = api.get_profile(token)
    except UpstreamError:
        raise AuthenticationError("Profile retrieval failed.")
    return DataResponse(data=Profile.model_validate(data or {}))
