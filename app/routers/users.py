# File: /app/routers/users.py | Version: 1.1 | Title: Users Router (register / login / details) — typed results -> HTTP
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse

from app.dependencies import get_token_service, get_user_store
from app.schemas.auth import LoginRequest, MessageResponse, TokenResponse
from app.schemas.user import UserEnvelope, UserInput, WelcomeResponse
from app.security import TokenService
from app.services import accounts
from app.services.accounts import Outcome
from app.services.user_store import UserStore

router = APIRouter(prefix="/users", tags=["Users"])

TECHNICAL_ERROR = "A technical error has occurred"


# ---------------------------
# Utilities
# ---------------------------


async def _read_json_or_form(request: Request) -> Dict[str, Any]:
    """Accept JSON or form-encoded bodies; anything else reads as empty."""
    ctype = (request.headers.get("content-type") or "").lower()
    data: Dict[str, Any] = {}
    if "application/json" in ctype:
        try:
            body = await request.json()
            if isinstance(body, dict):
                data = body
        except ValueError:
            data = {}
    elif "form" in ctype:
        form = await request.form()
        data = dict(form)
    return data


def _envelope(status_code: int, status_text: str, errors: list[str]) -> JSONResponse:
    body = UserEnvelope(errors=errors, data={"status": status_text})
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _registration_response(result: accounts.RegistrationResult) -> JSONResponse:
    if result.outcome is Outcome.CREATED:
        return _envelope(status.HTTP_201_CREATED, "User created successfully", [])
    if result.outcome is Outcome.INVALID:
        return _envelope(status.HTTP_400_BAD_REQUEST, "User not created", result.errors)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "User not created", [TECHNICAL_ERROR]
    )


def _details_response(result: accounts.DetailsResult):
    if result.outcome is Outcome.OK:
        return WelcomeResponse()
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Could not verify token", [TECHNICAL_ERROR]
    )


def _login_response(result: accounts.LoginResult) -> JSONResponse:
    if result.outcome is Outcome.OK:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=TokenResponse(token=result.token).model_dump(),
        )
    if result.outcome is Outcome.NOT_FOUND:
        body = MessageResponse(message="User not found or invalid credentials")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())
    body = MessageResponse(message="An error occurred during the login process")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump()
    )


# ---------------------------
# Endpoints
# ---------------------------


@router.api_route(
    "/register",
    methods=["GET", "POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=UserEnvelope,
    responses={400: {"model": UserEnvelope}, 500: {"model": UserEnvelope}},
)
async def register(request: Request, store: UserStore = Depends(get_user_store)):
    """
    Register a user from query parameters
    {firstName, lastName, email, password, phoneNumber}.
    POST bodies (JSON or form) may carry the same keys and take precedence.
    """
    payload: Dict[str, Any] = dict(request.query_params)
    if request.method == "POST":
        payload.update(await _read_json_or_form(request))
    fields = {k: str(v) for k, v in payload.items() if v is not None}
    data = UserInput.model_validate(fields)

    result = await accounts.register_user(data, store)
    return _registration_response(result)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def login(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    store: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Login with JSON or form {email/username, password}. A still-valid bearer
    token in the Authorization header is handed back unchanged; otherwise a new
    one is issued.
    """
    payload = await _read_json_or_form(request)
    # alias: username -> email (OAuth-style)
    if "username" in payload and "email" not in payload:
        payload["email"] = payload["username"]
    creds = LoginRequest(
        email=str(payload.get("email") or ""),
        password=str(payload.get("password") or ""),
    )

    result = await accounts.login_user(
        creds.email, creds.password, authorization, store, tokens
    )
    return _login_response(result)


@router.get(
    "/details",
    response_model=WelcomeResponse,
    responses={500: {"model": UserEnvelope}},
)
async def details(authorization: Optional[str] = Header(default=None)):
    # TODO: verify the bearer token and return the caller's profile instead of a greeting
    result = await accounts.user_details()
    return _details_response(result)
