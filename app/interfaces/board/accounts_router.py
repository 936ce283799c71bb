"""
FastAPI router for accounts: sign-up, login and logout.

Login sets the ``authorization`` cookie to "Bearer <token>"; logout
revokes the server-side session and clears it.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from app.application.board.dtos import (
    AuthenticatedUser,
    LogInCommand,
    LogOutCommand,
    SignUpCommand,
)
from app.application.board.log_in import LogInUseCase
from app.application.board.log_out import LogOutUseCase
from app.application.board.sign_up import SignUpUseCase
from app.core.config import settings
from app.interfaces.board.dependencies import (
    get_current_user,
    get_log_in_use_case,
    get_log_out_use_case,
    get_sign_up_use_case,
)
from app.interfaces.board.locale import request_message
from app.interfaces.board.schemas import (
    AccountItem,
    AccountResponse,
    ErrorResponse,
    LogInRequest,
    MessageResponse,
    SessionItem,
    SessionResponse,
    SignUpRequest,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/signup",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Sign up",
)
@limiter.limit(settings.rate_limit_auth)
def sign_up(
    request: Request,
    body: SignUpRequest,
    use_case: SignUpUseCase = Depends(get_sign_up_use_case),
) -> AccountResponse:
    result = use_case.execute(
        SignUpCommand(email=body.email, nickname=body.nickname, password=body.password)
    )
    return AccountResponse(
        message=request_message(request, "signed_up"),
        data=AccountItem(
            user_id=result.user_id, email=result.email, nickname=result.nickname
        ),
    )


@router.post(
    "/login",
    response_model=SessionResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Log in",
)
@limiter.limit(settings.rate_limit_auth)
def log_in(
    request: Request,
    response: Response,
    body: LogInRequest,
    use_case: LogInUseCase = Depends(get_log_in_use_case),
) -> SessionResponse:
    """Open a session and hand the credential back as a cookie and in the body."""
    result = use_case.execute(LogInCommand(email=body.email, password=body.password))
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=f"{result.token_type} {result.token}",
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return SessionResponse(
        message=request_message(request, "logged_in"),
        data=SessionItem(
            token=result.token,
            token_type=result.token_type,
            expires_at=result.expires_at,
        ),
    )


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Log out",
)
def log_out(
    request: Request,
    response: Response,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: LogOutUseCase = Depends(get_log_out_use_case),
) -> MessageResponse:
    use_case.execute(LogOutCommand(token=user.token))
    response.delete_cookie(settings.auth_cookie_name)
    return MessageResponse(message=request_message(request, "logged_out"))
