"""
Dependency injection for the board bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the board context; tests swap the
engine and clock through ``app.dependency_overrides``.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.application.board.create_post import CreatePostUseCase
from app.application.board.delete_post import DeletePostUseCase
from app.application.board.dtos import AuthenticatedUser, VerifyTokenQuery
from app.application.board.get_post import GetPostUseCase
from app.application.board.list_posts import ListPostsUseCase
from app.application.board.log_in import LogInUseCase
from app.application.board.log_out import LogOutUseCase
from app.application.board.sign_up import SignUpUseCase
from app.application.board.update_post import UpdatePostUseCase
from app.application.board.verify_token import VerifyTokenUseCase
from app.core.config import settings
from app.infrastructure.board.database import create_db_engine, utcnow
from app.infrastructure.board.password_hasher import Pbkdf2PasswordHasher
from app.infrastructure.board.post_repository import PostRepositoryAdapter
from app.infrastructure.board.session_repository import SessionRepositoryAdapter
from app.infrastructure.board.user_repository import UserRepositoryAdapter

Clock = Callable[[], datetime]


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_db_engine(settings.database_url)


def get_clock() -> Clock:
    return utcnow


def get_create_post_use_case(
    engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)
) -> CreatePostUseCase:
    """Build CreatePostUseCase with its infrastructure dependencies."""
    return CreatePostUseCase(
        post_repo=PostRepositoryAdapter(engine, clock=clock),
        user_repo=UserRepositoryAdapter(engine, clock=clock),
    )


def get_list_posts_use_case(
    engine: Engine = Depends(get_engine),
) -> ListPostsUseCase:
    return ListPostsUseCase(post_repo=PostRepositoryAdapter(engine))


def get_get_post_use_case(engine: Engine = Depends(get_engine)) -> GetPostUseCase:
    return GetPostUseCase(post_repo=PostRepositoryAdapter(engine))


def get_update_post_use_case(
    engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)
) -> UpdatePostUseCase:
    return UpdatePostUseCase(post_repo=PostRepositoryAdapter(engine, clock=clock))


def get_delete_post_use_case(
    engine: Engine = Depends(get_engine),
) -> DeletePostUseCase:
    return DeletePostUseCase(post_repo=PostRepositoryAdapter(engine))


def get_sign_up_use_case(
    engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)
) -> SignUpUseCase:
    return SignUpUseCase(
        user_repo=UserRepositoryAdapter(engine, clock=clock),
        password_hasher=Pbkdf2PasswordHasher(),
    )


def get_log_in_use_case(
    engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)
) -> LogInUseCase:
    """Build LogInUseCase; session lifetime comes from settings."""
    return LogInUseCase(
        user_repo=UserRepositoryAdapter(engine, clock=clock),
        session_repo=SessionRepositoryAdapter(engine),
        password_hasher=Pbkdf2PasswordHasher(),
        session_ttl=timedelta(minutes=settings.session_ttl_minutes),
        clock=clock,
    )


def get_log_out_use_case(engine: Engine = Depends(get_engine)) -> LogOutUseCase:
    return LogOutUseCase(session_repo=SessionRepositoryAdapter(engine))


def get_verify_token_use_case(
    engine: Engine = Depends(get_engine), clock: Clock = Depends(get_clock)
) -> VerifyTokenUseCase:
    return VerifyTokenUseCase(
        session_repo=SessionRepositoryAdapter(engine),
        user_repo=UserRepositoryAdapter(engine, clock=clock),
        clock=clock,
    )


def get_current_user(
    request: Request,
    use_case: VerifyTokenUseCase = Depends(get_verify_token_use_case),
) -> AuthenticatedUser:
    """Verify the request credential.

    The ``authorization`` cookie wins over the Authorization header.
    Verification failures propagate as classified errors.
    """
    credential = request.cookies.get(settings.auth_cookie_name) or request.headers.get(
        "Authorization"
    )
    return use_case.execute(VerifyTokenQuery(credential=credential))
