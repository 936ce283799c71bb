"""
FastAPI router for posts.

All routes require a verified user and delegate to use cases.
No business logic here. Error mapping is handled by the
centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request, status

from app.application.board.create_post import CreatePostUseCase
from app.application.board.delete_post import DeletePostUseCase
from app.application.board.dtos import (
    AuthenticatedUser,
    CreatePostCommand,
    DeletePostCommand,
    GetPostQuery,
    ListPostsQuery,
    PostResult,
    UpdatePostCommand,
)
from app.application.board.get_post import GetPostUseCase
from app.application.board.list_posts import ListPostsUseCase
from app.application.board.update_post import UpdatePostUseCase
from app.interfaces.board.dependencies import (
    get_create_post_use_case,
    get_current_user,
    get_delete_post_use_case,
    get_get_post_use_case,
    get_list_posts_use_case,
    get_update_post_use_case,
)
from app.interfaces.board.locale import request_message
from app.interfaces.board.schemas import (
    CreatedPostResponse,
    CreatePostRequest,
    ErrorResponse,
    MessageResponse,
    PostItem,
    PostListResponse,
    PostResponse,
    PostSummaryItem,
    UpdatePostRequest,
)

router = APIRouter(prefix="/posts", tags=["posts"])

AUTH_ERRORS = {401: {"model": ErrorResponse}}


def _to_item(result: PostResult) -> PostItem:
    return PostItem(
        id=result.id,
        user_id=result.user_id,
        title=result.title,
        content=result.content,
        category_id=result.category_id,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.post(
    "",
    response_model=CreatedPostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**AUTH_ERRORS, 400: {"model": ErrorResponse}},
    summary="Create a post",
)
def create_post(
    body: CreatePostRequest,
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> CreatedPostResponse:
    """Create a post owned by the requester."""
    result = use_case.execute(
        CreatePostCommand(
            user_id=user.user_id,
            title=body.title,
            content=body.content,
            category_id=body.category_id,
        )
    )
    return CreatedPostResponse(
        message=request_message(request, "post_created"), data=_to_item(result)
    )


@router.get(
    "",
    response_model=PostListResponse,
    responses=AUTH_ERRORS,
    summary="List posts",
    description="List posts by creation time. sort=ASC|DESC, default DESC.",
)
def list_posts(
    sort: Optional[str] = Query(default=None, description="ASC or DESC"),
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListPostsUseCase = Depends(get_list_posts_use_case),
) -> PostListResponse:
    results = use_case.execute(ListPostsQuery(sort=sort))
    return PostListResponse(
        data=[
            PostSummaryItem(
                id=r.id,
                title=r.title,
                category_id=r.category_id,
                created_at=r.created_at,
            )
            for r in results
        ]
    )


@router.get(
    "/{postId}",
    response_model=PostResponse,
    responses={**AUTH_ERRORS, 404: {"model": ErrorResponse}},
    summary="Get a post",
)
def get_post(
    post_id: int = Path(alias="postId"),
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetPostUseCase = Depends(get_get_post_use_case),
) -> PostResponse:
    result = use_case.execute(GetPostQuery(post_id=post_id))
    return PostResponse(data=_to_item(result))


@router.put(
    "/{postId}",
    response_model=MessageResponse,
    responses={
        **AUTH_ERRORS,
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update a post",
)
def update_post(
    body: UpdatePostRequest,
    request: Request,
    post_id: int = Path(alias="postId"),
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdatePostUseCase = Depends(get_update_post_use_case),
) -> MessageResponse:
    """Update title and content. Only the owner may do this."""
    use_case.execute(
        UpdatePostCommand(
            post_id=post_id,
            user_id=user.user_id,
            title=body.title,
            content=body.content,
        )
    )
    return MessageResponse(message=request_message(request, "post_updated"))


@router.delete(
    "/{postId}",
    response_model=MessageResponse,
    responses={
        **AUTH_ERRORS,
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete a post",
)
def delete_post(
    request: Request,
    post_id: int = Path(alias="postId"),
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: DeletePostUseCase = Depends(get_delete_post_use_case),
) -> MessageResponse:
    """Permanently delete a post. Only the owner may do this."""
    use_case.execute(DeletePostCommand(post_id=post_id, user_id=user.user_id))
    return MessageResponse(message=request_message(request, "post_deleted"))
