"""
Localized user-facing messages for error and success responses.

Keys are stable; wording may change freely. Korean carries the wording the
service shipped with, English is the fallback catalog.
"""

from typing import Optional

SUPPORTED_LOCALES = ("ko", "en")

CATALOG: dict[str, dict[str, str]] = {
    "ko": {
        "token_type_mismatch": "토큰 타입이 일치하지 않습니다.",
        "token_expired": "인증이 만료되었습니다. 재인증을 받아주세요.",
        "user_not_found": "토큰 사용자가 존재하지 않습니다.",
        "token_missing": "로그인 후 이용 가능합니다.",
        "invalid_email": "이메일 형식이 올바르지 않습니다.",
        "invalid_nickname": "닉네임은 3자리 이상 필요합니다.",
        "invalid_password": "비밀번호는 5자리 이상 필요합니다.",
        "password_confirm_mismatch": "비밀번호와 비밀번호 확인이 일치하지 않습니다.",
        "post_fields_required": "게시글의 제목과 내용을 모두 입력해주세요.",
        "validation_failed": "데이터 양식을 다시 확인해주세요.",
        "post_not_found": "해당하는 게시물을 찾을 수 없습니다.",
        "forbidden_update": "게시물을 수정할 권한이 없습니다.",
        "forbidden_delete": "게시물을 삭제할 권한이 없습니다.",
        "unexpected": "예상치 못한 에러가 발생하였습니다. 관리자에게 문의 해주십시오.",
        "unexpected_logout": "예기치 못한 오류가 발생했습니다. 관리자에게 문의 하십시오.",
        "rate_limited": "요청이 너무 많습니다. 잠시 후 다시 시도해주세요.",
        "post_created": "게시글을 성공적으로 등록하였습니다.",
        "post_updated": "게시물 정보를 성공적으로 수정하였습니다.",
        "post_deleted": "게시물 정보를 삭제하였습니다.",
        "signed_up": "회원가입이 완료되었습니다.",
        "logged_in": "로그인에 성공하였습니다.",
        "logged_out": "로그아웃 되었습니다.",
    },
    "en": {
        "token_type_mismatch": "Token type does not match.",
        "token_expired": "Your session has expired. Please log in again.",
        "user_not_found": "The user for this token does not exist.",
        "token_missing": "Please log in to continue.",
        "invalid_email": "The email format is invalid.",
        "invalid_nickname": "Nickname must be at least 3 characters.",
        "invalid_password": "Password must be at least 5 characters.",
        "password_confirm_mismatch": "Password and password confirmation do not match.",
        "post_fields_required": "Both a title and content are required.",
        "validation_failed": "Please check the request data.",
        "post_not_found": "The post could not be found.",
        "forbidden_update": "You do not have permission to edit this post.",
        "forbidden_delete": "You do not have permission to delete this post.",
        "unexpected": "An unexpected error occurred. Please contact the administrator.",
        "unexpected_logout": "An unexpected error occurred while logging out. Please contact the administrator.",
        "rate_limited": "Too many requests. Please try again later.",
        "post_created": "The post was created.",
        "post_updated": "The post was updated.",
        "post_deleted": "The post was deleted.",
        "signed_up": "Sign-up complete.",
        "logged_in": "Logged in.",
        "logged_out": "Logged out.",
    },
}


def resolve_locale(accept_language: Optional[str], default: str) -> str:
    """Pick a supported locale from an Accept-Language header value.

    Only primary language tags are considered, in header order; quality
    weights are ignored. Falls back to ``default``.
    """
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";")[0].strip().lower()
            primary = tag.split("-")[0]
            if primary in SUPPORTED_LOCALES:
                return primary
    return default if default in SUPPORTED_LOCALES else "en"


def message(key: str, locale: str) -> str:
    """Return the message for ``key`` in ``locale``, falling back to English."""
    catalog = CATALOG.get(locale, CATALOG["en"])
    return catalog.get(key, CATALOG["en"][key])
