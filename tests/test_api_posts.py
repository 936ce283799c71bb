"""
Tests for the posts API endpoints.

Runs the full stack (routers, use cases, SQLAlchemy adapters, error
dispatch) against an in-memory store.
"""

import pytest
from conftest import API, register

from app.application.board.dtos import AuthenticatedUser
from app.interfaces.board.dependencies import get_current_user
from app.main import app

POSTS = f"{API}/posts"


@pytest.fixture
def writer(client) -> dict[str, str]:
    return register(client, email="writer@example.com", nickname="writer")


@pytest.fixture
def stranger(client) -> dict[str, str]:
    return register(client, email="stranger@example.com", nickname="stranger")


def _create(client, headers, title="T", content="C", category_id=None) -> int:
    response = client.post(
        POSTS,
        json={"title": title, "content": content, "categoryId": category_id},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


class TestCreatePost:
    def test_created_post_round_trips(self, client, writer) -> None:
        response = client.post(
            POSTS, json={"title": "T", "content": "C", "categoryId": 2}, headers=writer
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"]
        created = body["data"]

        fetched = client.get(f"{POSTS}/{created['id']}", headers=writer).json()["data"]
        assert (fetched["title"], fetched["content"]) == ("T", "C")
        assert fetched["userId"] == created["userId"]
        assert fetched["categoryId"] == 2
        assert "createdAt" in fetched and "updatedAt" in fetched

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "", "content": "C"},
            {"title": "T", "content": ""},
            {"content": "C", "categoryId": 1},
            {"title": "T"},
            {},
        ],
    )
    def test_empty_title_or_content_is_400(self, client, writer, payload) -> None:
        response = client.post(POSTS, json=payload, headers=writer)
        assert response.status_code == 400
        assert response.headers["X-Error-Code"] == "POST_FIELDS_REQUIRED"
        assert response.json() == {
            "success": False,
            "message": "Both a title and content are required.",
        }

    def test_wrong_field_type_is_generic_400(self, client, writer) -> None:
        response = client.post(
            POSTS, json={"title": "T", "content": "C", "categoryId": "abc"}, headers=writer
        )
        assert response.status_code == 400
        assert response.headers["X-Error-Code"] == "VALIDATION_FAILED"
        assert "data" not in response.json()

    def test_nonexistent_requester_is_user_not_found(self, client) -> None:
        app.dependency_overrides[get_current_user] = lambda: AuthenticatedUser(
            user_id=999, token="ghost"
        )
        response = client.post(POSTS, json={"title": "T", "content": "C"})
        assert response.status_code == 401
        assert response.headers["X-Error-Code"] == "USER_NOT_FOUND"
        assert "authorization=" in response.headers.get("set-cookie", "")


class TestListPosts:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("?sort=asc", ["first", "second", "third"]),
            ("?sort=DESC", ["third", "second", "first"]),
            ("?sort=bogus", ["third", "second", "first"]),
            ("", ["third", "second", "first"]),
        ],
    )
    def test_sort_direction(self, client, writer, query, expected) -> None:
        for title in ("first", "second", "third"):
            _create(client, writer, title=title)
        response = client.get(f"{POSTS}{query}", headers=writer)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [p["title"] for p in body["data"]] == expected

    def test_listing_is_a_projection(self, client, writer) -> None:
        _create(client, writer, category_id=4)
        item = client.get(POSTS, headers=writer).json()["data"][0]
        assert set(item) == {"id", "title", "categoryId", "createdAt"}

    def test_requires_login(self, client) -> None:
        response = client.get(POSTS)
        assert response.status_code == 401
        assert response.headers["X-Error-Code"] == "TOKEN_MISSING"


class TestGetPost:
    def test_missing_post_is_404(self, client, writer) -> None:
        response = client.get(f"{POSTS}/12345", headers=writer)
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "The post could not be found.",
        }


class TestUpdatePost:
    def test_owner_can_update(self, client, writer) -> None:
        post_id = _create(client, writer)
        response = client.put(
            f"{POSTS}/{post_id}", json={"title": "T2", "content": "C2"}, headers=writer
        )
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "data" not in response.json()

        fetched = client.get(f"{POSTS}/{post_id}", headers=writer).json()["data"]
        assert (fetched["title"], fetched["content"]) == ("T2", "C2")
        assert fetched["updatedAt"] > fetched["createdAt"]

    def test_non_owner_is_forbidden(self, client, writer, stranger) -> None:
        post_id = _create(client, writer)
        response = client.put(
            f"{POSTS}/{post_id}", json={"title": "X", "content": "Y"}, headers=stranger
        )
        assert response.status_code == 403
        assert response.json()["message"] == "You do not have permission to edit this post."
        assert client.get(f"{POSTS}/{post_id}", headers=writer).json()["data"]["title"] == "T"

    def test_missing_post_is_404(self, client, writer) -> None:
        response = client.put(
            f"{POSTS}/999", json={"title": "T", "content": "C"}, headers=writer
        )
        assert response.status_code == 404

    def test_validation_before_existence(self, client, writer) -> None:
        response = client.put(f"{POSTS}/999", json={"title": "", "content": "C"}, headers=writer)
        assert response.status_code == 400


class TestDeletePost:
    def test_owner_can_delete(self, client, writer) -> None:
        post_id = _create(client, writer)
        response = client.delete(f"{POSTS}/{post_id}", headers=writer)
        assert response.status_code == 200
        assert client.get(f"{POSTS}/{post_id}", headers=writer).status_code == 404

    def test_non_owner_is_forbidden(self, client, writer, stranger) -> None:
        post_id = _create(client, writer)
        response = client.delete(f"{POSTS}/{post_id}", headers=stranger)
        assert response.status_code == 403
        assert response.json()["message"] == "You do not have permission to delete this post."

    def test_second_delete_is_404(self, client, writer) -> None:
        post_id = _create(client, writer)
        assert client.delete(f"{POSTS}/{post_id}", headers=writer).status_code == 200
        assert client.delete(f"{POSTS}/{post_id}", headers=writer).status_code == 404
        assert client.delete(f"{POSTS}/{post_id}", headers=writer).status_code == 404

    def test_update_after_racing_delete_is_404(self, client, writer) -> None:
        post_id = _create(client, writer)
        statuses = [
            client.delete(f"{POSTS}/{post_id}", headers=writer).status_code,
            client.put(
                f"{POSTS}/{post_id}", json={"title": "T2", "content": "C2"}, headers=writer
            ).status_code,
        ]
        assert statuses == [200, 404]


class TestOutOfRangePostId:
    HUGE_ID = 2**70

    def test_get_is_404(self, client, writer) -> None:
        response = client.get(f"{POSTS}/{self.HUGE_ID}", headers=writer)
        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "POST_NOT_FOUND"

    def test_put_is_404(self, client, writer) -> None:
        response = client.put(
            f"{POSTS}/{self.HUGE_ID}", json={"title": "T", "content": "C"}, headers=writer
        )
        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "POST_NOT_FOUND"

    def test_delete_is_404(self, client, writer) -> None:
        response = client.delete(f"{POSTS}/{self.HUGE_ID}", headers=writer)
        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "POST_NOT_FOUND"

    def test_negative_id_is_404(self, client, writer) -> None:
        response = client.get(f"{POSTS}/-1", headers=writer)
        assert response.status_code == 404


class TestLocalizedErrors:
    def test_korean_message(self, client, writer) -> None:
        response = client.get(
            f"{POSTS}/999", headers={**writer, "Accept-Language": "ko-KR"}
        )
        assert response.status_code == 404
        assert response.json()["message"] == "해당하는 게시물을 찾을 수 없습니다."
