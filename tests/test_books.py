"""Tests for book endpoints: register, read, update and delete."""

from datetime import datetime

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from mediashelf import models
from tests.conftest import API, create_test_book, create_test_library

LIBRARIES = f"{API}/media-libraries"


def as_naive(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=None)


class TestCreateBook:
    def test_create_book_success(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            f"{API}/books",
            json={
                "title": "Dune",
                "content_hash": "abc123",
                "tags": [{"key": "genre", "value": "sf"}],
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Dune"
        assert data["content_hash"] == "abc123"
        assert data["tags"] == [{"key": "genre", "value": "sf"}]

        # Verify in database
        book = db_session.get(models.Book, data["id"])
        assert book is not None
        assert book.title == "Dune"

    def test_create_book_reuses_tags(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        tags = [{"key": "genre", "value": "sf"}]
        create_test_book(client, auth_headers, "Dune", tags=tags)
        create_test_book(client, auth_headers, "Hyperion", tags=tags)

        assert db_session.query(models.Tag).count() == 1

    def test_create_book_duplicate_hash(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        create_test_book(client, auth_headers, "Dune", content_hash="same")

        response = client.post(
            f"{API}/books",
            json={"title": "Dune again", "content_hash": "same"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_create_book_requires_auth(self, client: TestClient) -> None:
        response = client.post(f"{API}/books", json={"title": "Dune"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGetBooks:
    def test_get_my_books_newest_first(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        first = create_test_book(client, auth_headers, "First")
        second = create_test_book(client, auth_headers, "Second")
        create_test_book(client, other_headers, "Not mine")

        response = client.get(f"{API}/books/my", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 2
        assert [book["id"] for book in data["books"]] == [second["id"], first["id"]]

    def test_get_book(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        book = create_test_book(client, auth_headers, "Dune")

        response = client.get(f"{API}/books/{book['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Dune"

    def test_get_book_not_found(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get(f"{API}/books/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateBook:
    def test_update_fields(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        book = create_test_book(client, auth_headers, "Dune", description="Sand")

        response = client.patch(
            f"{API}/books/{book['id']}",
            json={"title": "  Dune Messiah ", "tags": [{"key": "genre", "value": "sf"}]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Dune Messiah"
        assert data["description"] == "Sand"
        assert data["tags"] == [{"key": "genre", "value": "sf"}]

    def test_update_clears_description(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        book = create_test_book(client, auth_headers, "Dune", description="Sand")

        response = client.patch(
            f"{API}/books/{book['id']}", json={"description": None}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["description"] is None
        assert response.json()["title"] == "Dune"

    def test_update_by_non_owner(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        book = create_test_book(client, auth_headers, "Dune")

        response = client.patch(
            f"{API}/books/{book['id']}", json={"title": "Mine now"}, headers=other_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Not owner"
        assert client.get(f"{API}/books/{book['id']}", headers=auth_headers).json()[
            "title"
        ] == "Dune"

    def test_update_missing_book(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.patch(f"{API}/books/99999", json={"title": "X"}, headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_virtual_library_follows_newest_book_timestamps(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        book = create_test_book(client, auth_headers, "Dune")
        updated = client.patch(
            f"{API}/books/{book['id']}", json={"title": "Dune Messiah"}, headers=auth_headers
        ).json()

        virtual = client.get(f"{LIBRARIES}/virtual/my-uploaded", headers=auth_headers).json()

        assert as_naive(virtual["created_at"]) == as_naive(book["created_at"])
        assert as_naive(virtual["updated_at"]) == as_naive(updated["updated_at"])


class TestDeleteBook:
    def test_delete_removes_library_items(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        kept = create_test_book(client, auth_headers, "Kept")
        doomed = create_test_book(client, auth_headers, "Doomed")
        library = create_test_library(client, auth_headers, "Shelf")
        for book in (kept, doomed):
            client.post(f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=auth_headers)

        response = client.delete(f"{API}/books/{doomed['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"ok": True}
        detail = client.get(f"{LIBRARIES}/{library['id']}", headers=auth_headers).json()
        assert detail["items_count"] == 1
        assert [item["book"]["id"] for item in detail["items"]] == [kept["id"]]
        virtual = client.get(f"{LIBRARIES}/virtual/my-uploaded", headers=auth_headers).json()
        assert virtual["items_count"] == 1
        assert db_session.get(models.Book, doomed["id"]) is None
        assert client.get(f"{API}/books/{doomed['id']}", headers=auth_headers).status_code == (
            status.HTTP_404_NOT_FOUND
        )

    def test_delete_by_non_owner(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        book = create_test_book(client, auth_headers, "Dune")

        response = client.delete(f"{API}/books/{book['id']}", headers=other_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        virtual = client.get(f"{LIBRARIES}/virtual/my-uploaded", headers=auth_headers).json()
        assert virtual["items_count"] == 1

    def test_delete_missing_book(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.delete(f"{API}/books/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
