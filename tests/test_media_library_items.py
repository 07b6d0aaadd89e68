"""Tests for adding books, nesting libraries and removing library items."""

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import API, create_test_book, create_test_library

LIBRARIES = f"{API}/media-libraries"


def items_count(client: TestClient, headers: dict[str, str], library_id: int) -> int:
    return client.get(f"{LIBRARIES}/{library_id}", headers=headers).json()["items_count"]


class TestAddBook:
    def test_add_book_success(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        library = create_test_library(client, auth_headers, "Shelf")
        book = create_test_book(client, auth_headers)

        response = client.post(
            f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["library_id"] == library["id"]
        assert data["book_id"] == book["id"]
        assert data["added_at"] is not None
        assert items_count(client, auth_headers, library["id"]) == 1

    def test_add_book_twice_is_conflict(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf")
        book = create_test_book(client, auth_headers)
        url = f"{LIBRARIES}/{library['id']}/books/{book['id']}"

        first = client.post(url, headers=auth_headers)
        second = client.post(url, headers=auth_headers)

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_409_CONFLICT
        assert items_count(client, auth_headers, library["id"]) == 1

    def test_add_someone_elses_book(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf")
        book = create_test_book(client, other_headers, "Their book")

        response = client.post(
            f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_add_missing_book(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        library = create_test_library(client, auth_headers, "Shelf")

        response = client.post(f"{LIBRARIES}/{library['id']}/books/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_add_book_to_missing_library(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        book = create_test_book(client, auth_headers)

        response = client.post(f"{LIBRARIES}/99999/books/{book['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_add_book_to_foreign_library(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf", is_public=True)
        book = create_test_book(client, other_headers)

        response = client.post(
            f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=other_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Not owner"


class TestNestLibrary:
    def test_nest_library_success(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        parent = create_test_library(client, auth_headers, "Parent")
        child = create_test_library(client, auth_headers, "Child")

        response = client.post(
            f"{LIBRARIES}/{parent['id']}/libraries/{child['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["library_id"] == parent["id"]
        assert data["child_library_id"] == child["id"]

        detail = client.get(f"{LIBRARIES}/{parent['id']}", headers=auth_headers).json()
        item = detail["items"][0]
        assert item["book"] is None
        assert item["child_library"] == {"id": child["id"], "name": "Child"}

    def test_nest_foreign_public_library(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        parent = create_test_library(client, auth_headers, "Parent")
        child = create_test_library(client, other_headers, "Theirs", is_public=True)

        response = client.post(
            f"{LIBRARIES}/{parent['id']}/libraries/{child['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_self_nesting_is_conflict(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf")

        response = client.post(
            f"{LIBRARIES}/{library['id']}/libraries/{library['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Cannot nest into itself"

    def test_self_nesting_missing_library_is_conflict(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(f"{LIBRARIES}/99999/libraries/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_self_nesting_foreign_library_is_conflict(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf")

        response = client.post(
            f"{LIBRARIES}/{library['id']}/libraries/{library['id']}", headers=other_headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_nest_twice_is_conflict(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        parent = create_test_library(client, auth_headers, "Parent")
        child = create_test_library(client, auth_headers, "Child")
        url = f"{LIBRARIES}/{parent['id']}/libraries/{child['id']}"

        client.post(url, headers=auth_headers)
        response = client.post(url, headers=auth_headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Already nested"
        assert items_count(client, auth_headers, parent["id"]) == 1

    def test_nest_missing_child(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        parent = create_test_library(client, auth_headers, "Parent")

        response = client.post(
            f"{LIBRARIES}/{parent['id']}/libraries/99999", headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_nest_into_foreign_library(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        parent = create_test_library(client, auth_headers, "Parent")
        child = create_test_library(client, other_headers, "Child")

        response = client.post(
            f"{LIBRARIES}/{parent['id']}/libraries/{child['id']}", headers=other_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestRemoveItem:
    def test_remove_item_success(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        library = create_test_library(client, auth_headers, "Shelf")
        book = create_test_book(client, auth_headers)
        item = client.post(
            f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=auth_headers
        ).json()

        response = client.delete(
            f"{LIBRARIES}/{library['id']}/items/{item['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"ok": True}
        assert items_count(client, auth_headers, library["id"]) == 0

    def test_remove_item_from_wrong_library(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf")
        other_library = create_test_library(client, auth_headers, "Other")
        book = create_test_book(client, auth_headers)
        item = client.post(
            f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=auth_headers
        ).json()

        response = client.delete(
            f"{LIBRARIES}/{other_library['id']}/items/{item['id']}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert items_count(client, auth_headers, library["id"]) == 1

    def test_remove_missing_item(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        library = create_test_library(client, auth_headers, "Shelf")

        response = client.delete(
            f"{LIBRARIES}/{library['id']}/items/99999", headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remove_item_by_non_owner(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        library = create_test_library(client, auth_headers, "Shelf", is_public=True)
        book = create_test_book(client, auth_headers)
        item = client.post(
            f"{LIBRARIES}/{library['id']}/books/{book['id']}", headers=auth_headers
        ).json()

        response = client.delete(
            f"{LIBRARIES}/{library['id']}/items/{item['id']}", headers=other_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert items_count(client, auth_headers, library["id"]) == 1
