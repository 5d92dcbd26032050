"""
Tests for Authors API Endpoints

Tests for /authors endpoints.
"""

from bson import ObjectId
from fastapi import status


class TestListAuthors:
    """Tests for GET /authors endpoint."""

    def test_list_authors_empty(self, client):
        """Test listing authors when database is empty."""
        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_authors_with_data(self, client, sample_author):
        """Test listing authors returns expected data."""
        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0] == {"id": sample_author.id, "name": "George Orwell"}

    def test_list_authors_seeded(self, seeded_client):
        """Test the seeded catalog has exactly the two demo authors."""
        response = seeded_client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        names = sorted(author["name"] for author in response.json())
        assert names == ["J.K. Rowling", "J.R.R. Tolkien"]

    def test_list_authors_null_name(self, client, database):
        """Test an author stored with a null name is listed, not a 500."""
        oid = database.authors.insert_one({"name": None}).inserted_id

        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [{"id": str(oid), "name": None}]


class TestGetAuthor:
    """Tests for GET /authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_author):
        """Test getting an author by ID."""
        response = client.get(f"/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_author.id
        assert data["name"] == "George Orwell"

    def test_get_author_not_found(self, client):
        """Test a well-formed but unknown id returns 404."""
        response = client.get(f"/authors/{ObjectId()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}

    def test_get_author_malformed_id(self, client):
        """Test an id that is not an ObjectId returns 400."""
        response = client.get("/authors/not-an-id")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid author id: not-an-id"}


class TestGetAuthorBooks:
    """Tests for GET /authors/{author_id}/books endpoint."""

    def test_rowling_books(self, seeded_client, rowling_id):
        """Test the seeded Rowling author has the three Harry Potter books."""
        response = seeded_client.get(f"/authors/{rowling_id}/books")

        assert response.status_code == status.HTTP_200_OK
        titles = sorted(book["title"] for book in response.json())
        assert titles == [
            "Harry Potter and the Chamber of Secrets",
            "Harry Potter and the Philosopher's Stone",
            "Harry Potter and the Prisoner of Azkaban",
        ]

    def test_author_books_are_populated(self, seeded_client, rowling_id):
        """Test books are returned with the same author expansion as /books."""
        response = seeded_client.get(f"/authors/{rowling_id}/books")

        for book in response.json():
            assert book["author"] == {"id": rowling_id, "name": "J.K. Rowling"}

    def test_author_without_books(self, client, sample_author):
        """Test an author with no books returns an empty list."""
        response = client.get(f"/authors/{sample_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_author_books_only_that_author(self, client, sample_book, database):
        """Test books by other authors are not included."""
        other = database.authors.insert_one({"name": "Aldous Huxley"})
        database.books.insert_one(
            {"title": "Brave New World", "author": other.inserted_id}
        )

        response = client.get(f"/authors/{sample_book.author_id}/books")

        assert response.status_code == status.HTTP_200_OK
        assert [book["title"] for book in response.json()] == ["1984"]

    def test_author_books_not_found(self, client):
        """Test an unknown author returns 404 instead of failing."""
        response = client.get(f"/authors/{ObjectId()}/books")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Author not found"}

    def test_author_books_malformed_id(self, client):
        """Test a malformed id returns 400."""
        response = client.get("/authors/12345/books")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Invalid author id: 12345"

    def test_author_books_string_reference(self, client, sample_author, database):
        """Test a book referencing its author by hex string is included."""
        database.books.insert_one({"title": "Animal Farm", "author": sample_author.id})

        response = client.get(f"/authors/{sample_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        books = response.json()
        assert [book["title"] for book in books] == ["Animal Farm"]
        assert books[0]["author"]["name"] == "George Orwell"
