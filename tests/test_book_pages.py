"""Tests for the book pages, the catalog home page and unknown routes."""


class TestBookPages:
    """Tests for GET /catalog/books and /catalog/book/{id}."""

    def test_book_list(self, client, book_repo, book):
        book_repo.get_all_with_author.return_value = [book]

        response = client.get("/catalog/books")

        assert response.status_code == 200
        assert "<title>Book List</title>" in response.text
        assert 'href="/catalog/book/10"' in response.text
        assert "(Isaac Asimov)" in response.text

    def test_book_detail(self, client, book_repo, book):
        book_repo.get_detail.return_value = book

        response = client.get("/catalog/book/10")

        assert response.status_code == 200
        assert "Title: The Gods Themselves" in response.text
        assert 'href="/catalog/author/3"' in response.text
        assert 'href="/catalog/genre/1"' in response.text
        assert "9780553288100" in response.text

    def test_missing_book_is_404(self, client):
        response = client.get("/catalog/book/10")

        assert response.status_code == 404
        assert "Book not found" in response.text


class TestCatalogHome:
    """Tests for the home page and root redirect."""

    def test_root_redirects_to_catalog(self, client):
        response = client.get("/")

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog"

    def test_index_shows_counts(self, client, book_repo, author_repo, genre_repo):
        book_repo.count.return_value = 5
        author_repo.count.return_value = 4
        genre_repo.count.return_value = 3

        response = client.get("/catalog")

        assert response.status_code == 200
        assert "<strong>Books:</strong> 5" in response.text
        assert "<strong>Authors:</strong> 4" in response.text
        assert "<strong>Genres:</strong> 3" in response.text


def test_unknown_route_renders_error_page(client):
    response = client.get("/catalog/nothing-here")

    assert response.status_code == 404
    assert "Not Found" in response.text
    assert "<h2>404</h2>" in response.text


def test_malformed_book_id_renders_not_found_page(client):
    response = client.get("/catalog/book/abc")

    assert response.status_code == 404
    assert "<h2>404</h2>" in response.text
