# tests/test_routes.py
"""
Tests for the HTTP layer: blueprints wired to an injected MemStorage.
"""


def test_health_reports_corpus(client, storage):
    response = client.get('/health')
    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'healthy'
    assert body['verses'] == storage.verse_count
    assert body['source'] == 'dataset'


def test_list_books(client):
    response = client.get('/api/books')
    assert response.status_code == 200
    books = response.get_json()
    assert books[0] == {"id": 1, "name": "Genesis", "testament": "Old", "chapters": 50, "order": 1}
    assert [b['order'] for b in books] == sorted(b['order'] for b in books)


def test_get_book(client):
    response = client.get('/api/books/1%20Corinthians')
    assert response.status_code == 200
    assert response.get_json()['testament'] == 'New'


def test_get_book_not_found(client):
    response = client.get('/api/books/Revelation')
    assert response.status_code == 404
    assert response.get_json() == {"error": "Book not found"}


def test_get_verses_for_chapter(client):
    response = client.get('/api/verses/Genesis?chapter=2')
    assert response.status_code == 200
    verses = response.get_json()
    assert [(v['chapter'], v['verse']) for v in verses] == [(2, 1)]


def test_non_integer_chapter_returns_whole_book(client):
    response = client.get('/api/verses/Genesis?chapter=abc')
    assert response.status_code == 200
    assert len(response.get_json()) == 14


def test_get_single_verse(client):
    response = client.get('/api/verses/John/3/16')
    assert response.status_code == 200
    verse = response.get_json()
    assert set(verse) == {"id", "book", "chapter", "verse", "text"}
    assert verse['text'].startswith("For God so loved")


def test_get_single_verse_not_found(client):
    response = client.get('/api/verses/John/3/99')
    assert response.status_code == 404
    assert response.get_json() == {"error": "Verse not found"}


def test_search(client):
    response = client.get('/api/search', query_string={'q': 'John 3:16'})
    assert response.status_code == 200
    assert [(v['book'], v['chapter'], v['verse']) for v in response.get_json()] == [("John", 3, 16)]


def test_search_requires_query(client):
    for url in ('/api/search', '/api/search?q='):
        response = client.get(url)
        assert response.status_code == 400
        assert response.get_json() == {"error": "Search query is required"}


def test_highlight_lifecycle(client):
    response = client.post('/api/highlights', json={"verseId": "John:3:16", "color": "yellow"})
    assert response.status_code == 201
    assert response.get_json() == {"id": 1, "verseId": "John:3:16", "color": "yellow", "userId": "default"}

    assert len(client.get('/api/highlights').get_json()) == 1

    response = client.delete('/api/highlights/John:3:16')
    assert response.status_code == 204
    assert client.get('/api/highlights').get_json() == []


def test_highlights_filtered_by_user(client):
    client.post('/api/highlights', json={"verseId": "John:3:16", "color": "red", "userId": "alice"})
    assert client.get('/api/highlights').get_json() == []
    assert len(client.get('/api/highlights?userId=alice').get_json()) == 1

    client.delete('/api/highlights/John:3:16?userId=alice')
    assert client.get('/api/highlights?userId=alice').get_json() == []


def test_delete_unknown_highlight_returns_no_content(client):
    response = client.delete('/api/highlights/Genesis:1:1')
    assert response.status_code == 204


def test_invalid_highlight_rejected(client):
    bad_payloads = [
        {"verseId": "John:3:16", "color": "purple"},
        {"color": "yellow"},
        {"verseId": "", "color": "yellow"},
        ["John:3:16", "yellow"],
    ]
    for payload in bad_payloads:
        response = client.post('/api/highlights', json=payload)
        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid highlight data"}


def test_highlight_rejects_non_json_body(client):
    response = client.post('/api/highlights', data="John:3:16", content_type='text/plain')
    assert response.status_code == 400


def test_bookmark_lifecycle(client):
    response = client.post('/api/bookmarks', json={"verseId": "Psalms:23:1", "userId": "bob"})
    assert response.status_code == 201
    assert response.get_json() == {"id": 1, "verseId": "Psalms:23:1", "userId": "bob"}

    assert client.get('/api/bookmarks?userId=bob').get_json() == [response.get_json()]

    assert client.delete('/api/bookmarks/Psalms:23:1?userId=bob').status_code == 204
    assert client.get('/api/bookmarks?userId=bob').get_json() == []


def test_invalid_bookmark_rejected(client):
    response = client.post('/api/bookmarks', json={"userId": "bob"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid bookmark data"}


def test_unknown_route_returns_json_404(client):
    response = client.get('/api/verses/John/x/1')
    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_empty_user_id_query_is_its_own_user(client):
    client.post('/api/highlights', json={"verseId": "John:3:16", "color": "blue"})
    assert client.get('/api/highlights?userId=').get_json() == []
    assert len(client.get('/api/highlights').get_json()) == 1
