def test_list_urls_empty(client):
    """Test listing URLs when database is empty."""
    response = client.get("/urls")
    assert response.status_code == 200
    assert response.json() == []


def test_list_urls_with_data(client, sample_urls):
    """Test listing URLs returns every mapping in creation order."""
    for url in sample_urls:
        client.post("/shorten", json={"fullUrl": url})

    response = client.get("/urls")
    assert response.status_code == 200
    data = response.json()
    assert [u["fullUrl"] for u in data] == sample_urls
    for u in data:
        assert set(u) == {"alias", "fullUrl", "shortUrl"}
        assert u["shortUrl"] == f"http://localhost:8080/{u['alias']}"


def test_delete_url(client):
    client.post("/shorten", json={"fullUrl": "https://example.com/a", "customAlias": "a"})
    client.post("/shorten", json={"fullUrl": "https://example.com/b", "customAlias": "b"})

    response = client.delete("/a")
    assert response.status_code == 204

    assert [u["alias"] for u in client.get("/urls").json()] == ["b"]


def test_delete_url_not_found(client):
    """Test deleting a non-existent alias."""
    response = client.delete("/nonexistent")
    assert response.status_code == 404
    assert response.json() == {"error": "Alias 'nonexistent' not found"}


def test_alias_can_be_reused_after_delete(client):
    client.post("/shorten", json={"fullUrl": "https://example.com/old", "customAlias": "reuse"})
    client.delete("/reuse")

    response = client.post("/shorten", json={"fullUrl": "https://example.com/new", "customAlias": "reuse"})
    assert response.status_code == 201
    assert client.get("/reuse", follow_redirects=False).headers["location"] == "https://example.com/new"
