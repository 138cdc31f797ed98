def test_health_ok(client):
    """Health check pings the database and names its dialect"""
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "sqlite"}


def test_root_endpoint(client):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Report Mapping Dashboard"
    assert data["status"] == "ok"
    assert "docs" in data
    assert "health" in data
