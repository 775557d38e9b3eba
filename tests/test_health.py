# =============================================
# tests/test_health.py
# =============================================

async def test_health(client):
    response = await client.get("/health")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert "X-Process-Time" in response.headers

async def test_unknown_route_uses_message_shape(client):
    response = await client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}
