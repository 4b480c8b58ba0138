def test_health(client):
    assert client.get("/health").json() == {"message": "OK"}


def test_health_any_method(client):
    for method in ("GET", "POST", "PUT", "DELETE"):
        res = client.request(method, "/health")
        assert res.status_code == 200
        assert res.content == b'{"message":"OK"}'
