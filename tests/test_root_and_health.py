from fastapi.testclient import TestClient

from user_api.main import APP_VERSION, create_app
from user_api.models import UserRecord
from user_api.user_store import InMemoryUserStore


def test_root_greets_on_every_method():
    client = TestClient(create_app())
    for method in ("GET", "POST", "PUT", "DELETE"):
        r = client.request(method, "/api/v1/")
        assert r.status_code == 200, method
        assert r.json() == {"message": "Hello World"}


def test_healthz_reports_user_count():
    store = InMemoryUserStore()
    store.create(UserRecord(id=1, username="a"))
    client = TestClient(create_app(store=store))

    r = client.get("/healthz")
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["service"] == "user-api"
    assert data["version"] == APP_VERSION
    assert data["users"] == 1


def test_startup_logs_port(caplog):
    from user_api.settings import Settings

    app = create_app(settings=Settings(USER_API_PORT=8123))
    with caplog.at_level("INFO", logger="user_api"):
        with TestClient(app):
            pass
    assert "Server is running on 8123" in caplog.text
