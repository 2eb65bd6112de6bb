import pytest
from app import app as flask_app
from helpers import FakeLookup


@pytest.fixture
def client(monkeypatch):
    lookup = FakeLookup()
    tokens = []

    def factory(token):
        tokens.append(token)
        return lookup

    monkeypatch.setitem(flask_app.config, "LOOKUP_FACTORY", factory)
    monkeypatch.delenv("IPINFO_TOKEN", raising=False)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        c.tokens = tokens
        yield c


def test_get_form(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"Trace to Geo" in r.data


def test_trace_view(client):
    r = client.post("/", data={"input": "1  192.168.1.1\n2  8.8.8.8", "token": "tok", "view": "trace"})
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert "1  192.168.1.1    # Local - " in body
    assert "2  8.8.8.8        # Mountain View - US" in body
    assert client.tokens == ["tok"]


def test_full_view_uses_env_token(client, monkeypatch):
    monkeypatch.setenv("IPINFO_TOKEN", "env-tok")
    r = client.post("/", data={"input": "1.1.1.1", "view": "full"})
    body = r.get_data(as_text=True)
    assert "Hop 1 IP: 1.1.1.1" in body
    assert "City: Brisbane" in body
    assert client.tokens == ["env-tok"]


@pytest.mark.parametrize("data,message", [
    ({"input": "   ", "token": "tok"}, "Paste an IP"),
    ({"input": "8.8.8.8"}, "Enter an ipinfo.io token"),
    ({"input": "8.8.8.8", "token": "tok", "view": "map"}, "Unknown view"),
])
def test_form_errors_redirect(client, data, message):
    r = client.post("/", data=data)
    assert r.status_code == 302
    r = client.get(r.headers["Location"])
    assert message in r.get_data(as_text=True)
    assert client.tokens == []


def test_no_addresses(client):
    r = client.post("/", data={"input": "hello world", "token": "tok"})
    assert "No IP addresses found" in r.get_data(as_text=True)
    assert client.tokens == []
