"""
Tests for the token cookie endpoints and the email-ownership guard.
"""
from app.config import settings


def cookie_attributes(response) -> list:
    """Lower-cased Set-Cookie attributes without the name=value pair."""
    return [part.strip().lower() for part in response.headers["set-cookie"].split(";")[1:]]


def test_jwt_sets_httponly_cookie(client):
    response = client.post("/jwt", json={"email": "a@x.com"})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert response.headers["set-cookie"].startswith("token=")
    attributes = cookie_attributes(response)
    assert "httponly" in attributes
    assert "samesite=strict" in attributes
    assert "secure" not in attributes


def test_jwt_cookie_is_cross_site_in_production(client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    response = client.post("/jwt", json={"email": "a@x.com"})

    attributes = cookie_attributes(response)
    assert "samesite=none" in attributes
    assert "secure" in attributes


def test_jwt_rejects_invalid_email(client):
    response = client.post("/jwt", json={"email": "not-an-email"})
    assert response.status_code == 422


def test_logout_expires_cookie(client):
    response = client.get("/jwt-logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert "max-age=0" in cookie_attributes(response)


def test_issued_cookie_authorizes_bid_listing(client):
    client.post("/jwt", json={"email": "a@x.com"})
    response = client.get("/bid-jobs/a@x.com")
    assert response.status_code == 200
    assert response.json() == []


def test_bid_listing_without_cookie_is_unauthorized(client):
    response = client.get("/bid-jobs/a@x.com")
    assert response.status_code == 401
    assert response.json()["message"] == "Unauthorized access"


def test_bid_listing_with_invalid_token_is_unauthorized(client):
    client.cookies.set("token", "garbage")
    response = client.get("/bid-jobs/a@x.com")
    assert response.status_code == 401


def test_bid_listing_for_other_email_is_forbidden(client, login):
    login("a@x.com")
    response = client.get("/bid-jobs/b@x.com")
    assert response.status_code == 403
    assert response.json()["message"] == "Unauthorized access"


def test_logout_does_not_revoke_token(client, login):
    token = login("a@x.com")
    client.get("/jwt-logout")

    client.cookies.set("token", token)
    response = client.get("/bid-jobs/a@x.com")
    assert response.status_code == 200


def test_mutations_are_open_by_default(client):
    response = client.delete("/job/507f1f77bcf86cd799439011")
    assert response.status_code == 200


def test_mutations_require_token_when_protected(client, login, monkeypatch):
    monkeypatch.setattr(settings, "PROTECT_MUTATIONS", True)
    job_id = "507f1f77bcf86cd799439011"

    assert client.delete(f"/job/{job_id}").status_code == 401
    assert client.patch(f"/bid-status-update/{job_id}", json={"status": "accepted"}).status_code == 401

    login("a@x.com")
    assert client.delete(f"/job/{job_id}").status_code == 200
