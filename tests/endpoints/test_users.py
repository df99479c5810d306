from coursex.core.config import settings
from coursex.core.constants import RoleEnum
from coursex.core.security import create_identity_token
from coursex.crud.user import user as crud_user
from tests.helpers.asserts import assert_error


def _bearer(token: str):
    return {"Authorization": f"Bearer {token}"}


def test_me_requires_token(client):
    response = client.get("/api/users/me")
    assert_error(response, 401, "UNAUTHORIZED")


def test_me_rejects_invalid_token(client):
    response = client.get("/api/users/me", headers=_bearer("not-a-jwt"))
    assert_error(response, 401, "UNAUTHORIZED")


def test_first_request_mirrors_identity_as_student(client, db_session):
    print("\n[TEST] Mirror identity on first sight")
    token = create_identity_token("idp|new-user", email="new.user@test.com", name="New User")

    response = client.get("/api/users/me", headers=_bearer(token))
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["id"] == "idp|new-user"
    assert data["email"] == "new.user@test.com"
    assert data["role"] == RoleEnum.STUDENT.value

    again = client.get("/api/users/me", headers=_bearer(token))
    assert again.status_code == 200
    assert crud_user.count(db_session) == 1


def test_identity_without_email_is_rejected_on_first_sight(client):
    token = create_identity_token("idp|no-email")
    response = client.get("/api/users/me", headers=_bearer(token))
    assert_error(response, 401, "UNAUTHORIZED")


def test_email_linked_to_another_identity_is_rejected(client, student):
    token = create_identity_token("idp|impostor", email=student.email)
    response = client.get("/api/users/me", headers=_bearer(token))
    assert_error(response, 401, "UNAUTHORIZED")


def test_admin_email_is_mirrored_as_admin(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAIL", "Boss@Test.com")
    token = create_identity_token("idp|boss", email="boss@test.com")

    response = client.get("/api/users/me", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json()["data"]["role"] == RoleEnum.ADMIN.value


def test_existing_admin_email_user_is_promoted(client, student, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAIL", student.email)
    token = create_identity_token(student.id, email=student.email)

    response = client.get("/api/users/me", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json()["data"]["role"] == RoleEnum.ADMIN.value
