"""
Tests for the profile endpoints.
"""

import pytest

from tests.conftest import create_test_token

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def account(client):
    """Sign up a user and return (user, headers)."""
    response = client.post("/api/auth/signup", json={
        "name": "John Doe",
        "email": "john@example.com",
        "password": "securePassword123",
    })
    data = response.json()
    return data["user"], {"Authorization": f"Bearer {data['token']}"}


def upload(client, headers, data=PNG, content_type="image/png", filename="me.png"):
    return client.post(
        "/api/users/upload",
        headers=headers,
        files={"image": (filename, data, content_type)},
    )


class TestGetProfile:
    def test_get_profile(self, client, account):
        user, headers = account
        response = client.get("/api/users/profile", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["id"] == user["id"]
        assert set(data["user"]) == {
            "id", "name", "email", "bio", "profilePic", "createdAt", "updatedAt",
        }

    def test_token_for_unknown_user(self, client, auth_headers):
        """A valid token whose user is gone should be 404, not 401."""
        response = client.get("/api/users/profile", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}


class TestUpdateProfile:
    def test_partial_update(self, client, account):
        _, headers = account
        response = client.put("/api/users/profile", headers=headers, json={"bio": "Hello"})

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["bio"] == "Hello"
        assert user["name"] == "John Doe"

    def test_update_email_conflict(self, client, account):
        _, headers = account
        client.post("/api/auth/signup", json={
            "name": "Jane Roe",
            "email": "jane@example.com",
            "password": "securePassword123",
        })

        response = client.put("/api/users/profile", headers=headers, json={"email": "jane@example.com"})
        assert response.status_code == 409

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"password": "newPassword123"},
            {"email": "nope"},
            {"name": ""},
            {"bio": "x" * 501},
        ],
    )
    def test_invalid_update(self, client, account, body):
        _, headers = account
        response = client.put("/api/users/profile", headers=headers, json=body)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_non_object_body(self, client, account):
        _, headers = account
        response = client.put("/api/users/profile", headers=headers, json=["bio"])
        assert response.status_code == 400

    def test_requires_auth(self, client):
        response = client.put("/api/users/profile", json={"bio": "Hello"})
        assert response.status_code == 401


class TestUploadPicture:
    def test_upload(self, client, account, media_uploader):
        user, headers = account
        response = upload(client, headers)

        assert response.status_code == 200
        assert response.json()["user"]["profilePic"].startswith("https://images.test/")
        assert media_uploader.uploads == [(PNG, "image/png", user["id"])]

        # Persisted
        profile = client.get("/api/users/profile", headers=headers).json()["user"]
        assert profile["profilePic"] == response.json()["user"]["profilePic"]

    def test_rejects_unsupported_type(self, client, account, media_uploader):
        _, headers = account
        response = upload(client, headers, content_type="application/pdf", filename="cv.pdf")

        assert response.status_code == 400
        assert media_uploader.uploads == []

    def test_rejects_oversized_image(self, client, account, media_uploader):
        _, headers = account
        response = upload(client, headers, data=b"x" * (5 * 1024 * 1024 + 1))

        assert response.status_code == 400
        assert response.json()["message"] == "Image too large. Maximum size is 5 MB"
        assert media_uploader.uploads == []

    def test_oversized_upload_is_not_fully_buffered(
        self, client, account, container, media_uploader, monkeypatch
    ):
        """The route stops reading one byte past the ceiling."""
        _, headers = account
        service = container.profiles
        upload_picture = service.upload_picture
        received = []

        async def recording_upload(user_id, data, mime_type):
            received.append(len(data))
            return await upload_picture(user_id, data, mime_type)

        monkeypatch.setattr(service, "upload_picture", recording_upload)

        response = upload(client, headers, data=b"x" * (service.max_picture_bytes * 2))

        assert response.status_code == 400
        assert received == [service.max_picture_bytes + 1]
        assert media_uploader.uploads == []

    def test_missing_file_field(self, client, account):
        _, headers = account
        response = client.post(
            "/api/users/upload",
            headers=headers,
            files={"avatar": ("me.png", PNG, "image/png")},
        )
        assert response.status_code == 400

    def test_upstream_failure(self, client, account, media_uploader):
        _, headers = account
        media_uploader.fail_upload = True

        response = upload(client, headers)

        assert response.status_code == 502
        assert response.json() == {"success": False, "message": "Image upload failed"}
        profile = client.get("/api/users/profile", headers=headers).json()["user"]
        assert profile["profilePic"] is None


class TestDeleteAccount:
    def test_delete(self, client, account):
        _, headers = account
        response = client.delete("/api/users/profile", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Account deleted"}

    def test_delete_twice(self, client, account):
        _, headers = account
        client.delete("/api/users/profile", headers=headers)

        response = client.delete("/api/users/profile", headers=headers)
        assert response.status_code == 404

    def test_token_outlives_account(self, client, account):
        """The old token still verifies but the profile is gone."""
        _, headers = account
        client.delete("/api/users/profile", headers=headers)

        assert client.get("/api/users/profile", headers=headers).status_code == 404
        assert client.post("/api/auth/logout", headers=headers).status_code == 200

    def test_email_reusable_after_delete(self, client, account):
        _, headers = account
        client.delete("/api/users/profile", headers=headers)

        response = client.post("/api/auth/signup", json={
            "name": "John Again",
            "email": "john@example.com",
            "password": "securePassword123",
        })
        assert response.status_code == 201

    def test_requires_auth(self, client):
        token = create_test_token(expired=True)
        response = client.delete("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
