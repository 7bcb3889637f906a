"""Integration tests for the notification channel HTTP endpoints."""

from __future__ import annotations

import dataclasses

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


@pytest.fixture()
def client(channel_directory):
    """Return a test client bound to an in-memory channel directory."""

    from main import create_app

    app = create_app(channel_directory)
    with TestClient(app) as test_client:
        yield test_client


def test_create_then_list_notification_channel(client: TestClient) -> None:
    response = client.post(
        "/users/user123/notification-channels",
        json={"channelType": "DISCORD", "identifier": "123456789"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "userId": "user123",
        "channelType": "DISCORD",
        "identifier": "123456789",
        "isActive": True,
    }

    list_response = client.get("/users/user123/notification-channels")
    assert list_response.status_code == 200
    channels = list_response.json()["notificationChannels"]
    assert len(channels) == 1
    channel = channels[0]
    assert channel["userId"] == "user123"
    assert channel["channelType"] == "DISCORD"
    assert channel["identifier"] == "123456789"
    assert channel["isActive"] is True
    assert channel["createdAt"] == channel["updatedAt"]
    assert channel["createdAt"].endswith("Z")


def test_create_with_malformed_body_returns_generic_error(client: TestClient) -> None:
    response = client.post(
        "/users/user123/notification-channels",
        content="invalid json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.content == b'{"message":"Error creating notification channel"}'


def test_create_with_missing_identifier_returns_field_message(client: TestClient) -> None:
    response = client.post(
        "/users/user123/notification-channels",
        json={"channelType": "EMAIL"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "identifier cannot be null or empty"}
    assert client.get("/users/user123/notification-channels").json() == {"notificationChannels": []}


def test_create_same_channel_type_twice_keeps_last_identifier(client: TestClient) -> None:
    for identifier in ("old@example.com", "new@example.com"):
        response = client.post(
            "/users/user123/notification-channels",
            json={"channelType": "EMAIL", "identifier": identifier},
        )
        assert response.status_code == 200

    channels = client.get("/users/user123/notification-channels").json()["notificationChannels"]
    assert [(c["channelType"], c["identifier"]) for c in channels] == [("EMAIL", "new@example.com")]


def test_list_for_user_without_channels_is_empty(client: TestClient) -> None:
    response = client.get("/users/nobody/notification-channels")

    assert response.status_code == 200
    assert response.json() == {"notificationChannels": []}


def test_list_with_blank_user_id_returns_field_message(client: TestClient) -> None:
    response = client.get("/users/%20%20/notification-channels")

    assert response.status_code == 400
    assert response.json() == {"message": "userId cannot be null or empty"}


def test_create_with_invalid_utf8_body_is_rejected_and_not_stored(client: TestClient) -> None:
    response = client.post(
        "/users/user123/notification-channels",
        content=b'{"channelType":"EMAIL","identifier":"a\xffb@example.com"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Error creating notification channel"}
    assert client.get("/users/user123/notification-channels").json() == {"notificationChannels": []}


def test_create_with_unknown_field_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/users/user123/notification-channels",
        json={"channelType": "EMAIL", "identifier": "a@example.com", "isActive": False},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Error creating notification channel"}


def test_shutdown_releases_directory_engine(channel_directory) -> None:
    from main import create_app

    class RecordingEngine:
        disposed = False

        def dispose(self):
            self.disposed = True

    engine = RecordingEngine()
    directory = dataclasses.replace(channel_directory, engine=engine)

    with TestClient(create_app(directory)) as test_client:
        assert test_client.get("/users/user123/notification-channels").status_code == 200
        assert engine.disposed is False

    assert engine.disposed is True
