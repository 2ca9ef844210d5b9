from __future__ import annotations

from fittrack.models import Activity, Group, GroupMember, PersonalData, User, Weight
from fittrack.services import activity_service, group_service, user_service
from fittrack.models.base import utcnow


def test_profile_photo_latest_wins(client, signup):
    alice = signup("alice@x.com")
    headers = alice["headers"]

    assert client.get("/api/profile", headers=headers).json() == {"personalData": None}

    client.post("/api/profile", json={"photoUrl": "http://img/1.png"}, headers=headers)
    resp = client.post("/api/profile", json={"photoUrl": "http://img/2.png"}, headers=headers)
    assert resp.status_code == 200

    current = client.get("/api/profile", headers=headers).json()["personalData"]
    assert current["photoUrl"] == "http://img/2.png"

    assert client.post("/api/profile", json={"photoUrl": "  "}, headers=headers).status_code == 400


def test_delete_account_removes_everything(client, signup, group_for):
    alice = signup("alice@x.com", "Alice")
    bob = signup("bob@x.com", "Bob")
    alice_group = group_for(alice, "Alice's")
    bob_group = group_for(bob, "Bob's")
    client.post(f"/api/groups/{alice_group}/join", headers=bob["headers"])
    client.post(f"/api/groups/{bob_group}/join", headers=alice["headers"])
    activity = {"activityType": "RUN", "duration": 20, "date": "2024-01-01"}
    client.post("/api/activities", json={**activity, "groupId": alice_group}, headers=bob["headers"])
    client.post("/api/activities", json={**activity, "groupId": bob_group}, headers=alice["headers"])
    client.post("/api/weight", json={"weight": 70, "date": "2024-01-01"}, headers=alice["headers"])
    client.post("/api/profile", json={"photoUrl": "http://img/a.png"}, headers=alice["headers"])

    resp = client.delete("/api/user/delete", headers=alice["headers"])

    assert resp.status_code == 200
    assert client.get("/api/me", headers=alice["headers"]).status_code == 401
    assert client.post("/api/login", json={"email": "alice@x.com", "password": "pw123456"}).status_code == 401

    groups = client.get("/api/groups?showAll=true", headers=bob["headers"]).json()["groups"]
    assert [g["name"] for g in groups] == ["Bob's"]
    assert groups[0]["memberCount"] == 1
    assert groups[0]["activityCount"] == 0
    assert client.get("/api/activities", headers=bob["headers"]).json()["count"] == 0


def test_delete_account_service(db):
    alice = user_service.register(db, "alice@x.com", "pw123456", "Alice")
    group = group_service.create_group(db, alice, "Runners")
    activity_service.create_activity(db, alice, "RUN", 30, utcnow(), group.id)
    user_service.log_photo(db, alice, "http://img/a.png")
    db.add(Weight(user_id=alice.id, weight=70.0, date=utcnow()))
    db.commit()

    user_service.delete_account(db, alice)

    for model in (User, Group, GroupMember, Activity, Weight, PersonalData):
        assert db.query(model).count() == 0
