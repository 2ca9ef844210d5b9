from __future__ import annotations


def test_admin_routes_forbidden_for_users(client, signup):
    alice = signup("alice@x.com")
    assert client.get("/api/admin/overview", headers=alice["headers"]).status_code == 403
    assert client.post("/api/admin/reset", headers=alice["headers"]).status_code == 403
    assert client.get("/api/admin/overview").status_code == 401


def test_admin_overview(client, signup, group_for, make_admin):
    admin = signup("admin@x.com", "Admin")
    bob = signup("bob@x.com", "Bob")
    make_admin("admin@x.com")
    group_id = group_for(bob, "Runners")
    client.post(
        "/api/activities",
        json={"activityType": "RUN", "duration": 25, "date": "2024-01-01", "groupId": group_id},
        headers=bob["headers"],
    )

    resp = client.get("/api/admin/overview", headers=admin["headers"])

    assert resp.status_code == 200
    body = resp.json()
    users = {u["email"]: u for u in body["users"]}
    assert users["admin@x.com"]["role"] == "ADMIN"
    assert users["bob@x.com"]["counts"] == {"activities": 1, "memberships": 1, "createdGroups": 1}
    assert body["groups"][0]["createdBy"]["email"] == "bob@x.com"
    assert body["groups"][0]["counts"] == {"members": 1, "activities": 1}
    assert body["activities"][0]["group"]["name"] == "Runners"
    assert body["groupMembers"][0]["role"] == "ADMIN"


def test_admin_reset(client, signup, group_for, make_admin):
    admin = signup("admin@x.com", "Admin")
    make_admin("admin@x.com")
    group_for(admin)

    assert client.post("/api/admin/reset", headers=admin["headers"]).status_code == 200
    # Вместе со всеми пользователями удалён и сам администратор
    assert client.get("/api/me", headers=admin["headers"]).status_code == 401
