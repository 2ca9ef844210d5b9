from __future__ import annotations

from fittrack.models.base import utcnow


def test_log_run_and_see_it_on_leaderboard(client, signup, group_for):
    alice = signup("a@x.com", "A")
    group_id = group_for(alice, "Runners")

    resp = client.post(
        "/api/activities",
        json={"activityType": "RUN", "duration": 30, "date": utcnow().date().isoformat(), "groupId": group_id},
        headers=alice["headers"],
    )
    assert resp.status_code == 200

    activities = client.get("/api/activities", headers=alice["headers"]).json()["activities"]
    assert len(activities) == 1
    assert activities[0]["duration"] == 30

    board = client.get("/api/leaderboard?timeRange=monthly", headers=alice["headers"]).json()["leaderboard"]
    assert board[0]["userId"] == alice["id"]
    assert board[0]["totalDuration"] == 30
    assert board[0]["totalActivities"] == 1


def test_join_leave_and_delete_group(client, signup, group_for):
    alice = signup("a@x.com", "A")
    bob = signup("b@x.com", "B")
    group_id = group_for(alice, "Runners")

    assert client.post(f"/api/groups/{group_id}/join", headers=bob["headers"]).status_code == 201
    assert client.post(f"/api/groups/{group_id}/leave", headers=bob["headers"]).status_code == 200
    assert client.post(f"/api/groups/{group_id}/leave", headers=alice["headers"]).status_code == 403
    assert client.post(f"/api/groups/{group_id}/delete", headers=alice["headers"]).status_code == 200

    for user in (alice, bob):
        groups = client.get("/api/groups?showAll=true", headers=user["headers"]).json()["groups"]
        assert all(g["id"] != group_id for g in groups)
