import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_team_seats_owner(client: AsyncClient, make_user):
    owner_id, owner_headers = make_user()

    response = await client.post(
        "/teams",
        json={"name": "Hackers", "description": "Weekend project", "max_members": 4},
        headers=owner_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["owner_id"] == str(owner_id)
    assert data["member_count"] == 1
    assert data["available_slots"] == 3
    assert data["members"][0]["role"] == "owner"


@pytest.mark.asyncio
@pytest.mark.parametrize("max_members", [0, 21])
async def test_create_team_max_members_bounds(client: AsyncClient, make_user, max_members):
    _, owner_headers = make_user()

    response = await client.post(
        "/teams",
        json={"name": "Hackers", "max_members": max_members},
        headers=owner_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_MAX_MEMBERS"


@pytest.mark.asyncio
async def test_get_unknown_team(client: AsyncClient):
    response = await client.get("/teams/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TEAM_NOT_FOUND"


@pytest.mark.asyncio
async def test_remove_member_frees_seat(client: AsyncClient, make_user, create_team, notifier):
    _, owner_headers = make_user()
    user_id, user_headers = make_user()
    team = await create_team(owner_headers, max_members=2)

    request_response = await client.post(
        f"/teams/{team['id']}/join-requests", json={}, headers=user_headers
    )
    await client.post(
        f"/join-requests/{request_response.json()['id']}/respond",
        json={"decision": "approve"},
        headers=owner_headers,
    )

    remove_response = await client.delete(
        f"/teams/{team['id']}/members/{user_id}", headers=owner_headers
    )
    assert remove_response.status_code == 200
    assert remove_response.json()["status"] == "removed"

    team_response = await client.get(f"/teams/{team['id']}")
    assert team_response.json()["member_count"] == 1
    assert notifier.kinds()[-1] == "member.removed"

    # Removing again is a no-op
    again = await client.delete(f"/teams/{team['id']}/members/{user_id}", headers=owner_headers)
    assert again.status_code == 200
    assert again.json()["status"] == "not_a_member"

    # The freed seat can be taken again by the same user
    rejoin = await client.post(
        f"/teams/{team['id']}/join-requests", json={}, headers=user_headers
    )
    approve = await client.post(
        f"/join-requests/{rejoin.json()['id']}/respond",
        json={"decision": "approve"},
        headers=owner_headers,
    )
    assert approve.status_code == 200


@pytest.mark.asyncio
async def test_owner_cannot_be_removed(client: AsyncClient, make_user, create_team):
    owner_id, owner_headers = make_user()
    team = await create_team(owner_headers)

    response = await client.delete(
        f"/teams/{team['id']}/members/{owner_id}", headers=owner_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CANNOT_REMOVE_OWNER"


@pytest.mark.asyncio
async def test_deactivated_team_freezes_pending_requests(
    client: AsyncClient, make_user, create_team
):
    _, owner_headers = make_user()
    _, user_headers = make_user()
    team = await create_team(owner_headers)

    request_response = await client.post(
        f"/teams/{team['id']}/join-requests", json={}, headers=user_headers
    )

    deactivate_response = await client.post(
        f"/teams/{team['id']}/deactivate", headers=owner_headers
    )
    assert deactivate_response.status_code == 200
    assert deactivate_response.json()["is_active"] is False

    approve = await client.post(
        f"/join-requests/{request_response.json()['id']}/respond",
        json={"decision": "approve"},
        headers=owner_headers,
    )
    assert approve.status_code == 409
    assert approve.json()["error"]["code"] == "TEAM_INACTIVE"

    new_request = await client.post(
        f"/teams/{team['id']}/join-requests", json={}, headers=make_user()[1]
    )
    assert new_request.status_code == 409
    assert new_request.json()["error"]["code"] == "TEAM_INACTIVE"


@pytest.mark.asyncio
async def test_deleted_team_discards_pending_ledgers(
    client: AsyncClient, make_user, create_team
):
    _, owner_headers = make_user()
    _, applicant_headers = make_user()
    invitee_id, invitee_headers = make_user()
    team = await create_team(owner_headers)

    request_response = await client.post(
        f"/teams/{team['id']}/join-requests", json={}, headers=applicant_headers
    )
    invite_response = await client.post(
        f"/teams/{team['id']}/invitations",
        json={"invitee_id": str(invitee_id)},
        headers=owner_headers,
    )

    delete_response = await client.delete(f"/teams/{team['id']}", headers=owner_headers)
    assert delete_response.status_code == 200
    data = delete_response.json()
    assert data["status"] == "deleted"
    assert data["members_removed"] == 1
    assert data["join_requests_discarded"] == 1
    assert data["invitations_discarded"] == 1

    approve = await client.post(
        f"/join-requests/{request_response.json()['id']}/respond",
        json={"decision": "approve"},
        headers=owner_headers,
    )
    accept = await client.post(
        f"/invitations/{invite_response.json()['id']}/respond",
        json={"decision": "accept"},
        headers=invitee_headers,
    )
    assert approve.status_code == 404
    assert approve.json()["error"]["code"] == "JOIN_REQUEST_NOT_FOUND"
    assert accept.status_code == 404
    assert accept.json()["error"]["code"] == "INVITATION_NOT_FOUND"

    assert (await client.get(f"/teams/{team['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_non_owner_cannot_delete_team(client: AsyncClient, make_user, create_team):
    _, owner_headers = make_user()
    _, stranger_headers = make_user()
    team = await create_team(owner_headers)

    response = await client.delete(f"/teams/{team['id']}", headers=stranger_headers)

    assert response.status_code == 403
    assert (await client.get(f"/teams/{team['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_list_my_teams(client: AsyncClient, make_user, create_team):
    """Owned and joined active teams, with the caller's role in each"""
    _, owner_headers = make_user()
    _, user_headers = make_user()
    _, other_owner_headers = make_user()

    own_team = await create_team(user_headers, name="Own", max_members=2)
    joined_team = await create_team(owner_headers, name="Joined", max_members=3)
    retired_team = await create_team(other_owner_headers, name="Retired", max_members=3)
    await create_team(owner_headers, name="Unrelated")

    for team, headers in ((joined_team, owner_headers), (retired_team, other_owner_headers)):
        request_response = await client.post(
            f"/teams/{team['id']}/join-requests", json={}, headers=user_headers
        )
        approve = await client.post(
            f"/join-requests/{request_response.json()['id']}/respond",
            json={"decision": "approve"},
            headers=headers,
        )
        assert approve.status_code == 200

    await client.post(f"/teams/{retired_team['id']}/deactivate", headers=other_owner_headers)

    response = await client.get("/teams/mine", headers=user_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    roles = {team["id"]: team["role"] for team in data["teams"]}
    assert roles == {own_team["id"]: "owner", joined_team["id"]: "member"}
    joined = next(team for team in data["teams"] if team["id"] == joined_team["id"])
    assert joined["member_count"] == 2
    assert joined["available_slots"] == 1


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
