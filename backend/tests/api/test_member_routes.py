"""Member Routes — admin directory and the database probe."""

DIRECTORY_KEYS = {
    "id", "name", "email", "phone", "address", "birthday", "interests",
    "bio", "image", "role", "ministryRole", "membershipDate",
}

async def test_directory_lists_active_members_only(
    client, member, admin, inactive_member, auth_headers,
):
    res = await client.get("/api/members/directory", headers=auth_headers(admin))
    assert res.status_code == 200
    emails = {m["email"] for m in res.json()["members"]}
    assert emails == {"member@example.com", "admin@example.com"}

async def test_directory_entries_have_limited_fields(
    client, member, admin, auth_headers,
):
    res = await client.get("/api/members/directory", headers=auth_headers(admin))
    for entry in res.json()["members"]:
        assert set(entry) == DIRECTORY_KEYS

async def test_super_admin_can_read_directory(client, verifier, admin):
    token = verifier.issue_token(admin.id, role="super_admin")
    res = await client.get(
        "/api/members/directory", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 200

async def test_db_probe_reports_success(client, member):
    res = await client.get("/api/test-db")
    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "message": "Database connection successful",
        "userCount": 1,
    }

async def test_db_probe_on_empty_database(client):
    res = await client.get("/api/test-db")
    assert res.json()["userCount"] == 0
