API = "/api/v1"


def _h(user):
    return {"X-User-ID": str(user.id)}


class TestUsersAPI:
    def test_register_starts_as_athlete(self, client):
        response = client.post(f"{API}/users", json={"email": "nuevo@test.com", "full_name": "Nuevo Judoka"})

        assert response.status_code == 201
        data = response.json()
        assert data["role"] == "athlete"
        assert data["current_belt"] == "white"

        me = client.get(f"{API}/users/me", headers={"X-User-ID": str(data["id"])})
        assert me.json()["email"] == "nuevo@test.com"

    def test_register_duplicate_email(self, client, athlete_user):
        response = client.post(f"{API}/users", json={"email": athlete_user.email})

        assert response.status_code == 409

    def test_register_with_unknown_club(self, client):
        response = client.post(f"{API}/users", json={"email": "x@test.com", "club_id": 999})

        assert response.status_code == 404

    def test_update_profile(self, client, athlete_user):
        response = client.patch(
            f"{API}/users/me",
            json={"current_belt": "brown", "competition_category": "-73kg"},
            headers=_h(athlete_user),
        )

        assert response.status_code == 200
        assert response.json()["current_belt"] == "brown"
        assert response.json()["full_name"] == "Athlete Test"


class TestRolesAPI:
    def test_read_my_role(self, client, trainer_user):
        response = client.get(f"{API}/roles/me", headers=_h(trainer_user))

        assert response.status_code == 200
        assert response.json()["role"] == "trainer"

    def test_only_admin_can_change_roles(self, client, athlete_user, other_athlete):
        response = client.put(
            f"{API}/roles/{other_athlete.id}", json={"role": "admin"}, headers=_h(athlete_user)
        )

        assert response.status_code == 403

    def test_admin_changes_role(self, client, admin_user, athlete_user):
        response = client.put(
            f"{API}/roles/{athlete_user.id}", json={"role": "trainer"}, headers=_h(admin_user)
        )

        assert response.status_code == 200
        assert response.json()["role"] == "trainer"
        assert response.json()["assigned_by"] == admin_user.id
        assert client.get(f"{API}/users/me", headers=_h(athlete_user)).json()["role"] == "trainer"

        roles = client.get(f"{API}/roles", headers=_h(admin_user)).json()
        assert {r["user_id"]: r["role"] for r in roles}[athlete_user.id] == "trainer"


class TestClubsAPI:
    def test_athletes_cannot_create_clubs(self, client, athlete_user):
        response = client.post(f"{API}/clubs", json={"name": "Budokan"}, headers=_h(athlete_user))

        assert response.status_code == 403

    def test_club_lifecycle(self, client, trainer_user, other_athlete, admin_user):
        club = client.post(f"{API}/clubs", json={"name": "Budokan"}, headers=_h(trainer_user)).json()
        assert club["created_by"] == trainer_user.id

        response = client.patch(f"{API}/clubs/{club['id']}", json={"name": "Otro"}, headers=_h(other_athlete))
        assert response.status_code == 403

        response = client.patch(
            f"{API}/clubs/{club['id']}", json={"description": "Club de judo"}, headers=_h(trainer_user)
        )
        assert response.json()["description"] == "Club de judo"

        response = client.delete(f"{API}/clubs/{club['id']}", headers=_h(admin_user))
        assert response.status_code == 200
        assert client.get(f"{API}/clubs", headers=_h(trainer_user)).json() == []


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/api/v1/docs"
