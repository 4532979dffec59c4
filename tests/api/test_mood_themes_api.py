from datetime import date

API = "/api/v1"


def _h(user):
    return {"X-User-ID": str(user.id)}


class TestMoodThemesAPI:
    def test_catalog(self, client):
        response = client.get(f"{API}/mood-themes")

        assert response.status_code == 200
        themes = response.json()
        assert [theme["id"] for theme in themes] == ["sad", "low", "neutral", "good", "happy"]
        assert themes[0]["colors"]["primary"] == "220 70% 60%"
        assert set(themes[0]["gradient"]) == {"from", "to"}

    def test_suggest(self, client):
        tired = client.post(
            f"{API}/mood-themes/suggest", json={"mood_level": 4, "energy_level": 2}
        )
        stressed = client.post(
            f"{API}/mood-themes/suggest", json={"mood_level": 3, "energy_level": 5, "stress_level": 5}
        )

        assert tired.json()["id"] == "neutral"
        assert stressed.json()["id"] == "neutral"

    def test_suggest_rejects_out_of_range_levels(self, client):
        response = client.post(f"{API}/mood-themes/suggest", json={"mood_level": 6})

        assert response.status_code == 422

    def test_apply_returns_css_variables(self, client, athlete_user):
        response = client.post(
            f"{API}/mood-themes/apply", json={"theme_id": "happy", "user_mood": 5}, headers=_h(athlete_user)
        )

        assert response.status_code == 200
        data = response.json()
        assert data["theme"]["id"] == "happy"
        assert len(data["css_variables"]) == 8
        assert data["css_variables"]["--primary"] == data["theme"]["colors"]["primary"]

    def test_apply_unknown_theme(self, client, athlete_user):
        response = client.post(
            f"{API}/mood-themes/apply", json={"theme_id": "furious"}, headers=_h(athlete_user)
        )

        assert response.status_code == 404

    def test_apply_from_check_in(self, client, athlete_user):
        response = client.post(f"{API}/mood-themes/apply-from-check-in", headers=_h(athlete_user))
        assert response.status_code == 404

        client.post(
            f"{API}/mood-entries",
            json={"date": date.today().isoformat(), "mood_level": 2, "energy_level": 4, "stress_level": 1},
            headers=_h(athlete_user),
        )

        response = client.post(f"{API}/mood-themes/apply-from-check-in", headers=_h(athlete_user))
        assert response.status_code == 200
        assert response.json()["theme"]["id"] == "neutral"

    def test_without_redis_state_is_not_kept(self, client, athlete_user):
        client.post(f"{API}/mood-themes/apply", json={"theme_id": "sad"}, headers=_h(athlete_user))

        current = client.get(f"{API}/mood-themes/current", headers=_h(athlete_user))
        history = client.get(f"{API}/mood-themes/history", headers=_h(athlete_user))
        stats = client.get(f"{API}/mood-themes/stats", headers=_h(athlete_user))

        assert current.json()["id"] == "neutral"
        assert history.json() == {"entries": []}
        assert stats.json()["total_changes"] == 0
        assert stats.json()["most_used_theme"] == ""

    def test_reset_and_clear_history(self, client, athlete_user):
        reset = client.post(f"{API}/mood-themes/reset", headers=_h(athlete_user))
        cleared = client.delete(f"{API}/mood-themes/history", headers=_h(athlete_user))

        assert reset.json()["theme"]["id"] == "neutral"
        assert cleared.status_code == 204

    def test_requires_user(self, client):
        assert client.get(f"{API}/mood-themes/current").status_code == 401
