from judotrack.models.notification import NotificationType
from judotrack.schemas.notification import NotificationCreate
from judotrack.services.notification import notification_service

API = "/api/v1"


def _h(user):
    return {"X-User-ID": str(user.id)}


def _notify(db, user, title):
    return notification_service.notify(db, NotificationCreate(
        user_id=user.id, title=title, message=f"Mensaje {title}",
        notification_type=NotificationType.SYSTEM,
    ))


class TestNotificationsAPI:
    def test_unread_count_and_mark_read(self, client, db, athlete_user, other_athlete):
        first = _notify(db, athlete_user, "Uno")
        _notify(db, athlete_user, "Dos")
        _notify(db, other_athlete, "Ajena")

        assert client.get(f"{API}/notifications/unread-count", headers=_h(athlete_user)).json() == {"unread": 2}

        response = client.patch(f"{API}/notifications/{first.id}/read", headers=_h(athlete_user))
        assert response.status_code == 200
        assert response.json()["is_read"] is True
        assert response.json()["read_at"] is not None

        unread = client.get(f"{API}/notifications?unread_only=true", headers=_h(athlete_user)).json()
        assert [n["title"] for n in unread] == ["Dos"]

    def test_cannot_read_other_users_notification(self, client, db, athlete_user, other_athlete):
        foreign = _notify(db, other_athlete, "Ajena")

        response = client.patch(f"{API}/notifications/{foreign.id}/read", headers=_h(athlete_user))

        assert response.status_code == 404

    def test_mark_all_read(self, client, db, athlete_user, other_athlete):
        _notify(db, athlete_user, "Uno")
        _notify(db, athlete_user, "Dos")
        _notify(db, other_athlete, "Ajena")

        response = client.patch(f"{API}/notifications/read-all", headers=_h(athlete_user))

        assert response.json() == {"updated": 2}
        assert client.get(f"{API}/notifications/unread-count", headers=_h(athlete_user)).json() == {"unread": 0}
        assert client.get(f"{API}/notifications/unread-count", headers=_h(other_athlete)).json() == {"unread": 1}
