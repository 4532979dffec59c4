"""
Tests para AchievementService contra la base de datos de pruebas.
"""

from datetime import date, timedelta

import pytest

from judotrack.core.exceptions import NotFoundError
from judotrack.models.achievement import AchievementBadge
from judotrack.models.notification import Notification, NotificationType
from judotrack.models.training import TrainingSession
from judotrack.models.tracking import WeightEntry
from judotrack.services.achievement import DEFAULT_BADGES, achievement_service
from judotrack.services.achievement_metrics import achievement_metrics_service

TODAY = date(2024, 5, 15)


@pytest.fixture
def catalog(db):
    achievement_service.seed_default_badges(db)
    return achievement_service.get_catalog(db)


def _train(db, user, *days_ago):
    for d in days_ago:
        db.add(TrainingSession(user_id=user.id, date=TODAY - timedelta(days=d), session_type="tecnica"))
    db.commit()


class TestSeed:
    def test_seed_creates_default_catalog_once(self, db):
        assert achievement_service.seed_default_badges(db) == len(DEFAULT_BADGES) == 13
        assert achievement_service.seed_default_badges(db) == 0
        assert db.query(AchievementBadge).count() == 13


class TestMetrics:
    def test_collect(self, db, athlete_user):
        _train(db, athlete_user, 0, 1, 1, 2, 9)
        db.add(WeightEntry(user_id=athlete_user.id, date=TODAY, weight=73.4))
        db.commit()

        metrics = achievement_metrics_service.collect(db, athlete_user.id, TODAY)

        assert metrics["training"].count == 5
        assert metrics["training"].current_streak == 3
        assert metrics["consistency"].count == 4
        assert metrics["consistency"].current_streak == 3
        assert metrics["weight"].count == 1
        assert metrics["technique"].count == 0
        assert metrics["nutrition"].count == 0


class TestCheckAchievements:
    def test_creates_one_achievement_and_notification_per_badge(self, db, athlete_user, catalog):
        _train(db, athlete_user, 0, 1, 2)

        created = achievement_service.check_achievements(db, athlete_user.id, reference_date=TODAY)

        names = [a.badge.name for a in created]
        assert names == ["Primer Entrenamiento", "Racha Iniciada"]
        assert created[0].progress == 3
        notifications = db.query(Notification).filter(Notification.user_id == athlete_user.id).all()
        assert len(notifications) == 2
        assert all(n.notification_type == NotificationType.ACHIEVEMENT for n in notifications)
        assert {n.message for n in notifications} == {
            "Has conseguido: Primer Entrenamiento", "Has conseguido: Racha Iniciada"
        }

    def test_second_check_creates_nothing(self, db, athlete_user, catalog):
        _train(db, athlete_user, 0)
        achievement_service.check_achievements(db, athlete_user.id, reference_date=TODAY)

        assert achievement_service.check_achievements(db, athlete_user.id, reference_date=TODAY) == []
        assert len(achievement_service.get_user_achievements(db, athlete_user.id)) == 1

    def test_milestone_only_with_signal(self, db, athlete_user, catalog):
        milestone = AchievementBadge(
            name="Primer Torneo", description="Compite en tu primer torneo",
            category="training", criteria_type="milestone", criteria_value=1, is_active=True
        )
        db.add(milestone)
        db.commit()

        assert achievement_service.check_achievements(db, athlete_user.id, reference_date=TODAY) == []

        created = achievement_service.check_achievements(
            db, athlete_user.id, signals=[milestone.id], reference_date=TODAY
        )
        assert [a.badge_id for a in created] == [milestone.id]

    def test_mark_notified(self, db, athlete_user, other_athlete, catalog):
        _train(db, athlete_user, 0)
        achievement = achievement_service.check_achievements(db, athlete_user.id, reference_date=TODAY)[0]

        with pytest.raises(NotFoundError):
            achievement_service.mark_notified(db, other_athlete.id, achievement.id)

        assert achievement_service.mark_notified(db, athlete_user.id, achievement.id).is_notified is True

    def test_stats(self, db, athlete_user, catalog):
        _train(db, athlete_user, 0)
        achievement_service.check_achievements(db, athlete_user.id, reference_date=TODAY)

        stats = achievement_service.get_stats(db, athlete_user.id)

        assert stats.total_badges == 13
        assert stats.earned_badges == 1
        assert stats.completion_rate == round(1 / 13 * 100, 2)
        assert stats.category_counts == {"training": 4, "technique": 3, "consistency": 3, "weight": 3}
        assert stats.earned_category_counts == {"training": 1}
