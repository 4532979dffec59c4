# Importar todos los modelos para que Base.metadata los conozca
from judotrack.db.base_class import Base  # noqa
from judotrack.models.user import User, UserRoleAssignment  # noqa
from judotrack.models.club import Club  # noqa
from judotrack.models.trainer_assignment import TrainerAssignment  # noqa
from judotrack.models.training import TrainingSession, Exercise, ExerciseRecord  # noqa
from judotrack.models.knowledge import Technique, TacticalNote  # noqa
from judotrack.models.tracking import WeightEntry, NutritionEntry, MoodEntry  # noqa
from judotrack.models.achievement import AchievementBadge, UserAchievement  # noqa
from judotrack.models.notification import Notification  # noqa
