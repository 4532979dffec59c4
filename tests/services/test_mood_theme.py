"""
Tests para el selector de temas por estado de ánimo.
"""

import json

import pytest
from unittest.mock import AsyncMock

from judotrack.core.exceptions import ValidationError
from judotrack.services.mood_theme import (
    DEFAULT_THEME, HISTORY_KEY, MOOD_THEMES, STORAGE_KEY, MoodThemeSelector,
    RedisKeyValueStore, css_variables, get_theme, get_theme_by_id, suggest
)

THEME_IDS = {"sad", "low", "neutral", "good", "happy"}


class InMemoryStore:
    def __init__(self):
        self.data = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value

    async def remove(self, key):
        self.data.pop(key, None)


class TestCatalog:
    def test_one_theme_per_mood_level(self):
        assert [theme.mood for theme in MOOD_THEMES] == [1, 2, 3, 4, 5]
        assert {theme.id for theme in MOOD_THEMES} == THEME_IDS

    def test_neutral_palette(self):
        neutral = get_theme_by_id("neutral")

        assert neutral.name == "Equilibrio Natural"
        assert neutral.colors.primary == "25 95% 53%"
        assert neutral.gradient.from_ == "from-orange-100"

    def test_unknown_lookups_fall_back_to_neutral(self):
        assert get_theme(9) == DEFAULT_THEME
        assert get_theme_by_id("rainbow") == DEFAULT_THEME

    def test_css_variables(self):
        variables = css_variables(get_theme_by_id("sad"))

        assert len(variables) == 8
        assert variables["--primary"] == "220 70% 60%"
        assert variables["--border"] == "220 30% 80%"


class TestSuggest:
    @pytest.mark.parametrize("mood,energy,stress,expected_mood", [
        (2, 5, None, 3),      # energía alta sube un nivel
        (5, None, 5, 4),      # estrés alto baja un nivel
        (5, 1, None, 4),      # poca energía con buen ánimo baja un nivel
        (4, 5, None, 4),      # energía alta con ánimo >= 4 no cambia
        (2, 1, None, 2),      # poca energía con ánimo <= 3 no cambia
        (4, 2, 4, 2),         # energía y estrés se acumulan
        (1, None, 5, 1),      # nunca por debajo de 1
        (3, 4, 5, 3),         # sube por energía y baja por estrés
        (3, None, None, 3),
    ])
    def test_adjustments(self, mood, energy, stress, expected_mood):
        assert suggest(mood, energy, stress).mood == expected_mood

    def test_always_returns_a_canonical_theme(self):
        for mood in range(1, 6):
            for energy in [None, 1, 2, 3, 4, 5]:
                for stress in [None, 1, 2, 3, 4, 5]:
                    assert suggest(mood, energy, stress).id in THEME_IDS

    @pytest.mark.parametrize("args", [(0,), (6,), (3, 0), (3, None, 7), (True,)])
    def test_out_of_range_raises(self, args):
        with pytest.raises(ValidationError):
            suggest(*args)


class TestMoodThemeSelector:
    @pytest.mark.asyncio
    async def test_apply_writes_context_and_persists(self):
        store = InMemoryStore()
        selector = MoodThemeSelector(store)
        context = {"--radius": "0.5rem"}

        result = await selector.apply(get_theme_by_id("happy"), user_mood=5, context=context)

        assert result is context
        assert context["--primary"] == "45 90% 55%"
        assert context["--radius"] == "0.5rem"
        current = json.loads(store.data[STORAGE_KEY])
        assert current["theme"]["id"] == "happy"
        assert current["user_mood"] == 5
        assert current["auto_applied"] is True
        assert (await selector.current()).id == "happy"

    @pytest.mark.asyncio
    async def test_manual_apply_is_not_auto_applied(self):
        selector = MoodThemeSelector(InMemoryStore())

        await selector.apply(get_theme_by_id("low"))

        history = await selector.history()
        assert len(history) == 1
        assert history[0].auto_applied is False
        assert history[0].user_mood is None

    @pytest.mark.asyncio
    async def test_history_is_capped_fifo(self):
        selector = MoodThemeSelector(InMemoryStore())
        themes = [MOOD_THEMES[i % 5] for i in range(13)]

        for theme in themes:
            await selector.apply(theme, user_mood=theme.mood)

        history = await selector.history()
        assert len(history) == 10
        # Se descartan las 3 más antiguas
        assert [entry.theme.id for entry in history] == [t.id for t in themes[3:]]

    @pytest.mark.asyncio
    async def test_custom_history_limit(self):
        selector = MoodThemeSelector(InMemoryStore(), history_limit=3)

        for theme in MOOD_THEMES:
            await selector.apply(theme)

        assert [entry.theme.mood for entry in await selector.history()] == [3, 4, 5]

    @pytest.mark.asyncio
    async def test_persistence_failure_is_not_raised(self):
        store = AsyncMock()
        store.set.side_effect = ConnectionError("redis caído")
        store.get.side_effect = ConnectionError("redis caído")
        selector = MoodThemeSelector(store)

        context = await selector.apply(get_theme_by_id("good"), user_mood=4)

        assert context["--primary"] == "10 80% 60%"
        assert await selector.current() is None
        assert await selector.history() == []

    @pytest.mark.asyncio
    async def test_corrupt_history_is_replaced_on_next_apply(self):
        store = InMemoryStore()
        store.data[HISTORY_KEY] = "{not json"
        selector = MoodThemeSelector(store)

        assert await selector.history() == []

        for _ in range(3):
            await selector.apply(get_theme_by_id("good"), user_mood=4)

        history = await selector.history()
        assert len(history) == 3
        assert all(entry.theme.id == "good" for entry in history)

    @pytest.mark.asyncio
    async def test_failed_current_write_still_records_history(self):
        store = InMemoryStore()
        original_set = store.set

        async def flaky_set(key, value):
            if key == STORAGE_KEY:
                raise ConnectionError("redis caído")
            await original_set(key, value)

        store.set = flaky_set
        selector = MoodThemeSelector(store)

        await selector.apply(get_theme_by_id("low"), user_mood=2)

        assert STORAGE_KEY not in store.data
        assert [entry.theme.id for entry in await selector.history()] == ["low"]

    @pytest.mark.asyncio
    async def test_stats(self):
        selector = MoodThemeSelector(InMemoryStore())
        await selector.apply(get_theme_by_id("sad"), user_mood=1)
        await selector.apply(get_theme_by_id("neutral"))
        await selector.apply(get_theme_by_id("sad"), user_mood=1)

        stats = await selector.stats()

        assert stats.total_changes == 3
        assert stats.most_used_theme == "Calma Azul"
        assert stats.auto_applied_count == 2
        assert stats.manual_count == 1
        assert stats.theme_frequency == {"Calma Azul": 2, "Equilibrio Natural": 1}

    @pytest.mark.asyncio
    async def test_stats_without_history(self):
        stats = await MoodThemeSelector(InMemoryStore()).stats()

        assert stats.total_changes == 0
        assert stats.most_used_theme == ""

    @pytest.mark.asyncio
    async def test_reset_applies_neutral(self):
        selector = MoodThemeSelector(InMemoryStore())
        await selector.apply(get_theme_by_id("sad"), user_mood=1)

        context = await selector.reset()

        assert context["--primary"] == DEFAULT_THEME.colors.primary
        assert (await selector.current()).id == "neutral"

    @pytest.mark.asyncio
    async def test_clear_history_keeps_current_theme(self):
        store = InMemoryStore()
        selector = MoodThemeSelector(store)
        await selector.apply(get_theme_by_id("good"))

        await selector.clear_history()

        assert HISTORY_KEY not in store.data
        assert await selector.history() == []
        assert (await selector.current()).id == "good"


class TestRedisKeyValueStore:
    @pytest.mark.asyncio
    async def test_keys_are_prefixed_per_user(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = None
        store = RedisKeyValueStore(redis_client, namespace="user:7")

        await store.set(STORAGE_KEY, "{}")
        await store.get(HISTORY_KEY)
        await store.remove(HISTORY_KEY)

        redis_client.set.assert_awaited_once_with("judotrack:theme:user:7:currentMoodTheme", "{}")
        redis_client.get.assert_awaited_once_with("judotrack:theme:user:7:moodThemeHistory")
        redis_client.delete.assert_awaited_once_with("judotrack:theme:user:7:moodThemeHistory")
