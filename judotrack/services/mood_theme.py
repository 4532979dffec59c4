"""
Selector de temas de color según el estado de ánimo.

Catálogo estático de cinco paletas (una por nivel de ánimo 1-5), sugerencia a
partir de ánimo/energía/estrés y aplicación con historial persistido en un
almacén clave-valor inyectado. La aplicación nunca falla por culpa del
almacén: los errores de persistencia se registran y se ignoran.
"""

import json
import logging
import time
from collections import Counter
from typing import Any, Dict, List, MutableMapping, Optional, Protocol

from redis.asyncio import Redis

from judotrack.core.exceptions import ValidationError
from judotrack.schemas.mood_theme import (
    MoodTheme, ThemeColors, ThemeGradient, ThemeHistoryEntry, ThemeStats
)

logger = logging.getLogger(__name__)

STORAGE_KEY = "currentMoodTheme"
HISTORY_KEY = "moodThemeHistory"
HISTORY_LIMIT = 10

MIN_LEVEL = 1
MAX_LEVEL = 5

CSS_VARIABLES = (
    "primary", "secondary", "background", "foreground",
    "muted", "accent", "card", "border",
)


def _theme(id: str, name: str, description: str, mood: int, colors: Dict[str, str], gradient: tuple) -> MoodTheme:
    return MoodTheme(
        id=id,
        name=name,
        description=description,
        mood=mood,
        colors=ThemeColors(**colors),
        gradient=ThemeGradient(from_=gradient[0], to=gradient[1]),
    )


MOOD_THEMES: List[MoodTheme] = [
    _theme(
        "sad", "Calma Azul", "Tonos suaves y calmantes para días difíciles", 1,
        {
            "primary": "220 70% 60%",
            "secondary": "210 40% 70%",
            "background": "220 20% 97%",
            "foreground": "220 20% 15%",
            "muted": "220 15% 85%",
            "accent": "200 80% 85%",
            "card": "0 0% 100%",
            "border": "220 30% 80%",
        },
        ("from-blue-100", "to-sky-50"),
    ),
    _theme(
        "low", "Serenidad Verde", "Verde relajante para recuperar energía", 2,
        {
            "primary": "150 60% 55%",
            "secondary": "140 40% 65%",
            "background": "150 25% 97%",
            "foreground": "150 15% 20%",
            "muted": "150 20% 85%",
            "accent": "120 50% 85%",
            "card": "0 0% 100%",
            "border": "150 25% 75%",
        },
        ("from-green-100", "to-emerald-50"),
    ),
    _theme(
        "neutral", "Equilibrio Natural", "Colores balanceados para un día normal", 3,
        {
            "primary": "25 95% 53%",
            "secondary": "200 20% 50%",
            "background": "36 100% 98%",
            "foreground": "220 13% 18%",
            "muted": "36 100% 96%",
            "accent": "36 100% 88%",
            "card": "0 0% 100%",
            "border": "36 77% 75%",
        },
        ("from-orange-100", "to-yellow-50"),
    ),
    _theme(
        "good", "Energía Coral", "Tonos cálidos y energizantes", 4,
        {
            "primary": "10 80% 60%",
            "secondary": "350 70% 70%",
            "background": "10 50% 97%",
            "foreground": "10 20% 15%",
            "muted": "10 30% 90%",
            "accent": "340 60% 85%",
            "card": "0 0% 100%",
            "border": "10 40% 80%",
        },
        ("from-coral-100", "to-pink-50"),
    ),
    _theme(
        "happy", "Alegría Dorada", "Amarillos brillantes para días felices", 5,
        {
            "primary": "45 90% 55%",
            "secondary": "35 80% 65%",
            "background": "45 60% 97%",
            "foreground": "45 15% 15%",
            "muted": "45 40% 90%",
            "accent": "50 80% 85%",
            "card": "0 0% 100%",
            "border": "45 50% 75%",
        },
        ("from-yellow-100", "to-amber-50"),
    ),
]

DEFAULT_THEME = MOOD_THEMES[2]  # neutral


def _check_level(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not MIN_LEVEL <= value <= MAX_LEVEL:
        raise ValidationError(f"{name} debe estar entre {MIN_LEVEL} y {MAX_LEVEL}: {value!r}")


def get_theme(mood_level: int) -> MoodTheme:
    """Tema cuyo nivel de ánimo coincide; neutral si no hay coincidencia."""
    return next((theme for theme in MOOD_THEMES if theme.mood == mood_level), DEFAULT_THEME)


def get_theme_by_id(theme_id: str) -> MoodTheme:
    return next((theme for theme in MOOD_THEMES if theme.id == theme_id), DEFAULT_THEME)


def suggest(
    mood_level: int,
    energy_level: Optional[int] = None,
    stress_level: Optional[int] = None,
) -> MoodTheme:
    """
    Sugiere un tema a partir del ánimo, ajustado por energía y estrés.

    Energía baja (<=2) con buen ánimo (>3) baja un nivel; energía alta (>=4)
    con ánimo <4 sube un nivel. Después, estrés alto (>=4) baja un nivel más.
    """
    _check_level("mood_level", mood_level)
    _check_level("energy_level", energy_level)
    _check_level("stress_level", stress_level)

    adjusted_mood = mood_level

    if energy_level is not None:
        if energy_level <= 2 and mood_level > 3:
            adjusted_mood = max(adjusted_mood - 1, MIN_LEVEL)
        elif energy_level >= 4 and mood_level < 4:
            adjusted_mood = min(adjusted_mood + 1, MAX_LEVEL)

    if stress_level is not None and stress_level >= 4:
        # Tema más calmante si hay mucho estrés
        adjusted_mood = max(adjusted_mood - 1, MIN_LEVEL)

    rounded = int(round(adjusted_mood))
    rounded = min(max(rounded, MIN_LEVEL), MAX_LEVEL)
    return get_theme(rounded)


def css_variables(theme: MoodTheme) -> Dict[str, str]:
    colors = theme.colors.model_dump()
    return {f"--{name}": colors[name] for name in CSS_VARIABLES}


# === Almacenes clave-valor ===

class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> Any: ...

    async def remove(self, key: str) -> Any: ...


class RedisKeyValueStore:
    """Almacén de preferencias de tema por usuario sobre Redis."""

    def __init__(self, redis_client: Redis, namespace: str):
        self.redis_client = redis_client
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"judotrack:theme:{self.namespace}:{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self.redis_client.get(self._key(key))

    async def set(self, key: str, value: str) -> Any:
        return await self.redis_client.set(self._key(key), value)

    async def remove(self, key: str) -> Any:
        return await self.redis_client.delete(self._key(key))


class NullKeyValueStore:
    """Almacén vacío para cuando Redis no está configurado: no recuerda nada."""

    async def get(self, key: str) -> Optional[str]:
        return None

    async def set(self, key: str, value: str) -> Any:
        return None

    async def remove(self, key: str) -> Any:
        return None


# === Selector ===

class MoodThemeSelector:
    """
    Aplica temas y mantiene el tema actual y un historial acotado en el
    almacén recibido.
    """

    def __init__(self, store: KeyValueStore, history_limit: int = HISTORY_LIMIT):
        self.store = store
        self.history_limit = history_limit

    async def apply(
        self,
        theme: MoodTheme,
        user_mood: Optional[int] = None,
        context: Optional[MutableMapping[str, str]] = None,
    ) -> MutableMapping[str, str]:
        """
        Escribe las variables CSS del tema en el contexto de presentación y
        lo persiste como tema actual y en el historial.

        El contexto siempre queda actualizado aunque el almacén falle.
        """
        if context is None:
            context = {}
        context.update(css_variables(theme))

        entry = ThemeHistoryEntry(
            theme=theme,
            user_mood=user_mood,
            timestamp=time.time() * 1000,
            auto_applied=user_mood is not None,
        )
        await self._save(entry)
        return context

    async def _save(self, entry: ThemeHistoryEntry) -> None:
        payload = entry.model_dump(by_alias=True)
        try:
            await self.store.set(STORAGE_KEY, json.dumps(payload))
        except Exception as e:
            logger.warning(f"No se pudo guardar el tema actual en el almacén: {e}")

        try:
            history = await self._load_history_payload()
            # Mantener solo los últimos history_limit
            history = history[-(self.history_limit - 1):] if self.history_limit > 1 else []
            history.append(payload)
            await self.store.set(HISTORY_KEY, json.dumps(history))
        except Exception as e:
            logger.warning(f"No se pudo guardar el historial de temas en el almacén: {e}")

    async def _load_history_payload(self) -> List[Dict[str, Any]]:
        raw = await self.store.get(HISTORY_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            # Historial corrupto: se descarta y el próximo guardado lo rehace
            logger.warning("Historial de temas corrupto en el almacén, se descarta")
            return []
        return data if isinstance(data, list) else []

    async def current(self) -> Optional[MoodTheme]:
        """Tema guardado como actual, o None si no hay ninguno."""
        try:
            raw = await self.store.get(STORAGE_KEY)
            if not raw:
                return None
            data = json.loads(raw)
            # Compatibilidad con el formato antiguo que guardaba solo el tema
            return MoodTheme.model_validate(data.get("theme", data))
        except Exception as e:
            logger.warning(f"No se pudo cargar el tema desde el almacén: {e}")
            return None

    async def history(self) -> List[ThemeHistoryEntry]:
        try:
            return [ThemeHistoryEntry.model_validate(item) for item in await self._load_history_payload()]
        except Exception as e:
            logger.warning(f"No se pudo cargar el historial de temas: {e}")
            return []

    async def stats(self) -> ThemeStats:
        history = await self.history()
        frequency = Counter(entry.theme.name for entry in history)
        auto_applied = sum(1 for entry in history if entry.auto_applied)

        most_used = ""
        if frequency:
            # En empate gana el que apareció primero en el historial
            most_used = max(frequency, key=lambda name: frequency[name])

        return ThemeStats(
            total_changes=len(history),
            most_used_theme=most_used,
            auto_applied_count=auto_applied,
            manual_count=len(history) - auto_applied,
            theme_frequency=dict(frequency),
        )

    async def reset(self, context: Optional[MutableMapping[str, str]] = None) -> MutableMapping[str, str]:
        return await self.apply(DEFAULT_THEME, context=context)

    async def clear_history(self) -> None:
        try:
            await self.store.remove(HISTORY_KEY)
        except Exception as e:
            logger.warning(f"No se pudo limpiar el historial de temas: {e}")
