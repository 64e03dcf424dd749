"""The compiled-in snippet library, in tie-break order."""

from __future__ import annotations

from reference_resolver.domain.entities import SnippetEntry
from reference_resolver.snippets.ai_enemies import AI_ENEMIES_SNIPPET
from reference_resolver.snippets.camera_systems import CAMERA_SYSTEMS_SNIPPET
from reference_resolver.snippets.car_physics import CAR_PHYSICS_SNIPPET
from reference_resolver.snippets.particle_system import PARTICLE_SYSTEM_SNIPPET
from reference_resolver.snippets.physics_2d import PHYSICS_2D_SNIPPET
from reference_resolver.snippets.sound_engine import SOUND_ENGINE_SNIPPET
from reference_resolver.snippets.sprite_loader import SPRITE_LOADER_SNIPPET
from reference_resolver.snippets.ui_components import UI_COMPONENTS_SNIPPET

SNIPPET_LIBRARY: tuple[SnippetEntry, ...] = (
    SnippetEntry(
        name="physics-2d",
        content=PHYSICS_2D_SNIPPET,
        genres=("platformer", "shooter", "frogger", "rpg", "fighting", "endless-runner"),
        keywords=("gravity", "jump", "bounce", "collision", "physics", "platform"),
    ),
    SnippetEntry(
        name="car-physics",
        content=CAR_PHYSICS_SNIPPET,
        genres=("racing", "street-racing", "driving"),
        keywords=(
            "car", "racing", "driving", "drift", "steering", "garage",
            "street rod", "muscle car", "vehicle",
        ),
    ),
    SnippetEntry(
        name="particle-system",
        content=PARTICLE_SYSTEM_SNIPPET,
        genres=(
            "shooter", "platformer", "racing", "fighting", "street-racing",
            "tower-defense", "endless-runner",
        ),
        keywords=(
            "explosion", "particles", "confetti", "trail", "effects", "juice",
            "screen shake", "sparkle",
        ),
    ),
    SnippetEntry(
        name="sound-engine",
        content=SOUND_ENGINE_SNIPPET,
        genres=("racing", "shooter", "platformer", "fighting", "street-racing"),
        keywords=("sound", "audio", "music", "beep", "engine sound", "sound effects", "sfx"),
    ),
    SnippetEntry(
        name="ai-enemies",
        content=AI_ENEMIES_SNIPPET,
        genres=("shooter", "platformer", "rpg", "tower-defense", "fighting", "endless-runner"),
        keywords=("enemy", "enemies", "boss", "patrol", "chase", "waves", "spawn", "npc", "ai"),
    ),
    SnippetEntry(
        name="ui-components",
        content=UI_COMPONENTS_SNIPPET,
        genres=("rpg", "racing", "shooter", "street-racing", "tower-defense"),
        keywords=(
            "hud", "health bar", "score", "menu", "shop", "garage",
            "title screen", "game over", "minimap", "combo",
        ),
    ),
    SnippetEntry(
        name="camera-systems",
        content=CAMERA_SYSTEMS_SNIPPET,
        genres=("platformer", "rpg", "racing", "endless-runner", "street-racing"),
        keywords=("camera", "scroll", "parallax", "follow", "chase cam", "zoom", "side scroll"),
    ),
    SnippetEntry(
        name="sprite-loader",
        content=SPRITE_LOADER_SNIPPET,
        genres=("platformer", "shooter", "puzzle", "clicker"),
        keywords=("sprite", "spritesheet", "animation", "image", "picture"),
    ),
)
