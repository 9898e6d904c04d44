from typing import Dict, Optional

DUNGEON_TYPES: Dict[str, str] = {
    "a": "Ancient Ruins",
    "b": "Barrens",
    "c": "Cave",
    "d": "Desert",
    "e": "Enchanted Forest",
    "f": "Forest",
    "g": "Grassland",
    "h": "Hell",
    "i": "Ice Cavern",
    "j": "Jungle",
    "k": "Kingdom Ruins",
    "l": "Lava Pits",
    "m": "Mountain",
    "n": "Necropolis",
    "o": "Ocean Depths",
    "p": "Poison Swamp",
    "q": "Quagmire",
    "r": "Rainforest",
    "s": "Swamp",
    "t": "Temple",
    "u": "Underground Tunnels",
    "v": "Volcanic Crater",
    "w": "Water",
    "x": "Xeno Hive",
    "y": "Yellow Wasteland",
    "z": "Zephyr Highlands",
}

UNKNOWN_TYPE = "Unknown"


def dungeon_type(dominant_char: Optional[str], fallback: str = UNKNOWN_TYPE) -> str:
    """Biome name for the dominant letter; ``fallback`` when there is none."""
    if not dominant_char:
        return fallback
    return DUNGEON_TYPES.get(dominant_char.lower(), fallback)


def dungeon_level(area: int, divisor: int = 1000) -> int:
    # Area 0-999 -> 1, 1000-1999 -> 2, ...
    return max(area, 0) // divisor + 1


__all__ = ["DUNGEON_TYPES", "UNKNOWN_TYPE", "dungeon_type", "dungeon_level"]
