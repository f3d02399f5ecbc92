"""
Named option presets.

A preset sets every character-class flag at once and leaves the length alone.
"""

from typing import Dict, List, NamedTuple

from .exceptions import UnknownPresetError
from .utils.password_generator import GenerationOptions


class Preset(NamedTuple):
    """Bundle of flag values applied together."""

    name: str
    title: str
    description: str
    use_numbers: bool
    use_symbols: bool
    use_lowercase: bool
    use_uppercase: bool
    allow_ambiguous_characters: bool


ALL_CHARACTERS = "all_characters"
FOR_READING = "for_reading"
FOR_SAYING = "for_saying"

DEFAULT_PRESET = ALL_CHARACTERS

PRESETS: Dict[str, Preset] = {
    ALL_CHARACTERS: Preset(
        ALL_CHARACTERS, "All Characters", "all characters are used",
        use_numbers=True, use_symbols=True, use_lowercase=True,
        use_uppercase=True, allow_ambiguous_characters=True,
    ),
    FOR_READING: Preset(
        FOR_READING, "For Reading", "avoid ambiguous characters and special symbols",
        use_numbers=False, use_symbols=False, use_lowercase=True,
        use_uppercase=True, allow_ambiguous_characters=False,
    ),
    FOR_SAYING: Preset(
        FOR_SAYING, "For Saying", "avoid numbers and special symbols",
        use_numbers=False, use_symbols=False, use_lowercase=True,
        use_uppercase=True, allow_ambiguous_characters=True,
    ),
}


def list_presets() -> List[Preset]:
    """Return presets in display order."""
    return list(PRESETS.values())


def get_preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown preset '{name}'. Available: {', '.join(PRESETS)}"
        ) from None


def apply_preset(options: GenerationOptions, name: str) -> GenerationOptions:
    """
    Return a copy of ``options`` with the preset's flags applied.

    Raises:
        UnknownPresetError: If ``name`` is not a known preset
    """
    preset = get_preset(name)
    return options.replace(
        use_numbers=preset.use_numbers,
        use_symbols=preset.use_symbols,
        use_lowercase=preset.use_lowercase,
        use_uppercase=preset.use_uppercase,
        allow_ambiguous_characters=preset.allow_ambiguous_characters,
    )
