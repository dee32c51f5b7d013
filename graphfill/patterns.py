from graphfill.models import PatternGrid
from graphfill.services.pattern_service import UnknownPatternError
from graphfill.services.pattern_service import combine_patterns


# One string per weekday (Sunday first), one character per week.
H = PatternGrid(
    rows=(
        "#.#",
        "#.#",
        "#.#",
        "###",
        "#.#",
        "#.#",
        "#.#",
    )
)

I = PatternGrid(  # noqa: E741
    rows=(
        "###",
        ".#.",
        ".#.",
        ".#.",
        ".#.",
        ".#.",
        "###",
    )
)

HEART = PatternGrid(
    rows=(
        ".#.#.",
        "#####",
        "#####",
        ".###.",
        ".###.",
        "..#..",
        "..#..",
    )
)

SMILE = PatternGrid(
    rows=(
        "..##..",
        ".#..#.",
        "#.##.#",
        "#....#",
        "#.##.#",
        ".#..#.",
        "..##..",
    )
)

PATTERNS: dict[str, PatternGrid] = {
    "H": H,
    "I": I,
    "HEART": HEART,
    "SMILE": SMILE,
    "HI": combine_patterns(H, I),
}


def available_patterns() -> list[str]:
    return list(PATTERNS)


def get_pattern(name: str) -> tuple[str, PatternGrid]:
    """Look up a pattern case-insensitively, returning its canonical name."""

    normalized_name = name.strip().upper()
    pattern = PATTERNS.get(normalized_name)
    if pattern is None:
        raise UnknownPatternError(normalized_name, available_patterns())
    return normalized_name, pattern
