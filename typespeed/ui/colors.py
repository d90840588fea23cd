"""Terminal color palette and color utilities."""

from typing import Optional, Tuple

# channel values of the 6x6x6 color cube of 256-color terminals
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def gray(level: int) -> str:
    """#RRGGBB gray with all three channels set to *level* (0-255)."""
    level = max(0, min(255, int(level)))
    return f"#{level:02X}{level:02X}{level:02X}"


class LineColors:
    """Colors used when painting lines and the status line."""

    COMPLETED = gray(255)
    UNCOMPLETED = gray(100)
    ERROR = "#E60000"

    WORDS_LABEL = "#E60000"
    TIME_LABEL = "#00AF00"
    WPM_LABEL = "#5F87FF"
    MODE_LABEL = "#D7D700"


def parse_hex(color: str) -> Optional[Tuple[int, int, int]]:
    """(r, g, b) of a #RRGGBB string, None if it is not one."""
    color = color.strip()
    if not (color.startswith("#") and len(color) == 7):
        return None
    try:
        return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    except ValueError:
        return None


def xterm256(color: str) -> Optional[int]:
    """Closest xterm 256-color palette index for a #RRGGBB color.

    Only the color cube (16-231) and the gray ramp (232-255) are
    considered since the first 16 entries differ between terminals.
    """
    rgb = parse_hex(color)
    if rgb is None:
        return None

    def nearest_level(value: int) -> int:
        return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - value))

    cube = [nearest_level(c) for c in rgb]
    cube_rgb = [_CUBE_LEVELS[i] for i in cube]
    cube_index = 16 + 36 * cube[0] + 6 * cube[1] + cube[2]

    average = sum(rgb) // 3
    ramp = max(0, min(23, round((average - 8) / 10)))
    ramp_value = 8 + 10 * ramp

    def distance(other: list[int]) -> int:
        return sum((a - b) ** 2 for a, b in zip(rgb, other))

    if distance([ramp_value] * 3) < distance(cube_rgb):
        return 232 + ramp
    return cube_index
