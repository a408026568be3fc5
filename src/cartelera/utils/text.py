"""Text normalization utilities for listing fields."""

import re

# Branch qualifiers the listing appends after the room label
ROOM_SUFFIXES: tuple[str, ...] = ("Xoco", "CENART")


def clean_text(text: str) -> str:
    """
    Collapse runs of whitespace (including newlines) into single spaces.

    Args:
        text: Raw text content of a node

    Returns:
        Trimmed single-line text
    """
    return re.sub(r"\s+", " ", text).strip()


def find_room_label(text: str, suffixes: tuple[str, ...] = ROOM_SUFFIXES) -> str:
    """
    Find and normalize the screening room in a block of listing text.

    Examples:
        "SALA 3A Xoco 16:00"  →  "Sala 3A"
        "sala 1 CENART"       →  "Sala 1"
        "Sin sala"            →  ""

    Args:
        text: Full text content of a movie block
        suffixes: Venue qualifiers to drop, along with everything after them

    Returns:
        Room label such as "Sala 3A", or "" when no room is mentioned
    """
    # Only the rest of the line after "SALA" belongs to the label
    match = re.search(r"SALA\s+[^\n\r]*", text, re.IGNORECASE)
    if not match:
        return ""

    room = match.group(0)
    if suffixes:
        alternation = "|".join(re.escape(s) for s in suffixes)
        room = re.sub(rf"\s+({alternation}).*", "", room, flags=re.IGNORECASE)

    room = re.sub(r"^SALA", "Sala", room, flags=re.IGNORECASE)
    return room.strip()
