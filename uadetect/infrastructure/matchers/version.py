"""Dotted version comparison and truncation.

Versions are compared component by component as integers; missing
components count as zero ("8" == "8.0") and non-numeric components use
their leading digits, or zero ("XP" < "8.0"). An empty version is unknown,
not zero: callers must check for "" before comparing.
"""

import re

_LEADING_DIGITS = re.compile(r"\d+")


def _components(version: str) -> list[int]:
    parts: list[int] = []
    for part in version.split("."):
        match = _LEADING_DIGITS.match(part.strip())
        parts.append(int(match.group()) if match else 0)
    return parts


def version_compare(left: str, right: str) -> int:
    """Compare two dotted version strings.

    Args:
        left: First version ("4.1.2").
        right: Second version ("4.0").

    Returns:
        int: -1 if left < right, 0 if equal, 1 if left > right.
    """
    a, b = _components(left), _components(right)
    width = max(len(a), len(b))
    a += [0] * (width - len(a))
    b += [0] * (width - len(b))
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def truncate_version(version: str, level: int | None) -> str:
    """Cut a version down to the configured precision.

    Args:
        version: Dotted version string.
        level: 0 keeps the major part, 1 major.minor, 2 adds patch, 3 adds
            build. None keeps the version untouched.

    Returns:
        str: Truncated version ("" stays "").
    """
    if level is None or not version:
        return version
    return ".".join(version.split(".")[: level + 1])
