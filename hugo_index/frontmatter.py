"""
Front matter of a Hugo page:
- the block between the first two `---` lines of the raw page
- one `key: value` per line; only title / date / draft are kept
- values lose one pair of surrounding quotes
- problems are logged, never raised: a page with broken front matter is
  still indexed with whatever metadata could be recovered
"""
from __future__ import annotations

import logging
import re
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import FRONT_MATTER_KEYS, METADATA_KEYS

logger = logging.getLogger(__name__)

# a line holding only three dashes; \r\n and bare \r endings count too
DELIMITER_RE = re.compile(r"(?:^|(?<=\r))---[ \t]*(?=\r\n|\r|\n|\Z)", flags=re.M)
NEWLINE_RE = re.compile(r"\r\n|\r|\n")
# 2013-11-15T19:39:03-04:00 or 2013-11-15T19:39:03+01:00[Europe/Paris]
ZONE_ID_RE = re.compile(r"^(?P<stamp>[^\[]+?)(?:\[(?P<zone>[^\]]+)\])?$")
# extended form only: T separator, hh:mm[:ss[.fff]], then Z or an offset
EXTENDED_STAMP_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:\d{2}(?::\d{2})?)",
    flags=re.ASCII,
)


def split_front_matter(raw: str) -> str | None:
    """Text between the first and second delimiter, or None if there are fewer than two."""
    parts = DELIMITER_RE.split(raw, maxsplit=2)
    if len(parts) < 3:
        return None
    return parts[1]


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def is_zoned_timestamp(value: str) -> bool:
    m = ZONE_ID_RE.match(value.strip())
    if not m or not EXTENDED_STAMP_RE.fullmatch(m.group("stamp")):
        return False
    try:
        stamp = datetime.fromisoformat(m.group("stamp"))
    except ValueError:
        return False
    if stamp.tzinfo is None:
        return False
    zone = m.group("zone")
    if zone:
        try:
            ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError):
            return False
    return True


def check_metadata(metadata: dict[str, str]) -> list[str]:
    """Log (and return) every problem found; the metadata itself is left alone."""
    problems = []
    if len(metadata) != len(METADATA_KEYS):
        problems.append(f"Incomplete metadata set found: {metadata}")
    for key, value in metadata.items():
        if not value.strip():
            problems.append(f"Blank metadata value found in: {metadata}")
        if key == "draft" and value not in ("true", "false"):
            problems.append(f'Invalid "draft" value found in: {metadata}')
        if key == "date" and not is_zoned_timestamp(value):
            problems.append(f'Invalid "date" value found in: {metadata}')
    for problem in problems:
        logger.warning(problem)
    return problems


def parse_metadata(raw: str, page_name: str) -> dict[str, str]:
    front_matter = split_front_matter(raw)
    if front_matter is None:
        logger.error("Error locating front matter for %s", page_name)
        front_matter = ""

    found = {}
    for line in NEWLINE_RE.split(front_matter):
        key, sep, value = line.partition(":")
        if not sep or not key.strip() or not value.strip():
            continue
        key = key.strip()
        if key in FRONT_MATTER_KEYS:
            found[key] = strip_quotes(value.strip())

    found["pageName"] = page_name
    metadata = {k: found[k] for k in METADATA_KEYS if k in found}
    check_metadata(metadata)
    return metadata
