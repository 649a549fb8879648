"""
Summary: Path segment sanitization for metadata-derived names.
Why: Tag values may contain characters that are illegal in file names.
"""

import re
from typing import ClassVar, final

from flacfolders.platform.logging import logger


@final
class Sanitizer:
    """Sanitize file and path names."""

    # Characters that are illegal on at least one common filesystem
    FORBIDDEN_CHARACTERS: ClassVar[re.Pattern[str]] = re.compile(r'[<>:"/\\|?*]')

    FALLBACK_SEGMENT: ClassVar[str] = "Unknown"

    # Would point at the current or parent directory
    RELATIVE_SEGMENTS: ClassVar[frozenset[str]] = frozenset({".", ".."})

    @classmethod
    def clean_segment(cls, text: str | None) -> str:
        """Sanitize one path segment.

        Args:
            text: Raw segment, usually a tag value.

        Returns:
            str: Segment with forbidden characters removed and one leading
            and one trailing dot stripped, or ``FALLBACK_SEGMENT`` when
            nothing usable remains or only ``.``/``..`` is left.
        """
        if not text:
            return cls.FALLBACK_SEGMENT

        cleaned = cls.FORBIDDEN_CHARACTERS.sub("", text)
        if cleaned.endswith("."):
            cleaned = cleaned[:-1]
        if cleaned.startswith("."):
            cleaned = cleaned[1:]

        if not cleaned.strip() or cleaned in cls.RELATIVE_SEGMENTS:
            logger.debug("Segment %r sanitized to nothing; using fallback", text)
            return cls.FALLBACK_SEGMENT
        return cleaned


__all__ = ["Sanitizer"]
