"""Anonymous comments and star ratings kept in a local JSON file.

Newest comments come first and the list is capped, mirroring a small
browser-local store.

Updates: v0.2 - 2026-10-16 - Added comment persistence and input validation.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config import COMMENTS_PATH, MAX_COMMENTS
from .errors import CommentValidationError
from .models import Comment

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 50
MAX_TEXT_LENGTH = 300
COMMENT_DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"


def validate_comment(name: str, text: str, rating: int) -> tuple[str, str, int]:
    """Return cleaned ``(name, text, rating)`` or raise CommentValidationError."""
    clean_name = (name or "").strip()
    clean_text = (text or "").strip()
    if not clean_name:
        raise CommentValidationError("Please enter your name")
    if len(clean_name) > MAX_NAME_LENGTH:
        raise CommentValidationError(f"Name must be at most {MAX_NAME_LENGTH} characters")
    if not clean_text:
        raise CommentValidationError("Please write a comment")
    if len(clean_text) > MAX_TEXT_LENGTH:
        raise CommentValidationError(f"Comment must be at most {MAX_TEXT_LENGTH} characters")
    try:
        score = int(rating)
    except (TypeError, ValueError) as exc:
        raise CommentValidationError("Rating must be a whole number") from exc
    if not 1 <= score <= 5:
        raise CommentValidationError("Rating must be between 1 and 5")
    return clean_name, clean_text, score


class CommentStore:
    def __init__(self, path: Optional[Path] = None, max_comments: int = MAX_COMMENTS) -> None:
        self.path = path or COMMENTS_PATH
        self.max_comments = max_comments

    def load(self) -> List[Comment]:
        """Stored comments, newest first; an unreadable file counts as empty."""
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Unable to read comments from %s: %s", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Comments file %s is not a list; ignoring it.", self.path)
            return []
        comments = []
        for entry in data:
            if isinstance(entry, dict):
                comment = Comment.from_dict(entry)
                if comment is not None:
                    comments.append(comment)
        return comments

    def add(
        self, name: str, text: str, rating: int, now: Optional[datetime] = None
    ) -> Comment:
        clean_name, clean_text, score = validate_comment(name, text, rating)
        comment = Comment(
            name=clean_name,
            text=clean_text,
            rating=score,
            date=(now or datetime.now()).strftime(COMMENT_DATE_FORMAT),
        )
        comments = [comment, *self.load()][: self.max_comments]
        self._save(comments)
        logger.info("Stored comment from %s (%d/5)", clean_name, score)
        return comment

    def _save(self, comments: List[Comment]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump([item.as_dict() for item in comments], handle, indent=2)
        except OSError as exc:  # pragma: no cover - IO issues
            logger.warning("Unable to save comments: %s", exc)


__all__ = ["CommentStore", "validate_comment"]
