"""Local token file storage for the signup client.

This module handles:
- Storing and retrieving the bearer token in a local JSON file
- Removing the stored token
- Refusing token files readable or writable by group or others
"""

from __future__ import annotations

import json
import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class StoredToken(BaseModel):
    """Token file contents."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    token: str = Field(..., min_length=1, description="Opaque bearer token")
    stored_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="When the token was written")


class TokenStore:
    """Owner-only JSON file holding the bearer token."""

    def __init__(self, token_file: Optional[Path] = None):
        """Initialize token store.

        Args:
            token_file: Path of the token file (defaults to ~/.signup-client/token.json)
        """
        if token_file is None:
            self.token_file = Path.home() / ".signup-client" / "token.json"
        else:
            self.token_file = Path(token_file)

    def store_token(self, token: str) -> bool:
        """Store the token, replacing any previous one.

        Returns:
            True if stored successfully, False otherwise
        """
        try:
            stored = StoredToken(token=token)
        except ValidationError:
            logger.error("Refusing to store an empty token")
            return False

        try:
            self._ensure_parent_dir()

            # Write to a temporary file first
            temp_file = self.token_file.with_suffix(".tmp")

            # Owner-only from creation; chmod covers a leftover temp file
            fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stat.S_IRUSR | stat.S_IWUSR)
            os.chmod(temp_file, stat.S_IRUSR | stat.S_IWUSR)

            with os.fdopen(fd, "w") as f:
                json.dump(stored.model_dump(mode="json"), f, indent=2)

            # Atomically replace the token file
            temp_file.replace(self.token_file)

            logger.info(f"Stored token in {self.token_file}")
            return True

        except OSError as e:
            logger.error(f"Failed to store token: {e}")
            return False

    def load_token(self) -> Optional[str]:
        """Load the stored token.

        Returns:
            The token, or None when missing, insecure or unreadable
        """
        if not self.token_file.exists():
            logger.debug("No token file found")
            return None

        if not self._check_file_permissions():
            return None

        try:
            with open(self.token_file, "r") as f:
                data = json.load(f)
            stored = StoredToken.model_validate(data)

        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to load token file {self.token_file}: {e}")
            return None

        logger.debug(f"Loaded token stored at {stored.stored_at.isoformat()}")
        return stored.token

    def remove_token(self) -> bool:
        """Remove the stored token.

        Returns:
            True if removed (or already absent), False otherwise
        """
        try:
            if self.token_file.exists():
                self.token_file.unlink()
                logger.info("Removed stored token")
            return True

        except OSError as e:
            logger.error(f"Failed to remove token: {e}")
            return False

    def has_token(self) -> bool:
        """Check if a usable token is stored."""
        return self.load_token() is not None

    def _ensure_parent_dir(self) -> None:
        """Create the token directory with owner-only permissions if missing."""
        parent = self.token_file.parent
        if not parent.exists():
            parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    def _check_file_permissions(self) -> bool:
        """Check if the token file has secure permissions."""
        try:
            file_stat = self.token_file.stat()
        except OSError as e:
            logger.error(f"Failed to check file permissions: {e}")
            return False

        if file_stat.st_mode & (stat.S_IRGRP | stat.S_IWGRP | stat.S_IROTH | stat.S_IWOTH):
            logger.warning(f"Token file has insecure permissions: {stat.filemode(file_stat.st_mode)}")
            return False

        return True
