"""Profile persistence seam.

The aggregator never touches storage. Callers load a profile through a
repository, aggregate, and save the result. One profile per user.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union
from urllib.parse import quote

from ..utils.logging import get_logger
from .profile import VoiceProfile

logger = get_logger(__name__)


class ProfileRepository(ABC):
    """Storage keyed uniquely by user id."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[VoiceProfile]:
        """Return the user's profile, or None if they have none."""

    @abstractmethod
    def save(self, profile: VoiceProfile) -> None:
        """Insert or replace the profile for ``profile.user_id``."""

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete the user's profile. Returns False if none existed."""


class InMemoryProfileRepository(ProfileRepository):
    """Dictionary-backed repository. Rows are stored serialized, so
    returned profiles are independent copies."""

    def __init__(self):
        self._rows: Dict[str, Dict] = {}

    def get(self, user_id: str) -> Optional[VoiceProfile]:
        row = self._rows.get(user_id)
        return VoiceProfile.from_dict(row) if row is not None else None

    def save(self, profile: VoiceProfile) -> None:
        self._rows[profile.user_id] = profile.to_dict()

    def delete(self, user_id: str) -> bool:
        return self._rows.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._rows)


class JsonFileProfileRepository(ProfileRepository):
    """One JSON file per user under a directory.

    File names are the percent-encoded user id, so distinct ids never share
    a file.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, user_id: str) -> Path:
        if not user_id:
            raise ValueError("user_id is required")
        return self.directory / f"{quote(user_id, safe='')}.json"

    def get(self, user_id: str) -> Optional[VoiceProfile]:
        path = self._path(user_id)
        if not path.exists():
            return None
        with open(path, "r") as f:
            data = json.load(f)
        profile = VoiceProfile.from_dict(data)
        if profile.user_id != user_id:
            logger.warning(f"Profile file {path} belongs to {profile.user_id!r}, not {user_id!r}")
            return None
        return profile

    def save(self, profile: VoiceProfile) -> None:
        path = self._path(profile.user_id)
        self.directory.mkdir(parents=True, exist_ok=True)
        # Atomic replace.
        tmp_path = path.with_suffix(".json.tmp")
        with open(tmp_path, "w") as f:
            json.dump(profile.to_dict(), f, indent=2)
        tmp_path.replace(path)
        logger.debug(f"Saved profile for {profile.user_id} to {path}")

    def delete(self, user_id: str) -> bool:
        path = self._path(user_id)
        if not path.exists():
            return False
        path.unlink()
        return True
