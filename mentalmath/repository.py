"""JSON file storage for the player profile."""

from __future__ import annotations

import json
from pathlib import Path

from .userprofile import Profile

DEFAULT_PATH = Path("../data/profile.json")


class ProfileNotFoundError(FileNotFoundError):
    """Raised when the profile file does not exist."""


class ProfileRepository:
    """Loads and saves a profile in a versioned JSON file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.file_version: int | None = None

    def exists(self) -> bool:
        return self.path.exists()

    def _read(self) -> dict:
        if not self.exists():
            raise ProfileNotFoundError(f"profile file not found: {self.path}")
        with self.path.open(encoding="utf-8") as handle:
            return json.load(handle)

    def load(self) -> Profile:
        """Read the profile and remember the file's version."""
        data = self._read()
        profile = Profile.from_dict(data)
        self.file_version = int(data["version"])
        return profile

    def save(self, profile: Profile) -> int:
        """Overwrite the profile fields in the existing file; return the new version."""
        data = self._read()
        version = int(data["version"]) + 1
        data["version"] = version
        data.update(profile.to_dict())
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(json.dumps(data, indent=4, sort_keys=True) + "\n")
        return version