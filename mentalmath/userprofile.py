"""The player's persistent profile."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

_KEYS = {
    "calibrated": "calibrated",
    "baseline_difficulty": "baselineDifficulty",
    "total_sessions": "totalSessions",
    "rating": "rating",
    "best_accuracy": "bestAccuracy",
    "best_speed": "bestSpeed",
    "last_session_accuracy": "lastSessionAccuracy",
    "last_session_speed": "lastSessionSpeed",
}


@dataclass
class Profile:
    """Player statistics and calibration state."""

    calibrated: bool = False
    baseline_difficulty: float = 0.0
    total_sessions: int = 0
    rating: float = 0.0
    best_accuracy: float = 0.0
    best_speed: float = 0.0
    last_session_accuracy: float = 0.0
    last_session_speed: float = 0.0

    def increment_sessions(self) -> None:
        self.total_sessions += 1

    def to_dict(self) -> dict[str, Any]:
        """Fields under their stored (camelCase) key names."""
        return {_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Profile:
        """Build a profile from stored keys; a missing key raises KeyError."""
        return cls(
            calibrated=bool(data["calibrated"]),
            baseline_difficulty=float(data["baselineDifficulty"]),
            total_sessions=int(data["totalSessions"]),
            rating=float(data["rating"]),
            best_accuracy=float(data["bestAccuracy"]),
            best_speed=float(data["bestSpeed"]),
            last_session_accuracy=float(data["lastSessionAccuracy"]),
            last_session_speed=float(data["lastSessionSpeed"]),
        )