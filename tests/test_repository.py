import json

import pytest

from mentalmath.repository import ProfileNotFoundError, ProfileRepository
from mentalmath.userprofile import Profile


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "profile.json"
    data = Profile(rating=800.0, total_sessions=3).to_dict()
    data["version"] = 1
    data["note"] = "kept"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_exists(tmp_path, profile_file):
    assert ProfileRepository(profile_file).exists()
    assert not ProfileRepository(tmp_path / "missing.json").exists()


def test_load_missing_raises(tmp_path):
    with pytest.raises(ProfileNotFoundError):
        ProfileRepository(tmp_path / "missing.json").load()


def test_save_missing_raises_and_creates_nothing(tmp_path):
    path = tmp_path / "missing.json"
    with pytest.raises(ProfileNotFoundError):
        ProfileRepository(path).save(Profile())
    assert not path.exists()


def test_load_reads_profile_and_version(profile_file):
    repo = ProfileRepository(profile_file)
    profile = repo.load()
    assert profile == Profile(rating=800.0, total_sessions=3)
    assert repo.file_version == 1


def test_save_bumps_version_and_round_trips(profile_file):
    repo = ProfileRepository(profile_file)
    updated = Profile(calibrated=True, rating=1350.0, total_sessions=4, best_accuracy=0.95)
    assert repo.save(updated) == 2
    assert repo.save(updated) == 3
    assert repo.load() == updated
    assert repo.file_version == 3


def test_save_keeps_unknown_keys_and_indents(profile_file):
    ProfileRepository(profile_file).save(Profile())
    text = profile_file.read_text(encoding="utf-8")
    assert json.loads(text)["note"] == "kept"
    assert '\n    "calibrated"' in text
    assert text.endswith("\n")