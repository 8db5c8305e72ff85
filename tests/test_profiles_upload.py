"""Tests for uploading a profiles directory.

These tests use mocked HTTP responses to simulate core-metadata.
"""

import httpx
import pytest
import respx

from edgex_metadata.client.metadata import MetadataClient
from edgex_metadata.errors import OK, PROFILES_DIRECTORY_CODE, ErrorKind
from edgex_metadata.profiles.upload import (
    UploadStatus,
    find_profile_files,
    upload_profiles,
)
from edgex_metadata.types import ServiceEndpoint, ServiceEndpoints

BASE = "http://localhost:48081/api/v1"

EXISTING_PROFILE = {
    "id": "p-1",
    "name": "existing",
    "deviceResources": [
        {"name": "r", "properties": {"value": {"type": "Int32", "base": "10"}}}
    ],
}


@pytest.fixture
def client():
    endpoints = ServiceEndpoints(metadata=ServiceEndpoint("localhost", 48081))
    with MetadataClient(endpoints) as c:
        yield c


def write_profile(directory, filename, name):
    path = directory / filename
    path.write_text(f"name: {name}\ndeviceResources: []\n")
    return path


class TestFindProfileFiles:
    """Test find_profile_files function."""

    def test_yaml_files_in_order(self, tmp_path):
        """Only YAML files are listed, sorted by name."""
        write_profile(tmp_path, "b.yaml", "b")
        write_profile(tmp_path, "a.yml", "a")
        (tmp_path / "notes.txt").write_text("ignore me")
        (tmp_path / "sub.yaml").mkdir()

        files = find_profile_files(tmp_path)

        assert [p.name for p in files] == ["a.yml", "b.yaml"]


class TestUploadProfiles:
    """Test upload_profiles function."""

    @respx.mock
    def test_uploads_new_and_skips_existing(self, client, tmp_path):
        """Profiles already held by core-metadata are not uploaded again."""
        write_profile(tmp_path, "existing.yaml", "existing")
        new_path = write_profile(tmp_path, "new.yaml", "new")
        respx.get(f"{BASE}/deviceprofile/name/existing").mock(
            return_value=httpx.Response(200, json=EXISTING_PROFILE)
        )
        respx.get(f"{BASE}/deviceprofile/name/new").mock(
            return_value=httpx.Response(404)
        )
        upload = respx.post(f"{BASE}/deviceprofile/uploadfile").mock(
            return_value=httpx.Response(200, text="p-2")
        )

        summary = upload_profiles(client, tmp_path)

        assert summary.error == OK
        assert summary.uploaded == 1
        assert summary.skipped == 1
        assert summary.failed == 0
        assert upload.call_count == 1
        uploaded = [r for r in summary.results if r.status == UploadStatus.UPLOADED]
        assert uploaded[0].path == new_path
        assert uploaded[0].name == "new"
        assert uploaded[0].profile_id == "p-2"

    @respx.mock
    def test_upload_failure(self, client, tmp_path):
        """A rejected upload is recorded and reported."""
        write_profile(tmp_path, "bad.yaml", "bad")
        respx.get(f"{BASE}/deviceprofile/name/bad").mock(
            return_value=httpx.Response(404)
        )
        respx.post(f"{BASE}/deviceprofile/uploadfile").mock(
            return_value=httpx.Response(400, text="invalid profile")
        )

        summary = upload_profiles(client, tmp_path)

        assert summary.failed == 1
        assert summary.error.code == 400
        assert "invalid profile" in summary.results[0].error

    @respx.mock
    def test_first_failure_is_kept(self, client, tmp_path):
        """The summary reports the first failure and keeps going."""
        (tmp_path / "a.yaml").write_text("description: no name here\n")
        write_profile(tmp_path, "b.yaml", "b")
        respx.get(f"{BASE}/deviceprofile/name/b").mock(
            return_value=httpx.Response(404)
        )
        respx.post(f"{BASE}/deviceprofile/uploadfile").mock(
            return_value=httpx.Response(500)
        )

        summary = upload_profiles(client, tmp_path)

        assert summary.failed == 2
        assert summary.error.code == PROFILES_DIRECTORY_CODE

    @respx.mock
    def test_unreadable_file(self, client, tmp_path):
        """A file that is not YAML is recorded as failed."""
        (tmp_path / "broken.yaml").write_text("name: [unclosed\n")

        summary = upload_profiles(client, tmp_path)

        assert summary.failed == 1
        assert summary.results[0].name is None
        assert summary.error.kind is ErrorKind.PROFILES_DIRECTORY
        assert not respx.calls

    def test_missing_directory(self, client, tmp_path):
        """A directory that cannot be scanned gives a directory error."""
        summary = upload_profiles(client, tmp_path / "missing")

        assert summary.results == []
        assert summary.error.code == PROFILES_DIRECTORY_CODE

    def test_empty_directory(self, client, tmp_path):
        """An empty directory uploads nothing."""
        summary = upload_profiles(client, tmp_path)

        assert summary.results == []
        assert summary.error == OK
