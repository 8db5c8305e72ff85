"""Upload of device profile files to core-metadata.

Every YAML file in a profiles directory whose profile core-metadata does
not yet hold is posted to the upload endpoint. Files are only read far
enough to learn the profile name; the service parses the full document.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml

from edgex_metadata.client.metadata import MetadataClient
from edgex_metadata.errors import OK, PROFILES_DIRECTORY_CODE, ErrorSignal
from edgex_metadata.profiles.io import load_yaml

logger = logging.getLogger(__name__)

UPLOAD_SUFFIXES = (".yaml", ".yml")


class UploadStatus(str, Enum):
    """Outcome for a single profile file."""

    UPLOADED = "uploaded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ProfileUploadResult:
    """Result of handling one profile file.

    Attributes:
        path: The profile file.
        name: Profile name read from the file, if any.
        status: What happened to the file.
        profile_id: Id issued by core-metadata for an uploaded profile.
        error: Error message for a failed file.
    """

    path: Path
    name: str | None
    status: UploadStatus
    profile_id: str | None = None
    error: str | None = None


@dataclass
class ProfileUploadSummary:
    """Result of uploading a profiles directory.

    ``error`` is OK if every file was uploaded or skipped, otherwise the
    first failure encountered.
    """

    results: list[ProfileUploadResult] = field(default_factory=list)
    error: ErrorSignal = OK

    @property
    def uploaded(self) -> int:
        return sum(1 for r in self.results if r.status == UploadStatus.UPLOADED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.status == UploadStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status == UploadStatus.FAILED)


def find_profile_files(directory: Path) -> list[Path]:
    """List the YAML files of a profiles directory in name order."""
    return sorted(
        p
        for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in UPLOAD_SUFFIXES
    )


def _fail(
    summary: ProfileUploadSummary, result: ProfileUploadResult, error: ErrorSignal
) -> None:
    summary.results.append(result)
    if summary.error.ok:
        summary.error = error


def upload_profiles(client: MetadataClient, directory: Path) -> ProfileUploadSummary:
    """Upload the profiles of a directory that core-metadata does not hold.

    Args:
        client: Metadata client to use.
        directory: Directory containing profile YAML files.

    Returns:
        ProfileUploadSummary with per-file results.
    """
    summary = ProfileUploadSummary()
    try:
        files = find_profile_files(directory)
    except OSError as e:
        logger.error("Problem scanning profiles directory %s: %s", directory, e)
        summary.error = ErrorSignal(
            PROFILES_DIRECTORY_CODE,
            f"Problem scanning profiles directory {directory}: {e}",
        )
        return summary

    for path in files:
        try:
            document = load_yaml(path)
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.error("Unable to read device profile file %s: %s", path, e)
            _fail(
                summary,
                ProfileUploadResult(path, None, UploadStatus.FAILED, error=str(e)),
                ErrorSignal(PROFILES_DIRECTORY_CODE, f"Unable to read {path}: {e}"),
            )
            continue

        name = document.get("name")
        if not isinstance(name, str) or not name:
            logger.error("No profile name in %s", path)
            _fail(
                summary,
                ProfileUploadResult(
                    path, None, UploadStatus.FAILED, error="no profile name"
                ),
                ErrorSignal(PROFILES_DIRECTORY_CODE, f"No profile name in {path}"),
            )
            continue

        existing = client.get_deviceprofile(name)
        if existing.value is not None:
            logger.info("Device profile %s already exists: skipped", name)
            summary.results.append(
                ProfileUploadResult(path, name, UploadStatus.SKIPPED)
            )
            continue

        created = client.create_deviceprofile_file(path)
        body = (created.value or b"").decode("utf-8", errors="replace")
        if created.ok:
            logger.info("Device profile %s created with id %s", name, body)
            summary.results.append(
                ProfileUploadResult(path, name, UploadStatus.UPLOADED, profile_id=body)
            )
        else:
            logger.error(
                "Error uploading device profile %s: %s", name, created.error.reason
            )
            _fail(
                summary,
                ProfileUploadResult(
                    path, name, UploadStatus.FAILED, error=created.error.reason
                ),
                created.error,
            )

    return summary


__all__ = [
    "ProfileUploadResult",
    "ProfileUploadSummary",
    "UPLOAD_SUFFIXES",
    "UploadStatus",
    "find_profile_files",
    "upload_profiles",
]
