"""
Archive summary: the fixed preamble of a package file.

The summary carries the magic tag and the version triple (legacy
version, UE4 object version, UE5 object version) that every later
decoding decision depends on, followed by the custom version block.
"""

from dataclasses import dataclass
from enum import Enum

from uasset_outline.cursor import ByteCursor
from uasset_outline.errors import MalformedInput
from uasset_outline.versions import (
    LEGACY_VERSION_NEWEST,
    LEGACY_VERSION_OLDEST,
    is_gate_open,
)

# UAsset magic number
PACKAGE_FILE_TAG = 0x9E2A83C1

# Optimized entries are a GUID + int32 version; GUID-format entries are a
# GUID + int32 version followed by a friendly-name FString.
CUSTOM_VERSION_SIZE = 20
GUID_CUSTOM_VERSION_PREFIX_SIZE = 20


class CustomVersionFormat(Enum):
    """How the custom version block is laid out."""
    GUIDS = 'guids'
    OPTIMIZED = 'optimized'


@dataclass
class ArchiveSummary:
    """Package preamble."""
    magic: int = PACKAGE_FILE_TAG
    legacy_version: int = LEGACY_VERSION_NEWEST
    file_version: int = 0
    file_version_ue5: int = 0
    file_licensee_version: int = 0

    @property
    def custom_version_format(self) -> CustomVersionFormat:
        if self.legacy_version < -5:
            return CustomVersionFormat.OPTIMIZED
        return CustomVersionFormat.GUIDS

    def supports(self, field: str) -> bool:
        """Whether a version-gated field is serialized in this package."""
        return is_gate_open(self.file_version, self.file_version_ue5, field)

    def to_dict(self) -> dict:
        return {
            'legacy_version': self.legacy_version,
            'file_version': self.file_version,
            'file_version_ue5': self.file_version_ue5,
            'file_licensee_version': self.file_licensee_version,
        }


def read_archive_summary(cursor: ByteCursor) -> ArchiveSummary:
    """
    Decode the archive summary at the cursor.

    Raises:
        MalformedInput: On a bad magic tag or an unknown legacy version
    """
    s = ArchiveSummary()

    s.magic = cursor.read_u32()
    if s.magic != PACKAGE_FILE_TAG:
        raise MalformedInput(f"Invalid uasset magic: {s.magic:08X}")

    s.legacy_version = cursor.read_i32()
    if not LEGACY_VERSION_NEWEST <= s.legacy_version <= LEGACY_VERSION_OLDEST:
        raise MalformedInput(f"Unsupported legacy file version {s.legacy_version}")

    cursor.read_i32()  # legacy UE3 version, unused
    s.file_version = cursor.read_i32()
    if s.legacy_version <= -8:
        s.file_version_ue5 = cursor.read_i32()
    s.file_licensee_version = cursor.read_i32()
    return s


def skip_custom_versions(cursor: ByteCursor, summary: ArchiveSummary) -> int:
    """
    Consume the custom version block.

    Returns:
        Number of custom version entries skipped
    """
    count = cursor.read_i32()
    if count < 0:
        raise MalformedInput(f"Negative custom version count {count}")

    fmt = summary.custom_version_format
    for _ in range(count):
        if fmt == CustomVersionFormat.OPTIMIZED:
            cursor.skip(CUSTOM_VERSION_SIZE)
        else:
            cursor.skip(GUID_CUSTOM_VERSION_PREFIX_SIZE)
            cursor.read_string()  # friendly name
    return count
