"""
Package header (FPackageFileSummary) decoder.

Decodes everything that follows the archive summary: the custom version
block, the inline summary fields and the name, soft object path, export
and import tables they point at. Field presence follows the version
gates in uasset_outline.versions.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from uasset_outline.cursor import GUID_SIZE, ByteCursor
from uasset_outline.errors import InvalidIndex
from uasset_outline.names import NameReference, read_name_entry
from uasset_outline.objects import (
    ObjectExport,
    ObjectImport,
    read_object_export,
    read_object_import,
)
from uasset_outline.summary import ArchiveSummary, skip_custom_versions
from uasset_outline.versions import PackageFlags

GENERATION_INFO_SIZE = 8
COMPRESSED_CHUNK_SIZE = 16

LICENSEE_BIT = 0x80000000


@dataclass
class EngineVersion:
    """Engine version a package was saved with."""
    major: int = 0
    minor: int = 0
    patch: int = 0
    changelist_and_licensee_bit: int = 0
    branch: str = ""

    @classmethod
    def from_changelist(cls, changelist_and_licensee_bit: int) -> 'EngineVersion':
        """Version of packages that only stored a changelist number."""
        return cls(4, 0, 0, changelist_and_licensee_bit, "")

    @property
    def is_licensee_version(self) -> bool:
        return (self.changelist_and_licensee_bit & LICENSEE_BIT) != 0

    @property
    def changelist(self) -> int:
        return self.changelist_and_licensee_bit & ~LICENSEE_BIT

    def __str__(self):
        text = f"{self.major}.{self.minor}.{self.patch}-{self.changelist}"
        if self.branch:
            text += f"+{self.branch}"
        return text


def read_engine_version(cursor: ByteCursor) -> EngineVersion:
    v = EngineVersion()
    v.major = cursor.read_u16()
    v.minor = cursor.read_u16()
    v.patch = cursor.read_u16()
    v.changelist_and_licensee_bit = cursor.read_u32()
    v.branch = cursor.read_string()
    return v


@dataclass
class SoftObjectPath:
    """Soft object path table entry. The leading words are not interpreted."""
    unknown: Tuple[int, int, int, int] = (0, 0, 0, 0)
    path: str = ""


def read_soft_object_path(cursor: ByteCursor) -> SoftObjectPath:
    unknown = (cursor.read_i32(), cursor.read_i32(), cursor.read_i32(), cursor.read_i32())
    return SoftObjectPath(unknown, cursor.read_string())


@dataclass
class PackageHeader:
    """Decoded package summary and its tables."""
    total_header_size: int = 0
    folder_name: str = ""
    package_flags: int = 0
    names: List[str] = field(default_factory=list)
    soft_object_paths: List[SoftObjectPath] = field(default_factory=list)
    localization_id: str = ""
    gatherable_text_data_count: int = 0
    gatherable_text_data_offset: int = 0
    exports: List[ObjectExport] = field(default_factory=list)
    imports: List[ObjectImport] = field(default_factory=list)
    depends_offset: int = 0
    soft_package_references_count: int = 0
    soft_package_references_offset: int = 0
    searchable_names_offset: int = 0
    thumbnail_table_offset: int = 0
    generation_count: int = 0
    saved_by_engine_version: EngineVersion = field(default_factory=EngineVersion)
    compatible_with_engine_version: EngineVersion = field(default_factory=EngineVersion)
    compression_flags: int = 0
    package_source: int = 0
    asset_registry_data_offset: int = 0
    bulk_data_start_offset: int = 0
    world_tile_info_data_offset: int = 0
    chunk_ids: List[int] = field(default_factory=list)
    preload_dependency_count: int = -1
    preload_dependency_offset: int = 0
    names_referenced_from_export_data_count: int = 0
    payload_toc_offset: int = -1
    data_resource_offset: int = 0

    @property
    def has_editor_only_data(self) -> bool:
        return (self.package_flags & PackageFlags.FILTER_EDITOR_ONLY) == 0

    def name_to_string(self, name: NameReference) -> str:
        """Resolve a name reference against the name table."""
        if not 0 <= name.index < len(self.names):
            raise InvalidIndex('name', name.index, len(self.names))
        return self.names[name.index]

    def _export(self, index: int) -> ObjectExport:
        if not 1 <= index <= len(self.exports):
            raise InvalidIndex('export', index, len(self.exports))
        return self.exports[index - 1]

    def _import(self, index: int) -> ObjectImport:
        if not 1 <= -index <= len(self.imports):
            raise InvalidIndex('import', index, len(self.imports))
        return self.imports[-index - 1]

    def class_index_to_object_name(self, index: int) -> str:
        """Object name of the export (index > 0) or import (index < 0) a package index points at."""
        if index > 0:
            return self.name_to_string(self._export(index).object_name)
        if index < 0:
            return self.name_to_string(self._import(index).object_name)
        raise InvalidIndex('package', index, 0)

    def class_index_to_class_name(self, index: int) -> str:
        """
        Class name of the object a package index points at.

        For an export the class is itself a package index and is resolved
        to that object's name; for an import the class name is stored
        directly.
        """
        if index > 0:
            class_index = self._export(index).class_index
            if class_index == index:
                raise InvalidIndex('export class', class_index, len(self.exports))
            return self.class_index_to_object_name(class_index)
        if index < 0:
            return self.name_to_string(self._import(index).class_name)
        raise InvalidIndex('package', index, 0)

    def to_dict(self) -> dict:
        return {
            'folder_name': self.folder_name,
            'package_flags': self.package_flags,
            'names': list(self.names),
            'soft_object_paths': [p.path for p in self.soft_object_paths],
            'localization_id': self.localization_id,
            'exports': [e.to_dict() for e in self.exports],
            'imports': [i.to_dict() for i in self.imports],
            'saved_by_engine_version': str(self.saved_by_engine_version),
            'compatible_with_engine_version': str(self.compatible_with_engine_version),
            'chunk_ids': list(self.chunk_ids),
            'offsets': {
                'total_header_size': self.total_header_size,
                'gatherable_text_data': self.gatherable_text_data_offset,
                'depends': self.depends_offset,
                'soft_package_references': self.soft_package_references_offset,
                'searchable_names': self.searchable_names_offset,
                'thumbnail_table': self.thumbnail_table_offset,
                'asset_registry_data': self.asset_registry_data_offset,
                'bulk_data_start': self.bulk_data_start_offset,
                'world_tile_info_data': self.world_tile_info_data_offset,
                'preload_dependency': self.preload_dependency_offset,
                'payload_toc': self.payload_toc_offset,
                'data_resource': self.data_resource_offset,
            },
        }


def _read_count_and_offset(cursor: ByteCursor, present: bool,
                           default_count: int = 0, default_offset: int = 0) -> Tuple[int, int]:
    if present:
        return cursor.read_i32(), cursor.read_i32()
    return default_count, default_offset


def read_package_header(cursor: ByteCursor, summary: ArchiveSummary,
                        strict_booleans: bool = True) -> PackageHeader:
    """
    Decode the package header following the archive summary.

    Args:
        cursor: Cursor positioned directly after the archive summary
        summary: The decoded archive summary
        strict_booleans: Reject 32-bit booleans other than 0/1

    Returns:
        The decoded header

    Raises:
        ParseError: If the buffer is truncated or inconsistent
    """
    h = PackageHeader()

    skip_custom_versions(cursor, summary)

    h.total_header_size = cursor.read_i32()
    h.folder_name = cursor.read_string()
    h.package_flags = cursor.read_u32()
    editor_only = h.has_editor_only_data

    h.names = cursor.read_deferred_array(lambda c: read_name_entry(c, summary))
    h.soft_object_paths = cursor.read_deferred_array(read_soft_object_path)

    if summary.supports('localization_id') and editor_only:
        h.localization_id = cursor.read_string()

    h.gatherable_text_data_count, h.gatherable_text_data_offset = _read_count_and_offset(
        cursor, summary.supports('gatherable_text_data'))

    h.exports = cursor.read_deferred_array(
        lambda c: read_object_export(c, summary, strict_booleans))
    h.imports = cursor.read_deferred_array(
        lambda c: read_object_import(c, summary, editor_only, strict_booleans))

    h.depends_offset = cursor.read_i32()

    h.soft_package_references_count, h.soft_package_references_offset = _read_count_and_offset(
        cursor, summary.supports('soft_package_references'))

    if summary.supports('searchable_names'):
        h.searchable_names_offset = cursor.read_i32()

    h.thumbnail_table_offset = cursor.read_i32()

    cursor.skip(GUID_SIZE)  # package guid
    if summary.supports('persistent_guid') and editor_only:
        cursor.skip(GUID_SIZE)
        if not summary.supports('owner_persistent_guid_removed'):
            cursor.skip(GUID_SIZE)

    h.generation_count = cursor.read_i32()
    cursor.skip(max(h.generation_count, 0) * GENERATION_INFO_SIZE)

    if summary.supports('saved_by_engine_version'):
        h.saved_by_engine_version = read_engine_version(cursor)
    else:
        h.saved_by_engine_version = EngineVersion.from_changelist(cursor.read_u32())

    if summary.supports('compatible_with_engine_version'):
        h.compatible_with_engine_version = read_engine_version(cursor)
    else:
        h.compatible_with_engine_version = h.saved_by_engine_version

    h.compression_flags = cursor.read_u32()
    compressed_chunk_count = cursor.read_i32()
    cursor.skip(max(compressed_chunk_count, 0) * COMPRESSED_CHUNK_SIZE)

    h.package_source = cursor.read_u32()
    cursor.read_inline_array(ByteCursor.read_string)  # additional packages to cook

    if summary.legacy_version > -7:
        cursor.read_i32()  # texture allocations

    h.asset_registry_data_offset = cursor.read_i32()
    h.bulk_data_start_offset = cursor.read_i64()

    if summary.supports('world_tile_info'):
        h.world_tile_info_data_offset = cursor.read_i32()

    if summary.supports('chunk_id'):
        if summary.supports('chunk_id_array'):
            h.chunk_ids = cursor.read_inline_array(ByteCursor.read_i32)
        else:
            h.chunk_ids = [cursor.read_i32()]

    h.preload_dependency_count, h.preload_dependency_offset = _read_count_and_offset(
        cursor, summary.supports('preload_dependencies'), -1, 0)

    if summary.supports('names_referenced_from_export_data'):
        h.names_referenced_from_export_data_count = cursor.read_i32()
    else:
        h.names_referenced_from_export_data_count = len(h.names)

    if summary.supports('payload_toc'):
        h.payload_toc_offset = cursor.read_i64()

    if summary.supports('data_resources'):
        offset = cursor.read_i32()
        if offset > 0:
            h.data_resource_offset = offset

    return h
