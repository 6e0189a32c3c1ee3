"""
Export and import map records.

Package indices inside these records follow the usual convention:
0 is null, a positive value is a 1-based export index and a negative
value is a negated 1-based import index.
"""

from dataclasses import dataclass, field

from uasset_outline.cursor import GUID_SIZE, ByteCursor
from uasset_outline.names import NameReference, read_name_reference
from uasset_outline.summary import ArchiveSummary


@dataclass
class ObjectExport:
    """Export table entry."""
    class_index: int = 0
    super_index: int = 0
    template_index: int = 0
    # Not present in the serialized export map; always 0 after decoding
    outer_index: int = 0
    object_name: NameReference = field(default_factory=NameReference)
    object_flags: int = 0
    serial_size: int = 0
    serial_offset: int = 0
    forced_export: bool = False
    not_for_client: bool = False
    not_for_server: bool = False
    is_inherited_instance: bool = False
    package_flags: int = 0
    not_always_loaded_for_editor_game: bool = False
    is_asset: bool = False
    generate_public_hash: bool = False
    first_export_dependency: int = 0
    serialization_before_serialization_dependencies: int = 0
    create_before_serialization_dependencies: int = 0
    serialization_before_create_dependencies: int = 0
    create_before_create_dependencies: int = 0

    def to_dict(self) -> dict:
        return {
            'class_index': self.class_index,
            'super_index': self.super_index,
            'outer_index': self.outer_index,
            'template_index': self.template_index,
            'object_name': self.object_name.to_dict(),
            'object_flags': self.object_flags,
            'serial_size': self.serial_size,
            'serial_offset': self.serial_offset,
            'is_asset': self.is_asset,
        }


@dataclass
class ObjectImport:
    """Import table entry."""
    class_package: NameReference = field(default_factory=NameReference)
    class_name: NameReference = field(default_factory=NameReference)
    outer_index: int = 0
    object_name: NameReference = field(default_factory=NameReference)
    package_name: NameReference = field(default_factory=NameReference)
    import_optional: bool = False

    def to_dict(self) -> dict:
        return {
            'class_package': self.class_package.to_dict(),
            'class_name': self.class_name.to_dict(),
            'outer_index': self.outer_index,
            'object_name': self.object_name.to_dict(),
            'import_optional': self.import_optional,
        }


def read_object_export(cursor: ByteCursor, summary: ArchiveSummary,
                       strict_booleans: bool = True) -> ObjectExport:
    """
    Decode one export map entry.

    Args:
        cursor: Cursor positioned on the entry
        summary: Archive summary of the package
        strict_booleans: Reject 32-bit booleans other than 0/1

    Returns:
        The decoded export
    """
    exp = ObjectExport()
    exp.class_index = cursor.read_i32()
    exp.super_index = cursor.read_i32()
    if summary.supports('template_index'):
        exp.template_index = cursor.read_i32()
    exp.object_name = read_name_reference(cursor)
    cursor.read_i32()  # unused
    exp.object_flags = cursor.read_u32()

    if summary.supports('sixty_four_bit_serial_sizes'):
        exp.serial_size = cursor.read_i64()
        exp.serial_offset = cursor.read_i64()
    else:
        exp.serial_size = cursor.read_i32()
        exp.serial_offset = cursor.read_i32()

    exp.forced_export = cursor.read_bool_from_int32(strict_booleans)
    exp.not_for_client = cursor.read_bool_from_int32(strict_booleans)
    exp.not_for_server = cursor.read_bool_from_int32(strict_booleans)

    if not summary.supports('export_package_guid_removed'):
        cursor.skip(GUID_SIZE)
    if summary.supports('is_inherited_instance'):
        exp.is_inherited_instance = cursor.read_bool_from_int32(strict_booleans)

    exp.package_flags = cursor.read_u32()

    if summary.supports('not_always_loaded_for_editor_game'):
        exp.not_always_loaded_for_editor_game = cursor.read_bool_from_int32(strict_booleans)
    if summary.supports('is_asset'):
        exp.is_asset = cursor.read_bool_from_int32(strict_booleans)
    if summary.supports('generate_public_hash'):
        exp.generate_public_hash = cursor.read_bool_from_int32(strict_booleans)

    if summary.supports('export_dependencies'):
        exp.first_export_dependency = cursor.read_i32()
        # The second and fourth words both land in
        # serialization_before_create_dependencies; the fourth wins.
        exp.serialization_before_create_dependencies = cursor.read_i32()
        exp.create_before_serialization_dependencies = cursor.read_i32()
        exp.serialization_before_create_dependencies = cursor.read_i32()
        exp.create_before_create_dependencies = cursor.read_i32()

    return exp


def read_object_import(cursor: ByteCursor, summary: ArchiveSummary,
                       has_editor_only_data: bool,
                       strict_booleans: bool = True) -> ObjectImport:
    """Decode one import map entry."""
    imp = ObjectImport()
    imp.class_package = read_name_reference(cursor)
    imp.class_name = read_name_reference(cursor)
    imp.outer_index = cursor.read_i32()
    imp.object_name = read_name_reference(cursor)
    if has_editor_only_data and summary.supports('import_package_name'):
        imp.package_name = read_name_reference(cursor)
    if summary.supports('import_optional'):
        imp.import_optional = cursor.read_bool_from_int32(strict_booleans)
    return imp
