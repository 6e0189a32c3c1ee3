"""
Tests for export and import map records
"""

import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from uasset_outline.errors import MalformedInput
from uasset_outline.names import NameReference
from uasset_outline.outline import parse
from uasset_outline.versions import ObjectVersion, ObjectVersionUE5, PackageFlags

from package_builder import ExportSpec, ImportSpec, PackageBuilder


class TestObjectExport:
    """Test export map entries across versions."""

    def test_basic_fields(self):
        builder = PackageBuilder(exports=[
            ExportSpec(class_index=-1, super_index=-2, object_name='MyActor',
                       object_flags=0x00000001, is_asset=1, package_flags=0x10),
        ])
        export = parse(builder.build()).exports[0]
        assert export.class_index == -1
        assert export.super_index == -2
        assert export.object_name == NameReference(builder.names.index('MyActor'), 0)
        assert export.object_flags == 1
        assert export.package_flags == 0x10
        assert export.is_asset is True
        assert export.forced_export is False

    def test_outer_index_not_serialized(self):
        """The export map carries no outer index; the record keeps it at 0."""
        builder = PackageBuilder(exports=[ExportSpec(class_index=-1, object_name='A'),
                                          ExportSpec(object_name='B')])
        header = parse(builder.build())
        assert [e.outer_index for e in header.exports] == [0, 0]
        assert header.exports[1].object_name == NameReference(builder.names.index('B'), 0)
        assert header.exports[0].to_dict()['outer_index'] == 0

    @pytest.mark.parametrize('version', [
        ObjectVersion.SIXTY_FOUR_BIT_EXPORTMAP_SERIALSIZES - 1,
        ObjectVersion.SIXTY_FOUR_BIT_EXPORTMAP_SERIALSIZES,
    ])
    def test_serial_size_widths(self, version):
        """Serial size and offset are 32-bit before the widening and 64-bit after."""
        builder = PackageBuilder(file_version=version,
                                 exports=[ExportSpec(object_name='Data', data=b'\x01' * 6)])
        export = parse(builder.build()).exports[0]
        assert export.serial_size == 6
        assert export.serial_offset == builder.positions['export_data_1']

    def test_large_serial_offset(self):
        builder = PackageBuilder(exports=[ExportSpec(serial_size=2 ** 33, serial_offset=2 ** 34)])
        export = parse(builder.build()).exports[0]
        assert export.serial_size == 2 ** 33
        assert export.serial_offset == 2 ** 34

    @pytest.mark.parametrize('version, expected', [
        (ObjectVersion.TEMPLATEINDEX_IN_COOKED_EXPORTS - 1, 0),
        (ObjectVersion.TEMPLATEINDEX_IN_COOKED_EXPORTS, 3),
    ])
    def test_template_index(self, version, expected):
        builder = PackageBuilder(file_version=version,
                                 exports=[ExportSpec(template_index=3)])
        assert parse(builder.build()).exports[0].template_index == expected

    def test_is_asset_before_introduction(self):
        builder = PackageBuilder(file_version=ObjectVersion.COOKED_ASSETS_IN_EDITOR_SUPPORT - 1,
                                 exports=[ExportSpec(is_asset=1)])
        assert parse(builder.build()).exports[0].is_asset is False

    def test_dependency_overwrite(self):
        """
        The second dependency word is overwritten by the fourth.

        serialization_before_serialization_dependencies is never
        populated; this pins the established decoding.
        """
        builder = PackageBuilder(exports=[ExportSpec(dependencies=(10, 20, 30, 40, 50))])
        export = parse(builder.build()).exports[0]
        assert export.first_export_dependency == 10
        assert export.serialization_before_create_dependencies == 40
        assert export.create_before_serialization_dependencies == 30
        assert export.create_before_create_dependencies == 50
        assert export.serialization_before_serialization_dependencies == 0

    def test_dependencies_before_introduction(self):
        builder = PackageBuilder(file_version=ObjectVersion.PRELOAD_DEPENDENCIES_IN_COOKED_EXPORTS - 1,
                                 exports=[ExportSpec(dependencies=(10, 20, 30, 40, 50))])
        export = parse(builder.build()).exports[0]
        assert export.first_export_dependency == 0
        assert export.create_before_create_dependencies == 0

    def test_ue5_export_fields(self):
        """Inherited-instance and public-hash flags follow the UE5 versions."""
        builder = PackageBuilder(legacy_version=-8,
                                 file_version_ue5=ObjectVersionUE5.TRACK_OBJECT_EXPORT_IS_INHERITED,
                                 exports=[ExportSpec(is_inherited_instance=1, generate_public_hash=1),
                                          ExportSpec(object_name='Second')])
        header = parse(builder.build())
        assert header.exports[0].is_inherited_instance is True
        assert header.exports[0].generate_public_hash is True
        assert header.exports[1].object_name == NameReference(builder.names.index('Second'), 0)

    def test_strict_booleans(self):
        builder = PackageBuilder(exports=[ExportSpec(not_for_client=2)])
        data = builder.build()
        with pytest.raises(MalformedInput):
            parse(data)
        assert parse(data, strict_booleans=False).exports[0].not_for_client is True


class TestObjectImport:
    """Test import map entries across versions."""

    def _import(self, **kwargs):
        builder = PackageBuilder(imports=[ImportSpec(
            class_package='/Script/CoreUObject', class_name='Class',
            object_name='Actor', package_name='/Script/Engine', import_optional=1)], **kwargs)
        header = parse(builder.build())
        return builder, header, header.imports[0]

    def test_basic_fields(self):
        builder, header, imp = self._import()
        assert header.name_to_string(imp.class_package) == '/Script/CoreUObject'
        assert header.name_to_string(imp.class_name) == 'Class'
        assert header.name_to_string(imp.object_name) == 'Actor'
        assert imp.outer_index == 0

    def test_package_name_with_editor_data(self):
        _, header, imp = self._import()
        assert header.name_to_string(imp.package_name) == '/Script/Engine'

    def test_package_name_filtered(self):
        _, _, imp = self._import(package_flags=PackageFlags.FILTER_EDITOR_ONLY)
        assert imp.package_name == NameReference()

    def test_package_name_before_introduction(self):
        _, _, imp = self._import(file_version=ObjectVersion.NON_OUTER_PACKAGE_IMPORT - 1)
        assert imp.package_name == NameReference()

    def test_import_optional(self):
        _, _, imp = self._import(legacy_version=-8,
                                 file_version_ue5=ObjectVersionUE5.OPTIONAL_RESOURCES)
        assert imp.import_optional is True

    def test_import_optional_before_introduction(self):
        _, _, imp = self._import()
        assert imp.import_optional is False
