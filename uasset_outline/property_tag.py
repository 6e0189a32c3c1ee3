"""
Tagged property headers (FPropertyTag).

Only the tag is decoded: name, type, value size, array index and the
type-specific extra data. Value bytes are skipped using the declared
size. A stream of tags ends with a tag named "None".
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from uasset_outline.cursor import ByteCursor
from uasset_outline.errors import MalformedInput, UnexpectedEndOfBuffer, UnterminatedPropertyTagStream
from uasset_outline.header import PackageHeader
from uasset_outline.names import NONE_NAME, NameReference, read_name_reference
from uasset_outline.summary import ArchiveSummary

Guid = Tuple[int, int, int, int]


@dataclass
class StructExtraData:
    struct_name: NameReference
    struct_guid: Optional[Guid] = None


@dataclass
class BoolExtraData:
    value: bool


@dataclass
class EnumExtraData:
    enum_name: NameReference


@dataclass
class ArrayExtraData:
    inner_type: Optional[NameReference] = None


@dataclass
class OptionalExtraData:
    inner_type: NameReference


@dataclass
class SetExtraData:
    inner_type: NameReference


@dataclass
class MapExtraData:
    key_type: NameReference
    value_type: NameReference


@dataclass
class UnknownExtraData:
    """Type without extra data in this package version; nothing is consumed."""
    type_name: str


ExtraData = Union[
    StructExtraData,
    BoolExtraData,
    EnumExtraData,
    ArrayExtraData,
    OptionalExtraData,
    SetExtraData,
    MapExtraData,
    UnknownExtraData,
]


@dataclass
class PropertyTag:
    """Decoded property tag. A sentinel tag only has its name set."""
    name: NameReference = field(default_factory=NameReference)
    type: NameReference = field(default_factory=NameReference)
    size: int = 0
    array_index: int = 0
    name_str: str = ""
    type_str: str = ""
    extra_data: Optional[ExtraData] = None
    property_guid: Optional[Guid] = None

    @property
    def is_sentinel(self) -> bool:
        return self.name_str == NONE_NAME

    def to_dict(self) -> dict:
        return {
            'name': self.name_str,
            'type': self.type_str,
            'size': self.size,
            'array_index': self.array_index,
            'extra': type(self.extra_data).__name__ if self.extra_data is not None else None,
        }


def _read_extra_data(cursor: ByteCursor, summary: ArchiveSummary, type_str: str) -> ExtraData:
    if type_str == 'StructProperty':
        extra = StructExtraData(read_name_reference(cursor))
        if summary.supports('struct_guid'):
            extra.struct_guid = cursor.read_guid()
        return extra
    if type_str == 'BoolProperty':
        return BoolExtraData(cursor.read_bool_byte())
    if type_str == 'EnumName':
        return EnumExtraData(read_name_reference(cursor))
    if type_str == 'ArrayProperty':
        extra = ArrayExtraData()
        if summary.supports('array_inner_type'):
            extra.inner_type = read_name_reference(cursor)
        return extra
    if type_str == 'OptionalProperty':
        return OptionalExtraData(read_name_reference(cursor))
    if summary.supports('set_map_types'):
        if type_str == 'SetProperty':
            return SetExtraData(read_name_reference(cursor))
        if type_str == 'MapProperty':
            return MapExtraData(read_name_reference(cursor), read_name_reference(cursor))
    return UnknownExtraData(type_str)


def read_property_tag(cursor: ByteCursor, summary: ArchiveSummary,
                      header: PackageHeader) -> PropertyTag:
    """
    Decode one property tag.

    If the tag's name is "None" nothing past the name is read and the
    returned tag is the stream sentinel.
    """
    tag = PropertyTag()
    tag.name = read_name_reference(cursor)
    tag.name_str = header.name_to_string(tag.name)
    if tag.is_sentinel:
        return tag

    tag.type = read_name_reference(cursor)
    tag.size = cursor.read_i32()
    tag.array_index = cursor.read_i32()
    tag.type_str = header.name_to_string(tag.type)

    if tag.type.number == 0:
        tag.extra_data = _read_extra_data(cursor, summary, tag.type_str)

    if summary.supports('property_guid'):
        if cursor.read_u8() != 0:
            tag.property_guid = cursor.read_guid()

    return tag


def read_property_tag_stream(cursor: ByteCursor, summary: ArchiveSummary,
                             header: PackageHeader, offset: int,
                             export_index: int = 0) -> Tuple[List[PropertyTag], int]:
    """
    Walk a tag stream starting at ``offset``, skipping each value.

    The cursor's position is restored afterwards.

    Args:
        cursor: Package cursor
        summary: Archive summary of the package
        header: Decoded header, used to resolve names
        offset: Absolute offset of the first tag
        export_index: Export the stream belongs to, for error reporting

    Returns:
        (tags without the sentinel, position right after the sentinel's name)

    Raises:
        UnterminatedPropertyTagStream: If the buffer ends before a None tag
    """
    tags = []
    with cursor.snapshot():
        try:
            cursor.seek(offset)
            while True:
                tag = read_property_tag(cursor, summary, header)
                if tag.is_sentinel:
                    return tags, cursor.position
                if tag.size < 0:
                    raise MalformedInput(
                        f"Negative value size {tag.size} for property '{tag.name_str}'")
                cursor.skip(tag.size)
                tags.append(tag)
        except UnexpectedEndOfBuffer as e:
            raise UnterminatedPropertyTagStream(export_index, offset) from e
