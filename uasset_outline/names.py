"""
Name table entries and name references.

Every name in a package is stored once in the name table; records
refer to it by index plus an instance number suffix.
"""

from dataclasses import dataclass

from uasset_outline.cursor import ByteCursor
from uasset_outline.summary import ArchiveSummary

NONE_NAME = "None"


@dataclass(frozen=True)
class NameReference:
    """FName as serialized in a package: name table index + instance number."""
    index: int = 0
    number: int = 0

    def to_dict(self) -> dict:
        return {'index': self.index, 'number': self.number}


def read_name_reference(cursor: ByteCursor) -> NameReference:
    index = cursor.read_i32()
    number = cursor.read_u32()
    return NameReference(index, number)


def read_name_entry(cursor: ByteCursor, summary: ArchiveSummary) -> str:
    """Read one name table entry, dropping its hash if present."""
    name = cursor.read_string()
    if summary.supports('name_hashes'):
        cursor.read_u32()
    return name
