"""
UAsset Outline Package

Read-only decoder for Unreal Engine package (.uasset) headers: name
table, export and import maps, and property tag metadata, projected
into an outline for documentation tools.
"""

__version__ = '0.1.0'
__author__ = 'UAsset Outline Team'

from uasset_outline.errors import (
    ParseError,
    UnexpectedEndOfBuffer,
    MalformedInput,
    InvalidIndex,
    UnterminatedPropertyTagStream,
)
from uasset_outline.cursor import ByteCursor
from uasset_outline.summary import ArchiveSummary, read_archive_summary
from uasset_outline.header import PackageHeader, EngineVersion, read_package_header
from uasset_outline.property_tag import PropertyTag, read_property_tag, read_property_tag_stream
from uasset_outline.outline import (
    AssetOutline,
    BatchResult,
    UAssetOutlineParser,
    decode,
    parse,
    parse_files,
)

__all__ = [
    'ParseError',
    'UnexpectedEndOfBuffer',
    'MalformedInput',
    'InvalidIndex',
    'UnterminatedPropertyTagStream',
    'ByteCursor',
    'ArchiveSummary',
    'read_archive_summary',
    'PackageHeader',
    'EngineVersion',
    'read_package_header',
    'PropertyTag',
    'read_property_tag',
    'read_property_tag_stream',
    'AssetOutline',
    'BatchResult',
    'UAssetOutlineParser',
    'decode',
    'parse',
    'parse_files',
    '__version__',
]


# Lazy imports for optional components
def __getattr__(name):
    if name == 'webserver':
        from uasset_outline import webserver
        return webserver
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
