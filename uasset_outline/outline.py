"""
Package outline: decode a package and project it for documentation.

The outline is what a documentation builder consumes: the name table,
the export and import maps, and the resolved class name of every export
and import. Exports whose class is a Blueprint additionally get their
property tag stream walked.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from uasset_outline.config import DecoderConfig
from uasset_outline.cursor import ByteCursor
from uasset_outline.errors import ParseError
from uasset_outline.header import PackageHeader, read_package_header
from uasset_outline.property_tag import PropertyTag, read_property_tag_stream
from uasset_outline.summary import ArchiveSummary, read_archive_summary

# Stands in for an object name whose name table index is out of range
UNRESOLVED_NAME = '<unresolved>'


def parse(buffer: bytes, strict_booleans: bool = True) -> PackageHeader:
    """
    Decode the package header of a complete package file.

    Args:
        buffer: Full contents of the package file
        strict_booleans: Reject 32-bit booleans other than 0/1

    Returns:
        The decoded header

    Raises:
        ParseError: If the buffer cannot be decoded; no partial header is returned
    """
    _, _, header = decode(buffer, strict_booleans)
    return header


def decode(buffer: bytes, strict_booleans: bool = True) -> Tuple[ByteCursor, ArchiveSummary, PackageHeader]:
    """Decode summary and header, returning the cursor for further walks."""
    cursor = ByteCursor(buffer)
    summary = read_archive_summary(cursor)
    header = read_package_header(cursor, summary, strict_booleans)
    return cursor, summary, header


@dataclass
class AssetOutline:
    """Decoded package plus the projections handed to the documentation builder."""
    source: str
    summary: ArchiveSummary
    header: PackageHeader
    export_classes: List[Tuple[int, str]] = field(default_factory=list)
    import_classes: List[Tuple[int, str]] = field(default_factory=list)
    blueprint_tags: Dict[int, List[PropertyTag]] = field(default_factory=dict)
    # Keyed by package index: positive for exports, negative for imports
    object_names: Dict[int, str] = field(default_factory=dict)
    errors: Dict[int, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'file': os.path.basename(self.source),
            'version': self.summary.to_dict(),
            'engine_version': str(self.header.saved_by_engine_version),
            'names': list(self.header.names),
            'exports': [
                {'index': index, 'name': self.object_names[index], 'class': class_name}
                for index, class_name in self.export_classes
            ],
            'imports': [
                {'index': index, 'name': self.object_names[-index], 'class': class_name}
                for index, class_name in self.import_classes
            ],
            'blueprints': {
                str(index): [tag.to_dict() for tag in tags]
                for index, tags in self.blueprint_tags.items()
            },
            'errors': {str(index): message for index, message in self.errors.items()},
        }


@dataclass
class BatchResult:
    """Outcome of parsing one file in a batch."""
    path: str
    outline: Optional[AssetOutline] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class UAssetOutlineParser:
    """
    Builds outlines from .uasset files.

    Usage:
        parser = UAssetOutlineParser()
        outline = parser.load("path/to/asset.uasset")
        for index, class_name in outline.export_classes:
            print(index, class_name)
    """

    def __init__(self, config: Optional[DecoderConfig] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or DecoderConfig()
        self.logger = logger

    def log(self, level: str, message: str):
        """Log a message if logger is available."""
        if self.logger:
            getattr(self.logger, level)(message)

    def load(self, file_path: str) -> AssetOutline:
        """
        Load and outline a .uasset file.

        Args:
            file_path: Path to the .uasset file

        Returns:
            The outline
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Asset file not found: {file_path}")

        with open(file_path, 'rb') as f:
            data = f.read()

        return self.load_bytes(data, file_path)

    def load_bytes(self, data: bytes, name: str = "memory") -> AssetOutline:
        """
        Outline a package from bytes.

        Header decoding is all-or-nothing. Failures resolving a single
        export or walking its tag stream are recorded in the outline's
        errors and do not discard the header.
        """
        cursor, summary, header = decode(data, self.config.strict_booleans)
        self.log('debug', f'{name}: {len(header.names)} names, {len(header.exports)} exports, '
                          f'{len(header.imports)} imports (UE4 {summary.file_version}, '
                          f'UE5 {summary.file_version_ue5})')

        outline = AssetOutline(name, summary, header)

        for index in range(1, len(header.exports) + 1):
            outline.object_names[index] = self._resolve_object_name(outline, index)
            try:
                class_name = header.class_index_to_class_name(index)
            except ParseError as e:
                self._record(outline, index, e)
                continue
            outline.export_classes.append((index, class_name))

            if self.config.walk_blueprints and class_name in self.config.blueprint_classes:
                export = header.exports[index - 1]
                try:
                    tags, _ = read_property_tag_stream(
                        cursor, summary, header, export.serial_offset, index)
                except ParseError as e:
                    self._record(outline, index, e)
                    continue
                outline.blueprint_tags[index] = tags

        for index in range(1, len(header.imports) + 1):
            outline.object_names[-index] = self._resolve_object_name(outline, -index)
            try:
                class_name = header.class_index_to_class_name(-index)
            except ParseError as e:
                self._record(outline, -index, e)
                continue
            outline.import_classes.append((index, class_name))

        return outline

    def _resolve_object_name(self, outline: AssetOutline, index: int) -> str:
        try:
            return outline.header.class_index_to_object_name(index)
        except ParseError as e:
            self._record(outline, index, e)
            return UNRESOLVED_NAME

    def _record(self, outline: AssetOutline, index: int, error: ParseError):
        kind = 'export' if index > 0 else 'import'
        self.log('warning', f'{outline.source}: {kind} {abs(index)}: {error}')
        message = f'{error.kind}: {error}'
        if index in outline.errors:
            message = f'{outline.errors[index]}; {message}'
        outline.errors[index] = message


def parse_files(paths: Iterable[str], config: Optional[DecoderConfig] = None,
                logger: Optional[logging.Logger] = None) -> List[BatchResult]:
    """
    Outline several files, continuing past files that fail.

    Args:
        paths: Files to parse
        config: Decoder configuration
        logger: Optional logger

    Returns:
        One BatchResult per path, in order
    """
    parser = UAssetOutlineParser(config, logger)
    results = []
    for path in paths:
        try:
            results.append(BatchResult(path, outline=parser.load(path)))
        except (ParseError, OSError) as e:
            parser.log('error', f'Failed to parse {path}: {e}')
            results.append(BatchResult(path, error=e))
    return results
