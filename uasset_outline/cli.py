"""
Command line entry point.

    uasset_outline [--json] [--config FILE] FILE [FILE ...]

Prints the outline of each package. A file that fails to decode is
reported and the remaining files are still processed; the exit status
is 1 if any file failed.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from uasset_outline.config import load_config
from uasset_outline.outline import AssetOutline, parse_files


def print_outline(outline: AssetOutline):
    """Print a human readable outline."""
    summary = outline.summary
    header = outline.header
    print(f'{outline.source}')
    print(f'  Versions: UE4 {summary.file_version}, UE5 {summary.file_version_ue5}, '
          f'licensee {summary.file_licensee_version}')
    print(f'  Saved by: {header.saved_by_engine_version}')
    print(f'  Names: {len(header.names)}')
    print(f'  Exports: {len(header.exports)}')
    for index, class_name in outline.export_classes:
        print(f'    [{index}] {outline.object_names[index]} ({class_name})')
        for tag in outline.blueprint_tags.get(index, []):
            print(f'        {tag.name_str}: {tag.type_str} ({tag.size} bytes)')
    print(f'  Imports: {len(header.imports)}')
    for index, class_name in outline.import_classes:
        print(f'    [{-index}] {outline.object_names[-index]} ({class_name})')
    for index, message in outline.errors.items():
        print(f'  ! {index}: {message}')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the outline CLI."""
    parser = argparse.ArgumentParser(description='Outline Unreal Engine .uasset packages')
    parser.add_argument('files', nargs='+', help='Package files to outline')
    parser.add_argument('--json', action='store_true', help='Print outlines as JSON')
    parser.add_argument('--config', '-c', help='Path to a configuration YAML file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    level = logging.DEBUG if args.verbose else getattr(logging, config.logging.level, logging.INFO)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    logger = logging.getLogger('uasset_outline')

    results = parse_files(args.files, config.decoder, logger)

    if args.json:
        print(json.dumps([
            r.outline.to_dict() if r.ok else {'file': r.path, 'error': str(r.error)}
            for r in results
        ], indent=2))
    else:
        for r in results:
            if r.ok:
                print_outline(r.outline)
            else:
                print(f'{r.path}: {r.error}', file=sys.stderr)

    return 0 if all(r.ok for r in results) else 1


if __name__ == '__main__':
    sys.exit(main())
