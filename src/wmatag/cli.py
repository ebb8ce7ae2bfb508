"""wmatag CLI - inspect and edit WMA properties from the command line."""
import os
import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .core import AsfFile, WmaTagError
from .properties import PropertyMap
from .utils import (
    Config,
    setup_logging,
    join_for_printing,
    split_values,
    EXIT_CODE_SUCCESS,
    EXIT_CODE_ERROR,
    EXIT_CODE_USAGE,
    EXIT_CODE_NO_FILES,
    EXIT_CODE_INTERRUPTED,
)

logger = logging.getLogger(__name__)

OPERATIONS = ('print', 'write', 'clear', 'purge')

# ---------- CLI & Main ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="wmatag - WMA/ASF property editor")

    parser.add_argument("path", nargs='?', default='.', help="Directory or file to process")
    parser.add_argument("--operation", choices=OPERATIONS, default='print',
                        help="print properties, write/clear fields, or purge everything")
    parser.add_argument("--fields", help="Comma-separated canonical property names (e.g. TITLE,ALBUM)")
    parser.add_argument("--value", help="Value for write; split on --delimiter into multiple values")
    parser.add_argument("--delimiter", default=None,
                        help="Delimiter for splitting multi-value input (default: ';')")
    parser.add_argument("--recursive", action='store_true', help="Recurse into subdirectories")

    parser.add_argument("--raw", action='store_true', help="Print native attributes with their types")
    parser.add_argument("--json", action='store_true', help="Print results as JSON")
    parser.add_argument("--dry-run", action='store_true', help="Do not write files")
    parser.add_argument("--verbose", action='store_true', default=None,
                        help="Enable verbose logging (overrides WMATAG_VERBOSE env var)")
    return parser

def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    errors = []

    if args.operation in ('write', 'clear') and not args.fields:
        errors.append(f"{args.operation} operation requires --fields")
    if args.operation == 'write' and args.value is None:
        errors.append("write operation requires --value")

    if not os.path.exists(args.path):
        errors.append(f"Path does not exist: {args.path}")

    if errors:
        raise ValueError("; ".join(errors))

def parse_field_list(fields_str: Optional[str]) -> List[str]:
    """Parse comma-separated field list into upper-case canonical names."""
    if not fields_str:
        return []
    return [f.strip().upper() for f in fields_str.split(',') if f.strip()]

def collect_files(path: Path, recursive: bool = False) -> Iterator[Path]:
    """Yield supported files under path (or path itself if it is a file)."""
    if path.is_file():
        if path.suffix.lower() in Config.SUPPORTED_EXT:
            yield path
        return
    pattern = '**/*' if recursive else '*'
    for p in sorted(path.glob(pattern)):
        if p.is_file() and p.suffix.lower() in Config.SUPPORTED_EXT:
            yield p

def apply_operation(af: AsfFile, operation: str, fields: List[str],
                    values: List[str]) -> PropertyMap:
    """Apply an edit operation to a loaded file's tag. Returns ignored properties."""
    tag = af.tag
    if operation == 'purge':
        unsupported = tag.properties().unsupported
        ignored = tag.set_properties({})
        tag.remove_unsupported_properties(unsupported)
        return ignored

    props = tag.properties()
    for field in fields:
        if operation == 'write':
            props[field] = values
        elif operation == 'clear':
            props.pop(field, None)
    return tag.set_properties(props)

def raw_view(af: AsfFile) -> Dict[str, List[str]]:
    """Native keys with typed values, dedicated fields included."""
    tag = af.tag
    out = {}
    for label, value in (('Title', tag.title), ('Author', tag.artist),
                         ('Copyright', tag.copyright), ('Description', tag.comment),
                         ('Rating', tag.rating)):
        if value:
            out[label] = [value]
    for name, attrs in tag.attribute_list_map.items():
        out[name] = [f"{a.display_text()} ({a.type.name})" for a in attrs]
    return out

def print_metadata(metadata: Dict[str, List[str]], max_len: int = 150) -> None:
    """Print metadata in a consistent format with truncation."""
    if not metadata:
        print("  (empty)")
        return
    width = max(len(k) for k in metadata)
    for key, vals in metadata.items():
        s = join_for_printing(vals)
        if len(s) > max_len:
            s = s[:max_len-3] + "..."
        print(f"  {key.ljust(width)} : {s}")

def process_file(path: Path, args: argparse.Namespace, fields: List[str],
                 values: List[str]) -> Dict:
    """Process one file and return a result record."""
    rec = {'path': str(path)}
    with AsfFile.managed(path) as af:
        if args.operation != 'print':
            ignored = apply_operation(af, args.operation, fields, values)
            rec['ignored'] = dict(ignored)
            if not args.dry_run:
                af.save()
                rec['wrote'] = True
            else:
                rec['wrote'] = False

        props = af.properties()
        rec['properties'] = dict(props)
        rec['unsupported'] = list(props.unsupported)
        if args.raw:
            rec['raw'] = raw_view(af)
    return rec

def print_file_result(rec: Dict, args: argparse.Namespace) -> None:
    """Print detailed result for a single file."""
    print(f"\nFile: {rec['path']}")
    if rec.get('error'):
        print(f"  ERROR: {rec['error']}")
        return

    if args.raw:
        print_metadata(rec['raw'])
    else:
        print_metadata(rec['properties'])
        if rec['unsupported']:
            print(f"  Unsupported: {join_for_printing(rec['unsupported'])}")

    if rec.get('ignored'):
        print(f"  Ignored: {join_for_printing(sorted(rec['ignored']))}")
    if args.operation != 'print' and not rec.get('wrote'):
        print("  Note: dry-run, NOT WRITTEN")

def run_session(args: argparse.Namespace) -> int:
    """Process all files. Returns exit code."""
    files = list(collect_files(Path(args.path), recursive=args.recursive))
    if not files:
        print("No files found matching criteria.", file=sys.stderr)
        return EXIT_CODE_NO_FILES

    fields = parse_field_list(args.fields)
    delimiter = args.delimiter or Config.DEFAULT_DELIMITER
    values = split_values(args.value, delimiter) if args.value is not None else []

    results = []
    failed = 0
    for path in files:
        try:
            rec = process_file(path, args, fields, values)
        except WmaTagError as e:
            logger.warning(f"{path}: {e}")
            rec = {'path': str(path), 'error': str(e)}
            failed += 1
        results.append(rec)
        if not args.json:
            print_file_result(rec, args)

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return EXIT_CODE_ERROR if failed else EXIT_CODE_SUCCESS

def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    try:
        Config.load_from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_CODE_USAGE)

    # CLI flag > WMATAG_VERBOSE > default
    if args.verbose is None:
        args.verbose = Config.DEFAULT_VERBOSE
    setup_logging(args.verbose)

    try:
        validate_args(args)
    except ValueError as e:
        logger.error(f"Argument validation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_CODE_USAGE)

    try:
        sys.exit(run_session(args))
    except KeyboardInterrupt:
        sys.exit(EXIT_CODE_INTERRUPTED)
