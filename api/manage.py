#!/usr/bin/env python3
"""
Reference Index Maintenance CLI

Usage:
    python manage.py missing-files                      # Remove references to missing files
    python manage.py missing-files --dry-run            # Only show what would be removed
    python manage.py missing-files --update-refindex    # Update the reference index first
    python manage.py missing-files -n                   # Never ask, assume index is current
    python manage.py refindex-stats                     # Show reference index counts

Assumptions:
    - the reference index is complete (update it before running this tool)
    - soft reference parsers were applied everywhere files are used inline

Without --dry-run, every managed file reference (attachment fields) to a
missing file is removed from the index. Soft references to missing files
are only listed; they need a manual fix in the content.
"""
import argparse
import sys
from pathlib import Path

# Add api directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config import default_config
from logging_config import configure_logging
from operations.errors import StoreUnavailable
from operations.missing_files_reporter import MissingFilesReporter
from operations.operations_factory import OperationsFactory


def should_update_refindex(args) -> bool:
    """--update-refindex wins; otherwise ask when interactive"""
    print("Finding missing files requires a clean reference index (sys_refindex)")
    if args.update_refindex:
        return True
    if args.no_interaction or not sys.stdin.isatty():
        return False
    answer = input("Should the reference index be updated right now? [y/N] ")
    return answer.strip().lower() in ('y', 'yes')

def cmd_missing_files(args):
    """Find references to missing files and remove the managed ones"""
    print("Find all file references from records pointing to a missing (non-existing) file.\n")

    refresh = should_update_refindex(args)
    reconciler = OperationsFactory.create_reconciler()

    try:
        result = reconciler.run_reconciliation(dry_run=args.dry_run, refresh_index_first=refresh)
    except StoreUnavailable as e:
        print(f"Error: {e}")
        return 1

    reporter = MissingFilesReporter(result)

    soft_lines = reporter.soft_reference_lines()
    if soft_lines:
        print(f"\nFound {len(soft_lines)} soft-referenced files that need manual repair.")
        for line in soft_lines:
            print(f"  * {line}")

    if result.missing_managed_references:
        print(f"\nFound {result.managed_reference_count} references to non-existing files.")
        if args.dry_run:
            print("DRY RUN - nothing is removed")
        for line in reporter.repair_lines(verbose=args.verbose):
            print(f"  {line}")
        if not args.dry_run:
            print("\nAll references were updated accordingly.")

    print(f"\n{result.message}")
    return 0

def cmd_refindex_stats(args):
    """Show reference index counts"""
    store = OperationsFactory.create_reference_store()
    try:
        counts = store.count_references()
    except Exception as e:
        print(f"Error: Cannot read reference index {default_config.database.path}: {e}")
        return 1

    print(f"Reference index:         {default_config.database.path}")
    print(f"Content root:            {default_config.paths.content_root}")
    print(f"Total references:        {counts['total']}")
    print(f"File references:         {counts['file_references']}")
    print(f"  managed:               {counts['managed_file_references']}")
    print(f"  soft:                  {counts['soft_file_references']}")
    return 0

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Reference Index Maintenance CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    # missing-files
    p = subparsers.add_parser('missing-files',
                              help='Find file references pointing to missing files')
    p.add_argument('--dry-run', action='store_true',
                   help='Only show which references would be removed')
    p.add_argument('--update-refindex', action='store_true',
                   help='Update the reference index first without asking')
    p.add_argument('-n', '--no-interaction', action='store_true',
                   help='Do not ask; assume the reference index is up to date')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Group removals by missing file')
    p.set_defaults(func=cmd_missing_files)

    # refindex-stats
    p = subparsers.add_parser('refindex-stats', help='Show reference index counts')
    p.set_defaults(func=cmd_refindex_stats)

    args = parser.parse_args(argv)
    configure_logging(default_config.logging.level)
    return args.func(args)

if __name__ == '__main__':
    sys.exit(main())
