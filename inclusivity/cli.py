"""Command-line entry point for the inclusivity scanner."""

from __future__ import annotations

import argparse
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional

from .config import ConfigError, ScanConfig, load_config
from .result import ScanResult, format_diagnostic, format_summary_table
from .scanner import Scanner
from .utils import iter_code_files, iter_source_units, module_name, read_text_file

logger = logging.getLogger(__name__)

DEFAULT_PATHS = (".",)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inclusivity",
        description="Flag non-inclusive terminology in identifiers and docstrings",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to scan (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        "-c",
        dest="config_path",
        default=None,
        help="Path to a YAML configuration file (defaults to the nearest .inclusivity.yaml).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/inclusivity.json).",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Attach a proposed rename to every identifier finding.",
    )
    parser.add_argument(
        "--exit-zero",
        action="store_true",
        help="Always exit with status 0, even when findings are reported.",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=1,
        help="Number of files to scan concurrently.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable).",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def scan_file(path: Path, scanner: Scanner) -> ScanResult:
    """Scan one source file, recording rather than raising read/parse failures."""

    result = ScanResult()
    try:
        source = read_text_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Unable to read %s: %s", path, exc)
        result.add_error(f"{path}: {exc}")
        return result
    if not source:
        return result
    try:
        units = iter_source_units(source, path=str(path), namespace=module_name(path))
    except (SyntaxError, ValueError, RecursionError, MemoryError) as exc:
        logger.warning("Unable to parse %s: %s", path, exc)
        result.add_error(f"{path}: {exc}")
        return result
    return scanner.scan(units, result)


def run_scan(
    paths: Iterable[str],
    config: Optional[ScanConfig] = None,
    propose_fixes: bool = False,
    jobs: int = 1,
) -> ScanResult:
    if config is None:
        config = ScanConfig()
    scanner = Scanner(
        allow_names=config.allow_names,
        scan_names=config.scan_names,
        scan_docs=config.scan_docs,
        propose_fixes=propose_fixes,
    )
    files = list(iter_code_files(paths, extensions=config.extensions, exclude=config.exclude))
    logger.info("Scanning %d file(s)", len(files))

    result = ScanResult()
    if jobs > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            per_file = list(executor.map(lambda path: scan_file(path, scanner), files))
    else:
        per_file = [scan_file(path, scanner) for path in files]
    for file_result in per_file:
        result.extend(file_result)
    return result


def write_output(result: ScanResult, output_path: str | None, report_format: str) -> None:
    if report_format == "text":
        for index, diagnostic in enumerate(result.diagnostics):
            print(format_diagnostic(diagnostic))
            fix = result.fix_for(index)
            if fix is not None:
                print(f"  fix: rename {fix.original_name} -> {fix.new_name}")
        if result.diagnostics:
            print()

    summary = format_summary_table(result)
    print(summary)

    if report_format == "json" or output_path:
        payload = json.dumps(result.to_dict(), indent=2)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            print(f"\nReport written to {output_path}")
        else:
            print("\nJSON Report")
            print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")
    try:
        config = load_config(Path(args.config_path) if args.config_path else None)
    except ConfigError as exc:
        parser.error(str(exc))
    paths = args.paths or list(DEFAULT_PATHS)
    result = run_scan(paths, config, propose_fixes=args.fix, jobs=args.jobs)
    write_output(result, args.output_path, args.format)
    if args.exit_zero:
        return 0
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
