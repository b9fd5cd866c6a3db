#!/usr/bin/env python3
"""
Dependency Tracker CLI

Runs one tracking pass over a host graph description and prints the
resulting dependency snapshot in various formats.
"""

import argparse
import logging
import sys
from pathlib import Path

from exporters import snapshot_to_json, to_ascii, to_mermaid
from exporters.json_exporter import DEFAULT_SNAPSHOT_FILE
from host.loader import load_compilation
from tracker.diagnostics import DEFAULT_ERROR_LOG
from tracker.errors import TrackerError
from tracker.plugin import DEFAULT_PERSIST_MODE, DependencyTracker, TrackerOptions


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="depmap",
        description="Track which files depend on which in a module build graph.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  depmap graph.yaml                        # ASCII dependency trees
  depmap graph.yaml -f mermaid             # Mermaid flowchart
  depmap graph.yaml -f json -o deps.json   # JSON snapshot to file
  depmap graph.yaml --ignore '/repo/**/node_modules/**'
  depmap graph.yaml --mode development     # Also write dependency-info.json
        """,
    )

    parser.add_argument(
        "graph",
        help="Host graph description (YAML or JSON)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["ascii", "mermaid", "json"],
        default="ascii",
        help="Output format (default: ascii)",
    )

    parser.add_argument(
        "--orientation",
        choices=["LR", "TD", "TB", "RL", "BT"],
        default="LR",
        help="Mermaid flowchart orientation (default: LR)",
    )

    parser.add_argument(
        "--ascii-style",
        choices=["tree", "ascii"],
        default="tree",
        help="ASCII output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    parser.add_argument(
        "--relative-to",
        type=str,
        default=None,
        help="Base path for relative path display",
    )

    parser.add_argument(
        "--show-all",
        action="store_true",
        help="Include modules that have no connections",
    )

    # Tracking options
    parser.add_argument(
        "--ignore",
        nargs="+",
        default=[],
        metavar="PATTERN",
        help="Glob patterns of files to leave out of the snapshot",
    )

    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        help="Build mode (default: the 'mode' given in the graph file)",
    )

    parser.add_argument(
        "--persist-mode",
        type=str,
        default=DEFAULT_PERSIST_MODE,
        help=f"Build mode that writes the snapshot file (default: {DEFAULT_PERSIST_MODE})",
    )

    parser.add_argument(
        "--snapshot-path",
        type=str,
        default=DEFAULT_SNAPSHOT_FILE,
        help=f"Snapshot file written in the persist mode (default: {DEFAULT_SNAPSHOT_FILE})",
    )

    parser.add_argument(
        "--error-log",
        type=str,
        default=DEFAULT_ERROR_LOG,
        help=f"File extraction failures are appended to (default: {DEFAULT_ERROR_LOG})",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every ignore check and pass summary",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    graph_path = Path(parsed.graph)
    if not graph_path.is_file():
        print(f"Error: '{parsed.graph}' is not a file", file=sys.stderr)
        return 1

    base = Path(parsed.relative_to) if parsed.relative_to else None

    options = TrackerOptions(
        ignore_patterns=tuple(parsed.ignore),
        snapshot_path=parsed.snapshot_path,
        error_log_path=parsed.error_log,
        persist_mode=parsed.persist_mode,
    )
    tracker = DependencyTracker(options)

    try:
        compilation, file_mode = load_compilation(graph_path)
        mode = parsed.mode if parsed.mode is not None else file_mode
        snapshot = tracker.after_compile(compilation, mode)
    except (TrackerError, OSError) as e:
        print(f"Error tracking dependencies: {e}", file=sys.stderr)
        return 1

    if parsed.format == "mermaid":
        output = to_mermaid(
            snapshot,
            orientation=parsed.orientation,
            base=base,
            show_all=parsed.show_all,
        )
    elif parsed.format == "json":
        output = snapshot_to_json(snapshot)
    else:  # ascii (default)
        output = to_ascii(
            snapshot,
            base=base,
            style=parsed.ascii_style,
            show_all=parsed.show_all,
        )

    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
