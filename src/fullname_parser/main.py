"""
Batch entry for the full name parser.

Reads config, builds a BatchContext and hands it to BatchPipeline. Without
arguments it reads every file in ``paths.input_dir`` and writes one table
per file to ``paths.output_dir``.
"""

from __future__ import annotations

import argparse
from typing import Optional

from fullname_parser.config import get_config
from fullname_parser.core.context import BatchContext
from fullname_parser.core.pipeline import BatchPipeline
from fullname_parser.logging import get_logger, set_debug
from fullname_parser.utils import resolve_project_path

log = get_logger("main")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Full name parser: batch run over a directory of name lists"
    )
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Name list file or directory (default: paths.input_dir)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory (default: paths.output_dir)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=("csv", "json"),
        default=None,
        help="Output format (default: batch.format)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


def run(
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    fmt: Optional[str] = None,
    debug_flag: bool = False,
) -> dict:
    """
    Prepare context and execute the batch pipeline.
    """
    cfg = get_config()
    cfg.debug = bool(debug_flag) or bool(cfg.debug)
    if cfg.debug:
        set_debug(True)

    input_path = input_path or str(resolve_project_path(cfg.paths.get("input_dir", "files/input")))
    output_path = output_path or str(resolve_project_path(cfg.paths.get("output_dir", "files/output")))

    log.info("Reading names from: %s", input_path)

    ctx = BatchContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        format=fmt or cfg.batch.get("format", "csv"),
        delimiter=cfg.batch.get("delimiter", ","),
        debug=cfg.debug,
    )

    counts = BatchPipeline(ctx).run()

    log.info("Batch complete. Output: %s", output_path)
    return counts


def main(argv=None) -> None:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            fmt=args.format,
            debug_flag=args.debug,
        )
    except Exception as exc:
        log.exception("Unhandled exception in main: %s", exc)
        raise


if __name__ == "__main__":
    main()
