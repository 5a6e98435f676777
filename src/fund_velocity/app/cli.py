from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from fund_velocity.adapters.input_source import FileInputSource
from fund_velocity.adapters.output_sink import FileOutputSink
from fund_velocity.config.loader import ConfigError, load_config
from fund_velocity.config.models import AppConfig
from fund_velocity.domain.errors import ParseError
from fund_velocity.observability.logging import Logger, build_logger
from fund_velocity.usecases.pipeline import run_pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fund load velocity limit evaluator")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--input", help="Path to input NDJSON file (default: input.txt)")
    parser.add_argument("--output", help="Path to output file (default: output.txt)")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI flags take precedence over config values.
    if args.input is not None:
        config.input.file_path = args.input
    if args.output is not None:
        config.output.file_path = args.output


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
    except (ConfigError, OSError) as exc:
        # No logger config is available yet; report through the default sink.
        logger = build_logger(AppConfig().logging)
        logger.error("Failed to load config", path=args.config, error=str(exc))
        return 1

    apply_overrides(config, args)
    logger = build_logger(config.logging)
    try:
        return _run_batch(config, logger)
    finally:
        logger.close()


def _run_batch(config: AppConfig, logger: Logger) -> int:
    input_path = Path(config.input.file_path)
    output_path = Path(config.output.file_path)
    logger.info("Parsing input", path=str(input_path))
    try:
        result = run_pipeline(
            FileInputSource(input_path),
            FileOutputSink(output_path, atomic_replace=config.output.atomic_replace),
            logger=logger,
        )
    except ParseError as exc:
        logger.error(
            "Failed to parse load attempt",
            line_no=exc.line_no,
            reason=exc.reason.value,
            error=str(exc),
        )
        return 1
    except OSError as exc:
        logger.error("I/O failure", error=str(exc))
        return 1

    logger.info(
        "Processed load attempts",
        output=str(output_path),
        accepted=result.accepted_count,
        declined=result.declined_count,
        suppressed=len(result.suppressed),
    )
    return 0
