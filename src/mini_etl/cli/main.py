"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="mini-etl", description="Mini ETL pipeline for user records")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = subparsers.add_parser("run", help="Run the pipeline once and print the result")
    run_parser.add_argument(
        "--source",
        default="randomuser",
        choices=["randomuser", "fallback"],
        help="Source to load users from",
    )
    run_parser.add_argument(
        "--demo",
        action="store_true",
        help="Skip the live source and use the bundled fallback dataset",
    )
    run_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings YAML (default: MINI_ETL_* environment variables)",
    )
    run_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON result to file (default: stdout)",
    )
    run_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the extract/transform/load log lines instead of JSON",
    )

    # fallback
    subparsers.add_parser("fallback", help="Print the bundled fallback dataset")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "run":
        _run_pipeline(args)
    elif args.command == "fallback":
        _run_fallback(args)
    else:
        parser.print_help()


def _run_pipeline(args: argparse.Namespace) -> None:
    """Run pipeline command."""
    import yaml
    from pydantic import ValidationError

    from mini_etl.connectors.registry import ConnectorRegistry
    from mini_etl.errors import PipelineRunError
    from mini_etl.pipeline import describe_run, run_pipeline
    from mini_etl.settings import Settings

    try:
        settings = Settings.from_yaml(args.config) if args.config else Settings.from_env()
    except (OSError, ValidationError, yaml.YAMLError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        raise SystemExit(1)

    connector = ConnectorRegistry.get(args.source, settings=settings)
    try:
        run = run_pipeline(prefer_live=not args.demo, connector=connector, settings=settings)
    except PipelineRunError as e:
        print(f"Run failed: {e}", file=sys.stderr)
        raise SystemExit(1)
    finally:
        connector.close()

    if args.summary:
        for line in describe_run(run):
            print(line)
        return

    output = json.dumps(run.to_payload(), indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(run.users)} users to {args.output}")
    else:
        print(output)


def _run_fallback(args: argparse.Namespace) -> None:
    """Run fallback command."""
    from mini_etl.connectors.fallback import load_fallback_dataset

    dataset = load_fallback_dataset()
    print(json.dumps(dataset.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
