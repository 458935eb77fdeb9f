import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Optional, Sequence

from radar_layout import (
    EntryNotFoundError,
    RadarEngine,
    ValidationError,
    load_config_file,
    print_legend,
    print_result,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute a radar chart layout")
    parser.add_argument("path", help="Path to the radar JSON configuration")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="ID",
        help="Toggle the description of the entry with this id (repeatable)",
    )
    parser.add_argument(
        "--json-output",
        help="Write the render result (with the final legend) as JSON to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading radar configuration from %s", args.path)
    try:
        config = load_config_file(args.path)
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(2) from exc

    engine = RadarEngine()
    result = engine.render(config)
    print(print_result(result))

    for entry_id in args.select:
        try:
            legend = engine.select(entry_id)
        except EntryNotFoundError as exc:
            logger.error("%s", exc)
            raise SystemExit(1) from exc
        print(f"\nLegend after selecting {entry_id}:")
        print(print_legend(legend))

    if args.json_output:
        output_path = Path(args.json_output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        final = replace(result, legend=engine.legend) if engine.legend is not None else result
        logger.info("Writing layout JSON to %s", output_path)
        output_path.write_text(json.dumps(asdict(final), indent=2), encoding="utf-8")
        print(f"Layout written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
