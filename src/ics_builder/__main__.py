"""CLI entry point for the iCalendar builder."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .builder.document import CalendarDocument
from .config import AppConfig, EventsFile, config
from .utils.exceptions import IcsBuilderError, InvalidRecurrenceError
from .utils.logging import setup_logging
from .writers.file_writer import FileCalendarWriter, StreamCalendarWriter


def main(argv: Optional[list[str]] = None, app_config: Optional[AppConfig] = None) -> int:
    """Main CLI entry point."""
    app_config = app_config or config

    parser = argparse.ArgumentParser(
        description="ICS Builder - Build iCalendar files from a YAML list of events"
    )
    parser.add_argument(
        "events_file",
        type=Path,
        help="YAML file describing the calendar and its events",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write the calendar to (overrides config)",
    )
    parser.add_argument(
        "--filename",
        type=str,
        default=None,
        help="Output filename without extension (default: calendar)",
    )
    parser.add_argument(
        "--ext",
        type=str,
        default=None,
        help="Output file extension (default: ics)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the calendar instead of writing a file",
    )
    parser.add_argument(
        "--uid-domain",
        type=str,
        default=None,
        help="Domain part of event UIDs (overrides config)",
    )
    parser.add_argument(
        "--prod-id",
        type=str,
        default=None,
        help="PRODID of the calendar (overrides config)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    # Setup logging
    log_level = "DEBUG" if args.verbose else app_config.log_level
    logger = setup_logging(level=log_level, log_file=app_config.log_file)

    try:
        events_file = EventsFile(args.events_file)

        document = CalendarDocument(
            uid_domain=args.uid_domain or events_file.uid_domain or app_config.uid_domain,
            product_id=args.prod_id or events_file.product_id or app_config.product_id,
            separator=app_config.separator,
        )

        skipped = 0
        errors = []
        for index, event in enumerate(events_file.events):
            try:
                if document.add(event) is None:
                    skipped += 1
            except InvalidRecurrenceError as e:
                error_msg = f"Event #{index} ({event.subject}): {e}"
                logger.error(error_msg)
                errors.append(error_msg)

        logger.info(
            f"Added {len(document)} event(s), "
            f"{skipped} skipped, "
            f"{len(errors)} error(s)"
        )
        if errors:
            return 1

        if args.stdout:
            writer = StreamCalendarWriter()
        else:
            writer = FileCalendarWriter(args.output_dir or app_config.output_dir)

        calendar = document.download(
            writer,
            filename=args.filename or events_file.filename,
            ext=args.ext or events_file.extension,
        )
        if calendar is None:
            logger.error("No events to build")
            return 1
        return 0

    except IcsBuilderError as e:
        logger.error(f"ICS builder error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
