import argparse
import logging
import os
import sys
from typing import List, Optional

import structlog

from .builder import StatementBuilder
from .catalog import load_invoices, load_plays
from .exceptions import StatementError
from .export import render_html
from .render import render_plain_text

_RENDERERS = {
    "text": render_plain_text,
    "html": render_html,
}


def configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("playbill")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(numeric)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playbill",
        description="Print the billing statement for one invoice.",
    )
    parser.add_argument("plays", help="JSON play catalog")
    parser.add_argument("invoices", help="JSON list of invoices")
    parser.add_argument("--invoice", type=int, default=0, help="invoice index (default: 0)")
    parser.add_argument("--format", choices=sorted(_RENDERERS), default="text")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("PLAYBILL_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        plays = load_plays(args.plays)
        invoices = load_invoices(args.invoices)
        if not 0 <= args.invoice < len(invoices):
            raise StatementError(
                f"Invoice index {args.invoice} out of range ({len(invoices)} invoices)"
            )
        statement = StatementBuilder().build(invoices[args.invoice], plays)
    except StatementError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(_RENDERERS[args.format](statement))
    return 0


if __name__ == "__main__":
    sys.exit(main())
