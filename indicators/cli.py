"""Command-line interface to verify an indicator document.

Reads a YAML indicator document, decodes it, validates it and reports every
problem found. Validation messages are printed one per line on stdout so they
can be piped; progress and failures are logged.

Exit status
-----------
0   the document is valid
1   the document decoded but has validation errors
2   the document could not be read or decoded

Usage
-----
    indicators-verify indicators.yml
    python -m indicators.cli indicators.yml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config.models import LOG_LEVELS, EnvSettings
from .domain.decoder import read_indicator_file
from .domain.errors import DecodeError
from .domain.validator import validate
from .observability import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def run(path: Path) -> int:
    """Decode and validate the document at ``path``.

    Returns
    -------
    int
        Process exit status (see module docstring).
    """
    try:
        document = read_indicator_file(path)
    except OSError as exc:
        logger.error("could not read %s: %s", path, exc)
        return EXIT_UNREADABLE
    except DecodeError as exc:
        logger.error("%s: %s", path, exc)
        return EXIT_UNREADABLE

    errors = validate(document)
    for err in errors:
        logger.error("%s: %s", path, err)
        print(err)

    if errors:
        logger.error("%s: %d validation error(s)", path, len(errors))
        return EXIT_INVALID

    logger.info(
        "%s is valid (%d metrics, %d indicators, %d sections)",
        path,
        len(document.metrics),
        len(document.indicators),
        len(document.documentation.sections),
    )
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint for verifying an indicator document."""
    parser = argparse.ArgumentParser(description="Verify an indicator document")
    parser.add_argument("path", help="Path to the indicator document (YAML)")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        help="Logging level (overrides environment)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (once sets DEBUG)",
    )
    args = parser.parse_args(argv)

    effective_level = args.log_level or (
        "DEBUG" if args.verbose > 0 else EnvSettings().log_level
    )
    setup_logging(effective_level)

    raise SystemExit(run(Path(args.path)))


if __name__ == "__main__":
    main()
