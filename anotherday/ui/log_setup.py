# -*- coding: utf-8 -*-

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool) -> None:
    """
    --verbose: everything from DEBUG up on stderr.
    otherwise: nothing, I/O failures stay silent.
    """
    level = logging.DEBUG if verbose else logging.CRITICAL + 1
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )
