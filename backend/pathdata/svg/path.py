"""Path-data parser entry point: ``d`` attribute text -> Path."""

from __future__ import annotations

import logging

from pathdata.svg.assembler import assemble
from pathdata.svg.commands import Path
from pathdata.svg.tokenizer import tokenize

logger = logging.getLogger(__name__)


def parse_path(raw: str) -> Path:
    """Parse path data into a Path.

    Raises a PathDataError subclass on the first problem found; there are no partial
    results.
    """
    tokens = tokenize(raw)
    commands = assemble(tokens, raw)
    logger.debug("Parsed path data: %d tokens, %d commands", len(tokens), len(commands))
    return Path(commands)
