"""Process entry point.

Runs the startup chain and reports its outcome:

    $ dbclients
    prisma.write is secret:readWriteUrl
    prisma.read is secret:readOnlyUrl

On failure every message is printed to stderr and the process exits
with status 1.
"""

import asyncio
import sys
from typing import Optional, TextIO

from pydantic import ValidationError

from dbclients.client import DataClients
from dbclients.logging import get_logger, setup_logging
from dbclients.resolution import initialize
from dbclients.settings import get_settings
from dbclients.types.result import Result, is_failure

logger = get_logger(__name__)

FAILURE_HEADER = "Failed to initialize prisma:"


def report(
    result: Result[DataClients],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Print the outcome of initialization and return the exit status.
    
    Args:
        result: Final client resolution Result
        out: Informational stream, defaults to stdout
        err: Error stream, defaults to stderr
        
    Returns:
        0 on success, 1 on failure
    """
    out = out or sys.stdout
    err = err or sys.stderr
    
    if is_failure(result):
        print(FAILURE_HEADER, file=err)
        for message in result.messages:
            print(f"  - {message}", file=err)
        return 1
    
    clients = result.value
    print(f"prisma.write is {clients.write.db}", file=out)
    print(f"prisma.read is {clients.read.db}", file=out)
    return 0


def main() -> None:
    """Initialize the data-access clients and exit accordingly."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)
    
    setup_logging(settings.log_level)
    
    result = asyncio.run(initialize(settings))
    status = report(result)
    if status != 0:
        sys.exit(status)


if __name__ == "__main__":
    main()
