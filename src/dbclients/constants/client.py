"""Client handle constants and enumerations.

This module contains the enum types used to configure data-access
client handles.
"""

from enum import Enum


class ErrorFormat(str, Enum):
    """Error formatting mode of a data-access client.
    
    Values:
        MINIMAL: Terse, single-line error output
        PRETTY: Human-oriented, multi-line error output
    """
    
    MINIMAL = "minimal"
    PRETTY = "pretty"


class AccessMode(str, Enum):
    """Kind of access a client handle is configured for.
    
    Values:
        READ: Read-only replica access
        WRITE: Read-write primary access
    """
    
    READ = "read"
    WRITE = "write"
