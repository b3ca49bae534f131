import io
import logging
import sys
from typing import Iterator
from name_census.config import DEFAULT_ENCODING, INPUT_DECODE_ERRORS

logger = logging.getLogger(__name__)

STDIN_MARKER = '-'

def iter_lines(path: str, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """
    Stream lines from a file, or from stdin when path is '-'.
    
    Lines are yielded one at a time so arbitrarily large inputs are never
    held in memory. Bytes that are invalid in `encoding` are replaced, so a
    bad line is left for the parser to skip. File errors propagate to the
    caller.
    
    Args:
        path: Path to the input file, or '-' for stdin
        encoding: Text encoding of the input
        
    Yields:
        str: Each line, including its trailing newline
    """
    if path == STDIN_MARKER:
        logger.debug(f"Reading records from stdin as {encoding}")
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, errors=INPUT_DECODE_ERRORS)
        try:
            yield from stream
        finally:
            # leave the underlying stdin buffer open
            stream.detach()
        return
    
    logger.debug(f"Reading records from {path}")
    with open(path, 'r', encoding=encoding, errors=INPUT_DECODE_ERRORS) as f:
        yield from f

def format_duration(seconds: float) -> str:
    """
    Format duration in human-readable format.
    
    Args:
        seconds: Duration in seconds
        
    Returns:
        str: Formatted duration string
    """
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds}s"
    elif seconds < 3600:
        minutes = seconds // 60
        remaining_seconds = seconds % 60
        return f"{minutes}m {remaining_seconds}s"
    else:
        hours = seconds // 3600
        remaining_minutes = (seconds % 3600) // 60
        return f"{hours}h {remaining_minutes}m"

def truncate_string(text: str, max_length: int = 50) -> str:
    """
    Truncate string if it's too long.
    
    Args:
        text: Text to truncate
        max_length: Maximum length
        
    Returns:
        str: Truncated string with ellipsis if needed
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
