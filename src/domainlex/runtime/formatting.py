"""printf-style substitution of positional values into resolved strings.

Both the catalog path and the registry's unregistered-domain path run every
resolved string through format_message(), so a miss and a hit format the
same way.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

__all__ = ["format_message"]

logger = logging.getLogger(__name__)


def format_message(template: str, args: Sequence[object] = ()) -> str:
    """Substitute format arguments into a resolved string.

    Rules:
        - No arguments: template returned unchanged, literal "%" included.
        - One Mapping argument: applied as ``template % mapping`` so named
          placeholders like ``%(name)s`` work.
        - Otherwise: ``template % tuple(args)``.

    A mismatch between template and arguments never propagates. The
    unformatted template is returned and the mismatch is logged at DEBUG.

    Args:
        template: Resolved translation or echoed source string
        args: Positional format arguments (possibly empty)

    Returns:
        Formatted string

    Example:
        >>> format_message("%d files", (3,))
        '3 files'
        >>> format_message("100%")
        '100%'
        >>> format_message("Hi %(name)s", ({"name": "Ada"},))
        'Hi Ada'
    """
    if not args:
        return template

    values: object
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    else:
        values = tuple(args)

    try:
        return template % values
    except (TypeError, ValueError, KeyError, OverflowError) as e:
        logger.debug("Cannot format %r with %d argument(s): %s", template, len(args), e)
        return template
