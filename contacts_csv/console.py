"""Optional console encoding setup, independent of the conversion itself."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

logger = logging.getLogger(__name__)


def _reconfigure(stream, encoding: str) -> bool:
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        logger.warning("cannot set encoding %s on %r: stream does not support it", encoding, stream)
        return False
    try:
        reconfigure(encoding=encoding)
    except (LookupError, ValueError, OSError) as e:
        logger.warning("cannot set encoding %s on %r: %s", encoding, stream, e)
        return False
    return True


def configure_console(
    input_encoding: Optional[str] = None, output_encoding: Optional[str] = None
) -> List[str]:
    """
    Set console stream encodings.

    Effects:
    - "input": sys.stdin encoding set to input_encoding
    - "output": sys.stdout and sys.stderr encoding set to output_encoding

    Failures are logged and never fatal. Returns the effects applied.
    """
    applied: List[str] = []

    if input_encoding and _reconfigure(sys.stdin, input_encoding):
        applied.append("input")

    if output_encoding:
        ok = _reconfigure(sys.stdout, output_encoding)
        ok = _reconfigure(sys.stderr, output_encoding) and ok
        if ok:
            applied.append("output")

    return applied
