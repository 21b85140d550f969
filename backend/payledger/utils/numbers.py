import logging
import math

logger = logging.getLogger(__name__)


def parse_number(v, field: str) -> float:
    """
    Best-effort number from form input.

    Anything that is not a finite number becomes 0 and is logged, so one bad
    cell never rejects a whole edit batch.
    """
    if v is None or isinstance(v, bool):
        return 0.0
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return 0.0
    try:
        out = float(v)
    except (TypeError, ValueError):
        logger.warning("invalid %s %r, using 0", field, v)
        return 0.0
    if not math.isfinite(out):
        logger.warning("invalid %s %r, using 0", field, v)
        return 0.0
    return out
