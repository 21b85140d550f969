from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from payledger.schemas.ledger import Ledger

logger = logging.getLogger(__name__)


class SnapshotError(Exception):
    pass


def backup_path(path: str | os.PathLike) -> Path:
    p = Path(path)
    return p.with_name(p.name + ".bak")


def load_snapshot(path: str | os.PathLike) -> Ledger | None:
    """Read the ledger file. A missing file means an empty ledger, not an error."""
    p = Path(path)
    try:
        raw = p.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise SnapshotError(f"cannot read ledger file {p}: {e}") from e

    try:
        return Ledger.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotError(f"invalid ledger file {p}: {e}") from e


def _file_mode(p: Path) -> int:
    """Mode for a new ledger file: keep the current one, else 0666 minus umask."""
    try:
        return p.stat().st_mode & 0o777
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_snapshot(path: str | os.PathLike, ledger: Ledger) -> None:
    p = Path(path)
    data = ledger.model_dump_json(indent=2).encode("utf-8")

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=p.parent)
    except OSError as e:
        raise SnapshotError(f"cannot write ledger file {p}: {e}") from e

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600
        os.chmod(tmp, _file_mode(p))

        if p.exists():
            try:
                os.replace(p, backup_path(p))
            except OSError as e:
                logger.warning("could not back up %s: %s", p, e)

        os.replace(tmp, p)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise SnapshotError(f"cannot write ledger file {p}: {e}") from e
