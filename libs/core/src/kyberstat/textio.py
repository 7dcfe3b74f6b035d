"""Line-oriented access to benchmark artifacts (objdump listings, slurm logs)."""

from __future__ import annotations

import logging
import pathlib
from contextlib import contextmanager
from typing import IO, Iterator

log = logging.getLogger(__name__)


class ArtifactError(RuntimeError):
    """The input artifact could not be opened or read to the end."""


def _iter_lines(fh: IO[str], path: pathlib.Path) -> Iterator[str]:
    try:
        for raw in fh:
            yield raw.rstrip("\r\n")
    except OSError as exc:
        raise ArtifactError(f"read error in {path}: {exc}") from exc


@contextmanager
def open_artifact(path: str | pathlib.Path) -> Iterator[Iterator[str]]:
    """Open ``path`` for a single forward scan.

    Yields an iterator over the file's lines without their line terminators.
    Undecodable bytes are replaced rather than rejected; both scanners only
    match ASCII. The handle is closed on every exit path.
    """
    p = pathlib.Path(path)
    if p.is_dir():
        raise ArtifactError(f"{p} is a directory")
    try:
        fh = p.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ArtifactError(f"cannot open {p}: {exc.strerror or exc}") from exc
    log.debug("opened %s", p)
    try:
        yield _iter_lines(fh, p)
    finally:
        fh.close()
