from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from .errors import CompilationError

logger = logging.getLogger(__name__)

Compiler = Callable[[Path], int]
Mailer = Callable[[Path, str], bool]

_INTERMEDIATE_SUFFIXES = (".aux", ".log", ".out", ".tex")


def command_compiler(command: Sequence[str]) -> Compiler:
    """Wrap an external command, e.g. ``["pdflatex", "-interaction=batchmode"]``."""

    def _compile(source: Path) -> int:
        result = subprocess.run(
            [*command, source.name],
            cwd=source.parent,
            capture_output=True,
            check=False,
        )
        return result.returncode

    return _compile


def _cleanup(source: Path, output: Path) -> None:
    for suffix in _INTERMEDIATE_SUFFIXES:
        artifact = source.with_suffix(suffix)
        if artifact != output and artifact.exists():
            artifact.unlink()


def publish_invoice(
    source: Path,
    compiler: Compiler,
    mailer: Optional[Mailer] = None,
    recipient: Optional[str] = None,
) -> Path:
    """Compile ``source`` to PDF, remove intermediates and mail the result.

    A non-zero compiler exit status raises CompilationError and leaves every
    file in place; nothing is mailed in that case.
    """
    source = Path(source)
    output = source.with_suffix(".pdf")

    returncode = compiler(source)
    if returncode != 0:
        logger.warning("publish.failed source=%s returncode=%s", source, returncode)
        raise CompilationError(f"Compiling {source.name} failed with status {returncode}", returncode)

    _cleanup(source, output)
    logger.info("publish.compiled output=%s", output)

    recipient = (recipient or "").strip()
    if mailer is not None and recipient:
        sent = mailer(output, recipient)
        logger.info("publish.mail to=%s sent=%s", recipient, sent)
    return output
