"""
Adaptateurs vers le presse-papiers du système.

- `CommandClipboard`: pipe le texte vers une commande de la plateforme (pbcopy, wl-copy, xclip,
  xsel, clip).
- `OSC52Clipboard`: séquence d'échappement OSC 52 écrite sur le terminal, pour les sessions sans
  commande de presse-papiers (SSH, conteneurs).
"""

from __future__ import annotations

import asyncio
import base64
import shlex
import shutil
import sys
from collections.abc import Sequence
from typing import TextIO

from marriedmore.core.constants import CLIPBOARD_TIMEOUT_S
from marriedmore.infra.clipboard.base import ClipboardError, ClipboardUnavailableError

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def find_clipboard_command() -> tuple[str, ...] | None:
    """Retourne la première commande de presse-papiers installée, ou None."""
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


class CommandClipboard:
    """Presse-papiers via une commande externe lisant le texte sur stdin."""

    def __init__(
        self, command: Sequence[str] | str | None = None, timeout_s: float = CLIPBOARD_TIMEOUT_S
    ) -> None:
        """
        Args:
            command: commande imposée (liste d'arguments ou chaîne à découper); détectée
                automatiquement si absente.
            timeout_s: délai maximal d'exécution de la commande, en secondes.
        """
        if isinstance(command, str):
            command = shlex.split(command)
        self.command = tuple(command) if command else None
        self.timeout_s = timeout_s

    async def write_text(self, text: str) -> None:
        command = self.command or find_clipboard_command()
        if not command:
            raise ClipboardUnavailableError("no clipboard command found")
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as ex:
            raise ClipboardError(f"{command[0]} could not be started") from ex
        try:
            _, stderr = await asyncio.wait_for(
                proc.communicate(text.encode("utf-8")), timeout=self.timeout_s
            )
        except asyncio.TimeoutError as ex:
            await _kill(proc)
            raise ClipboardError(f"{command[0]} timed out after {self.timeout_s}s") from ex
        except asyncio.CancelledError:
            await _kill(proc)
            raise
        except OSError as ex:
            await _kill(proc)
            raise ClipboardError(f"{command[0]} failed") from ex
        if proc.returncode != 0:
            detail = stderr.decode("utf-8", "replace").strip()
            raise ClipboardError(f"{command[0]} exited with {proc.returncode}: {detail}")


async def _kill(proc: asyncio.subprocess.Process) -> None:
    """Termine et récolte un processus encore en cours."""
    if proc.returncode is None:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    await proc.wait()


class OSC52Clipboard:
    """Presse-papiers du terminal via la séquence OSC 52."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    async def write_text(self, text: str) -> None:
        stream = self.stream or sys.stderr
        if not stream.isatty():
            raise ClipboardUnavailableError("OSC 52 needs a terminal")
        payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
        try:
            stream.write(f"\033]52;c;{payload}\a")
            stream.flush()
        except (OSError, ValueError) as ex:
            raise ClipboardError("terminal write failed") from ex
