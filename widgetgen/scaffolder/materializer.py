"""Filesystem effects for a resolved manifest.

The Materializer is the only part of the scaffolder that touches the disk.
Entries are applied one at a time, in manifest order.  Every operation is
safe to repeat against an existing destination: copies overwrite, renders
rewrite, directories are created only if missing.  Nothing is ever deleted,
so files left over from an earlier run with a different selection stay put.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from widgetgen.utils import print_created

from .manifest import EntryKind, ManifestEntry
from .templates import TemplateRenderer


class MaterializeError(OSError):
    """Raised when a manifest entry cannot be applied.

    Keeps the underlying ``errno`` and ``filename`` and names the failing
    entry so partial output can be traced back to it.  Template errors have
    no ``errno``; their ``filename`` is the template source.
    """

    def __init__(self, entry: ManifestEntry, cause: OSError | TemplateError) -> None:
        self.entry = entry
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(
            getattr(cause, "errno", None),
            f"{entry.kind.value} {entry.dest}: {reason}",
            getattr(cause, "filename", None),
        )


class Materializer:
    """Applies manifest entries under a destination root."""

    def __init__(self, renderer: TemplateRenderer, quiet: bool = False) -> None:
        self.renderer = renderer
        self.quiet = quiet

    async def materialize(
        self,
        manifest: list[ManifestEntry],
        contexts: dict[str, dict[str, Any]],
        destination_root: str | Path,
    ) -> list[Path]:
        """Apply every entry of *manifest* under *destination_root*.

        Args:
            manifest: Entries from ``resolve_manifest``.
            contexts: Bound template contexts, keyed by context name.
            destination_root: Root directory of the generated project.

        Returns:
            The destination path of each entry, in manifest order.

        Raises:
            MaterializeError: On the first entry whose file operation or
                template rendering fails.
                Entries applied before it remain on disk.
            KeyError: If a render entry names a context that was not bound.
        """
        root = Path(destination_root)
        written: list[Path] = []
        for entry in manifest:
            written.append(await self.apply(entry, contexts, root))
        return written

    async def apply(
        self,
        entry: ManifestEntry,
        contexts: dict[str, dict[str, Any]],
        root: Path,
    ) -> Path:
        """Apply a single entry and return its destination path."""
        target = root / entry.dest
        context = contexts[entry.context] if entry.kind is EntryKind.RENDER else None
        try:
            if entry.kind is EntryKind.ENSURE_DIR:
                await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
            elif entry.kind is EntryKind.RENDER:
                await self.renderer.render_to_file(entry.source, target, context)
            else:
                source = self.renderer.source_path(entry.source)
                await asyncio.to_thread(_copy, source, target)
        except (OSError, TemplateError) as exc:
            raise MaterializeError(entry, exc) from exc

        if not self.quiet:
            print_created(entry.dest, is_dir=target.is_dir())
        return target


def _copy(source: Path, target: Path) -> None:
    """Copy a file or a whole directory tree, overwriting what is there."""
    if source.is_dir():
        shutil.copytree(source, target, dirs_exist_ok=True)
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)
