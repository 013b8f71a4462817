"""Output location helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

IMAGES_SUBDIR: Final[Path] = Path("static") / "images"
CONTENT_SUBDIR: Final[Path] = Path("content")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    root: Path = field(default_factory=Path)

    @property
    def images_dir(self) -> Path:
        return self.root / IMAGES_SUBDIR

    @property
    def content_dir(self) -> Path:
        return self.root / CONTENT_SUBDIR

    def ensure_images_dir(self) -> Path:
        self.images_dir.mkdir(parents=True, exist_ok=True)
        return self.images_dir

    def ensure_content_dir(self) -> Path:
        self.content_dir.mkdir(parents=True, exist_ok=True)
        return self.content_dir
