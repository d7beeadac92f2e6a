"""Path helpers shared by source discovery and configuration loading."""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Union

SourcePath = Union[str, os.PathLike]
Sources = Union[SourcePath, Iterable[SourcePath]]


def normalize_sources(sources: Sources) -> list[Path]:
    """Turn a single path or a collection of paths into a list of Paths."""
    if isinstance(sources, (str, os.PathLike)):
        return [Path(sources)]
    return [Path(source) for source in sources]


def source_directory(source: Path) -> Path:
    """Directory a source lives in (the source itself for directories)."""
    return source if source.is_dir() else source.parent
