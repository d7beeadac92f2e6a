"""Discovery of episode source files on the local file system."""

import logging
from pathlib import Path

from castfeed.utils.errors import SourceNotFoundError
from castfeed.utils.paths import Sources, normalize_sources

logger = logging.getLogger(__name__)

# Pattern for audio files picked up from source directories
AUDIO_FILE_PATTERN = "*.mp3"


def discover_source_files(
    sources: Sources,
    pattern: str = AUDIO_FILE_PATTERN,
    log: logging.Logger | None = None,
) -> list[Path]:
    """Collect episode files from files and directories.

    Directories contribute their direct children matching ``pattern``.
    Explicitly named files are always included, whatever their extension.

    Args:
        sources: One path or an ordered collection of paths
        pattern: Glob pattern for files inside directories
        log: Logger for discovery details (module logger if None)

    Returns:
        Flat list of source file paths

    Raises:
        SourceNotFoundError: If a source path does not exist
    """
    log = log or logger
    source_files: list[Path] = []

    for source in normalize_sources(sources):
        if source.is_dir():
            # Hidden files such as macOS "._" resource forks are not episodes
            found = sorted(
                path
                for path in source.glob(pattern)
                if path.is_file() and not path.name.startswith(".")
            )
            log.debug("Found %d file(s) matching %s in %s", len(found), pattern, source)
            source_files.extend(found)
        elif source.exists():
            source_files.append(source)
        else:
            raise SourceNotFoundError(str(source))

    return source_files
