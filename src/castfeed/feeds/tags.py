"""Episode metadata extraction from audio file tags using mutagen.

Reads ID3 frames written by common podcast tooling:
- TIT2 / TPE1 / TALB / TIT3: title, artist, album, subtitle
- USLT, TDES or COMM: episode summary (first one present)
- TKWD: comma-separated keywords
- WXXX:image: episode artwork URL
- TDRL or TDRC: release date (file modification time otherwise)
"""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from mutagen import File as MutagenFile
from mutagen import MutagenError

from castfeed.feeds.models import EpisodeTags
from castfeed.utils.errors import EpisodeParseError

logger = logging.getLogger(__name__)

# ID3 timestamps may be truncated to any precision
_TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H",
    "%Y-%m-%d",
    "%Y-%m",
    "%Y",
)

IMAGE_URL_FRAME = "WXXX:image"


class EpisodeReader(Protocol):
    """Anything that turns an episode file into EpisodeTags."""

    def read(self, path: Path) -> EpisodeTags:
        """Read metadata for one file."""
        ...


def parse_timestamp(text: str) -> datetime | None:
    """Parse an ID3 timestamp into an aware UTC datetime.

    mutagen renders timestamps with a space between date and time, ID3 itself
    uses "T"; both are accepted.

    Args:
        text: Timestamp such as "2023", "2023-06-01" or "2023-06-01 10:30:00"

    Returns:
        Parsed datetime, or None if the text is not a timestamp
    """
    normalized = text.strip().replace(" ", "T")
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(normalized, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


def _first_text(tags: Any, frame_id: str) -> str | None:
    """Return the first non-empty text of the given ID3 frame type."""
    if tags is None or not hasattr(tags, "getall"):
        return None

    for frame in tags.getall(frame_id):
        text = getattr(frame, "text", None)
        if isinstance(text, list):
            text = text[0] if text else None
        if text is not None and str(text).strip():
            return str(text).strip()
    return None


def _first_url(tags: Any, frame_id: str) -> str | None:
    if tags is None or not hasattr(tags, "getall"):
        return None

    for frame in tags.getall(frame_id):
        url = getattr(frame, "url", None)
        if url and url.strip():
            return url.strip()
    return None


class TagReader:
    """Reads episode metadata from audio files.

    Example:
        >>> reader = TagReader()
        >>> tags = reader.read(Path("episodes/001-intro.mp3"))
        >>> tags.title
        'Introduction'
    """

    def __init__(self, chunk_size: int = 64 * 1024) -> None:
        """Initialize the tag reader.

        Args:
            chunk_size: Block size used when hashing file contents
        """
        self.chunk_size = chunk_size

    def read(self, path: Path) -> EpisodeTags:
        """Read metadata for a single episode file.

        Args:
            path: Audio file to read

        Returns:
            EpisodeTags for the file

        Raises:
            EpisodeParseError: If the file cannot be read or parsed
        """
        path = Path(path)

        try:
            audio = MutagenFile(path)
            stat = path.stat()
            digest = self._hash_file(path)
        except (MutagenError, OSError) as e:
            raise EpisodeParseError(f"Could not read metadata from {path}: {e}") from e

        if audio is None:
            logger.debug("%s is not a recognised audio file, using file name only", path)
            tags = None
        else:
            tags = audio.tags

        keywords_text = _first_text(tags, "TKWD")
        keywords = (
            [keyword.strip() for keyword in keywords_text.split(",") if keyword.strip()]
            if keywords_text
            else []
        )

        duration = None
        info = getattr(audio, "info", None)
        if info is not None and getattr(info, "length", None):
            duration = float(info.length)

        return EpisodeTags(
            file_path=path,
            file_name=path.name,
            title=_first_text(tags, "TIT2") or path.stem,
            artist=_first_text(tags, "TPE1"),
            album=_first_text(tags, "TALB"),
            subtitle=_first_text(tags, "TIT3"),
            summary=(
                _first_text(tags, "USLT")
                or _first_text(tags, "TDES")
                or _first_text(tags, "COMM")
            ),
            duration_seconds=duration,
            file_size=stat.st_size,
            pub_date=self._publish_date(path, tags, stat.st_mtime),
            image_url=_first_url(tags, IMAGE_URL_FRAME),
            keywords=keywords,
            uuid=digest,
        )

    def _publish_date(self, path: Path, tags: Any, mtime: float) -> datetime:
        for frame_id in ("TDRL", "TDRC"):
            text = _first_text(tags, frame_id)
            if not text:
                continue
            parsed = parse_timestamp(text)
            if parsed is not None:
                return parsed
            logger.debug("Ignoring unparseable %s '%s' in %s", frame_id, text, path)

        return datetime.fromtimestamp(mtime, tz=timezone.utc)

    def _hash_file(self, path: Path) -> str:
        sha1 = hashlib.sha1()
        with open(path, "rb") as f:
            while chunk := f.read(self.chunk_size):
                sha1.update(chunk)
        return sha1.hexdigest()
