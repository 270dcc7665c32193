"""Loading the queue's track list from YAML."""

from pathlib import Path

import yaml

from .i18n import t
from .track import Track

# Track list used when no file is configured (in the fauxplayer package directory)
DEFAULT_TRACKS_PATH = Path(__file__).parent / "default_tracks.yaml"


def load_tracks(path: str | Path | None = None) -> list[Track]:
    """Load tracks from a YAML file.

    The document is either a list of track mappings or a mapping with a
    ``tracks`` key holding that list.

    Args:
        path: The YAML file to read, or None for the bundled track list.

    Returns:
        The tracks in file order.

    Raises:
        ValueError: If the document is not a non-empty list of valid tracks.
    """
    yaml_path = Path(path) if path is not None else DEFAULT_TRACKS_PATH

    with open(yaml_path, encoding="utf-8") as f:
        try:
            document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(t("error.tracks_invalid_yaml", path=yaml_path, error=e)) from e

    if isinstance(document, dict):
        document = document.get("tracks")

    if not isinstance(document, list) or not document:
        raise ValueError(t("error.tracks_empty", path=yaml_path))

    return [Track.from_dict(entry) for entry in document]
