"""Track dataclass representing a playable item."""

from collections.abc import Mapping
from dataclasses import dataclass

from .i18n import t

# Accepted aliases for fields, keyed by attribute name
_FIELD_ALIASES = {
    "track_id": ("track_id", "trackid"),
    "length": ("length",),
    "art_url": ("art_url", "artUrl"),
    "album": ("album",),
    "album_artist": ("album_artist", "albumArtist"),
    "artist": ("artist",),
    "auto_rating": ("auto_rating", "autoRating"),
    "disc_number": ("disc_number", "discNumber"),
    "title": ("title",),
    "track_number": ("track_number", "trackNumber"),
    "url": ("url",),
}


@dataclass(frozen=True)
class Track:
    """Represents a track in the player queue."""

    track_id: str
    length: int  # Duration in milliseconds
    art_url: str = ""
    album: str = ""
    album_artist: tuple[str, ...] = ()
    artist: tuple[str, ...] = ()
    auto_rating: float = 0.0
    disc_number: int = 1
    title: str = ""
    track_number: int = 1
    url: str = ""

    def format_duration(self) -> str:
        """Format length as MM:SS or HH:MM:SS."""
        hours, remainder = divmod(self.length // 1000, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    def to_metadata(self) -> dict[str, object]:
        """Map the track onto the media player metadata vocabulary."""
        return {
            "mpris:trackid": self.track_id,
            "mpris:length": self.length,
            "mpris:artUrl": self.art_url,
            "xesam:album": self.album,
            "xesam:albumArtist": list(self.album_artist),
            "xesam:artist": list(self.artist),
            "xesam:autoRating": self.auto_rating,
            "xesam:discNumber": self.disc_number,
            "xesam:title": self.title,
            "xesam:trackNumber": self.track_number,
            "xesam:url": self.url,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "Track":
        """Build a track from a plain mapping.

        Keys may use either the attribute names or the camelCase metadata
        names (``trackid``, ``artUrl``, ``albumArtist``...).

        Args:
            data: The mapping to read fields from.

        Returns:
            A new Track.

        Raises:
            ValueError: If a required field is missing or the length is invalid.
        """
        if not isinstance(data, Mapping):
            raise ValueError(t("error.track_not_mapping", value=data))

        fields: dict[str, object] = {}
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    fields[name] = data[alias]
                    break

        for required in ("track_id", "length"):
            if required not in fields:
                raise ValueError(t("error.track_missing_field", field=required))

        try:
            length = int(fields["length"])  # type: ignore[call-overload]
        except (TypeError, ValueError) as e:
            raise ValueError(t("error.track_invalid_length", value=fields["length"])) from e
        if length < 0:
            raise ValueError(t("error.track_invalid_length", value=length))
        fields["length"] = length

        for name in ("album_artist", "artist"):
            value = fields.get(name)
            if isinstance(value, str):
                fields[name] = (value,)
            elif value is not None:
                try:
                    fields[name] = tuple(str(v) for v in value)  # type: ignore[attr-defined]
                except TypeError as e:
                    raise ValueError(t("error.track_invalid_names", field=name, value=value)) from e

        fields["track_id"] = str(fields["track_id"])
        return cls(**fields)  # type: ignore[arg-type]
