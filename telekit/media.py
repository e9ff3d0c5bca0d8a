"""Media objects: photos, audio, documents, videos, stickers and the like."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

_CAPTIONED = frozenset({"audio", "video", "document", "photo", "animation"})


@dataclass
class InputMedia:
    """A media item in the form used by the album sending and editing methods."""

    type: str = ""
    media: str = ""
    caption: str = ""
    thumbnail: str = ""
    parse_mode: str = ""
    entities: list[dict[str, Any]] = field(default_factory=list)
    width: int = 0
    height: int = 0
    duration: int = 0
    title: str = ""
    performer: str = ""
    streaming: bool = False
    disable_type_detection: bool = False
    has_spoiler: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "media": self.media,
            "caption": self.caption,
        }
        optional = {
            "thumbnail": self.thumbnail,
            "parse_mode": self.parse_mode,
            "caption_entities": self.entities,
            "width": self.width,
            "height": self.height,
            "duration": self.duration,
            "title": self.title,
            "performer": self.performer,
            "supports_streaming": self.streaming,
            "disable_content_type_detection": self.disable_type_detection,
            "is_spoiler": self.has_spoiler,
        }
        data.update({k: v for k, v in optional.items() if v})
        return data


@dataclass
class _FileFields:
    """Identification of the file behind a media object."""

    file_id: str = ""
    unique_id: str = ""
    file_size: int = 0
    file_url: str = ""


def _file_kwargs(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "file_id": data.get("file_id", ""),
        "unique_id": data.get("file_unique_id", ""),
        "file_size": data.get("file_size", 0),
    }


class Media(Protocol):
    def media_type(self) -> str: ...


@dataclass
class Photo(_FileFields):
    """A single photo file."""

    width: int = 0
    height: int = 0
    caption: str = ""

    def media_type(self) -> str:
        return "photo"

    def input_media(self) -> InputMedia:
        return InputMedia(type=self.media_type(), caption=self.caption)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | list[dict[str, Any]]) -> Photo:
        """Build a photo from one size or, given a list of sizes, the largest one."""
        if isinstance(data, list):
            if not data:
                raise ValueError("telekit: photo has no sizes")
            data = data[-1]
        return cls(
            **_file_kwargs(data),
            width=data.get("width", 0),
            height=data.get("height", 0),
        )


@dataclass
class Audio(_FileFields):
    """An audio file."""

    duration: int = 0
    caption: str = ""
    thumbnail: Photo | None = None
    title: str = ""
    performer: str = ""
    mime: str = ""
    file_name: str = ""

    def media_type(self) -> str:
        return "audio"

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            duration=self.duration,
            title=self.title,
            performer=self.performer,
        )


@dataclass
class Document(_FileFields):
    """A general file, as opposed to a photo or an audio file."""

    thumbnail: Photo | None = None
    caption: str = ""
    mime: str = ""
    file_name: str = ""
    disable_type_detection: bool = False

    def media_type(self) -> str:
        return "document"

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            disable_type_detection=self.disable_type_detection,
        )


@dataclass
class Video(_FileFields):
    """A video file."""

    width: int = 0
    height: int = 0
    duration: int = 0
    caption: str = ""
    thumbnail: Photo | None = None
    streaming: bool = False
    mime: str = ""
    file_name: str = ""

    def media_type(self) -> str:
        return "video"

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            width=self.width,
            height=self.height,
            duration=self.duration,
            streaming=self.streaming,
        )


@dataclass
class Animation(_FileFields):
    """An animation file."""

    width: int = 0
    height: int = 0
    duration: int = 0
    caption: str = ""
    thumbnail: Photo | None = None
    mime: str = ""
    file_name: str = ""

    def media_type(self) -> str:
        return "animation"

    def input_media(self) -> InputMedia:
        return InputMedia(
            type=self.media_type(),
            caption=self.caption,
            width=self.width,
            height=self.height,
            duration=self.duration,
        )


@dataclass
class Voice(_FileFields):
    """A voice note."""

    duration: int = 0
    caption: str = ""
    mime: str = ""

    def media_type(self) -> str:
        return "voice"


@dataclass
class VideoNote(_FileFields):
    """A video message."""

    duration: int = 0
    thumbnail: Photo | None = None
    length: int = 0

    def media_type(self) -> str:
        return "videoNote"


@dataclass
class Sticker(_FileFields):
    """A sticker."""

    type: str = ""
    width: int = 0
    height: int = 0
    animated: bool = False
    video: bool = False
    thumbnail: Photo | None = None
    emoji: str = ""
    set_name: str = ""
    premium_animation: dict[str, Any] | None = None
    mask_position: dict[str, Any] | None = None
    custom_emoji: str = ""
    repaint: bool = False

    def media_type(self) -> str:
        return "sticker"


class Album(list):
    """Several media items grouped into a single message."""

    def set_caption(self, caption: str) -> None:
        """Set the caption of the album, which lives on its first item."""
        if not self:
            return
        first = self[0]
        if first.media_type() in _CAPTIONED:
            first.caption = caption


@dataclass
class Contact:
    """A contact of a Telegram user."""

    phone_number: str = ""
    first_name: str = ""
    last_name: str = ""
    user_id: int = 0


@dataclass
class Location:
    """A geographic position; live_period is in seconds (60 to 86400)."""

    lat: float = 0.0
    lng: float = 0.0
    horizontal_accuracy: float | None = None
    heading: int = 0
    alert_radius: int = 0
    live_period: int = 0

    def params(self) -> dict[str, str]:
        """Request parameters for sending this location."""
        params = {
            "latitude": f"{self.lat:f}",
            "longitude": f"{self.lng:f}",
            "live_period": str(self.live_period),
        }
        if self.horizontal_accuracy is not None:
            params["horizontal_accuracy"] = f"{self.horizontal_accuracy:f}"
        if self.heading:
            params["heading"] = str(self.heading)
        if self.alert_radius:
            params["proximity_alert_radius"] = str(self.alert_radius)
        return params


@dataclass
class Venue:
    """A venue location with name, address and optional place identifiers."""

    location: Location = field(default_factory=Location)
    title: str = ""
    address: str = ""
    foursquare_id: str = ""
    foursquare_type: str = ""
    google_place_id: str = ""
    google_place_type: str = ""

    def params(self) -> dict[str, str]:
        """Request parameters for sending this venue."""
        return {
            "latitude": f"{self.location.lat:f}",
            "longitude": f"{self.location.lng:f}",
            "title": self.title,
            "address": self.address,
            "foursquare_id": self.foursquare_id,
            "foursquare_type": self.foursquare_type,
            "google_place_id": self.google_place_id,
            "google_place_type": self.google_place_type,
        }


@dataclass
class Dice:
    """A dice with a random value for one of the supported emoji."""

    type: str = ""
    value: int = 0

    def params(self) -> dict[str, str]:
        """Request parameters for sending this dice."""
        return {"emoji": self.type}


CUBE = Dice(type="🎲")
DART = Dice(type="🎯")
BALL = Dice(type="🏀")
GOAL = Dice(type="⚽")
SLOT = Dice(type="🎰")
BOWL = Dice(type="🎳")