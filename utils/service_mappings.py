"""
utils/service_mappings.py
-------------------------
Brand colors and logos for well-known subscription services.
Used to fill in presentation fields that a spreadsheet row leaves empty.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_COLOR = "#6B7280"


@dataclass(frozen=True)
class ServiceMapping:
    name: str
    variants: tuple[str, ...]
    color: str
    logo: str


SERVICE_MAPPINGS: tuple[ServiceMapping, ...] = (
    ServiceMapping("Netflix", ("netflix", "netflix premium", "netflix basic", "netflix standard"),
                   "#E50914", "netflix.svg"),
    ServiceMapping("Spotify", ("spotify", "spotify premium", "spotify family", "spotify duo",
                               "spotify student"), "#1DB954", "spotify.svg"),
    ServiceMapping("Amazon Prime", ("amazon prime", "prime", "amazon", "prime video"),
                   "#00A8E1", "amazon-prime.svg"),
    ServiceMapping("Disney+", ("disney+", "disney plus", "disney"), "#0063E5", "disney-plus.svg"),
    ServiceMapping("YouTube Premium", ("youtube premium", "youtube", "yt premium", "youtube music"),
                   "#FF0000", "youtube.svg"),
    ServiceMapping("Apple Music", ("apple music", "apple music family", "apple music student",
                                   "apple tv"), "#FA243C", "apple-music.svg"),
    ServiceMapping("Xbox Game Pass", ("xbox game pass", "game pass", "xbox", "xbox live"),
                   "#107C10", "xbox.svg"),
    ServiceMapping("PlayStation Plus", ("playstation plus", "ps plus", "ps+", "playstation"),
                   "#0070D1", "playstation.svg"),
    ServiceMapping("Adobe Creative Cloud", ("adobe", "adobe cc", "creative cloud",
                                            "adobe creative cloud"), "#FF0000", "adobe.svg"),
    ServiceMapping("Microsoft 365", ("microsoft 365", "office 365", "microsoft office", "office"),
                   "#D83B01", "microsoft-365.svg"),
    ServiceMapping("iCloud", ("icloud", "apple icloud", "icloud storage"), "#3395FF", "icloud.svg"),
    ServiceMapping("Google One", ("google one", "google storage", "google drive storage"),
                   "#4285F4", "google-one.svg"),
    ServiceMapping("Dropbox", ("dropbox", "dropbox plus", "dropbox professional"),
                   "#0061FF", "dropbox.svg"),
    ServiceMapping("HBO Max", ("hbo max", "hbo", "hbomax"), "#5822B4", "hbo-max.svg"),
    ServiceMapping("Hulu", ("hulu", "hulu premium", "hulu no ads"), "#1CE783", "hulu.svg"),
)


def find_mapping(service_name: str) -> Optional[ServiceMapping]:
    """Find the mapping whose name or one of its variants matches ``service_name``."""
    if not service_name:
        return None
    key = service_name.strip().lower()
    for mapping in SERVICE_MAPPINGS:
        if mapping.name.lower() == key or key in mapping.variants:
            return mapping
    return None


def default_logo(service_name: str) -> str:
    """First letter of the name, as shown when no logo is known."""
    name = (service_name or "").strip()
    return name[0].upper() if name else "?"
