"""
Domain logic: social platform classification by URL host.
Zero external dependencies.

A URL is supported when its lowercased host equals one of the platform
domains or is a subdomain of it. Malformed URLs are unsupported; nothing in
this module raises on bad input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlsplit


class Platform(str, Enum):
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    TWITTER = "twitter"


PLATFORM_DOMAINS: dict[Platform, tuple[str, ...]] = {
    Platform.YOUTUBE: ("youtube.com", "youtu.be"),
    Platform.TIKTOK: ("tiktok.com",),
    Platform.INSTAGRAM: ("instagram.com",),
    Platform.FACEBOOK: ("facebook.com", "fb.watch"),
    Platform.TWITTER: ("twitter.com", "x.com"),
}

SUPPORTED_PLATFORMS_LABEL = "YouTube, TikTok, Instagram, Facebook, Twitter/X"


@dataclass(frozen=True)
class PlatformClassification:
    supported: bool
    platform: Optional[Platform] = None


_UNSUPPORTED = PlatformClassification(supported=False)


def is_host(host: str, domain: str) -> bool:
    return host == domain or host.endswith(f".{domain}")


def _extract_host(url: str) -> Optional[str]:
    try:
        host = urlsplit(url).hostname
    except (ValueError, TypeError, AttributeError):
        return None
    return host.lower() if host else None


def classify_url(url: str) -> PlatformClassification:
    """Classify *url* by host against the platform allow-list."""
    if not url:
        return _UNSUPPORTED
    host = _extract_host(url)
    if host is None:
        return _UNSUPPORTED
    for platform, domains in PLATFORM_DOMAINS.items():
        if any(is_host(host, domain) for domain in domains):
            return PlatformClassification(supported=True, platform=platform)
    return _UNSUPPORTED
