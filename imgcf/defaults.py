from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

CDN_PREFIX = "/cdn-cgi/image/"
RETINA_SUFFIX = " 2x"

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "format": "auto",
        "fit": "crop",
        "sharpen": "1",
        "retina": True,
        "use_img_dims": True,
    }
)

# Steer local behaviour only; never serialised into the CDN path.
CONTROL_ONLY_KEYS = frozenset({"retina", "use_img_dims"})

DIMENSION_KEYS = ("width", "height")


__all__ = [
    "CDN_PREFIX",
    "CONTROL_ONLY_KEYS",
    "DEFAULT_OPTIONS",
    "DIMENSION_KEYS",
    "RETINA_SUFFIX",
]
