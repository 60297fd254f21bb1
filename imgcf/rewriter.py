"""Rewrite img attributes to Cloudflare on-the-fly image resizing paths.

Options follow https://developers.cloudflare.com/images/image-resizing/url-format
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from .defaults import (
    CDN_PREFIX,
    CONTROL_ONLY_KEYS,
    DEFAULT_OPTIONS,
    DIMENSION_KEYS,
    RETINA_SUFFIX,
)
from .errors import InvalidDimensionError, MissingFieldError
from .models import ImageAttributes, ResizeOptions

logger = logging.getLogger(__name__)

# HTML width/height must be a bare integer, without a unit.
_DIMENSION_RE = re.compile(r"0|[1-9][0-9]*")


def parse_dimension(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidDimensionError(field, value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidDimensionError(field, value)
        return value
    if isinstance(value, str) and _DIMENSION_RE.fullmatch(value):
        return int(value)
    raise InvalidDimensionError(field, value)


def merge_options(override: Mapping[str, Any] | None = None) -> ResizeOptions:
    """Merge *override* on top of the default options; override wins per key.

    Any ``width``/``height`` key in *override* must be a valid dimension;
    ``None`` is rejected rather than read as "no dimension".
    """

    options: ResizeOptions = dict(DEFAULT_OPTIONS)
    if not override:
        return options
    for key, value in override.items():
        if key in DIMENSION_KEYS:
            value = parse_dimension(key, value)
        options[key] = value
    return options


def merge_image_dims(options: ResizeOptions, attributes: ImageAttributes) -> ResizeOptions:
    """Fill width/height from the img attributes when the options lack them."""

    merged = dict(options)
    if not merged.get("use_img_dims"):
        return merged
    for key in DIMENSION_KEYS:
        raw = getattr(attributes, key)
        if raw is None or key in merged:
            continue
        try:
            merged[key] = parse_dimension(key, raw)
        except InvalidDimensionError:
            logger.warning("rejecting img %s=%r for %s", key, raw, attributes.src)
            raise
    return merged


def double_dimensions(options: ResizeOptions) -> ResizeOptions:
    """Double width and/or height if present. Absent dimensions stay absent."""

    doubled = dict(options)
    for key in DIMENSION_KEYS:
        if key in doubled:
            doubled[key] = doubled[key] * 2
    return doubled


def format_option_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_options(options: Mapping[str, Any]) -> str:
    return ",".join(
        f"{key}={format_option_value(value)}"
        for key, value in options.items()
        if key not in CONTROL_ONLY_KEYS
    )


def build_path(options: Mapping[str, Any], src: str) -> str:
    return CDN_PREFIX + serialize_options(options) + src


def rewrite(
    attributes: ImageAttributes,
    override: Mapping[str, Any] | None = None,
    *,
    enabled: bool,
) -> ImageAttributes:
    """Point ``src`` (and a 2x ``srcset``) at the CDN resizing path.

    When *enabled* is false the attributes are returned untouched. *override*
    defaults to the ``cf`` attribute of the tag.
    """

    if not enabled:
        return attributes

    src = attributes.src
    if src is None:
        raise MissingFieldError("src")

    if override is None:
        override = attributes.cf

    options = merge_image_dims(merge_options(override), attributes)
    path = build_path(options, src)
    update: dict[str, Any] = {"src": path, "cf": None}

    if options.get("retina"):
        update["srcset"] = build_path(double_dimensions(options), src) + RETINA_SUFFIX

    logger.debug("rewrote img src %s -> %s", src, path)
    return attributes.model_copy(update=update)


__all__ = [
    "build_path",
    "double_dimensions",
    "format_option_value",
    "merge_image_dims",
    "merge_options",
    "parse_dimension",
    "rewrite",
    "serialize_options",
]
