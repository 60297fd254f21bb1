"""Serve img tags through Cloudflare on-the-fly image resizing."""

from .component import img_cf
from .config import Settings, get_settings, reset_settings_cache
from .defaults import CDN_PREFIX, CONTROL_ONLY_KEYS, DEFAULT_OPTIONS
from .errors import ImgCfError, InvalidDimensionError, MissingFieldError
from .models import ImageAttributes, ResizeOptions
from .render import render_img
from .rewriter import (
    build_path,
    double_dimensions,
    merge_image_dims,
    merge_options,
    parse_dimension,
    rewrite,
    serialize_options,
)

__all__ = [
    "CDN_PREFIX",
    "CONTROL_ONLY_KEYS",
    "DEFAULT_OPTIONS",
    "ImageAttributes",
    "ImgCfError",
    "InvalidDimensionError",
    "MissingFieldError",
    "ResizeOptions",
    "Settings",
    "build_path",
    "double_dimensions",
    "get_settings",
    "img_cf",
    "merge_image_dims",
    "merge_options",
    "parse_dimension",
    "render_img",
    "reset_settings_cache",
    "rewrite",
    "serialize_options",
]
