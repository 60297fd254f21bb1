from __future__ import annotations

import re
from html import escape
from typing import Any, Mapping, Union

from .models import ImageAttributes

_INVALID_NAME_RE = re.compile(r"[\s\"'>/=]")


def _attr_name(name: str) -> str:
    if not name or _INVALID_NAME_RE.search(name):
        raise ValueError(f"invalid html attribute name: {name!r}")
    return escape(name, quote=True)


def render_img(attributes: Union[ImageAttributes, Mapping[str, Any]]) -> str:
    """Render *attributes* as a native ``<img>`` element.

    ``True`` values render as bare boolean attributes; ``False`` and ``None``
    are dropped.
    """

    if isinstance(attributes, ImageAttributes):
        attrs = attributes.to_attrs()
    else:
        attrs = {key: value for key, value in attributes.items() if key != "cf"}

    parts = ["<img"]
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        safe_name = _attr_name(str(name))
        if value is True:
            parts.append(safe_name)
        else:
            parts.append(f'{safe_name}="{escape(str(value), quote=True)}"')
    return " ".join(parts) + " />"


__all__ = ["render_img"]
