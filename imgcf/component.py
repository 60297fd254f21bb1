"""Template-facing ``img_cf`` helper.

Usage in a server-rendered template::

    {{ img_cf(src="/images/foobar.png", width="400", alt="Foo") }}
    {{ img_cf(src=url, width="400", cf={"retina": False, "sharpen": "3"}) }}

Rewriting is switched on per process with ``IMG_CF_REWRITE_URLS=1``.
"""

from __future__ import annotations

from typing import Any, Mapping

from .config import Settings, get_settings
from .models import ImageAttributes
from .render import render_img
from .rewriter import rewrite


def img_cf(
    attributes: Mapping[str, Any] | ImageAttributes | None = None,
    /,
    *,
    settings: Settings | None = None,
    **attrs: Any,
) -> str:
    if isinstance(attributes, ImageAttributes):
        merged = {**attributes.to_attrs(), "cf": attributes.cf}
    else:
        merged = dict(attributes or {})
    merged.update(attrs)

    tag = ImageAttributes.from_attrs(merged)
    settings = settings or get_settings()
    return render_img(rewrite(tag, enabled=settings.rewrite_urls))


__all__ = ["img_cf"]
