from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from .errors import InvalidDimensionError

ResizeOptions = Dict[str, Any]

_NAMED_ATTRS = ("src", "width", "height", "srcset")


class ImageAttributes(BaseModel):
    """Attributes of a single ``<img>`` element.

    ``src``, ``width``, ``height`` and ``srcset`` are named fields; anything
    else (``alt``, ``class``, ``data-*`` ...) is kept as an extra attribute.
    ``cf`` carries a per-tag resize option override and is never rendered.
    """

    src: str | None = None
    # Strict so values are kept exactly as supplied (no 4.0 -> 4, True -> 1).
    width: Union[StrictInt, StrictStr, None] = None
    height: Union[StrictInt, StrictStr, None] = None
    srcset: str | None = None
    cf: ResizeOptions | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, Any]) -> "ImageAttributes":
        """Build from template attributes, rejecting non int/str dimensions."""

        for key in ("width", "height"):
            value = attrs.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, str)):
                raise InvalidDimensionError(key, value)
        return cls.model_validate(dict(attrs))

    def passthrough(self) -> Dict[str, Any]:
        """Return the extra attributes in insertion order."""

        return dict(self.model_extra or {})

    def to_attrs(self) -> Dict[str, Any]:
        """Return every set attribute as an ordered mapping, without ``cf``."""

        attrs: Dict[str, Any] = {}
        for name in _NAMED_ATTRS:
            value = getattr(self, name)
            if value is not None:
                attrs[name] = value
        attrs.update(self.passthrough())
        return attrs


__all__ = ["ImageAttributes", "ResizeOptions"]
