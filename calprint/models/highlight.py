"""Highlight style model with Pydantic v2 validation."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from reportlab.lib import colors


class Shape(str, Enum):
    """Shape drawn behind a highlighted day."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


RGB = tuple[int, int, int]

_HEX_COLOUR = re.compile(r"#[0-9a-fA-F]{6}")


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


class HighlightStyle(BaseModel):
    """Named visual style applied to calendar days.

    Colour may be given as an ``[r, g, b]`` list of 0-255 ints, a ``#rrggbb``
    hex string, or any colour name ReportLab knows (``"red"``, ``"skyblue"``).
    It is always stored as an RGB triple.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str
    shape: Shape
    colour: RGB = Field(alias="color")

    @field_validator("shape", mode="before")
    @classmethod
    def normalise_shape(cls, v):
        """Accept shape names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("colour", mode="before")
    @classmethod
    def convert_colour(cls, v):
        """Convert colour names and hex strings to an RGB triple."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("#") and not _HEX_COLOUR.fullmatch(v):
                raise ValueError(f"Hex colour must be #rrggbb: {v}")
            try:
                colour = colors.toColor(v)
            except ValueError:
                raise ValueError(f"Unknown colour: {v}") from None
            return (_channel(colour.red), _channel(colour.green), _channel(colour.blue))
        if isinstance(v, (list, tuple)):
            if len(v) != 3:
                raise ValueError(f"Colour needs exactly 3 components, got {len(v)}")
            for component in v:
                if isinstance(component, bool) or not isinstance(component, int):
                    raise ValueError(f"Colour components must be integers: {v}")
                if not 0 <= component <= 255:
                    raise ValueError(f"Colour components must be 0-255: {v}")
            return tuple(v)
        raise ValueError(f"Invalid colour: {v!r}")

    @property
    def hex(self) -> str:
        """Colour as a #rrggbb string."""
        return "#{:02x}{:02x}{:02x}".format(*self.colour)
