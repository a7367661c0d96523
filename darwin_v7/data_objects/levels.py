"""
Tiling metadata of an image slot.

The platform sends the pyramid levels and the base storage key of a tiled
image in a single flat JSON object, e.g.

    {
        "0": {
            "format": "png",
            "pixel_ratio": 1,
            "tile_height": 2048,
            "tile_width": 2048,
            "x_tiles": 82,
            "y_tiles": 22
        },
        "base_key": "some-base-key.jpg"
    }

so `Levels` reads and writes that object itself rather than relying on
field-by-field validation.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Optional, Union

from pydantic import Field, ValidationError, field_validator, model_serializer, model_validator

from darwin_v7.data_objects.typing import UnknownType
from darwin_v7.exceptions import StructuralDecodeError
from darwin_v7.json import dumps, loads
from darwin_v7.pydantic_base import DefaultDarwin

BASE_KEY = "base_key"
MAX_LEVEL_INDEX = 2**32 - 1


def _same_float(a: float, b: float) -> bool:
    return (math.isnan(a) and math.isnan(b)) or a == b


class ImageLevel(DefaultDarwin):
    """
    One zoom level of a tiled image.

    `x_tiles` and `y_tiles` may be NaN when the platform does not know the
    grid size; it writes those as null. NaN compares equal to NaN.
    """

    format: str
    pixel_ratio: int = Field(ge=0, le=2**16 - 1)
    tile_height: int = Field(ge=0, le=MAX_LEVEL_INDEX)
    tile_width: int = Field(ge=0, le=MAX_LEVEL_INDEX)
    x_tiles: float
    y_tiles: float

    @field_validator("x_tiles", "y_tiles", mode="before")
    @classmethod
    def null_to_nan(cls, v: UnknownType) -> UnknownType:
        return math.nan if v is None else v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageLevel):
            return NotImplemented
        return (
            self.format == other.format
            and self.pixel_ratio == other.pixel_ratio
            and self.tile_height == other.tile_height
            and self.tile_width == other.tile_width
            and _same_float(self.x_tiles, other.x_tiles)
            and _same_float(self.y_tiles, other.y_tiles)
        )


def parse_level_index(key: Any) -> int:
    """
    Parses the key of a pyramid level, a base-10 non-negative integer.

    Raises
    ------
    ValueError
        If the key is not a level index.
    """
    if not (isinstance(key, str) and key.isascii() and key.isdigit()):
        raise ValueError(f"Invalid key: {key}")
    index = int(key)
    if index > MAX_LEVEL_INDEX:
        raise ValueError(f"Invalid key: {key}")
    return index


class Levels(DefaultDarwin):
    """
    Pyramid levels of a tiled image keyed by level index, plus the storage key
    the tiles live under.

    Attributes
    ----------
    image_levels: Dict[int, ImageLevel]
    base_key: Optional[str]
        None when the platform did not send one, in which case it is left out
        of the encoded object as well.

    Any dict given to the model is read as the flat platform object, so levels
    built in Python go through `Levels.of`.
    """

    image_levels: Dict[int, ImageLevel] = {}
    base_key: Optional[str] = None

    @classmethod
    def of(
        cls, image_levels: Dict[int, ImageLevel], base_key: Optional[str] = None
    ) -> Levels:
        flat: Dict[str, Any] = {str(index): level for index, level in image_levels.items()}
        flat[BASE_KEY] = base_key
        return cls.model_validate(flat)

    @model_validator(mode="before")
    @classmethod
    def from_flat_mapping(cls, values: Any) -> Any:
        # every dict is the wire form, build from python with `Levels.of`
        if not isinstance(values, dict):
            return values

        image_levels: Dict[int, ImageLevel] = {}
        base_key: Optional[str] = None
        for key, value in values.items():
            if key == BASE_KEY:
                if value is not None and not isinstance(value, str):
                    raise ValueError(f"{BASE_KEY} must be a string")
                base_key = value
                continue
            index = parse_level_index(key)
            try:
                image_levels[index] = ImageLevel.model_validate(value)
            except ValidationError as exc:
                raise ValueError(f"Invalid image level for key {key}: {exc}") from exc

        return {"image_levels": image_levels, BASE_KEY: base_key}

    @model_serializer(mode="plain")
    def to_flat_mapping(self) -> Dict[str, Any]:
        flat: Dict[str, Any] = {
            str(index): self.image_levels[index].model_dump()
            for index in sorted(self.image_levels)
        }
        if self.base_key is not None:
            flat[BASE_KEY] = self.base_key
        return flat

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Levels):
            return NotImplemented
        return (
            self.image_levels == other.image_levels and self.base_key == other.base_key
        )


def levels_from_json(raw: Union[str, bytes, Dict[str, Any]]) -> Levels:
    """
    Decodes the flat levels object, given as JSON text or an already parsed dict.

    Raises
    ------
    StructuralDecodeError
        If the JSON is malformed, a key is neither a level index nor
        `base_key`, or a level is not shaped like an `ImageLevel`.
    """
    try:
        data = loads(raw) if isinstance(raw, (str, bytes)) else raw
        if not isinstance(data, dict):
            raise ValueError("a map with keys '0'..'N' and 'base_key' is required")
        return Levels.model_validate(data)
    except ValueError as exc:
        raise StructuralDecodeError.from_exception(exc) from exc


def levels_to_json(levels: Levels) -> str:
    """Encodes levels as compact JSON, levels in index order then `base_key`."""
    return dumps(levels.model_dump())
