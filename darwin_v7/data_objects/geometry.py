from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, model_validator


class Keypoint(BaseModel):
    x: float
    y: float

    def __add__(self, other: Keypoint) -> Keypoint:
        return Keypoint(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Keypoint) -> Keypoint:
        return Keypoint(x=self.x - other.x, y=self.y - other.y)


PolygonPath = List[Keypoint]


class BoundingBox(BaseModel):
    """Axis aligned box, `x`/`y` is the top-left corner."""

    h: float
    w: float
    x: float
    y: float

    @property
    def center(self) -> Keypoint:
        return Keypoint(x=self.x + self.w / 2, y=self.y + self.h / 2)


class Polygon(BaseModel):
    """
    One or more paths of keypoints.

    Darwin JSON 2.0 writes `paths`, a list of paths. Darwin JSON 1.0 writes
    `path`, which is a single path for `polygon` and a list of paths for
    `complex_polygon`. Both are read into `paths`.
    """

    paths: List[PolygonPath]

    @model_validator(mode="before")
    @classmethod
    def normalise_path(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "paths" in values or "path" not in values:
            return values
        values = dict(values)
        path = values.pop("path")
        is_multi_path = isinstance(path, list) and bool(path) and isinstance(path[0], list)
        values["paths"] = path if is_multi_path else [path]
        return values

    def bounding_box(self) -> BoundingBox:
        points = [point for path in self.paths for point in path]
        if not points:
            return BoundingBox(h=0.0, w=0.0, x=0.0, y=0.0)
        min_x = min(point.x for point in points)
        min_y = min(point.y for point in points)
        max_x = max(point.x for point in points)
        max_y = max(point.y for point in points)
        return BoundingBox(h=max_y - min_y, w=max_x - min_x, x=min_x, y=min_y)

    @property
    def is_complex(self) -> bool:
        return len(self.paths) > 1

    @property
    def center(self) -> Keypoint:
        return self.bounding_box().center


class Tag(BaseModel):
    # presence alone marks the annotation as a tag
    model_config = ConfigDict(extra="ignore")


class Text(BaseModel):
    text: str
