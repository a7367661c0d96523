from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from darwin_v7.data_objects.geometry import BoundingBox, Keypoint, Polygon, Tag, Text
from darwin_v7.exceptions import (
    AmbiguousAnnotationType,
    InvalidAnnotationType,
    StructuralDecodeError,
    UnsupportedAnnotationType,
)
from darwin_v7.pydantic_base import DefaultDarwin


class AnnotationKind(str, Enum):
    attributes = "attributes"
    auto_annotate = "auto_annotate"
    bounding_box = "bounding_box"
    cuboid = "cuboid"
    directional_vector = "directional_vector"
    ellipse = "ellipse"
    inference = "inference"
    instance_id = "instance_id"
    keypoint = "keypoint"
    line = "line"
    measures = "measures"
    polygon = "polygon"
    skeleton = "skeleton"
    tag = "tag"
    text = "text"


class AnnotationTypeCode(IntEnum):
    """
    Numeric ids the platform uses when grouping annotation classes by the
    set of annotation types they support, e.g. a polygon class with text is
    the type set [6, 3].
    """

    TAG = 1
    BOUNDING_BOX = 2
    POLYGON = 3
    ATTRIBUTES = 5
    TEXT = 6
    LINE = 11
    SKELETON = 12


ANNOTATION_TYPE_CODES: Dict[AnnotationKind, AnnotationTypeCode] = {
    AnnotationKind.tag: AnnotationTypeCode.TAG,
    AnnotationKind.bounding_box: AnnotationTypeCode.BOUNDING_BOX,
    AnnotationKind.polygon: AnnotationTypeCode.POLYGON,
    AnnotationKind.attributes: AnnotationTypeCode.ATTRIBUTES,
    AnnotationKind.text: AnnotationTypeCode.TEXT,
    AnnotationKind.line: AnnotationTypeCode.LINE,
    AnnotationKind.skeleton: AnnotationTypeCode.SKELETON,
}

GeometryPayload = Union[BoundingBox, Keypoint, Polygon, Tag, Text]

PAYLOAD_MODELS: Dict[AnnotationKind, Type[BaseModel]] = {
    AnnotationKind.bounding_box: BoundingBox,
    AnnotationKind.keypoint: Keypoint,
    AnnotationKind.polygon: Polygon,
    AnnotationKind.tag: Tag,
    AnnotationKind.text: Text,
}

DEFAULT_PAYLOADS: Dict[AnnotationKind, Callable[[], GeometryPayload]] = {
    AnnotationKind.bounding_box: lambda: BoundingBox(h=0.0, w=0.0, x=0.0, y=0.0),
    AnnotationKind.keypoint: lambda: Keypoint(x=0.0, y=0.0),
    AnnotationKind.polygon: lambda: Polygon(paths=[]),
    AnnotationKind.tag: Tag,
    AnnotationKind.text: lambda: Text(text=""),
}

# Order in which geometry fields are probed, main shapes before sub-annotations
DECODE_PRIORITY: Tuple[AnnotationKind, ...] = (
    AnnotationKind.polygon,
    AnnotationKind.bounding_box,
    AnnotationKind.ellipse,
    AnnotationKind.cuboid,
    AnnotationKind.keypoint,
    AnnotationKind.line,
    AnnotationKind.skeleton,
    AnnotationKind.tag,
    AnnotationKind.text,
    AnnotationKind.attributes,
    AnnotationKind.directional_vector,
    AnnotationKind.instance_id,
    AnnotationKind.auto_annotate,
    AnnotationKind.inference,
    AnnotationKind.measures,
)

FIELD_ALIASES: Dict[AnnotationKind, Tuple[str, ...]] = {
    AnnotationKind.polygon: ("polygon", "complex_polygon"),
}


def field_names(kind: AnnotationKind) -> Tuple[str, ...]:
    """JSON field names an annotation of the given kind can be stored under."""
    return FIELD_ALIASES.get(kind, (kind.value,))


def _kind_from_name(value: str) -> AnnotationKind:
    lowered = value.lower()
    for kind in AnnotationKind:
        if lowered in field_names(kind):
            return kind
    raise InvalidAnnotationType(value)


class AnnotationType(DefaultDarwin):
    """
    A single annotation type, optionally carrying its geometry.

    Only bounding boxes, keypoints, polygons, tags and text carry a payload,
    every other kind is a marker.

    Attributes
    ----------
    kind: AnnotationKind
    payload: Optional[GeometryPayload]
    """

    model_config = ConfigDict(frozen=True)

    kind: AnnotationKind
    payload: Optional[GeometryPayload] = None

    @model_validator(mode="before")
    @classmethod
    def parse_payload(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        kind = values.get("kind")
        payload = values.get("payload")
        if kind is None or payload is None or isinstance(payload, BaseModel):
            return values
        model = PAYLOAD_MODELS.get(AnnotationKind(kind))
        if model is not None:
            values = {**values, "payload": model.model_validate(payload)}
        return values

    @model_validator(mode="after")
    def validate_payload_matches_kind(self) -> AnnotationType:
        model = PAYLOAD_MODELS.get(self.kind)
        if model is None:
            assert self.payload is None, f"{self.kind.value} does not carry a payload"
        else:
            assert isinstance(
                self.payload, model
            ), f"{self.kind.value} requires a {model.__name__} payload"
        return self

    @classmethod
    def of(
        cls, kind: AnnotationKind, payload: Optional[GeometryPayload] = None
    ) -> AnnotationType:
        if payload is None and kind in DEFAULT_PAYLOADS:
            payload = DEFAULT_PAYLOADS[kind]()
        return cls(kind=kind, payload=payload)

    @classmethod
    def from_str(cls, value: str) -> AnnotationType:
        """
        Builds an annotation type from its name, case insensitive.
        Kinds that carry a payload get an empty default one.

        Raises
        ------
        InvalidAnnotationType
            If `value` does not name a known annotation type.
        """
        return cls.of(_kind_from_name(value))

    @classmethod
    def decode(cls, data: Mapping[str, Any]) -> Optional[AnnotationType]:
        """
        Reads the annotation type out of a JSON object holding geometry fields.

        Fields set to null count as absent. Returns None when no known field
        is present.

        Raises
        ------
        AmbiguousAnnotationType
            If more than one known field is present.
        StructuralDecodeError
            If the payload does not have the shape of its type.
        """
        found: List[Tuple[AnnotationKind, str]] = [
            (kind, name)
            for kind in DECODE_PRIORITY
            for name in field_names(kind)
            if data.get(name) is not None
        ]
        if not found:
            return None
        if len(found) > 1:
            raise AmbiguousAnnotationType([name for _, name in found])

        kind, name = found[0]
        model = PAYLOAD_MODELS.get(kind)
        if model is None:
            return cls(kind=kind)
        try:
            payload = model.model_validate(data[name])
        except ValidationError as exc:
            raise StructuralDecodeError.from_exception(exc) from exc
        return cls(kind=kind, payload=payload)  # type: ignore[arg-type]

    def encode(self) -> Dict[str, Any]:
        """A JSON object with exactly one field, named after the kind."""
        payload = self.payload.model_dump() if self.payload is not None else {}
        return {self.kind.value: payload}

    @property
    def code(self) -> AnnotationTypeCode:
        """
        Raises
        ------
        UnsupportedAnnotationType
            If the platform code for this kind is not known.
        """
        if self.kind not in ANNOTATION_TYPE_CODES:
            raise UnsupportedAnnotationType(self.kind.value)
        return ANNOTATION_TYPE_CODES[self.kind]

    def __str__(self) -> str:
        return self.kind.value
