"""
Darwin JSON, the format the platform writes when exporting annotated items.

See https://docs.v7labs.com/reference/darwin-json
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, ConfigDict, Field, ValidationError, field_validator

from darwin_v7.data_objects.annotation_type import (
    DECODE_PRIORITY,
    AnnotationType,
    field_names,
)
from darwin_v7.data_objects.geometry import BoundingBox, Keypoint, Polygon, Tag, Text
from darwin_v7.exceptions import StructuralDecodeError
from darwin_v7.json import load
from darwin_v7.pydantic_base import DefaultDarwin


class DatasetItemType(str, Enum):
    image = "image"
    video = "video"
    pdf = "pdf"
    dicom = "dicom"


class Annotator(DefaultDarwin):
    email: str
    full_name: str


class ImageExport(DefaultDarwin):
    """The `image` section of a Darwin JSON 1.0 export"""

    filename: str
    height: int
    original_filename: str
    path: str
    thumbnail_url: str
    url: str
    width: int
    workview_url: str
    seq: Optional[int] = None


class ImageAnnotation(DefaultDarwin):
    """
    One annotation on one item.

    The geometry fields are independent: an exported polygon usually comes
    with its bounding box, and both are kept. Fields this model does not type
    (line, skeleton, cuboid, ellipse, updated_at, ...) are kept as extra
    fields so they are written back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: str
    annotators: Optional[List[Annotator]] = None
    reviewers: Optional[List[Annotator]] = None
    bounding_box: Optional[BoundingBox] = None
    tag: Optional[Tag] = None
    polygon: Optional[Polygon] = Field(
        default=None, validation_alias=AliasChoices("polygon", "complex_polygon")
    )
    text: Optional[Text] = None
    keypoint: Optional[Keypoint] = None
    slot_names: Optional[List[str]] = None

    def annotation_types(self) -> List[AnnotationType]:
        """One annotation type per geometry field present, main shapes first."""
        data = self.model_dump(exclude_none=True)
        found: List[AnnotationType] = []
        for kind in DECODE_PRIORITY:
            for name in field_names(kind):
                if name in data:
                    decoded = AnnotationType.decode({name: data[name]})
                    if decoded is not None:
                        found.append(decoded)
        return found

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class JsonExport(DefaultDarwin):
    """Darwin JSON 1.0"""

    dataset: str
    image: ImageExport
    annotations: List[ImageAnnotation]


class ExportDataset(DefaultDarwin):
    name: str
    slug: str
    dataset_management_url: str


class ExportTeam(DefaultDarwin):
    name: str
    slug: str


class SourceInfo(DefaultDarwin):
    dataset: ExportDataset
    item_id: str
    team: ExportTeam
    workview_url: str


class SourceFile(DefaultDarwin):
    file_name: str
    storage_key: Optional[str] = None
    url: str


class ExportSlot(DefaultDarwin):
    type: DatasetItemType
    slot_name: str
    width: Optional[int] = None
    height: Optional[int] = None
    thumbnail_url: Optional[str] = None
    source_files: List[SourceFile] = []


class ExportItem(DefaultDarwin):
    name: str
    path: str
    source_info: SourceInfo
    slots: List[ExportSlot] = []


class JsonExportV2(DefaultDarwin):
    """Darwin JSON 2.0"""

    version: Literal["2.0"] = "2.0"
    schema_ref: str
    item: ExportItem
    annotations: List[ImageAnnotation]

    @field_validator("schema_ref")
    @classmethod
    def validate_schema_ref(cls, v: str) -> str:
        assert v.startswith("http"), "schema_ref must be a url"
        return v


AnyExport = Union[JsonExport, JsonExportV2]


def parse_export(data: Dict[str, Any]) -> AnyExport:
    """
    Parses an export, Darwin JSON 2.0 when it has a `version` field and
    Darwin JSON 1.0 otherwise.

    Raises
    ------
    StructuralDecodeError
        If the export does not match its schema.
    """
    try:
        if "version" in data:
            return JsonExportV2.model_validate(data)
        return JsonExport.model_validate(data)
    except ValidationError as exc:
        raise StructuralDecodeError.from_exception(exc) from exc


def load_export(path: Union[str, Path]) -> AnyExport:
    return parse_export(load(path))
