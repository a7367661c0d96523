"""
Annotations in the shape the platform accepts when importing them into a
dataset item, and the functions that build them from exported annotations.
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel

from darwin_v7.data_objects.annotation_class import AnnotationClass
from darwin_v7.data_objects.export import ImageAnnotation
from darwin_v7.data_objects.geometry import Keypoint, PolygonPath, Tag
from darwin_v7.exceptions import AnnotationClassNotFound, MissingAnnotationClassId


class AnnotationImportPolygon(BaseModel):
    # Points are kept in the order they were exported in
    path: List[Keypoint]


class AnnotationImportData(BaseModel):
    polygon: Optional[AnnotationImportPolygon] = None
    tag: Optional[Tag] = None


class AnnotationContext(BaseModel):
    # The platform expects slot ids here, despite the name
    slot_names: List[str]


class AnnotationImportAnnotation(BaseModel):
    """One annotation to import into a dataset item."""

    id: str
    data: AnnotationImportData
    annotation_class_id: int
    context_keys: AnnotationContext


class AnnotationImport(BaseModel):
    """The import request body for a single dataset item."""

    annotations: List[AnnotationImportAnnotation]
    overwrite: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def find_annotation_class_id(
    eligible_annotation_classes: Sequence[AnnotationClass], class_name: str
) -> int:
    """
    Returns the id of the first annotation class named exactly `class_name`.

    Raises
    ------
    AnnotationClassNotFound
        If no class has that name.
    MissingAnnotationClassId
        If the first class with that name has no id.
    """
    match = next(
        (
            annotation_class
            for annotation_class in eligible_annotation_classes
            if annotation_class.name is not None
            and annotation_class.name == class_name
        ),
        None,
    )
    if match is None:
        raise AnnotationClassNotFound(class_name)
    if match.id is None:
        raise MissingAnnotationClassId(class_name)
    return match.id


def _new_id() -> str:
    return str(uuid.uuid4())


def new_polygon_annotation(
    original_annotation: ImageAnnotation,
    path: PolygonPath,
    eligible_annotation_classes: Sequence[AnnotationClass],
    slot_name: str,
) -> AnnotationImportAnnotation:
    """
    Builds a polygon import annotation for one path of an exported annotation.

    Parameters
    ----------
    original_annotation: ImageAnnotation
        The exported annotation, its name picks the annotation class.
    path: PolygonPath
        The polygon path to import.
    eligible_annotation_classes: Sequence[AnnotationClass]
        Classes the annotation may belong to.
    slot_name: str
        The slot of the item to attach the annotation to.

    Returns
    -------
    AnnotationImportAnnotation
    """
    return AnnotationImportAnnotation(
        id=_new_id(),
        data=AnnotationImportData(polygon=AnnotationImportPolygon(path=list(path))),
        annotation_class_id=find_annotation_class_id(
            eligible_annotation_classes, original_annotation.name
        ),
        context_keys=AnnotationContext(slot_names=[slot_name]),
    )


def new_tag_annotation(
    original_annotation: ImageAnnotation,
    eligible_annotation_classes: Sequence[AnnotationClass],
    slot_name: str,
) -> AnnotationImportAnnotation:
    """Builds a tag import annotation carrying the tag of `original_annotation`."""
    return AnnotationImportAnnotation(
        id=_new_id(),
        data=AnnotationImportData(tag=original_annotation.tag),
        annotation_class_id=find_annotation_class_id(
            eligible_annotation_classes, original_annotation.name
        ),
        context_keys=AnnotationContext(slot_names=[slot_name]),
    )
