from __future__ import annotations

from logging import getLogger
from typing import Iterable, List, Optional, Sequence

from darwin_v7.data_objects.annotation_class import AnnotationClass
from darwin_v7.data_objects.export import ImageAnnotation, JsonExportV2
from darwin_v7.data_objects.imports import (
    AnnotationImport,
    AnnotationImportAnnotation,
    new_polygon_annotation,
    new_tag_annotation,
)

logger = getLogger(__name__)


def import_annotations_for(
    annotation: ImageAnnotation,
    annotation_classes: Sequence[AnnotationClass],
    slot_name: str,
) -> List[AnnotationImportAnnotation]:
    """
    Builds the import annotations for one exported annotation.

    A polygon becomes one import annotation per path, a tag becomes one tag
    annotation. Any other annotation type is not importable yet and gives an
    empty list.

    Raises
    ------
    AnnotationClassNotFound
        If no annotation class is named like the annotation.
    MissingAnnotationClassId
        If the matching annotation class has no id.
    """
    if annotation.polygon is not None:
        if annotation.tag is not None:
            logger.warning(
                f"Annotation {annotation.id} ({annotation.name}) is a polygon, "
                f"ignoring its tag"
            )
        return [
            new_polygon_annotation(annotation, path, annotation_classes, slot_name)
            for path in annotation.polygon.paths
        ]
    if annotation.tag is not None:
        return [new_tag_annotation(annotation, annotation_classes, slot_name)]

    kinds = ", ".join(str(kind) for kind in annotation.annotation_types()) or "none"
    logger.warning(
        f"Skipping annotation {annotation.id} ({annotation.name}), "
        f"unsupported annotation types: {kinds}"
    )
    return []


def build_annotation_import(
    annotations: Iterable[ImageAnnotation],
    annotation_classes: Sequence[AnnotationClass],
    slot_name: str,
    overwrite: bool = False,
) -> AnnotationImport:
    """
    Builds the import request for annotations that all go to one slot.

    Parameters
    ----------
    annotations: Iterable[ImageAnnotation]
        Exported annotations to import.
    annotation_classes: Sequence[AnnotationClass]
        Classes to resolve annotation names against, first match wins.
    slot_name: str
        Slot to attach every annotation to.
    overwrite: bool
        Whether the import replaces the annotations already on the item.

    Returns
    -------
    AnnotationImport
    """
    imported: List[AnnotationImportAnnotation] = []
    for annotation in annotations:
        imported.extend(import_annotations_for(annotation, annotation_classes, slot_name))
    logger.debug(f"Built {len(imported)} import annotations for slot {slot_name}")
    return AnnotationImport(annotations=imported, overwrite=overwrite)


def build_item_import(
    export: JsonExportV2,
    annotation_classes: Sequence[AnnotationClass],
    overwrite: bool = False,
) -> AnnotationImport:
    """
    Builds the import request for every annotation of a Darwin JSON 2.0 export.

    Each annotation goes to the first of its `slot_names`, or to the first
    slot of the item when it names none.

    Raises
    ------
    ValueError
        If an annotation names no slot and the item has no slots.
    """
    default_slot: Optional[str] = (
        export.item.slots[0].slot_name if export.item.slots else None
    )
    imported: List[AnnotationImportAnnotation] = []
    for annotation in export.annotations:
        slot_name = annotation.slot_names[0] if annotation.slot_names else default_slot
        if slot_name is None:
            raise ValueError(
                f"Annotation {annotation.id} names no slot and item {export.item.name} has none"
            )
        imported.extend(import_annotations_for(annotation, annotation_classes, slot_name))
    logger.debug(f"Built {len(imported)} import annotations for item {export.item.name}")
    return AnnotationImport(annotations=imported, overwrite=overwrite)
