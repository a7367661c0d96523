from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import ConfigDict, Field

from darwin_v7.data_objects.annotation_type import AnnotationType
from darwin_v7.pydantic_base import DefaultDarwin


class AnnotationClassMetadata(DefaultDarwin):
    model_config = ConfigDict(populate_by_name=True)

    color: Optional[str] = Field(default=None, alias="_color")
    polygon: Optional[Dict[str, str]] = None
    auto_annotate: Optional[Dict[str, str]] = None
    inference: Optional[Dict[str, str]] = None
    measures: Optional[Dict[str, str]] = None


class AnnotationDataset(DefaultDarwin):
    id: Optional[int] = None


class AnnotationClassImage(DefaultDarwin):
    id: Optional[str] = None
    index: Optional[int] = None
    key: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    scale: Optional[float] = None
    annotation_class_id: Optional[int] = None
    crop_key: Optional[str] = None
    image_height: Optional[int] = None
    image_width: Optional[int] = None
    crop_url: Optional[str] = None
    original_image_url: Optional[str] = None


class AnnotationClass(DefaultDarwin):
    """
    A team scoped annotation class as registered on the platform.

    Almost every field is optional: depending on the endpoint the platform
    sends null for most of them.

    Attributes
    ----------
    id: Optional[int]
    name: Optional[str]
    annotation_types: List[Optional[str]]
        names of the annotation types the class supports, e.g. `["polygon", "text"]`
    datasets: List[Optional[AnnotationDataset]]
        datasets the class is attached to
    """

    id: Optional[int] = None
    name: Optional[str] = None
    annotation_types: List[Optional[str]] = []
    datasets: List[Optional[AnnotationDataset]] = []
    metadata: Optional[AnnotationClassMetadata] = None
    annotation_class_image_url: Optional[str] = None
    dataset_id: Optional[int] = None
    team_id: Optional[int] = None
    description: Optional[str] = None
    images: List[AnnotationClassImage] = []
    inserted_at: Optional[str] = None
    updated_at: Optional[str] = None

    def annotation_kinds(self) -> List[AnnotationType]:
        """
        Raises
        ------
        InvalidAnnotationType
            If the class lists a type name this library does not know.
        """
        return [
            AnnotationType.from_str(name)
            for name in self.annotation_types
            if name is not None
        ]

    def in_dataset(self, dataset_id: int) -> bool:
        return any(
            dataset is not None and dataset.id == dataset_id
            for dataset in self.datasets
        )


def classes_for_dataset(
    annotation_classes: Iterable[AnnotationClass], dataset_id: int
) -> List[AnnotationClass]:
    """Annotation classes attached to the given dataset, in their original order."""
    return [
        annotation_class
        for annotation_class in annotation_classes
        if annotation_class.in_dataset(dataset_id)
    ]
