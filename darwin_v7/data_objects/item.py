from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import ValidationInfo, field_validator

from darwin_v7.data_objects.export import DatasetItemType
from darwin_v7.data_objects.levels import Levels
from darwin_v7.data_objects.typing import UnknownType
from darwin_v7.pydantic_base import DefaultDarwin

# Most fields below are optional: depending on the context the endpoint
# returns null for them, with little consistency as to when.


class DatasetItemStatus(str, Enum):
    annotate = "annotate"
    archived = "archived"
    complete = "complete"
    error = "error"
    new = "new"
    processing = "processing"
    review = "review"
    uploading = "uploading"


class ItemLayout(DefaultDarwin):
    # Required fields
    slots: List[str]
    type: Literal["grid", "horizontal", "vertical", "simple"]
    version: Literal[1, 2]

    # Required only in version 2
    layout_shape: Optional[List[int]] = None

    @field_validator("layout_shape")
    @classmethod
    def layout_validator(
        cls, value: Optional[List[int]], values: ValidationInfo
    ) -> Optional[List[int]]:
        if not value and values.data.get("version") == 2:
            raise ValueError("layout_shape must be specified for version 2 layouts")

        return value


class ItemSlotMetadata(DefaultDarwin):
    levels: Optional[Levels] = None
    base_key: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class ItemSlot(DefaultDarwin):
    file_name: Optional[str] = None
    fps: Optional[float] = None
    id: Optional[str] = None
    is_external: Optional[bool] = None
    metadata: Optional[ItemSlotMetadata] = None
    size_bytes: Optional[int] = None
    slot_name: Optional[str] = None
    streamable: Optional[bool] = None
    total_sections: Optional[int] = None
    type: Optional[DatasetItemType] = None
    upload_id: Optional[str] = None
    legacy_item_id: Optional[int] = None


class ProcessingError(DefaultDarwin):
    message: Optional[str] = None
    processing_error_type: Optional[str] = None
    http_status_code: Optional[int] = None
    stage: Optional[str] = None
    storage_key: Optional[str] = None
    raw_error: Optional[str] = None


class ItemUpload(DefaultDarwin):
    upload_type: Optional[str] = None
    file_name: Optional[str] = None
    processing_status: Optional[str] = None
    slot_name: Optional[str] = None
    upload_id: Optional[str] = None
    processing_error: Optional[ProcessingError] = None
    as_frames: Optional[bool] = None


class DatasetItem(DefaultDarwin):
    """
    A dataset item as returned by the items endpoints.

    Attributes
    ----------
    id: Optional[str]
    name: Optional[str]
    slots: List[Optional[ItemSlot]]
        the files of the item, tiled images carry their levels in
        `slot.metadata.levels`
    """

    archived: Optional[bool] = None
    cursor: Optional[str] = None
    dataset_id: Optional[int] = None
    id: Optional[str] = None
    inserted_at: Optional[str] = None
    layout: Optional[ItemLayout] = None
    name: Optional[str] = None
    path: Optional[str] = None
    priority: Optional[int] = None
    processing_status: Optional[DatasetItemStatus] = None
    slot_types: List[Optional[DatasetItemType]] = []
    slots: List[Optional[ItemSlot]] = []
    status: Optional[DatasetItemStatus] = None
    tags: List[Optional[str]] = []
    updated_at: Optional[str] = None
    uploads: List[Optional[ItemUpload]] = []
    workflow_status: Optional[str] = None
    metadata: Optional[Dict[str, UnknownType]] = None

    def slot(self, slot_name: str) -> Optional[ItemSlot]:
        for slot in self.slots:
            if slot is not None and slot.slot_name == slot_name:
                return slot
        return None
