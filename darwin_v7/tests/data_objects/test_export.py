import pytest

from darwin_v7.data_objects.annotation_type import AnnotationKind
from darwin_v7.data_objects.export import (
    ImageAnnotation,
    JsonExport,
    JsonExportV2,
    load_export,
    parse_export,
)
from darwin_v7.data_objects.geometry import Keypoint, Polygon
from darwin_v7.exceptions import StructuralDecodeError
from darwin_v7.tests.fixtures import *


def test_loads_export_v1(export_v1_json: dict) -> None:
    export = parse_export(export_v1_json)

    assert isinstance(export, JsonExport)
    assert export.dataset == "Test Dataset"
    assert export.image.width == 188688
    assert len(export.annotations) == 2


def test_export_v1_polygon_and_bounding_box_both_kept(export_v1_json: dict) -> None:
    annotation = parse_export(export_v1_json).annotations[0]

    assert annotation.polygon is not None
    assert annotation.bounding_box is not None
    assert [t.kind for t in annotation.annotation_types()] == [
        AnnotationKind.polygon,
        AnnotationKind.bounding_box,
    ]


def test_export_v1_complex_polygon(export_v1_json: dict) -> None:
    annotation = parse_export(export_v1_json).annotations[1]

    assert annotation.polygon is not None
    assert len(annotation.polygon.paths) == 2
    assert annotation.annotators is not None
    assert annotation.annotators[0].full_name == "ABC XYZ"


def test_loads_export_v2(export_v2_json: dict) -> None:
    export = parse_export(export_v2_json)

    assert isinstance(export, JsonExportV2)
    assert export.version == "2.0"
    assert export.item.source_info.team.slug == "api-v2-testing"
    assert export.item.slots[0].slot_name == "0"
    assert len(export.annotations) == 3


def test_export_v2_single_point_path(export_v2_json: dict) -> None:
    export = parse_export(export_v2_json)
    polygon = export.annotations[0].polygon

    assert polygon is not None
    assert len(polygon.paths) == 1
    assert polygon.paths[0] == [Keypoint(x=89094.67, y=11924.8)]


def test_export_v2_keeps_unknown_fields(export_v2_json: dict) -> None:
    export = parse_export(export_v2_json)

    cheese = export.annotations[0].to_json()
    assert cheese["updated_at"] == "2023-08-03T03:04:37"
    assert cheese["slot_names"] == ["0"]

    ruler = export.annotations[2]
    assert ruler.to_json()["line"] == export_v2_json["annotations"][2]["line"]
    assert [t.kind for t in ruler.annotation_types()] == [AnnotationKind.line]


def test_export_v2_round_trip(export_v2_json: dict) -> None:
    export = parse_export(export_v2_json)
    assert isinstance(export, JsonExportV2)

    again = JsonExportV2.model_validate(export.model_dump(mode="json", exclude_none=True))

    assert again == export


def test_export_v2_invalid_schema_ref(export_v2_json: dict) -> None:
    export_v2_json["schema_ref"] = "schema.json"

    with pytest.raises(StructuralDecodeError):
        parse_export(export_v2_json)


def test_export_missing_annotation_name(export_v1_json: dict) -> None:
    del export_v1_json["annotations"][0]["name"]

    with pytest.raises(StructuralDecodeError):
        parse_export(export_v1_json)


def test_load_export_from_file() -> None:
    export = load_export(test_data_path / "export_v2.json")

    assert isinstance(export, JsonExportV2)


def test_annotation_without_geometry() -> None:
    annotation = ImageAnnotation(name="Nothing")

    assert annotation.annotation_types() == []
    assert annotation.to_json() == {"name": "Nothing"}


def test_annotation_tag_and_text() -> None:
    annotation = ImageAnnotation.model_validate(
        {"name": "Note", "tag": {}, "text": {"text": "mouldy"}}
    )

    assert [t.kind for t in annotation.annotation_types()] == [
        AnnotationKind.tag,
        AnnotationKind.text,
    ]


def test_annotation_polygon_by_field_name() -> None:
    annotation = ImageAnnotation(
        name="Cheese", polygon=Polygon(paths=[[Keypoint(x=1.0, y=1.0)]])
    )

    assert annotation.to_json()["polygon"] == {"paths": [[{"x": 1.0, "y": 1.0}]]}
