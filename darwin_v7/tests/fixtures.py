from pathlib import Path
from typing import List

import pytest

from darwin_v7.core.client import ClientCore, DarwinConfig
from darwin_v7.data_objects.annotation_class import AnnotationClass
from darwin_v7.data_objects.export import ImageAnnotation
from darwin_v7.data_objects.geometry import Keypoint, Polygon
from darwin_v7.json import load

test_data_path: Path = Path(__file__).parent / "data"


@pytest.fixture
def base_config() -> DarwinConfig:
    return DarwinConfig(
        api_key="test_key",
        base_url="http://test_url.com/",
        api_endpoint="http://test_url.com/api/",
        default_team="default-team",
        datasets_dir=Path("datasets"),
        teams={},
    )


@pytest.fixture
def base_client(base_config: DarwinConfig) -> ClientCore:
    return ClientCore(base_config)


@pytest.fixture
def export_v1_json() -> dict:
    return load(test_data_path / "export_v1.json")


@pytest.fixture
def export_v2_json() -> dict:
    return load(test_data_path / "export_v2.json")


@pytest.fixture
def dataset_item_json() -> dict:
    return load(test_data_path / "dataset_item.json")


@pytest.fixture
def levels_json() -> str:
    return (
        '{"0":{"format":"png","pixel_ratio":1,"tile_height":2048,"tile_width":2048,'
        '"x_tiles":82.0,"y_tiles":22.0},"base_key":"some-base-key.jpg"}'
    )


@pytest.fixture
def cheese_annotation() -> ImageAnnotation:
    return ImageAnnotation(
        id="770e4a19-a350-4d5e-964e-783512a508f9",
        name="Cheese",
        polygon=Polygon(paths=[[Keypoint(x=89094.67, y=11924.8)]]),
    )


@pytest.fixture
def annotation_classes_json() -> List[dict]:
    return [
        {
            "id": 7,
            "name": "Holes",
            "annotation_types": ["polygon", "text"],
            "datasets": [{"id": 1}],
            "images": [],
            "metadata": {"_color": "rgba(255,0,0,1.0)", "polygon": {}},
        },
        {
            "id": 42,
            "name": "Cheese",
            "annotation_types": ["polygon"],
            "datasets": [{"id": 1}, {"id": 2}],
            "images": [],
            "metadata": {"_color": "rgba(0,255,0,1.0)"},
        },
        {
            "id": 43,
            "name": "Cheese",
            "annotation_types": ["polygon"],
            "datasets": [{"id": 3}],
            "images": [],
        },
        {
            "id": 8,
            "name": "Reviewed",
            "annotation_types": ["tag"],
            "datasets": [{"id": 2}],
            "images": [],
        },
    ]


@pytest.fixture
def annotation_classes(annotation_classes_json: List[dict]) -> List[AnnotationClass]:
    return [AnnotationClass.model_validate(item) for item in annotation_classes_json]
