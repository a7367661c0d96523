from .annotation_class import AnnotationClass, classes_for_dataset
from .annotation_type import AnnotationKind, AnnotationType, AnnotationTypeCode
from .export import ImageAnnotation, JsonExport, JsonExportV2, load_export, parse_export
from .geometry import BoundingBox, Keypoint, Polygon, Tag, Text
from .imports import AnnotationImport, new_polygon_annotation, new_tag_annotation
from .item import DatasetItem
from .levels import ImageLevel, Levels, levels_from_json, levels_to_json
