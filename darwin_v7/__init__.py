from .core.client import ClientCore, DarwinConfig
from .data_objects import (
    AnnotationClass,
    AnnotationImport,
    AnnotationType,
    ImageAnnotation,
    JsonExport,
    JsonExportV2,
    Levels,
)
from .importer import build_annotation_import, build_item_import
from .version import __version__
