from darwin_v7.core.items.get import get_item
from darwin_v7.core.items.import_annotations import import_annotations
