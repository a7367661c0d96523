from __future__ import annotations

from typing import Union
from uuid import UUID

from darwin_v7.core.client import ClientCore
from darwin_v7.core.types.common import JSONType
from darwin_v7.data_objects.imports import AnnotationImport


def import_annotations(
    client: ClientCore,
    team_slug: str,
    item_id: Union[UUID, str],
    payload: AnnotationImport,
) -> JSONType:
    """
    Imports annotations into a dataset item.

    Args:
        client (ClientCore): The Darwin Core client.
        team_slug (str): The team slug.
        item_id (UUID | str): The id of the item to import into.
        payload (AnnotationImport): The annotations, and whether existing
            annotations are overwritten.

    Returns:
        JSONType: The response data.
    """
    assert payload.annotations, "No annotations provided, nothing to import"

    return client.post(
        f"/v2/teams/{team_slug}/items/{item_id}/import", data=payload.to_payload()
    )
