from __future__ import annotations

from typing import Union
from uuid import UUID

from pydantic import ValidationError

from darwin_v7.core.client import ClientCore
from darwin_v7.core.types.common import QueryString
from darwin_v7.data_objects.item import DatasetItem
from darwin_v7.exceptions import StructuralDecodeError


def get_item(
    api_client: ClientCore,
    team_slug: str,
    item_id: Union[UUID, str],
    params: QueryString = QueryString({}),
) -> DatasetItem:
    """
    Returns an item

    Parameters
    ----------
    api_client: ClientCore
        The client to use for the request
    team_slug: str
        The slug of the team the item belongs to
    item_id: str
        The id of the item to get

    Returns
    -------
    DatasetItem
        The item, with the tiling levels of its slots

    Raises
    ------
    StructuralDecodeError
        If the response is not shaped like an item
    """
    response = api_client.get(f"/v2/teams/{team_slug}/items/{item_id}", params)
    assert isinstance(response, dict)
    try:
        return DatasetItem.model_validate(response)
    except ValidationError as exc:
        raise StructuralDecodeError.from_exception(exc) from exc
