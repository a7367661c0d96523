from __future__ import annotations

from typing import List

from darwin_v7.core.client import ClientCore
from darwin_v7.core.types.common import QueryString
from darwin_v7.data_objects.annotation_class import AnnotationClass


def get_annotation_classes(
    client: ClientCore,
    team_slug: str,
    include_tags: bool = True,
) -> List[AnnotationClass]:
    """
    Returns the annotation classes of a team

    Parameters
    ----------
    client: ClientCore
        The client to use for the request
    team_slug: str
        The slug of the team to get annotation classes for
    include_tags: bool
        Whether tag classes are included, defaults to True

    Returns
    -------
    List[AnnotationClass]
        The annotation classes of the team
    """
    response = client.get(
        f"/teams/{team_slug}/annotation_classes",
        QueryString({"include_tags": include_tags}),
    )
    assert isinstance(response, dict)
    return [
        AnnotationClass.model_validate(annotation_class)
        for annotation_class in response["annotation_classes"]
    ]
