from pydantic import BaseModel, ConfigDict


class DefaultDarwin(BaseModel):
    """Default darwin-v7 pydantic settings for platform objects.
    Default settings include:
        - auto validating variables on setting/assignment
        - no reserved `model_` namespace, the platform uses those names freely
    """

    model_config = ConfigDict(validate_assignment=True, protected_namespaces=())
