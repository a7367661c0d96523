from __future__ import annotations

from typing import Any, Optional, Sequence


class DarwinException(Exception):
    """
    Generic Darwin exception.

    Used to differentiate from errors that originate in our code, and those that
    originate in third-party libraries.

    Extends `Exception` and adds a `parent_exception` field to store the original
    exception.
    """

    parent_exception: Optional[Exception] = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)

    @classmethod
    def from_exception(cls, exc: Exception) -> DarwinException:
        """
        Creates a new exception from an existing exception.

        Parameters
        ----------
        exc: Exception
            The existing exception.

        Returns
        -------
        DarwinException
            The new exception.
        """
        instance = cls(str(exc))
        instance.parent_exception = exc

        return instance

    def __str__(self) -> str:
        output_string = f"{self.__class__.__name__}: {super().__str__()}\n"
        if self.parent_exception:
            output_string += f"Parent exception: {self.parent_exception}\n"

        return output_string

    def __repr__(self) -> str:
        return super().__repr__()


class NotFound(DarwinException):
    pass


class UnprocessibleEntity(DarwinException):
    pass


class Unauthorized(DarwinException):
    pass


class BadRequest(DarwinException):
    pass


class StructuralDecodeError(DarwinException):
    """Raised when a platform payload does not have the expected shape."""

    ...


class InvalidAnnotationType(DarwinException):
    """Raised when a string does not name a known annotation type."""

    def __init__(self, annotation_type: str) -> None:
        super().__init__(f"Invalid annotation type: {annotation_type}")
        self.annotation_type = annotation_type


class AmbiguousAnnotationType(DarwinException):
    """Raised when a geometry object carries more than one annotation type field."""

    def __init__(self, keys: Sequence[str]) -> None:
        super().__init__(f"Ambiguous annotation type, found: {', '.join(keys)}")
        self.keys = list(keys)


class UnsupportedAnnotationType(DarwinException):
    """Raised when an annotation type has no numeric code on the platform."""

    def __init__(self, annotation_type: str) -> None:
        super().__init__(f"No annotation type code for: {annotation_type}")
        self.annotation_type = annotation_type


class AnnotationClassNotFound(DarwinException):
    """Raised when no annotation class matches an annotation by name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No matching annotation class for {name}")
        self.name = name


class MissingAnnotationClassId(DarwinException):
    """Raised when the matching annotation class has no id."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Annotation class missing id: {name}")
        self.name = name
