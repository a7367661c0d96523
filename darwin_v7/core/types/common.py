from __future__ import annotations

from typing import Any, Dict, List, Mapping, Protocol, Union

JSONType = Union[Dict[str, Any], List[Dict[str, Any]]]  # type: ignore
JSONDict = Dict[str, Any]  # type: ignore


class Implements_str(Protocol):
    def __str__(self) -> str: ...


Stringable = Union[str, Implements_str]


class QueryString:
    """
    Represents a query string, which is a dictionary of string key-value pairs.

    Attributes:
    -----------
    value : Dict[str, Union[List[str], str]]
        The dictionary of key-value pairs that make up the query string.

    Methods:
    --------
    __str__() -> str
        Returns a string representation of the QueryString object, in the format "?key1=value1&key2=value2".
    """

    value: Dict[str, Union[List[str], str]]

    def dict_check(
        self, value: Mapping[str, Union[List[Stringable], Stringable]]
    ) -> Dict[str, Union[List[str], str]]:
        mapped: Dict[str, Union[List[str], str]] = {}
        for k, v in value.items():
            if isinstance(v, list):
                mapped[k] = [str(x) for x in v]
            else:
                mapped[k] = str(v)
        return mapped

    def __init__(self, value: Mapping[str, Union[List[Stringable], Stringable]]) -> None:
        self.value = self.dict_check(value)

    def __str__(self) -> str:
        output: str = "?" if self.value else ""
        for k, v in self.value.items():
            if isinstance(v, list):
                for x in v:
                    output += f"{k}={x.lower()}&"
            else:
                output += f"{k}={v.lower()}&"
        return output[:-1]  # remove trailing &

    def __add__(self, other: QueryString) -> QueryString:
        return QueryString({**self.value, **other.value})
