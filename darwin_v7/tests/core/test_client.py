from pathlib import Path

import pytest
import responses
from pydantic import ValidationError
from requests import HTTPError

from darwin_v7.core.client import ClientCore, DarwinConfig
from darwin_v7.core.types.common import QueryString
from darwin_v7.exceptions import (
    BadRequest,
    DarwinException,
    NotFound,
    Unauthorized,
    UnprocessibleEntity,
)
from darwin_v7.tests.fixtures import *


def test_create_config(base_config: DarwinConfig) -> None:
    assert base_config.api_key == "test_key"
    assert base_config.base_url == "http://test_url.com/"
    assert base_config.default_team == "default-team"


def test_config_base_url(base_config: DarwinConfig) -> None:
    # Test that the base_url validates after being created
    base_config.base_url = "https://test_url.com"
    assert base_config.base_url == "https://test_url.com/"


@pytest.mark.parametrize("base_url", ["test_url.com", "ftp://test_url.com", ""])
def test_invalid_config_url_validation(base_url: str, tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        DarwinConfig(
            api_key="test_key",
            datasets_dir=tmp_path,
            api_endpoint="http://test_url.com/api/",
            base_url=base_url,
            default_team="default-team",
            teams={},
        )


def test_config_from_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "global:\n"
        "  api_endpoint: https://darwin.v7labs.com/api/\n"
        "  base_url: https://darwin.v7labs.com\n"
        "  default_team: team-a\n"
        "teams:\n"
        "  team-a:\n"
        "    api_key: 1ed99664-726e-4400-bc5d-3132b22ce60c\n"
        "    datasets_dir: /home/user/.v7/team-a\n"
        "  team-b:\n"
        "    api_key: other-key\n"
    )

    config = DarwinConfig.from_file(config_path)

    assert config.api_key == "1ed99664-726e-4400-bc5d-3132b22ce60c"
    assert config.datasets_dir == Path("/home/user/.v7/team-a")
    assert config.base_url == "https://darwin.v7labs.com/"
    assert config.teams["team-b"].datasets_dir is None


def test_config_from_api_key() -> None:
    config = DarwinConfig.from_api_key_with_defaults("some-key")

    assert config.api_key == "some-key"
    assert config.api_endpoint == "https://darwin.v7labs.com/api/"


def test_client(base_client: ClientCore) -> None:
    assert base_client.headers == {
        "Content-Type": "application/json",
        "Authorization": "ApiKey test_key",
        "Accept": "application/json",
    }

    endpoint = base_client.config.api_endpoint + "test_endpoint"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, endpoint, json={"test": "test"}, status=200)
        rsps.add(responses.PUT, endpoint, json={"test": "test"}, status=200)
        rsps.add(responses.POST, endpoint, json={"test": "test"}, status=200)
        rsps.add(responses.DELETE, endpoint, status=204)
        rsps.add(responses.PATCH, endpoint, json={"test": "test"}, status=200)

        assert base_client.get("/test_endpoint/") == {"test": "test"}
        assert base_client.put("test_endpoint", {"test": "test"}) == {"test": "test"}
        assert base_client.post("test_endpoint", {"test": "test"}) == {"test": "test"}
        assert base_client.delete("test_endpoint") == {}
        assert base_client.patch("test_endpoint", {"test": "test"}) == {"test": "test"}


def test_client_query_string(base_client: ClientCore) -> None:
    endpoint = base_client.config.api_endpoint + "test_endpoint?flag=true"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, endpoint, json={"test": "test"}, status=200)

        response = base_client.get(
            "test_endpoint", QueryString({"flag": True})
        )

    assert response == {"test": "test"}


@pytest.mark.parametrize(
    "status_code, exception",
    [
        (400, BadRequest),
        (401, Unauthorized),
        (404, NotFound),
        (422, UnprocessibleEntity),
    ],
)
def test_client_raises_darwin(
    status_code: int, exception: DarwinException, base_client: ClientCore
) -> None:
    endpoint = base_client.config.api_endpoint + "test_endpoint"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, endpoint, json={"test": "test"}, status=status_code)
        with pytest.raises(exception):  # type: ignore
            base_client.get("test_endpoint")
        rsps.reset()
        rsps.add(responses.POST, endpoint, json={"test": "test"}, status=status_code)
        with pytest.raises(exception):  # type: ignore
            base_client.post("test_endpoint", {"test": "test"})


def test_client_raises_generic(base_client: ClientCore) -> None:
    endpoint = base_client.config.api_endpoint + "test_endpoint"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, endpoint, json={"test": "test"}, status=403)
        with pytest.raises(HTTPError):
            base_client.get("test_endpoint")
