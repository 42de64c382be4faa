import json

import pytest

from github_org.auth import GitHubAuthenticator, JsonCredentialProvider, redact_headers
from github_org.errors import ConfigurationError


def test_bearer_headers():
    auth = GitHubAuthenticator("https://api.github.com")
    auth.set_api_token("ghp_secret")

    headers = auth.get_headers()

    assert headers["Authorization"] == "Bearer ghp_secret"
    assert headers["Accept"] == "application/json"


def test_empty_token_is_rejected():
    auth = GitHubAuthenticator("https://api.github.com")
    auth.set_api_token("")
    with pytest.raises(ConfigurationError):
        auth.setup_authentication()


def test_redact_headers():
    headers = {"Authorization": "Bearer ghp_secret", "Accept": "application/json"}
    redacted = redact_headers(headers)
    assert redacted["Authorization"] == "***REDACTED***"
    assert redacted["Accept"] == "application/json"
    assert headers["Authorization"] == "Bearer ghp_secret"


def test_json_credential_provider(tmp_path):
    path = tmp_path / "credential.json"
    path.write_text(json.dumps({"organizations": [{"name": "navikt", "token": "t"}]}))

    provider = JsonCredentialProvider(str(path))

    assert provider.get_organization_credentials("navikt")["token"] == "t"
    with pytest.raises(ValueError):
        provider.get_organization_credentials("other")


def test_json_credential_provider_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonCredentialProvider(str(tmp_path / "nope.json")).get_organization_credentials("navikt")
