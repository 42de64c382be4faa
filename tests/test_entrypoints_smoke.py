from conftest import FakeApiClient, json_response
from github_org.entrypoints import run_client_sync
from github_org.models import Team


def test_run_client_sync_opens_client_and_runs_operation(tmp_path, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "token")
    created = []

    def factory(settings):
        assert settings.organization.token == "token"
        api = FakeApiClient([json_response({"id": 5, "name": "Platform", "slug": "platform"})])
        created.append(api)
        return api

    team = run_client_sync(
        lambda client: client.get_team("platform"),
        api_client_factory=factory,
        organization="navikt",
        config_file=str(tmp_path / "missing.json"),
    )

    assert team == Team(id=5, name="Platform", slug="platform")
    assert created[0].history[0]["path"] == "orgs/navikt/teams/platform"
