import asyncio
from typing import Any, Awaitable, Callable, Optional

from .api_client import ApiClient
from .client import GitHubOrgClient
from .settings import ClientSettings, load_client_settings

ApiClientFactory = Callable[[ClientSettings], Any]
Operation = Callable[[GitHubOrgClient], Awaitable[Any]]


def _default_client_factory(settings: ClientSettings):
    return ApiClient(settings.base_url, settings.organization.token, settings.config_loader)


async def _run_with_client(settings: ClientSettings, operation: Operation, api_client_factory: ApiClientFactory) -> Any:
    async with api_client_factory(settings) as api_client:
        client = GitHubOrgClient(settings.organization.name, api_client)
        return await operation(client)


def run_client_sync(
    operation: Operation,
    settings: Optional[ClientSettings] = None,
    api_client_factory: ApiClientFactory = _default_client_factory,
    configure_logging: bool = False,
    **settings_kwargs: Any,
) -> Any:
    """
    Synchronous helper to run one client operation.

    Opens the API client, awaits ``operation(client)`` and closes it again.
    Meant for scripts that don't want to manage asyncio directly, e.g.

        run_client_sync(lambda client: client.get_team("platform"), organization="my-org")
    """
    if settings is None:
        settings = load_client_settings(**settings_kwargs)
    if configure_logging:
        settings.config_loader.setup_logging()
    return asyncio.run(_run_with_client(settings, operation, api_client_factory))
