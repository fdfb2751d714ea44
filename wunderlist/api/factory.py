"""Endpoint factory: the entry point of the client."""

from __future__ import annotations

from loguru import logger

from wunderlist.api.client import RequestsTransport, Transport
from wunderlist.api.endpoint import WunderlistEndpoint
from wunderlist.api.resources import ENDPOINT_TYPES
from wunderlist.config import Configurator, get_configurator
from wunderlist.constants import ALLOWED_ENDPOINTS, BASE_URL
from wunderlist.errors import ConfigurationError, UnknownEndpointError


class WunderlistService:
    """
    Hands out endpoints by resource name.
    One endpoint instance is cached per resource name; the identifier is set again on every lookup.

    Example:
        service = WunderlistService(Configurator(client_id, token))
        service.get_endpoint('lists', 42).tasks().get_all()
    """

    def __init__(
        self,
        configurator: Configurator | None = None,
        transport: Transport | None = None,
        base_url: str = BASE_URL,
    ):
        self._configurator = configurator or get_configurator()
        if not self._configurator.is_configured:
            raise ConfigurationError('Token and Client ID are needed for the Wunderlist client to work')
        self._transport = transport if transport is not None else RequestsTransport.from_config()
        self._base_url = base_url
        self._instances: dict[str, WunderlistEndpoint] = {}

    def get_endpoint(self, name: str, identifier: int | None = None) -> WunderlistEndpoint:
        if name not in ALLOWED_ENDPOINTS:
            raise UnknownEndpointError(f'Cannot get endpoint {name}. Endpoint not implemented.')

        if name not in self._instances:
            logger.debug(f'Creating endpoint {name}')
            self._instances[name] = ENDPOINT_TYPES[name](
                name,
                transport=self._transport,
                headers=self._configurator.get_config(),
                base_url=self._base_url,
            )
        return self._instances[name].set_id(identifier)

    def close(self) -> None:
        """Shut down the transport; pending calls finish first."""
        logger.debug('Closing Wunderlist service', endpoints=sorted(self._instances))
        self._transport.close()
        self._instances.clear()

    def __enter__(self) -> WunderlistService:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
