"""Validated request builders for the Wunderlist REST API."""

from wunderlist.api import WunderlistEndpoint, WunderlistService
from wunderlist.config import Configurator, Settings, get_configurator
from wunderlist.constants import Resource, Scenario, Verb
from wunderlist.version import get_version

__version__ = get_version()

__all__ = [
    "Configurator",
    "Resource",
    "Scenario",
    "Settings",
    "Verb",
    "WunderlistEndpoint",
    "WunderlistService",
    "get_configurator",
    "get_version",
]
