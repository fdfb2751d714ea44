"""Wunderlist API endpoints and transport."""

from .client import (
    EndpointCallResult,
    PreparedRequest,
    RequestsTransport,
    TimeoutSettings,
    Transport,
)
from .endpoint import RequestState, WunderlistEndpoint
from .factory import WunderlistService
from .resources import (
    AvatarEndpoint,
    FoldersEndpoint,
    ListsEndpoint,
    MembershipsEndpoint,
    NotesEndpoint,
    PositionsEndpoint,
    PreviewsEndpoint,
    RemindersEndpoint,
    RootEndpoint,
    SubtasksEndpoint,
    TaskCommentsEndpoint,
    TasksEndpoint,
    UserEndpoint,
)

__all__ = [
    "AvatarEndpoint",
    "EndpointCallResult",
    "FoldersEndpoint",
    "ListsEndpoint",
    "MembershipsEndpoint",
    "NotesEndpoint",
    "PositionsEndpoint",
    "PreparedRequest",
    "PreviewsEndpoint",
    "RemindersEndpoint",
    "RequestState",
    "RequestsTransport",
    "RootEndpoint",
    "SubtasksEndpoint",
    "TaskCommentsEndpoint",
    "TasksEndpoint",
    "TimeoutSettings",
    "Transport",
    "UserEndpoint",
    "WunderlistEndpoint",
    "WunderlistService",
]
