"""
Concrete Wunderlist resources.

Each resource declares its schema in :mod:`wunderlist.schemas` and only overrides the hooks or URL
builders where it deviates from the generic pipeline.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Mapping

from wunderlist.api.client import EndpointCallResult, PreparedRequest, Transport
from wunderlist.api.endpoint import WunderlistEndpoint
from wunderlist.constants import (
    AVATAR_SIZES,
    BASE_URL,
    MEMBERSHIP_ACCEPTED_STATE,
    POSITION_SEGMENTS,
    PREVIEW_PLATFORMS,
    PREVIEW_SIZES,
    RECURRENCE_TYPES,
    Resource,
    Scenario,
    Verb,
)
from wunderlist.errors import (
    AbstractEndpointError,
    CrossFieldValidationError,
    MissingIdentifierError,
    MissingListIdError,
    MissingTaskIdError,
    ParamValidationError,
)
from wunderlist.schemas import get_schema
from wunderlist.utils import build_query
from wunderlist.validation import NUMERIC


class ParentTaskMixin:
    """Children of a task get their ``task_id`` from the scoping context when creating."""

    def prepare(self, scenario: Scenario) -> None:
        payload = self.get_payload()
        if scenario != Scenario.CREATE or payload.get('task_id'):
            return
        payload['task_id'] = self.get_task_id()


class ScopedListingMixin:
    """Listings that need a task or list id as a query parameter."""

    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET_ALL:
            return
        self.set_params(self.get_list_or_task())

    def build_get_all(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET_ALL, build_query(url, self.get_params()))


class ListsEndpoint(WunderlistEndpoint):
    def tasks(self) -> TasksEndpoint:
        try:
            list_id = self.get_id()
        except MissingIdentifierError as e:
            raise MissingListIdError('In order to get a task for lists, the list id has to be specified') from e
        return self._spawn(TasksEndpoint, Resource.TASKS).set_params({'list_id': list_id})


class FoldersEndpoint(WunderlistEndpoint):
    def get_folder_revisions(self) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET)
        return self.execute('folder_revisions', Verb.GET)


class TasksEndpoint(WunderlistEndpoint):
    def notes(self) -> NotesEndpoint:
        try:
            task_id = self.get_id()
        except MissingIdentifierError as e:
            raise MissingTaskIdError('In order to get notes, the Task ID has to be specified') from e
        return self._spawn(NotesEndpoint, Resource.NOTES).set_params({'task_id': task_id})

    def prepare(self, scenario: Scenario) -> None:
        payload = self.get_payload()
        if scenario != Scenario.CREATE or payload.get('list_id'):
            return
        payload['list_id'] = self.get_list_id()

    def post_validation(self, scenario: Scenario) -> None:
        payload = self.get_payload()
        recurrence_type = payload.get('recurrence_type')
        recurrence_count = payload.get('recurrence_count')
        if not recurrence_type and not recurrence_count:
            return
        if not recurrence_type or not recurrence_count:
            raise CrossFieldValidationError(
                self.resource_name, 'recurrence type and recurrence count need to be present at the same time'
            )
        if recurrence_type not in RECURRENCE_TYPES:
            raise CrossFieldValidationError(
                self.resource_name,
                f"recurrence type does not match any valid option [{', '.join(RECURRENCE_TYPES)}]",
            )

    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET_ALL:
            return
        params = self.get_params()
        if not params.get('list_id'):
            raise MissingListIdError('List ID is needed to get Tasks')
        if 'completed' in params:
            params['completed'] = bool(params['completed'])

    def build_get_all(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET_ALL, build_query(url, self.get_params()))

    def build_create(self, url: str) -> PreparedRequest:
        list_id = self.get_payload().get('list_id') or self.get_list_id()
        return self._request(Verb.CREATE, build_query(url, {'list_id': list_id}), self.get_payload())


class NotesEndpoint(ParentTaskMixin, WunderlistEndpoint):
    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET_ALL:
            return
        if not self.get_params().get('task_id'):
            raise MissingTaskIdError('Task ID is required to retrieve Notes')

    def build_get_all(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET_ALL, build_query(url, self.get_params()))


class SubtasksEndpoint(ParentTaskMixin, ScopedListingMixin, WunderlistEndpoint):
    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET_ALL:
            return
        params = self.get_list_or_task()
        previous = self.get_params()
        if 'completed' in previous:
            params['completed'] = bool(previous['completed'])
        self.set_params(params)


class RemindersEndpoint(ParentTaskMixin, ScopedListingMixin, WunderlistEndpoint):
    pass


class TaskCommentsEndpoint(ParentTaskMixin, ScopedListingMixin, WunderlistEndpoint):
    pass


class MembershipsEndpoint(WunderlistEndpoint):
    def post_validation(self, scenario: Scenario) -> None:
        payload = self.get_payload()
        if scenario == Scenario.CREATE and not payload.get('user_id') and not payload.get('email'):
            raise CrossFieldValidationError(self.resource_name, 'creation requires either a user_id or email')
        if scenario == Scenario.UPDATE and payload.get('state') != MEMBERSHIP_ACCEPTED_STATE:
            raise CrossFieldValidationError(
                self.resource_name, f'update requires state to be {MEMBERSHIP_ACCEPTED_STATE}'
            )


class PositionsEndpoint(WunderlistEndpoint):
    """
    Ordering of lists, tasks or subtasks.
    ``positions`` itself has no URL; only the ``list_positions``, ``task_positions`` and
    ``subtask_positions`` segments can be called.
    """

    def __init__(
        self,
        name: str | None,
        *,
        transport: Transport,
        headers: Mapping[str, str],
        base_url: str = BASE_URL,
    ):
        segment = name if name in POSITION_SEGMENTS else None
        super().__init__(
            segment,
            transport=transport,
            headers=headers,
            schema=get_schema(Resource.POSITIONS),
            base_url=base_url,
        )
        if segment is None:
            raise AbstractEndpointError(
                f"Endpoint is null, the Positions endpoint needs to be called as {', '.join(POSITION_SEGMENTS)}"
            )

    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET_ALL:
            return
        if self.resource_name == Resource.TASK_POSITIONS:
            if not self.get_params().get('list_id'):
                raise MissingListIdError('List ID is required to retrieve task positions')
        elif self.resource_name == Resource.SUBTASK_POSITIONS:
            self.set_params(self.get_list_or_task())

    def build_get_all(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET_ALL, build_query(url, self.get_params()))


class UserEndpoint(WunderlistEndpoint):
    def get(self, identifier: int | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET)
        return self.execute(self.resource_name, Verb.GET)

    def get_all(self) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET_ALL)
        return self.execute('users', Verb.GET_ALL)


class RootEndpoint(WunderlistEndpoint):
    def get(self, identifier: int | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET)
        return self.execute(self.resource_name, Verb.GET)


class QueryOnlyEndpoint(WunderlistEndpoint):
    """GET-only resources addressed purely through query parameters."""

    def get(self, identifier: int | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET)
        return self.execute(self.resource_name, Verb.GET)

    def build_get(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET, build_query(url, self.get_params()))


def _require_param(params: Mapping[str, Any], name: str, message: str) -> Any:
    value = params.get(name)
    if not value:
        raise ParamValidationError(message)
    NUMERIC.validate(value, name)
    return value


class AvatarEndpoint(QueryOnlyEndpoint):
    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET:
            return
        params = self.get_params()
        _require_param(params, 'user_id', 'User ID is required for avatar endpoint')
        size = params.get('size')
        if size is not None and str(size) not in {str(option) for option in AVATAR_SIZES}:
            raise ParamValidationError(
                f"Size attribute is not one of the following: {', '.join(map(str, AVATAR_SIZES))}"
            )
        if 'fallback' in params:
            params['fallback'] = bool(params['fallback'])


class PreviewsEndpoint(QueryOnlyEndpoint):
    def validate_params(self, verb: Verb) -> None:
        if verb != Verb.GET:
            return
        params = self.get_params()
        _require_param(params, 'file_id', 'file_id is needed in file preview')
        if params.get('platform') not in PREVIEW_PLATFORMS:
            raise ParamValidationError(
                f"Invalid platform name. Supported elements are: {', '.join(PREVIEW_PLATFORMS)}"
            )
        if params.get('size') not in PREVIEW_SIZES:
            raise ParamValidationError(f"Invalid size. Supported sizes are: {', '.join(PREVIEW_SIZES)}")


ENDPOINT_TYPES: dict[str, type[WunderlistEndpoint]] = {
    Resource.AVATAR: AvatarEndpoint,
    Resource.PREVIEWS: PreviewsEndpoint,
    Resource.FOLDERS: FoldersEndpoint,
    Resource.LISTS: ListsEndpoint,
    Resource.MEMBERSHIPS: MembershipsEndpoint,
    Resource.NOTES: NotesEndpoint,
    Resource.POSITIONS: PositionsEndpoint,
    Resource.LIST_POSITIONS: PositionsEndpoint,
    Resource.TASK_POSITIONS: PositionsEndpoint,
    Resource.SUBTASK_POSITIONS: PositionsEndpoint,
    Resource.REMINDERS: RemindersEndpoint,
    Resource.ROOT: RootEndpoint,
    Resource.SUBTASKS: SubtasksEndpoint,
    Resource.TASKS: TasksEndpoint,
    Resource.TASK_COMMENTS: TaskCommentsEndpoint,
    Resource.USER: UserEndpoint,
}
