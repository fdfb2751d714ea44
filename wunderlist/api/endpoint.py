"""
Generic request builder shared by every Wunderlist resource.

An endpoint keeps the last configured request state (identifier, payload, query parameters and
scoping ids). Each public operation gates its verb, validates that state, turns it into an immutable
:class:`~wunderlist.api.client.PreparedRequest` and issues exactly one transport call.
Resources customise the pipeline through three hooks, all no-ops by default:

- ``prepare(scenario)`` runs before payload validation (e.g. injecting a parent id),
- ``post_validation(scenario)`` runs after field validation for cross-field checks,
- ``validate_params(verb)`` checks query parameters before the URL is built.
"""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Mapping

from loguru import logger

from wunderlist.api.client import EndpointCallResult, PreparedRequest, Transport
from wunderlist.constants import BASE_URL, VALID_SCENARIOS, VERB_TO_HTTP_METHOD, Scenario, Verb
from wunderlist.errors import (
    EmptyPayloadError,
    InvalidDeletePayloadError,
    InvalidScenarioError,
    MethodNotAllowedError,
    MissingIdentifierError,
    MissingListIdError,
    MissingSchemaError,
    MissingTaskIdError,
    NoValidFieldsError,
    UnknownFieldError,
    ValidationError,
)
from wunderlist.schemas import ResourceSchema, get_schema
from wunderlist.utils import build_query, drop_absent
from wunderlist.validation import NUMERIC


@dataclass
class RequestState:
    identifier: int | None = None
    payload: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    list_id: int | None = None
    task_id: int | None = None


class WunderlistEndpoint:
    def __init__(
        self,
        name: str | None,
        *,
        transport: Transport,
        headers: Mapping[str, str],
        schema: ResourceSchema | None = None,
        base_url: str = BASE_URL,
    ):
        self._resource_name = name
        self._transport = transport
        self._headers = dict(headers)
        self._base_url = base_url
        self._schema = schema if schema is not None else get_schema(name)
        self.state = RequestState()

    def __repr__(self):
        return f'{self.__class__.__name__}({self._resource_name!r}, id={self.state.identifier})'

    @property
    def resource_name(self) -> str | None:
        return self._resource_name

    @property
    def allowed_verbs(self) -> frozenset[Verb]:
        return self._schema.verbs

    @property
    def valid_fields(self) -> tuple[str, ...]:
        return self._schema.fields

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def _spawn(self, endpoint_cls: type[WunderlistEndpoint], name: str) -> WunderlistEndpoint:
        """Create a sibling endpoint sharing this endpoint's transport and credentials."""
        return endpoint_cls(name, transport=self._transport, headers=self._headers, base_url=self._base_url)

    # ---- request state ----

    def set_id(self, identifier: int | None) -> WunderlistEndpoint:
        self.state.identifier = identifier
        return self

    def get_id(self) -> int:
        identifier = self.state.identifier
        if isinstance(identifier, int) and not isinstance(identifier, bool) and identifier > 0:
            return identifier
        raise MissingIdentifierError(f"Invalid identifier for endpoint {self._resource_name}: {identifier!r}")

    def set_payload(self, payload: Mapping[str, Any]) -> WunderlistEndpoint:
        self.state.payload = dict(payload)
        return self

    def get_payload(self) -> dict[str, Any]:
        return self.state.payload

    def set_params(self, params: Mapping[str, Any]) -> WunderlistEndpoint:
        self.state.params = dict(params)
        return self

    def get_params(self) -> dict[str, Any]:
        return self.state.params

    def set_list_id(self, list_id: int | None) -> WunderlistEndpoint:
        self.state.list_id = list_id
        return self

    def get_list_id(self) -> int:
        list_id = self.state.list_id or self.state.params.get('list_id')
        if not list_id:
            raise MissingListIdError('List_id is not defined')
        NUMERIC.validate(list_id, 'list_id')
        return list_id

    def set_task_id(self, task_id: int | None) -> WunderlistEndpoint:
        self.state.task_id = task_id
        return self

    def get_task_id(self) -> int:
        task_id = self.state.task_id or self.state.params.get('task_id')
        if not task_id:
            raise MissingTaskIdError('Invalid task ID')
        NUMERIC.validate(task_id, 'task_id')
        return task_id

    def get_list_or_task(self) -> dict[str, Any]:
        params = self.state.params
        if params.get('task_id'):
            return {'task_id': params['task_id']}
        if params.get('list_id'):
            return {'list_id': params['list_id']}
        raise MissingTaskIdError('Task ID or List ID is required')

    def reset(self) -> WunderlistEndpoint:
        self.state = RequestState()
        return self

    # ---- verbs ----

    def method_enabled(self, verb: Verb) -> None:
        if verb not in self.allowed_verbs:
            raise MethodNotAllowedError(self._resource_name, verb)

    def get_all(self) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET_ALL)
        return self.execute(self._resource_name, Verb.GET_ALL)

    def get(self, identifier: int | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.GET)
        if identifier:
            self.set_id(identifier)
        return self.execute(f'{self._resource_name}/{self.get_id()}', Verb.GET)

    def create(self, payload: Mapping[str, Any] | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.CREATE)
        if payload is not None:
            self.set_payload(payload)
        if not self.state.payload:
            raise EmptyPayloadError(f'Cannot create a new child for {self._resource_name} without data')
        self.validate(Scenario.CREATE)
        return self.execute(self._resource_name, Verb.CREATE)

    def update(self, payload: Mapping[str, Any] | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.UPDATE)
        if payload is not None:
            self.set_payload(payload)
        if not self.state.payload:
            raise EmptyPayloadError(f'Cannot update child of {self._resource_name} without data')
        self.validate(Scenario.UPDATE)
        return self.execute(f'{self._resource_name}/{self.get_id()}', Verb.UPDATE)

    def delete(self, payload: Mapping[str, Any] | None = None) -> Future[EndpointCallResult]:
        self.method_enabled(Verb.DELETE)
        if payload is not None:
            self.set_payload(payload)
        payload = self.state.payload
        message = f'Revision is the only required element to delete a {self._resource_name} element'
        if set(payload) != {'revision'}:
            raise InvalidDeletePayloadError(message)
        try:
            NUMERIC.validate(payload['revision'], 'revision')
        except ValidationError as e:
            raise InvalidDeletePayloadError(message) from e
        return self.execute(build_query(f'{self._resource_name}/{self.get_id()}', payload), Verb.DELETE)

    # ---- validation ----

    def validate(self, scenario: Scenario) -> None:
        """
        Validate the current payload for ``scenario``.
        Runs the ``prepare`` hook, checks every payload key against the field whitelist, applies each rule
        of the scenario (fields missing from the payload are validated as empty) and finishes with the
        ``post_validation`` hook. The first failure is raised.
        """
        self.prepare(scenario)
        if scenario not in VALID_SCENARIOS:
            raise InvalidScenarioError(f'Scenario {scenario} is not valid. Valid scenarios are create and update.')

        valid_fields = self.valid_fields
        if not valid_fields:
            raise NoValidFieldsError(f'The endpoint {self._resource_name} has no defined valid fields')

        payload = self.state.payload
        if not payload:
            raise EmptyPayloadError('Data cannot be empty')

        for field_name in payload:
            if field_name not in valid_fields:
                raise UnknownFieldError(field_name, valid_fields)

        rules = self._schema.rules_for(scenario)
        if not rules:
            raise MissingSchemaError(f'Field validation is missing for {self._resource_name} scenario {scenario}')

        for field_name, rule in rules.items():
            rule.validate(payload.get(field_name), field_name)

        self.post_validation(scenario)
        logger.debug(f'Validated {self._resource_name} payload for {scenario}', fields=sorted(payload))

    def prepare(self, scenario: Scenario) -> None:
        pass

    def post_validation(self, scenario: Scenario) -> None:
        pass

    def validate_params(self, verb: Verb) -> None:
        pass

    # ---- dispatch ----

    def execute(self, path: str | None, verb: Verb) -> Future[EndpointCallResult]:
        self.validate_params(verb)
        request = self.build_request(verb, f'{self._base_url}{path}')
        logger.debug('Dispatching Wunderlist request', verb=verb, method=request.method, url=request.url)
        return self.send(request)

    def build_request(self, verb: Verb, url: str) -> PreparedRequest:
        builders = {
            Verb.GET: self.build_get,
            Verb.GET_ALL: self.build_get_all,
            Verb.CREATE: self.build_create,
            Verb.UPDATE: self.build_update,
            Verb.DELETE: self.build_delete,
        }
        return builders[verb](url)

    def _request(self, verb: Verb, url: str, body: Mapping[str, Any] | None = None) -> PreparedRequest:
        return PreparedRequest(
            verb=verb,
            method=VERB_TO_HTTP_METHOD[verb],
            url=url,
            headers=self.headers,
            body=None if body is None else drop_absent(body),
        )

    def build_get(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET, url)

    def build_get_all(self, url: str) -> PreparedRequest:
        return self._request(Verb.GET_ALL, url)

    def build_create(self, url: str) -> PreparedRequest:
        return self._request(Verb.CREATE, url, self.state.payload)

    def build_update(self, url: str) -> PreparedRequest:
        return self._request(Verb.UPDATE, url, self.state.payload)

    def build_delete(self, url: str) -> PreparedRequest:
        return self._request(Verb.DELETE, url)

    def send(self, request: PreparedRequest) -> Future[EndpointCallResult]:
        transport = self._transport
        if request.verb in (Verb.GET, Verb.GET_ALL):
            return transport.get_request(request.url, request.headers)
        if request.verb == Verb.CREATE:
            return transport.post_request(request.url, request.body or {}, request.headers)
        if request.verb == Verb.UPDATE:
            return transport.patch_request(request.url, request.body or {}, request.headers)
        return transport.delete_request(request.url, request.headers)
