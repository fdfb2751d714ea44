"""Per-resource field lists, allowed verbs and validation rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from wunderlist.constants import ALL_VERBS, Resource, Scenario, Verb
from wunderlist.errors import UnknownEndpointError
from wunderlist.validation import (
    ARRAY,
    BOOLEAN,
    DATE,
    EMAIL,
    EMPTY_REQUIRED,
    NUMERIC,
    STRING,
    FieldRule,
    optional,
    required,
)

Rules = Mapping[Scenario, Mapping[str, FieldRule]]


@dataclass(frozen=True, slots=True)
class ResourceSchema:
    """Everything an endpoint needs to know about the payload it accepts."""

    fields: tuple[str, ...] = ()
    verbs: frozenset[Verb] = ALL_VERBS
    rules: Rules = field(default_factory=dict)

    def rules_for(self, scenario: Scenario) -> Mapping[str, FieldRule]:
        return self.rules.get(scenario, {})


def _schema(fields: str = '', verbs: frozenset[Verb] = ALL_VERBS, **rules: Mapping[str, FieldRule]) -> ResourceSchema:
    scenario_rules = {Scenario(name.lower()): MappingProxyType(dict(table)) for name, table in rules.items()}
    return ResourceSchema(
        fields=tuple(name for name in fields.split(',') if name),
        verbs=verbs,
        rules=MappingProxyType(scenario_rules),
    )


_POSITIONS = _schema(
    'values,revision',
    verbs=frozenset({Verb.GET, Verb.GET_ALL, Verb.UPDATE}),
    UPDATE={
        'values': required(ARRAY),
        'revision': required(NUMERIC),
    },
)

SCHEMAS: Mapping[str, ResourceSchema] = MappingProxyType({
    Resource.LISTS: _schema(
        'title,revision',
        CREATE={
            'title': required(STRING),
            'revision': required(EMPTY_REQUIRED),
        },
        UPDATE={
            'title': required(STRING),
            'revision': required(NUMERIC),
        },
    ),
    Resource.FOLDERS: _schema(
        'title,revision,list_ids',
        CREATE={
            'title': required(STRING),
            'revision': required(EMPTY_REQUIRED),
            'list_ids': required(ARRAY),
        },
        UPDATE={
            'title': required(STRING),
            'revision': required(NUMERIC),
            'list_ids': optional(ARRAY),
        },
    ),
    Resource.TASKS: _schema(
        'list_id,title,assignee_id,completed,recurrence_type,recurrence_count,due_date,starred,revision,remove',
        CREATE={
            'list_id': required(NUMERIC),
            'title': required(STRING),
            'assignee_id': optional(NUMERIC),
            'completed': optional(BOOLEAN),
            'recurrence_type': optional(STRING),
            'recurrence_count': optional(NUMERIC),
            'due_date': optional(DATE),
            'starred': optional(BOOLEAN),
            'revision': required(EMPTY_REQUIRED),
            'remove': optional(ARRAY),
        },
        UPDATE={
            'list_id': optional(NUMERIC),
            'title': optional(STRING),
            'assignee_id': optional(NUMERIC),
            'completed': optional(BOOLEAN),
            'recurrence_type': optional(STRING),
            'recurrence_count': optional(NUMERIC),
            'due_date': optional(DATE),
            'starred': optional(BOOLEAN),
            'revision': required(NUMERIC),
            'remove': optional(ARRAY),
        },
    ),
    Resource.NOTES: _schema(
        'task_id,content,revision',
        CREATE={
            'task_id': required(NUMERIC),
            'content': required(STRING),
            'revision': required(EMPTY_REQUIRED),
        },
        UPDATE={
            'task_id': required(EMPTY_REQUIRED),
            'content': required(STRING),
            'revision': required(NUMERIC),
        },
    ),
    Resource.SUBTASKS: _schema(
        'task_id,title,completed,revision',
        CREATE={
            'revision': required(EMPTY_REQUIRED),
            'task_id': required(NUMERIC),
            'title': required(STRING),
            'completed': optional(BOOLEAN),
        },
        UPDATE={
            'revision': required(NUMERIC),
            'title': required(STRING),
            'completed': optional(BOOLEAN),
        },
    ),
    Resource.REMINDERS: _schema(
        'task_id,date,created_by_device_udid,revision',
        verbs=frozenset({Verb.GET_ALL, Verb.CREATE, Verb.UPDATE, Verb.DELETE}),
        CREATE={
            'task_id': required(NUMERIC),
            'date': required(DATE),
            'created_by_device_udid': optional(STRING),
            'revision': required(EMPTY_REQUIRED),
        },
        UPDATE={
            'revision': required(NUMERIC),
            'date': required(DATE),
            'created_by_device_udid': optional(STRING),
        },
    ),
    Resource.TASK_COMMENTS: _schema(
        'revision,task_id,text',
        verbs=frozenset({Verb.GET, Verb.GET_ALL, Verb.CREATE, Verb.DELETE}),
        CREATE={
            'revision': required(EMPTY_REQUIRED),
            'task_id': required(NUMERIC),
            'text': required(STRING),
        },
        UPDATE={
            'revision': required(NUMERIC),
            'text': required(STRING),
        },
    ),
    Resource.MEMBERSHIPS: _schema(
        'list_id,user_id,email,muted,state,revision',
        verbs=frozenset({Verb.GET_ALL, Verb.CREATE, Verb.UPDATE, Verb.DELETE}),
        CREATE={
            'list_id': required(NUMERIC),
            'user_id': optional(NUMERIC),
            'email': optional(EMAIL),
            'revision': required(EMPTY_REQUIRED),
            'muted': optional(BOOLEAN),
            'state': required(EMPTY_REQUIRED),
        },
        UPDATE={
            'revision': required(NUMERIC),
            'muted': optional(BOOLEAN),
            'state': required(STRING),
            'list_id': required(EMPTY_REQUIRED),
            'user_id': required(EMPTY_REQUIRED),
            'email': required(EMPTY_REQUIRED),
        },
    ),
    Resource.POSITIONS: _POSITIONS,
    Resource.LIST_POSITIONS: _POSITIONS,
    Resource.TASK_POSITIONS: _POSITIONS,
    Resource.SUBTASK_POSITIONS: _POSITIONS,
    Resource.USER: _schema(verbs=frozenset({Verb.GET, Verb.GET_ALL})),
    Resource.ROOT: _schema(verbs=frozenset({Verb.GET})),
    Resource.AVATAR: _schema(verbs=frozenset({Verb.GET})),
    Resource.PREVIEWS: _schema(verbs=frozenset({Verb.GET})),
})


def get_schema(name: str) -> ResourceSchema:
    try:
        return SCHEMAS[name]
    except KeyError as e:
        raise UnknownEndpointError(f"No schema defined for endpoint {name}") from e
