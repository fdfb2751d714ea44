"""Centralized Wunderlist constant definitions."""

from enum import StrEnum

BASE_URL = "https://a.wunderlist.com/api/v1/"


class Verb(StrEnum):
    GET = "get"
    GET_ALL = "get_all"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Scenario(StrEnum):
    CREATE = "create"
    UPDATE = "update"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


VERB_TO_HTTP_METHOD: dict[Verb, HttpMethod] = {
    Verb.GET: HttpMethod.GET,
    Verb.GET_ALL: HttpMethod.GET,
    Verb.CREATE: HttpMethod.POST,
    Verb.UPDATE: HttpMethod.PATCH,
    Verb.DELETE: HttpMethod.DELETE,
}

ALL_VERBS: frozenset[Verb] = frozenset(Verb)
VALID_SCENARIOS: frozenset[Scenario] = frozenset(Scenario)


class Resource(StrEnum):
    AVATAR = "avatar"
    PREVIEWS = "previews"
    FOLDERS = "folders"
    LISTS = "lists"
    MEMBERSHIPS = "memberships"
    NOTES = "notes"
    POSITIONS = "positions"
    LIST_POSITIONS = "list_positions"
    TASK_POSITIONS = "task_positions"
    SUBTASK_POSITIONS = "subtask_positions"
    REMINDERS = "reminders"
    ROOT = "root"
    SUBTASKS = "subtasks"
    TASKS = "tasks"
    TASK_COMMENTS = "task_comments"
    USER = "user"


ALLOWED_ENDPOINTS: tuple[str, ...] = tuple(resource.value for resource in Resource)

POSITION_SEGMENTS: tuple[str, ...] = (
    Resource.LIST_POSITIONS,
    Resource.TASK_POSITIONS,
    Resource.SUBTASK_POSITIONS,
)

CLIENT_ID_HEADER = "X-Client-ID"
ACCESS_TOKEN_HEADER = "X-Access-Token"

RECURRENCE_TYPES: tuple[str, ...] = ("day", "week", "month", "year")
MEMBERSHIP_ACCEPTED_STATE = "accepted"

PREVIEW_PLATFORMS: tuple[str, ...] = ("mac", "web", "windows", "iphone", "ipad", "android")
PREVIEW_SIZES: tuple[str, ...] = ("nonretina", "retina")
AVATAR_SIZES: tuple[int, ...] = (25, 28, 30, 32, 50, 54, 56, 60, 64, 108, 128, 135, 256, 270, 512)

MAX_STRING_LENGTH = 255
