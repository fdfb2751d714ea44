"""
Tests for resource specific behaviour in wunderlist.api.resources.
"""
import pytest

from wunderlist.api.resources import (
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
from wunderlist.constants import BASE_URL, Scenario
from wunderlist.errors import (
    AbstractEndpointError,
    CrossFieldValidationError,
    MethodNotAllowedError,
    MissingListIdError,
    MissingTaskIdError,
    ParamValidationError,
    ValidationError,
)


# Tasks
def test_create_task_end_to_end(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    tasks.create({"list_id": 10, "title": "Buy milk", "revision": None})

    call = transport.last
    assert call.method == "POST"
    assert call.url == f"{BASE_URL}tasks?list_id=10"
    assert call.body == {"list_id": 10, "title": "Buy milk"}
    assert "revision" not in call.body


def test_create_task_injects_list_id_from_context(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks").set_list_id(10)
    tasks.create({"title": "Buy milk"})

    assert transport.last.url == f"{BASE_URL}tasks?list_id=10"
    assert transport.last.body == {"title": "Buy milk", "list_id": 10}


def test_create_task_without_list_context(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    with pytest.raises(MissingListIdError):
        tasks.create({"title": "Buy milk"})
    assert transport.calls == []


def test_update_task_does_not_inject_list_id(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks").set_list_id(10)
    tasks.set_id(3).update({"title": "Buy oat milk", "revision": 4})

    assert transport.last.url == f"{BASE_URL}tasks/3"
    assert transport.last.body == {"title": "Buy oat milk", "revision": 4}


def test_task_accepts_explicit_false(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    tasks.create({"list_id": 1, "title": "x", "starred": False, "completed": False})
    assert transport.last.body["starred"] is False


@pytest.mark.parametrize("payload", [
    {"recurrence_type": "week"},
    {"recurrence_count": 2},
])
def test_task_recurrence_fields_come_together(make_endpoint, payload):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    tasks.set_payload({"list_id": 1, "title": "Water plants", **payload})
    with pytest.raises(CrossFieldValidationError, match="same time"):
        tasks.validate(Scenario.CREATE)


def test_task_recurrence_type_must_be_known(make_endpoint):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    tasks.set_payload({"list_id": 1, "title": "Water plants", "recurrence_type": "fortnight", "recurrence_count": 2})
    with pytest.raises(CrossFieldValidationError, match="day, week, month, year"):
        tasks.validate(Scenario.CREATE)


def test_task_recurrence_valid(make_endpoint):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    tasks.set_payload({"list_id": 1, "title": "Water plants", "recurrence_type": "week", "recurrence_count": 2})
    tasks.validate(Scenario.CREATE)


def test_get_all_tasks_requires_list_id(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks")
    with pytest.raises(MissingListIdError):
        tasks.get_all()
    assert transport.calls == []


def test_get_all_tasks_coerces_completed(make_endpoint, transport):
    tasks = make_endpoint(TasksEndpoint, "tasks").set_params({"list_id": 5, "completed": 1})
    tasks.get_all()
    assert transport.last.url == f"{BASE_URL}tasks?list_id=5&completed=true"


def test_list_tasks_navigation(make_endpoint, transport):
    lists = make_endpoint(ListsEndpoint, "lists").set_id(5)
    tasks = lists.tasks()

    assert isinstance(tasks, TasksEndpoint)
    assert tasks is not lists
    tasks.get_all()
    assert transport.last.url == f"{BASE_URL}tasks?list_id=5"


def test_list_tasks_navigation_requires_id(make_endpoint):
    with pytest.raises(MissingListIdError, match="list id has to be specified"):
        make_endpoint(ListsEndpoint, "lists").tasks()


# Notes
def test_task_notes_navigation(make_endpoint, transport):
    notes = make_endpoint(TasksEndpoint, "tasks").set_id(8).notes()
    assert isinstance(notes, NotesEndpoint)

    notes.get_all()
    assert transport.last.url == f"{BASE_URL}notes?task_id=8"

    notes.create({"content": "Semi-skimmed"})
    assert transport.last.url == f"{BASE_URL}notes"
    assert transport.last.body == {"content": "Semi-skimmed", "task_id": 8}


def test_task_notes_navigation_requires_id(make_endpoint):
    with pytest.raises(MissingTaskIdError):
        make_endpoint(TasksEndpoint, "tasks").notes()


def test_get_all_notes_requires_task_id(make_endpoint):
    with pytest.raises(MissingTaskIdError):
        make_endpoint(NotesEndpoint, "notes").get_all()


def test_note_update_forbids_task_id(make_endpoint):
    notes = make_endpoint(NotesEndpoint, "notes").set_id(2)
    with pytest.raises(ValidationError) as exc_info:
        notes.update({"task_id": 8, "content": "x", "revision": 1})
    assert exc_info.value.property == "task_id"


# Subtasks, reminders, task comments
def test_get_all_subtasks_keeps_completed(make_endpoint, transport):
    subtasks = make_endpoint(SubtasksEndpoint, "subtasks").set_params({"list_id": 3, "completed": 0, "other": 1})
    subtasks.get_all()
    assert transport.last.url == f"{BASE_URL}subtasks?list_id=3&completed=false"


def test_create_subtask_injects_task_id(make_endpoint, transport):
    subtasks = make_endpoint(SubtasksEndpoint, "subtasks").set_task_id(4)
    subtasks.create({"title": "Check fridge"})
    assert transport.last.body == {"title": "Check fridge", "task_id": 4}


def test_get_all_reminders(make_endpoint, transport):
    reminders = make_endpoint(RemindersEndpoint, "reminders")
    with pytest.raises(MissingTaskIdError):
        reminders.get_all()
    reminders.set_params({"task_id": 2}).get_all()
    assert transport.last.url == f"{BASE_URL}reminders?task_id=2"


def test_reminders_have_no_single_get(make_endpoint):
    with pytest.raises(MethodNotAllowedError):
        make_endpoint(RemindersEndpoint, "reminders").get(1)


def test_create_reminder(make_endpoint, transport):
    reminders = make_endpoint(RemindersEndpoint, "reminders").set_task_id(4)
    reminders.create({"date": "2024-01-15T09:00:00Z"})
    assert transport.last.body == {"date": "2024-01-15T09:00:00Z", "task_id": 4}


def test_create_reminder_rejects_bad_date(make_endpoint):
    reminders = make_endpoint(RemindersEndpoint, "reminders").set_task_id(4)
    with pytest.raises(ValidationError):
        reminders.create({"date": "tomorrow"})


def test_task_comments(make_endpoint, transport):
    comments = make_endpoint(TaskCommentsEndpoint, "task_comments").set_params({"task_id": 6})
    comments.create({"text": "Done?"})
    assert transport.last.body == {"text": "Done?", "task_id": 6}

    comments.get_all()
    assert transport.last.url == f"{BASE_URL}task_comments?task_id=6"

    with pytest.raises(MethodNotAllowedError):
        comments.set_id(1).update({"text": "x", "revision": 1})


# Memberships
def test_membership_requires_user_or_email(make_endpoint, transport):
    memberships = make_endpoint(MembershipsEndpoint, "memberships")
    with pytest.raises(CrossFieldValidationError, match="user_id or email"):
        memberships.create({"list_id": 1})
    assert transport.calls == []


@pytest.mark.parametrize("extra", [{"user_id": 7}, {"email": "friend@example.com"}])
def test_membership_create(make_endpoint, transport, extra):
    memberships = make_endpoint(MembershipsEndpoint, "memberships")
    memberships.create({"list_id": 1, **extra})
    assert transport.last.body == {"list_id": 1, **extra}


def test_membership_create_rejects_state(make_endpoint):
    memberships = make_endpoint(MembershipsEndpoint, "memberships")
    with pytest.raises(ValidationError) as exc_info:
        memberships.create({"list_id": 1, "user_id": 7, "state": "accepted"})
    assert exc_info.value.property == "state"


def test_membership_update_requires_accepted_state(make_endpoint, transport):
    memberships = make_endpoint(MembershipsEndpoint, "memberships").set_id(3)
    with pytest.raises(CrossFieldValidationError, match="accepted"):
        memberships.update({"revision": 1, "state": "pending"})

    memberships.update({"revision": 1, "state": "accepted", "muted": False})
    assert transport.last.method == "PATCH"
    assert transport.last.url == f"{BASE_URL}memberships/3"


# Positions
def test_positions_is_abstract(make_endpoint):
    with pytest.raises(AbstractEndpointError, match="list_positions, task_positions, subtask_positions"):
        make_endpoint(PositionsEndpoint, "positions")


def test_list_positions(make_endpoint, transport):
    positions = make_endpoint(PositionsEndpoint, "list_positions")
    positions.get_all()
    assert transport.last.url == f"{BASE_URL}list_positions"

    positions.set_id(5).update({"values": [3, 1, 2], "revision": 1})
    assert transport.last.url == f"{BASE_URL}list_positions/5"
    assert transport.last.body == {"values": [3, 1, 2], "revision": 1}

    with pytest.raises(MethodNotAllowedError):
        positions.create({"values": [1]})


def test_positions_update_requires_values(make_endpoint):
    positions = make_endpoint(PositionsEndpoint, "task_positions").set_id(5)
    with pytest.raises(ValidationError) as exc_info:
        positions.update({"values": [], "revision": 1})
    assert exc_info.value.property == "values"


def test_task_positions_require_list_id(make_endpoint, transport):
    positions = make_endpoint(PositionsEndpoint, "task_positions")
    with pytest.raises(MissingListIdError):
        positions.get_all()
    positions.set_params({"list_id": 2}).get_all()
    assert transport.last.url == f"{BASE_URL}task_positions?list_id=2"


def test_subtask_positions_scope(make_endpoint, transport):
    positions = make_endpoint(PositionsEndpoint, "subtask_positions").set_params({"task_id": 9, "list_id": 2})
    positions.get_all()
    assert transport.last.url == f"{BASE_URL}subtask_positions?task_id=9"


# User, root, folders
def test_user_endpoints(make_endpoint, transport):
    user = make_endpoint(UserEndpoint, "user")
    user.get()
    assert transport.last.url == f"{BASE_URL}user"
    user.get_all()
    assert transport.last.url == f"{BASE_URL}users"
    with pytest.raises(MethodNotAllowedError):
        user.create({"name": "x"})


def test_root_endpoint(make_endpoint, transport):
    make_endpoint(RootEndpoint, "root").get()
    assert transport.last.url == f"{BASE_URL}root"


def test_folder_revisions(make_endpoint, transport):
    make_endpoint(FoldersEndpoint, "folders").get_folder_revisions()
    assert transport.last.url == f"{BASE_URL}folder_revisions"


def test_folder_create_requires_lists(make_endpoint, transport):
    folders = make_endpoint(FoldersEndpoint, "folders")
    with pytest.raises(ValidationError) as exc_info:
        folders.create({"title": "Home"})
    assert exc_info.value.property == "list_ids"

    folders.create({"title": "Home", "list_ids": [1, 2]})
    assert transport.last.body == {"title": "Home", "list_ids": [1, 2]}


# Avatar & previews
def test_avatar_query(make_endpoint, transport):
    avatar = make_endpoint(AvatarEndpoint, "avatar").set_params({"user_id": 5, "size": 64, "fallback": 1})
    avatar.get()
    assert transport.last.url == f"{BASE_URL}avatar?user_id=5&size=64&fallback=true"


def test_avatar_requires_user(make_endpoint, transport):
    with pytest.raises(ParamValidationError, match="User ID"):
        make_endpoint(AvatarEndpoint, "avatar").get()
    assert transport.calls == []


@pytest.mark.parametrize("size", [65, "huge", 0])
def test_avatar_rejects_unknown_size(make_endpoint, size):
    avatar = make_endpoint(AvatarEndpoint, "avatar").set_params({"user_id": 5, "size": size})
    with pytest.raises(ParamValidationError, match="Size attribute"):
        avatar.get()


def test_avatar_accepts_size_as_string(make_endpoint, transport):
    make_endpoint(AvatarEndpoint, "avatar").set_params({"user_id": 5, "size": "128"}).get()
    assert transport.last.url == f"{BASE_URL}avatar?user_id=5&size=128"


def test_avatar_is_get_only(make_endpoint):
    with pytest.raises(MethodNotAllowedError):
        make_endpoint(AvatarEndpoint, "avatar").get_all()


def test_previews_query(make_endpoint, transport):
    previews = make_endpoint(PreviewsEndpoint, "previews")
    previews.set_params({"file_id": 3, "platform": "web", "size": "retina"}).get()
    assert transport.last.url == f"{BASE_URL}previews?file_id=3&platform=web&size=retina"


@pytest.mark.parametrize("params, message", [
    ({"platform": "web", "size": "retina"}, "file_id"),
    ({"file_id": 3, "platform": "linux", "size": "retina"}, "platform"),
    ({"file_id": 3, "platform": "web", "size": "huge"}, "size"),
])
def test_previews_param_validation(make_endpoint, transport, params, message):
    previews = make_endpoint(PreviewsEndpoint, "previews").set_params(params)
    with pytest.raises(ParamValidationError, match=message):
        previews.get()
    assert transport.calls == []
