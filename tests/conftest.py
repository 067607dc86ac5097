"""Shared fixtures for the task manager tests."""

import json
from urllib.parse import urlsplit

import pytest

from app import create_app
from client.api_client import TaskApiClient, TaskApiError, TaskRecord
from core.task_store import TaskStore


@pytest.fixture
def app():
    """Fresh application with its own in-memory database."""
    application = create_app('testing')
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield TaskStore()


class FlaskTestResponse:
    """Minimal requests.Response look-alike over a Flask test response."""

    def __init__(self, response):
        self.status_code = response.status_code
        self.content = response.data
        self.text = response.get_data(as_text=True)

    def json(self):
        return json.loads(self.text)


class FlaskTestSession:
    """Routes requests.Session.request calls into the Flask test client."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        parts = urlsplit(url)
        self.calls.append((method, parts.path, json))
        response = self.test_client.open(parts.path, method=method, json=json)
        return FlaskTestResponse(response)


@pytest.fixture
def api_session(client):
    return FlaskTestSession(client)


@pytest.fixture
def api_client(api_session):
    return TaskApiClient('http://testserver/api', session=api_session)


class FakeTaskApi:
    """In-process stand-in for TaskApiClient used by view tests."""

    def __init__(self, tasks=None):
        self.tasks = list(tasks or [])
        self.next_id = max((task.id for task in self.tasks), default=0) + 1
        self.fail = False
        self.calls = []

    def _check(self, name, *args):
        self.calls.append((name,) + args)
        if self.fail:
            raise TaskApiError('backend unavailable')

    def list_tasks(self):
        self._check('list_tasks')
        return list(self.tasks)

    def create_task(self, description):
        self._check('create_task', description)
        task = TaskRecord(self.next_id, description, False, '2026-01-01T00:00:00Z')
        self.next_id += 1
        self.tasks.append(task)
        return task

    def update_task(self, task_id, is_completed):
        self._check('update_task', task_id, is_completed)
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                updated = TaskRecord(task.id, task.description, is_completed, task.created_at)
                self.tasks[index] = updated
                return updated
        raise TaskApiError(f'Task with ID {task_id} not found', status_code=404)

    def delete_task(self, task_id):
        self._check('delete_task', task_id)
        before = len(self.tasks)
        self.tasks = [task for task in self.tasks if task.id != task_id]
        if len(self.tasks) == before:
            raise TaskApiError(f'Task with ID {task_id} not found', status_code=404)


@pytest.fixture
def fake_api():
    return FakeTaskApi()
