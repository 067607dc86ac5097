"""Tests for application wiring: service routes, middleware and error envelope."""

from app import SAMPLE_TASKS, create_app


def test_index(client):
    body = client.get('/').get_json()

    assert body['service'] == 'Task Manager API'
    assert body['status'] == 'running'


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'healthy'
    assert body['database'] == 'connected'
    assert body['tasks'] == 0


def test_docs_enabled_in_testing(client):
    response = client.get('/api/docs')

    assert response.status_code == 200
    assert 'tasks' in response.get_json()['endpoints']


def test_docs_can_be_disabled(monkeypatch):
    from core.config import TestingConfig
    monkeypatch.setattr(TestingConfig, 'ENABLE_API_DOCS', False)

    assert create_app('testing').test_client().get('/api/docs').status_code == 404


def test_unknown_route_uses_error_envelope(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    body = response.get_json()
    assert body['success'] is False
    assert body['error']['status_code'] == 404
    assert body['error']['path'] == '/api/nothing-here'


def test_method_not_allowed(client):
    response = client.patch('/api/tasks/1', json={'isCompleted': True})

    assert response.status_code == 405
    assert response.get_json()['error']['status_code'] == 405


def test_request_id_header(client):
    response = client.get('/api/tasks')

    assert response.headers['X-Request-ID']
    assert response.headers['X-Response-Time'].endswith('s')


def test_cors_allows_configured_origin(client):
    response = client.get('/api/tasks', headers={'Origin': 'http://localhost:5173'})

    assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:5173'


def test_cors_rejects_other_origin(client):
    response = client.get('/api/tasks', headers={'Origin': 'http://evil.example'})

    assert 'Access-Control-Allow-Origin' not in response.headers


def test_each_app_has_its_own_store():
    first = create_app('testing').test_client()
    second = create_app('testing').test_client()

    first.post('/api/tasks', json={'description': 'only in first'})

    assert len(first.get('/api/tasks').get_json()) == 1
    assert second.get('/api/tasks').get_json() == []


def test_seed_sample_tasks(monkeypatch):
    from core.config import TestingConfig
    monkeypatch.setattr(TestingConfig, 'SEED_SAMPLE_TASKS', True)

    client = create_app('testing').test_client()

    body = client.get('/api/tasks').get_json()
    assert [task['description'] for task in body] == SAMPLE_TASKS


def test_unhandled_error_returns_500(app, monkeypatch):
    from core.task_store import TaskStore

    def broken(self):
        raise RuntimeError('storage unavailable')

    monkeypatch.setattr(TaskStore, 'list_tasks', broken)
    app.config['PROPAGATE_EXCEPTIONS'] = False

    response = app.test_client().get('/api/tasks')

    assert response.status_code == 500
    assert response.get_json()['error']['message'] == 'An unexpected error occurred'


def test_production_logging_honours_log_level(tmp_path, monkeypatch):
    import logging
    from logging.handlers import RotatingFileHandler
    from core.config import ProductionConfig

    monkeypatch.setattr(ProductionConfig, 'LOG_FILE', str(tmp_path / 'logs' / 'app.log'))
    monkeypatch.setattr(ProductionConfig, 'LOG_LEVEL', 'WARNING')

    app = create_app('production')
    file_handlers = [h for h in app.logger.handlers if isinstance(h, RotatingFileHandler)]
    try:
        assert app.logger.level == logging.WARNING
        assert [h.level for h in file_handlers] == [logging.WARNING]
        assert (tmp_path / 'logs' / 'app.log').exists()
    finally:
        for handler in file_handlers:
            app.logger.removeHandler(handler)
            handler.close()


def test_unknown_log_level_falls_back_to_info(app):
    from core.logging_config import resolve_log_level
    import logging

    app.config['LOG_LEVEL'] = 'chatty'

    assert resolve_log_level(app) == logging.INFO
