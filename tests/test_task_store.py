"""Tests for the in-memory task store."""

import pytest

from core.task_store import NotFoundError, ValidationError


class TestCreate:

    def test_create_assigns_defaults(self, store):
        task = store.create_task('Buy milk')

        assert task.id == 1
        assert task.description == 'Buy milk'
        assert task.is_completed is False
        assert task.created_at is not None

    def test_ids_are_fresh_and_increasing(self, store):
        ids = [store.create_task(f'task {n}').id for n in range(5)]

        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_deleted_id_is_not_reused(self, store):
        first = store.create_task('first')
        store.delete_task(first.id)

        second = store.create_task('second')

        assert second.id > first.id

    @pytest.mark.parametrize('description', ['', '   ', '\t\n', None, 42])
    def test_blank_or_invalid_description_rejected(self, store, description):
        with pytest.raises(ValidationError) as excinfo:
            store.create_task(description)

        assert excinfo.value.status_code == 400
        assert excinfo.value.error_code == 'VALIDATION_ERROR'
        assert store.list_tasks() == []

    def test_description_stored_as_given(self, store):
        task = store.create_task('  padded  ')

        assert task.description == '  padded  '


class TestList:

    def test_empty(self, store):
        assert store.list_tasks() == []

    def test_ordered_by_ascending_id(self, store):
        for name in ('c', 'a', 'b'):
            store.create_task(name)

        tasks = store.list_tasks()

        assert [task.id for task in tasks] == [1, 2, 3]
        assert [task.description for task in tasks] == ['c', 'a', 'b']


class TestUpdateCompletion:

    def test_changes_only_completion(self, store):
        task = store.create_task('Buy milk')
        created_at = task.created_at

        updated = store.update_completion(task.id, True)

        assert updated.is_completed is True
        assert updated.description == 'Buy milk'
        assert updated.created_at == created_at

    def test_can_be_reset(self, store):
        task = store.create_task('Buy milk')
        store.update_completion(task.id, True)

        assert store.update_completion(task.id, False).is_completed is False

    def test_unknown_id(self, store):
        with pytest.raises(NotFoundError) as excinfo:
            store.update_completion(99, True)

        assert excinfo.value.status_code == 404
        assert excinfo.value.task_id == 99
        assert 'Task with ID 99 not found' in excinfo.value.message


class TestDelete:

    def test_removes_from_listing(self, store):
        keep = store.create_task('keep')
        drop = store.create_task('drop')

        store.delete_task(drop.id)

        assert [task.id for task in store.list_tasks()] == [keep.id]

    def test_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.delete_task(1)

    def test_twice(self, store):
        task = store.create_task('once')
        store.delete_task(task.id)

        with pytest.raises(NotFoundError):
            store.delete_task(task.id)


@pytest.mark.parametrize('task_id', [0, -1, 2 ** 63, 10 ** 20])
def test_ids_outside_sqlite_range_are_not_found(store, task_id):
    with pytest.raises(NotFoundError):
        store.get_task(task_id)
