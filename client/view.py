"""
任务列表视图

保存客户端本地状态（任务列表、加载状态、错误信息、输入框内容），
每次请求返回后更新本地状态并触发重新渲染。
"""

import logging
from typing import Callable, List, Optional

from .api_client import TaskApiClient, TaskApiError, TaskRecord

logger = logging.getLogger(__name__)

TITLE = 'Task Manager'
LOADING_TEXT = 'Loading tasks...'
EMPTY_TEXT = 'No tasks yet. Add one to get started!'

FETCH_ERROR = 'Failed to fetch tasks. Please ensure the backend is running.'
EMPTY_DESCRIPTION_ERROR = 'Task description cannot be empty'
ADD_ERROR = 'Failed to add task'
UPDATE_ERROR = 'Failed to update task'
DELETE_ERROR = 'Failed to delete task'


class TaskListView:
    """单页任务列表视图"""

    def __init__(self, client: TaskApiClient, on_change: Optional[Callable[['TaskListView'], None]] = None):
        self.client = client
        self.on_change = on_change
        self.tasks: List[TaskRecord] = []
        self.new_task_description = ''
        self.loading = False
        self.error = ''

    @property
    def total_count(self) -> int:
        return len(self.tasks)

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self.tasks if task.is_completed)

    def find_task(self, task_id: int) -> Optional[TaskRecord]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def load(self) -> None:
        """获取任务列表"""
        self.loading = True
        self.error = ''
        self._changed()
        try:
            self.tasks = self.client.list_tasks()
        except TaskApiError as e:
            self.error = FETCH_ERROR
            logger.error(f"Error fetching tasks: {e}")
        finally:
            self.loading = False
            self._changed()

    def add_task(self, description: Optional[str] = None) -> Optional[TaskRecord]:
        """添加任务，空白描述在本地拒绝，不发送请求"""
        if description is not None:
            self.new_task_description = description

        if not self.new_task_description.strip():
            self.error = EMPTY_DESCRIPTION_ERROR
            self._changed()
            return None

        self.error = ''
        try:
            task = self.client.create_task(self.new_task_description)
        except TaskApiError as e:
            self.error = ADD_ERROR
            logger.error(f"Error adding task: {e}")
            self._changed()
            return None

        self.tasks = self.tasks + [task]
        self.new_task_description = ''
        self._changed()
        return task

    def toggle_task(self, task_id: int) -> Optional[TaskRecord]:
        """切换完成状态，发送取反后的值"""
        current = self.find_task(task_id)
        current_status = current.is_completed if current else False

        self.error = ''
        try:
            updated = self.client.update_task(task_id, not current_status)
        except TaskApiError as e:
            self.error = UPDATE_ERROR
            logger.error(f"Error updating task: {e}")
            self._changed()
            return None

        self.tasks = [updated if task.id == task_id else task for task in self.tasks]
        self._changed()
        return updated

    def delete_task(self, task_id: int) -> bool:
        self.error = ''
        try:
            self.client.delete_task(task_id)
        except TaskApiError as e:
            self.error = DELETE_ERROR
            logger.error(f"Error deleting task: {e}")
            self._changed()
            return False

        self.tasks = [task for task in self.tasks if task.id != task_id]
        self._changed()
        return True

    def render(self) -> str:
        """渲染为文本"""
        lines = [TITLE, '=' * len(TITLE)]

        if self.error:
            lines.append(f'! {self.error}')

        if self.loading:
            lines.append(LOADING_TEXT)
        elif not self.tasks:
            lines.append(EMPTY_TEXT)
        else:
            for task in self.tasks:
                mark = 'x' if task.is_completed else ' '
                lines.append(f'[{mark}] {task.id:>3}  {task.description}')

        lines.append(f'Total: {self.total_count} | Completed: {self.completed_count}')
        return '\n'.join(lines)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
