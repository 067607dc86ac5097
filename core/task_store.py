"""
任务存储服务

封装任务的列表、创建、完成状态更新和删除操作。
数据保存在进程内的 SQLite 内存数据库中，进程退出即丢失。
"""

import logging
from sqlalchemy.exc import SQLAlchemyError

from models import db, Task
from api.base import APIException

logger = logging.getLogger(__name__)

# SQLite INTEGER 为 64 位有符号整数
MAX_TASK_ID = 2 ** 63 - 1


class TaskStoreError(APIException):
    """任务存储错误基类"""


class ValidationError(TaskStoreError):
    """任务数据校验失败"""

    status_code = 400
    error_code = 'VALIDATION_ERROR'


class NotFoundError(TaskStoreError):
    """任务不存在"""

    status_code = 404
    error_code = 'TASK_NOT_FOUND'

    def __init__(self, task_id):
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """任务存储，所有写操作在一个事务内完成"""

    def __init__(self, session=None):
        self.session = session or db.session

    def list_tasks(self):
        """按 id 升序返回全部任务"""
        return self.session.query(Task).order_by(Task.id.asc()).all()

    def get_task(self, task_id):
        # 超出 SQLite 整数范围的 id 不可能存在
        if not 0 < task_id <= MAX_TASK_ID:
            raise NotFoundError(task_id)
        task = self.session.get(Task, task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def create_task(self, description):
        """
        创建新任务

        Args:
            description: 任务描述，不能为空或只包含空白字符

        Returns:
            新创建的 Task

        Raises:
            ValidationError: 描述为空
        """
        if not isinstance(description, str) or not description.strip():
            raise ValidationError("Description is required")

        task = Task(description=description, is_completed=False)
        self._commit(lambda: self.session.add(task))
        logger.info("Task created: id=%s", task.id)
        return task

    def update_completion(self, task_id, is_completed):
        """覆盖任务的完成状态，其他字段保持不变"""
        task = self.get_task(task_id)

        def apply():
            task.is_completed = bool(is_completed)

        self._commit(apply)
        logger.info("Task updated: id=%s is_completed=%s", task.id, task.is_completed)
        return task

    def delete_task(self, task_id):
        task = self.get_task(task_id)
        self._commit(lambda: self.session.delete(task))
        logger.info("Task deleted: id=%s", task_id)

    def _commit(self, change):
        try:
            change()
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
