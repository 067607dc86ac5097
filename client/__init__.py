"""
Task Manager 客户端

- api_client: HTTP API 客户端
- view: 任务列表视图（本地状态与渲染）
- cli: 交互式终端入口
"""

from .api_client import TaskApiClient, TaskApiError, TaskRecord
from .view import TaskListView

__all__ = [
    'TaskApiClient',
    'TaskApiError',
    'TaskRecord',
    'TaskListView',
]
