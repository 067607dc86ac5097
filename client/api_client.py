"""
任务 API 客户端

基于 requests 的 HTTP 客户端，封装任务列表、创建、更新和删除接口
"""

import os
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:5100/api'
DEFAULT_TIMEOUT = 10


@dataclass
class TaskRecord:
    id: int
    description: str
    is_completed: bool
    created_at: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskRecord':
        return cls(
            id=data['id'],
            description=data['description'],
            is_completed=data['isCompleted'],
            created_at=data['createdAt'],
        )


class TaskApiError(Exception):
    """API 请求失败（网络错误、非 2xx 响应或响应格式不符）"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TaskApiClient:
    """Task Manager API 客户端"""

    def __init__(self, base_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or os.environ.get('TASK_API_URL') or DEFAULT_API_URL).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def list_tasks(self) -> List[TaskRecord]:
        data = self._request('GET', '/tasks')
        if not isinstance(data, list):
            raise TaskApiError(f"Unexpected response: expected a task list, got {type(data).__name__}")
        return [self._decode_task(item) for item in data]

    def create_task(self, description: str) -> TaskRecord:
        data = self._request('POST', '/tasks', json={'description': description})
        return self._decode_task(data)

    def update_task(self, task_id: int, is_completed: bool) -> TaskRecord:
        data = self._request('PUT', f'/tasks/{task_id}', json={'isCompleted': is_completed})
        return self._decode_task(data)

    def delete_task(self, task_id: int) -> None:
        self._request('DELETE', f'/tasks/{task_id}')

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        """发送请求，失败时抛出 TaskApiError"""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TaskApiError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.error(f"{method} {url} returned {response.status_code}: {message}")
            raise TaskApiError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TaskApiError(f"Invalid JSON response from {url}", status_code=response.status_code) from e

    @staticmethod
    def _decode_task(data: Any) -> TaskRecord:
        """解析任务数据，格式不符时抛出 TaskApiError"""
        try:
            return TaskRecord.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected task payload: {data!r}")
            raise TaskApiError(f"Unexpected response: {e!r}") from e

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            return body['error'].get('message') or f"HTTP {response.status_code}"
        return f"HTTP {response.status_code}"
