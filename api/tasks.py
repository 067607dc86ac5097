"""
任务 API 蓝图

提供任务的 CRUD 操作接口：
- GET    /api/tasks           获取任务列表
- POST   /api/tasks           创建任务
- GET    /api/tasks/<id>      获取单个任务
- PUT    /api/tasks/<id>      更新完成状态
- DELETE /api/tasks/<id>      删除任务
"""

from flask import Blueprint, jsonify, url_for
from .base import get_json_object
from core.decorators import require_json
from core.task_store import TaskStore, ValidationError

# 创建蓝图
tasks_bp = Blueprint('tasks', __name__)


@tasks_bp.route('', methods=['GET'])
def list_tasks():
    """获取任务列表（按 id 升序）"""
    tasks = TaskStore().list_tasks()
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route('', methods=['POST'])
@require_json
def create_task():
    """创建新任务"""
    data = get_json_object()

    task = TaskStore().create_task(data.get('description'))

    response = jsonify(task.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('tasks.get_task', task_id=task.id)
    return response


@tasks_bp.route('/<int:task_id>', methods=['GET'])
def get_task(task_id):
    """获取单个任务详情"""
    task = TaskStore().get_task(task_id)
    return jsonify(task.to_dict())


@tasks_bp.route('/<int:task_id>', methods=['PUT'])
@require_json
def update_task(task_id):
    """更新任务完成状态"""
    data = get_json_object()

    # 请求体校验先于任务查找
    is_completed = data.get('isCompleted')
    if not isinstance(is_completed, bool):
        raise ValidationError("isCompleted must be a boolean")

    task = TaskStore().update_completion(task_id, is_completed)
    return jsonify(task.to_dict())


@tasks_bp.route('/<int:task_id>', methods=['DELETE'])
def delete_task(task_id):
    """删除任务"""
    TaskStore().delete_task(task_id)
    return '', 204
