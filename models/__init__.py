"""
Task Manager - 数据模型包

包含所有数据库模型的定义。
"""

from .base import db
from .task import Task

__all__ = [
    'db',
    'Task',
]
