"""
API 蓝图包

包含任务 API 蓝图、接口文档和通用工具函数
"""

from .base import APIException, api_error

__all__ = [
    'APIException',
    'api_error',
]
