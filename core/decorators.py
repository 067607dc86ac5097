"""
Flask 装饰器集合

包含常用的HTTP请求处理装饰器
"""

from functools import wraps
from flask import request
from api.base import api_error


def require_json(f):
    """要求请求内容为 JSON 的装饰器"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if request.method in ['POST', 'PUT', 'PATCH']:
            if not request.is_json:
                return api_error(
                    'Content-Type must be application/json',
                    400,
                    error_code='INVALID_JSON'
                )
        return f(*args, **kwargs)
    return decorated_function
