"""
API 基础工具函数

包含通用的错误响应格式、请求校验和异常类
"""

from datetime import datetime, timezone
from flask import jsonify, request


def api_error(message="An error occurred", status_code=400, error_code=None, details=None):
    """
    标准 API 错误响应格式

    Args:
        message: 错误消息
        status_code: HTTP 状态码
        error_code: 业务错误码
        details: 错误详情

    Returns:
        (Flask Response, 状态码) 元组
    """
    error_data = {
        'success': False,
        'error': {
            'message': message,
            'status_code': status_code,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'path': request.path
        }
    }

    if error_code:
        error_data['error']['code'] = error_code

    if details:
        error_data['error']['details'] = details

    return jsonify(error_data), status_code


class APIException(Exception):
    """自定义 API 异常类"""

    status_code = 400
    error_code = None

    def __init__(self, message, status_code=None, error_code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.details = details

    def to_response(self):
        """转换为 API 错误响应"""
        return api_error(
            message=self.message,
            status_code=self.status_code,
            error_code=self.error_code,
            details=self.details
        )


def get_json_object():
    """
    读取请求体中的 JSON 对象

    Returns:
        请求数据字典

    Raises:
        APIException: 请求体不是 JSON 对象
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise APIException(
            "Request body must be a JSON object",
            400,
            error_code="INVALID_JSON"
        )
    return data
