"""
错误处理器中间件

将业务异常和HTTP错误状态码统一转换为 JSON 错误响应
"""

from flask import request
from werkzeug.exceptions import HTTPException
from api.base import APIException, api_error


def setup_error_handlers(app):
    """配置错误处理器"""

    @app.errorhandler(APIException)
    def handle_api_exception(error):
        """业务异常（校验失败、任务不存在等）"""
        app.logger.info(f"{error.__class__.__name__}: {request.method} {request.path} - {error.message}")
        return error.to_response()

    @app.errorhandler(400)
    def bad_request(error):
        """400 错误处理"""
        app.logger.warning(f"Bad Request: {request.url} - {error}")
        return api_error(
            message='The request could not be understood by the server',
            status_code=400
        )

    @app.errorhandler(404)
    def not_found(error):
        """404 错误处理"""
        app.logger.info(f"Not Found: {request.url}")
        return api_error(
            message='The requested resource was not found',
            status_code=404
        )

    @app.errorhandler(405)
    def method_not_allowed(error):
        """405 错误处理"""
        app.logger.warning(f"Method Not Allowed: {request.method} {request.url}")
        return api_error(
            message=f'The {request.method} method is not allowed for this endpoint',
            status_code=405
        )

    @app.errorhandler(500)
    def internal_error(error):
        """500 错误处理"""
        from models import db
        db.session.rollback()
        # 未处理异常在 original_exception 中
        original = getattr(error, 'original_exception', None) or error
        if not isinstance(original, HTTPException):
            app.logger.error(f"Internal Server Error: {request.url} - {original}", exc_info=original)
        return api_error(
            message='An unexpected error occurred',
            status_code=500
        )
