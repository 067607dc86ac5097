"""
日志配置和请求日志中间件

包含应用日志配置和HTTP请求/响应日志记录功能
"""

import time
import logging
from flask import request, g


def resolve_log_level(app):
    """LOG_LEVEL 配置对应的日志级别，无法识别时使用 INFO"""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(app):
    """配置日志系统"""
    level = resolve_log_level(app)

    if not app.debug:
        # 生产环境日志配置
        logging.basicConfig(
            level=level,
            format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        )
    else:
        # 开发环境日志配置
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(levelname)s: %(message)s'
        )

    app.logger.setLevel(logging.DEBUG if app.debug else level)


def setup_request_logging(app):
    """配置请求日志中间件"""

    @app.before_request
    def before_request():
        """请求开始前的处理"""
        g.start_time = time.time()
        g.request_id = f"{int(time.time() * 1000)}-{id(request)}"

        app.logger.info(f"[REQUEST_START] {g.request_id} {request.method} {request.path}")

        # 记录 JSON 请求体，过长的字符串截断
        if request.is_json and request.method in ['POST', 'PUT', 'PATCH']:
            json_data = request.get_json(silent=True)
            if isinstance(json_data, dict):
                filtered_data = {}
                for key, value in json_data.items():
                    if isinstance(value, str) and len(value) > 100:
                        filtered_data[key] = value[:100] + '...'
                    else:
                        filtered_data[key] = value
                app.logger.debug(f"[REQUEST_BODY] {g.request_id} {filtered_data}")
            elif json_data is None:
                app.logger.warning(f"[REQUEST_BODY_ERROR] {g.request_id} Failed to parse JSON")

    @app.after_request
    def after_request(response):
        """请求结束后的处理"""
        if hasattr(g, 'start_time'):
            duration = time.time() - g.start_time

            # 根据状态码选择日志级别
            if response.status_code >= 500:
                log_level = 'error'
            elif response.status_code >= 400:
                log_level = 'warning'
            else:
                log_level = 'info'

            getattr(app.logger, log_level)(
                f"[REQUEST_END] {g.request_id} {request.method} {request.path} - "
                f"Status: {response.status_code}, Duration: {duration:.3f}s"
            )

            # 记录慢请求
            if duration > app.config.get('SLOW_REQUEST_SECONDS', 1.0):
                app.logger.warning(f"[SLOW_REQUEST] {g.request_id} {request.method} {request.path} - Duration: {duration:.3f}s")

            response.headers['X-Response-Time'] = f"{duration:.3f}s"

        # 添加响应头
        response.headers['X-Request-ID'] = getattr(g, 'request_id', 'unknown')
        return response
