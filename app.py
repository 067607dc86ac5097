#!/usr/bin/env python3
"""
Task Manager - Flask 应用入口

主要功能:
- Flask 应用初始化
- 内存数据库初始化
- API 路由注册
- 命令行命令注册
"""

import os
from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy import text

# 导入模型和配置
from models import db, Task
from core.config import config
from core.middleware import setup_all_middleware

SERVICE_NAME = 'Task Manager API'
SERVICE_VERSION = '1.0.0'

SAMPLE_TASKS = [
    'Buy milk',
    'Write the weekly report',
    'Call the plumber',
]


def create_app(config_name=None):
    """应用工厂函数"""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # 初始化配置
    config[config_name].init_app(app)

    # 初始化扩展
    db.init_app(app)

    # 初始化CORS
    CORS(app,
         resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}},
         allow_headers=['Content-Type'],
         methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'])

    # 设置中间件
    setup_all_middleware(app)

    # 注册蓝图
    register_blueprints(app)

    # 内存数据库随进程创建
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_SAMPLE_TASKS'):
            seed_sample_tasks(app)

    return app


def register_blueprints(app):
    """注册蓝图"""
    # 基础路由
    @app.route('/')
    def index():
        return jsonify({
            'service': SERVICE_NAME,
            'version': SERVICE_VERSION,
            'status': 'running'
        })

    @app.route('/health')
    def health_check():
        """健康检查 - 行业标准路径"""
        try:
            # 测试数据库连接
            with db.engine.connect() as connection:
                connection.execute(text('SELECT 1'))
            db_status = 'connected'
        except Exception as e:
            app.logger.error(f"Health check failed: {e}")
            db_status = f'error: {str(e)}'

        return jsonify({
            'status': 'healthy' if db_status == 'connected' else 'unhealthy',
            'database': db_status,
            'tasks': db.session.query(Task).count() if db_status == 'connected' else None
        })

    from api.tasks import tasks_bp
    app.register_blueprint(tasks_bp, url_prefix='/api/tasks')

    # 接口文档只在开发环境开放
    if app.config.get('ENABLE_API_DOCS'):
        from api.docs import docs_bp
        app.register_blueprint(docs_bp, url_prefix='/api/docs')

    app.logger.info("Registered task blueprints")


def seed_sample_tasks(app):
    """写入示例任务"""
    from core.task_store import TaskStore
    store = TaskStore()
    for description in SAMPLE_TASKS:
        task = store.create_task(description)
        app.logger.info(f"Seeded task {task.id}: {task.description}")


def main():
    """开发服务器入口"""
    app = create_app()
    host = app.config['HOST']
    port = app.config['PORT']

    print(f"🚀 启动 {SERVICE_NAME}...")
    print(f"📍 地址: http://{host}:{port}")
    print(f"🔧 环境: {os.environ.get('FLASK_ENV', 'development')}")

    # 内存数据库：关闭重载器，避免子进程丢失状态
    app.run(host=host, port=port, debug=app.config.get('DEBUG', False), use_reloader=False)


if __name__ == '__main__':
    main()
