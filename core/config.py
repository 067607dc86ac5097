"""
Flask 应用配置
"""

import os
from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool


def load_env_files():
    """
    加载环境变量文件：
    1. ENV_FILE环境变量: 通过ENV_FILE环境变量指定.env文件路径（最高优先级）
    2. 本地开发配置: 回退到项目根目录/.env
    """
    current_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.dirname(current_dir)

    env_file_path = os.environ.get('ENV_FILE')
    if env_file_path:
        if os.path.exists(env_file_path):
            load_dotenv(env_file_path)
            return env_file_path
        print(f"⚠️  指定的环境变量文件不存在: {env_file_path}")

    root_env = os.path.join(project_root, '.env')
    if os.path.exists(root_env):
        load_dotenv(root_env)
        return root_env
    return None


# 加载环境变量
loaded_env_file = load_env_files()


def env_flag(name, default=False):
    """读取布尔型环境变量"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """基础配置类"""

    # Flask 基础配置
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # 数据库配置：进程内 SQLite 内存库，所有线程共用一个连接
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'poolclass': StaticPool,
        'connect_args': {'check_same_thread': False},
    }

    # CORS 配置
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:3000,http://localhost:5173').split(',')

    # 服务监听配置
    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = int(os.environ.get('PORT', 5100))

    # 接口文档（开发环境默认开启）
    ENABLE_API_DOCS = env_flag('ENABLE_API_DOCS', False)

    # 启动时写入示例任务
    SEED_SAMPLE_TASKS = env_flag('SEED_SAMPLE_TASKS', False)

    # 日志配置
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    LOG_FILE = os.environ.get('LOG_FILE') or 'logs/task_manager.log'
    SLOW_REQUEST_SECONDS = float(os.environ.get('SLOW_REQUEST_SECONDS', 1.0))

    @staticmethod
    def init_app(app):
        """初始化应用配置"""
        pass


class DevelopmentConfig(Config):
    """开发环境配置"""
    DEBUG = True
    ENABLE_API_DOCS = env_flag('ENABLE_API_DOCS', True)


class TestingConfig(Config):
    """测试环境配置"""
    TESTING = True
    ENABLE_API_DOCS = True


class ProductionConfig(Config):
    """生产环境配置"""
    DEBUG = False

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # 生产环境特定配置
        import logging
        from logging.handlers import RotatingFileHandler
        from .logging_config import resolve_log_level

        level = resolve_log_level(app)

        if not app.debug:
            log_dir = os.path.dirname(app.config['LOG_FILE'])
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            file_handler = RotatingFileHandler(
                app.config['LOG_FILE'],
                maxBytes=10240000,
                backupCount=10
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(level)
            app.logger.addHandler(file_handler)

            app.logger.setLevel(level)
            app.logger.info('Task Manager startup')


# 配置映射
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
