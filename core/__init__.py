"""
核心模块：配置、中间件和任务存储服务
"""
