"""工具模块.

主要工具:
- structlog_config: 结构化日志配置
"""
