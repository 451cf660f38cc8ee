"""服务层.

- plugin_options: 插件配置页的渲染上下文编排与提交取值校验
"""
