"""基础设施层

包含存储适配器、事件总线、配置与依赖注入容器。
"""
