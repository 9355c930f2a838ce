"""宿主包管理器接缝

本包只暴露 studio 需要的宿主接口：包模型、仓库查找顺序、
求解请求、操作计划与生命周期事件。求解器本身由调用方注入。
"""
