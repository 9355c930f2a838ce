"""studio - 本地工作副本覆盖依赖包

在 install / update 过程中，将选定的依赖替换为本地目录中的工作副本，
使正在开发的库无需发布即可被消费项目直接使用。
"""

__version__ = "0.3.0"
