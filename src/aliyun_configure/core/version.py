"""Version information for aliyun-configure."""

__version__ = "1.2.0"
