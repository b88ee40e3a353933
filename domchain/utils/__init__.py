"""
Utility modules for domchain.
"""

from domchain.utils.config import Config
from domchain.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
