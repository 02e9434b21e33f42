from freelan.config import Configuration, LoadResult, load_configuration
from freelan.logger import init_logger, get_freelan_logger

__version__ = '1.0.0'

__all__ = [
    'Configuration',
    'LoadResult',
    'load_configuration',
    'init_logger',
    'get_freelan_logger',
]
