from .loader import CollectorConfig, DEFAULT_CONFIG, load_config

__all__ = ['CollectorConfig', 'DEFAULT_CONFIG', 'load_config']
