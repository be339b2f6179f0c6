from .config import ClientConfig, Config, MonitoringConfig, find_config_file

__all__ = ["ClientConfig", "Config", "MonitoringConfig", "find_config_file"]
