from tririsk.config.settings import IpqsConfig, load_config

__all__ = ["IpqsConfig", "load_config"]
