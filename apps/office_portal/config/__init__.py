from .settings import PortalConfig, TestingConfig

__all__ = ['PortalConfig', 'TestingConfig']
