from .site_config_model import SETTING_TYPES, SiteContent, SiteSetting

__all__ = ["SETTING_TYPES", "SiteContent", "SiteSetting"]
