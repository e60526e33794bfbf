from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SocialMedia(_CamelModel):
    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    linkedin: str = ""
    youtube: str = ""
    tiktok: str = ""


class EmailNotifications(_CamelModel):
    new_signup: bool = True
    daily_report: bool = True
    weekly_report: bool = False
    export_reminder: bool = False


class FeatureFlags(_CamelModel):
    admin_dashboard: bool = True
    content_editor: bool = True
    csv_export: bool = True
    real_time_stats: bool = True
    advanced_filters: bool = True


class CustomLink(_CamelModel):
    label: str = Field(..., min_length=1, max_length=100)
    url: str = Field(..., min_length=1, max_length=2048)
    open_in_new_tab: bool = False


class FooterSettings(_CamelModel):
    show_footer: bool = True
    company_address: str = ""
    company_phone: str = ""
    footer_text: str = "Made with ❤️ for creators"
    show_social_links: bool = True
    show_legal_links: bool = True
    custom_links: List[CustomLink] = Field(default_factory=list)


class SiteConfiguration(_CamelModel):
    """
    Site-level behaviour and presentation settings.

    Every top-level field is stored as one ``site_settings`` row keyed by its
    camelCase name; nested sections are stored as JSON rows and validated as a
    whole, so no setting is ever addressed by a dotted path.
    """

    # General
    site_name: str = Field("MYZUWA", min_length=1, max_length=100)
    site_description: str = "E-commerce meets music. Join the waitlist for exclusive access."
    site_url: str = "https://myzuwa.com"
    logo_url: str = ""
    favicon_url: str = ""

    # SEO
    meta_title: str = "Myzuwa - Join the Waitlist"
    meta_description: str = (
        "Join the Myzuwa waitlist - where e-commerce meets music. "
        "Be the first to access our revolutionary platform."
    )
    meta_keywords: List[str] = Field(
        default_factory=lambda: ["myzuwa", "e-commerce", "music", "waitlist", "platform"]
    )
    og_image: str = ""
    twitter_handle: str = "@myzuwa"

    # Email
    admin_email: str = "admin@myzuwa.com"
    support_email: str = "support@myzuwa.com"
    notification_email: str = "notifications@myzuwa.com"
    email_from_name: str = "Myzuwa Team"

    social_media: SocialMedia = Field(default_factory=SocialMedia)

    # Analytics
    google_analytics_id: str = ""
    facebook_pixel_id: str = ""
    hotjar_id: str = ""

    # Waitlist
    waitlist_enabled: bool = True
    max_waitlist_entries: int = Field(50000, ge=0)
    require_phone_number: bool = True
    enable_tutorial_book: bool = True
    auto_email_confirmation: bool = True

    email_notifications: EmailNotifications = Field(default_factory=EmailNotifications)

    # Security
    enable_captcha: bool = False
    rate_limit_enabled: bool = True
    max_attempts_per_hour: int = Field(10, ge=1)
    session_timeout: int = Field(30, ge=1)

    # Appearance
    theme: Literal["light", "dark", "auto"] = "light"
    primary_color: str = Field("#ea580c", pattern=r"^#[0-9a-fA-F]{6}$")
    secondary_color: str = Field("#1f2937", pattern=r"^#[0-9a-fA-F]{6}$")
    accent_color: str = Field("#f97316", pattern=r"^#[0-9a-fA-F]{6}$")

    features: FeatureFlags = Field(default_factory=FeatureFlags)

    # Maintenance
    maintenance_mode: bool = False
    maintenance_message: str = (
        "We're currently performing scheduled maintenance. Please check back soon!"
    )
    maintenance_end_time: str = ""

    # Legal
    privacy_policy_url: str = "/privacy"
    terms_of_service_url: str = "/terms"
    cookie_policy_url: str = "/cookies"
    gdpr_compliant: bool = True
    data_retention_days: int = Field(365, ge=1)

    footer_settings: FooterSettings = Field(default_factory=FooterSettings)


# top-level field name -> category of its settings row
SETTING_CATEGORIES: Dict[str, str] = {
    "site_name": "general",
    "site_description": "general",
    "site_url": "general",
    "logo_url": "general",
    "favicon_url": "general",
    "meta_title": "seo",
    "meta_description": "seo",
    "meta_keywords": "seo",
    "og_image": "seo",
    "twitter_handle": "seo",
    "admin_email": "email",
    "support_email": "email",
    "notification_email": "email",
    "email_from_name": "email",
    "social_media": "social",
    "google_analytics_id": "analytics",
    "facebook_pixel_id": "analytics",
    "hotjar_id": "analytics",
    "waitlist_enabled": "waitlist",
    "max_waitlist_entries": "waitlist",
    "require_phone_number": "waitlist",
    "enable_tutorial_book": "waitlist",
    "auto_email_confirmation": "waitlist",
    "email_notifications": "notifications",
    "enable_captcha": "security",
    "rate_limit_enabled": "security",
    "max_attempts_per_hour": "security",
    "session_timeout": "security",
    "theme": "appearance",
    "primary_color": "appearance",
    "secondary_color": "appearance",
    "accent_color": "appearance",
    "features": "features",
    "maintenance_mode": "maintenance",
    "maintenance_message": "maintenance",
    "maintenance_end_time": "maintenance",
    "privacy_policy_url": "legal",
    "terms_of_service_url": "legal",
    "cookie_policy_url": "legal",
    "gdpr_compliant": "legal",
    "data_retention_days": "legal",
    "footer_settings": "footer",
}

# Internal contact addresses, not served publicly
SENSITIVE_SETTINGS = frozenset({"admin_email", "notification_email"})
