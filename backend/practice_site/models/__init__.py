from .admin_user import AdminUser
from .site_config import SiteConfig
from .testimonial import Testimonial
from .faq_item import FaqItem
from .service import Service
from .photo_carousel import PhotoCarouselItem
from .specialty import Specialty
from .custom_code import CustomCode
from .article import Article
from .contact_settings import ContactSettings
from .footer_settings import FooterSettings
from .cookie_settings import CookieSettings
from .legal_document import PrivacyPolicy, TermsOfUse
from .support_message import SupportMessage
from .chat_message import ChatMessage
from .user_preference import UserPreference
from .audit_log import AuditLog

__all__ = [
    "AdminUser",
    "SiteConfig",
    "Testimonial",
    "FaqItem",
    "Service",
    "PhotoCarouselItem",
    "Specialty",
    "CustomCode",
    "Article",
    "ContactSettings",
    "FooterSettings",
    "CookieSettings",
    "PrivacyPolicy",
    "TermsOfUse",
    "SupportMessage",
    "ChatMessage",
    "UserPreference",
    "AuditLog",
]
