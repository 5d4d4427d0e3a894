"""
Admin Client Package - Programmatic admin tooling for the content API
"""

from .api import ApiClient, ResourceClient, ApiRequestError
from .dialogs import (
    AlwaysConfirm,
    NeverConfirm,
    ScriptedConfirm,
    Notification,
    NotificationQueue
)
from .manager import (
    ListManager,
    ManagerConfig,
    Draft,
    skills_manager,
    experiences_manager,
    portfolios_manager
)

__all__ = [
    'ApiClient',
    'ResourceClient',
    'ApiRequestError',
    'AlwaysConfirm',
    'NeverConfirm',
    'ScriptedConfirm',
    'Notification',
    'NotificationQueue',
    'ListManager',
    'ManagerConfig',
    'Draft',
    'skills_manager',
    'experiences_manager',
    'portfolios_manager'
]
