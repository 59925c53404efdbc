"""
Services package for the Medal Bot.

Database access, OpenDota access, profile aggregation, medal classification
and role assignment.
"""

from .base import BaseService
from .identity_store import IdentityStore
from .opendota_client import OpenDotaClient
from .profile import ProfileAggregator
from .medal import classify
from .roles import RoleAssigner

__all__ = ['BaseService', 'IdentityStore', 'OpenDotaClient', 'ProfileAggregator', 'classify', 'RoleAssigner']
