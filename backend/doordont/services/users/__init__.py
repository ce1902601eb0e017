"""
Users module - Accounts, authentication and twitter handles
"""
from .passwords import hash_password, generate_salt, verify_password
from .service import UserService

__all__ = ['hash_password', 'generate_salt', 'verify_password', 'UserService']
