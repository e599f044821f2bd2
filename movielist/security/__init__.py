"""
Security helpers: password hashing and JWT issuance.
"""

from movielist.security.passwords import hash_password, verify_password
from movielist.security.tokens import create_token, decode_token

__all__ = ['hash_password', 'verify_password', 'create_token', 'decode_token']
