"""
Async client for the member/auth service: email verification, name
duplication check, sign-up, login and logout.
"""

from member_api.auth import MemberAuthClient
from member_api.config import Settings, load_settings
from member_api.models import LoginRequest, SignUpRequest
from member_api.observability import configure_observability
from member_api.transport import HttpTransport, HttpxTransport, TransportResponse

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "LoginRequest",
    "MemberAuthClient",
    "Settings",
    "SignUpRequest",
    "TransportResponse",
    "configure_observability",
    "load_settings",
]

__version__ = "1.0.0"
