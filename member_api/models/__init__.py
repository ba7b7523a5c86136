"""
Pydantic request models for the member/auth service.

Keeping the wire contracts here keeps the client module focused on mapping
operations to HTTP calls.
"""

from member_api.models.member_models import LoginRequest, SignUpRequest

__all__ = ["LoginRequest", "SignUpRequest"]
