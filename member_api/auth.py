"""
Member/auth API client.

Each method issues exactly one request through the injected transport and
returns the parsed response body untouched. Transport errors are not caught.
"""
import logging
from typing import Any, Mapping, Union
from urllib.parse import quote

from member_api.models.member_models import LoginRequest, SignUpRequest
from member_api.transport import HttpTransport

logger = logging.getLogger("member_api.auth")

# Characters legal inside a single path segment besides the unreserved set
_SEGMENT_SAFE = "@:!$&'()*+,;="


def _segment(value: str) -> str:
    value = str(value)
    # "." and ".." would be collapsed as dot segments by URL normalization
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe=_SEGMENT_SAFE)


class MemberAuthClient:
    """
    Client for the member endpoints (/members/...) and the auth endpoints
    (/auth/login, /auth/logout).

    Usage:
        async with HttpxTransport.from_settings(load_settings()) as transport:
            client = MemberAuthClient(transport)
            await client.login("a@b.com", "secret")
    """

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    async def send_verification_email(self, email: str) -> Any:
        """Ask the service to email a verification link to ``email``."""
        logger.debug("send_verification_email")
        response = await self.transport.get(f"/members/email/{_segment(email)}")
        return response.data

    async def verify_email(self, token: str) -> Any:
        """Confirm an email address with the token from the verification link."""
        logger.debug("verify_email")
        response = await self.transport.get(f"/members/email/verification/{_segment(token)}")
        return response.data

    async def check_name_duplication(self, name: str) -> Any:
        logger.debug("check_name_duplication name=%s", name)
        response = await self.transport.get(f"/members/name/{_segment(name)}")
        return response.data

    async def sign_up(self, sign_up_data: Union[SignUpRequest, Mapping[str, Any], Any]) -> Any:
        """
        Register a new member.

        Accepts a SignUpRequest, a mapping, or any object exposing email,
        password, name and phoneNumber/phone_number. Only those four fields
        are sent, and their values are not checked.
        """
        if not isinstance(sign_up_data, SignUpRequest):
            sign_up_data = SignUpRequest.pick(sign_up_data)
        logger.debug("sign_up email=%s", sign_up_data.email)
        response = await self.transport.post("/members", sign_up_data.to_body())
        return response.data

    async def login(self, email: str, password: str) -> Any:
        logger.debug("login email=%s", email)
        body = LoginRequest(email=email, password=password).to_body()
        response = await self.transport.post("/auth/login", body)
        return response.data

    async def logout(self) -> Any:
        logger.debug("logout")
        response = await self.transport.post("/auth/logout")
        return response.data
