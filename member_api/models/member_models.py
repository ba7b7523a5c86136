from typing import Any, Dict, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

SIGN_UP_FIELDS = ("email", "password", "name", "phoneNumber", "phone_number")


class SignUpRequest(BaseModel):
    # Field values are forwarded as given; only the set of keys is fixed
    model_config = ConfigDict(extra="ignore")

    email: Any = None
    password: Any = None
    name: Any = None
    phone_number: Any = Field(
        default=None,
        validation_alias=AliasChoices("phoneNumber", "phone_number"),
        serialization_alias="phoneNumber",
    )

    @classmethod
    def pick(cls, data: Any) -> "SignUpRequest":
        """
        Take the sign-up fields from a mapping or any object with attributes.

        Everything else on ``data`` is dropped. Fields ``data`` does not carry
        stay unset and are left out of the body.
        """
        if isinstance(data, Mapping):
            picked = {key: data[key] for key in SIGN_UP_FIELDS if key in data}
        else:
            picked = {key: getattr(data, key) for key in SIGN_UP_FIELDS if hasattr(data, key)}
        return cls.model_validate(picked)

    def to_body(self) -> Dict[str, Any]:
        """JSON body for POST /members: {email, password, name, phoneNumber}."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Any
    password: Any

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump()
