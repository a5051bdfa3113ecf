from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Legacy clients still post the old form field names (f_Sno, f_username, f_passward).
_SEQUENCE_ID = AliasChoices("sequenceId", "sequence_id", "f_Sno")
_USERNAME = AliasChoices("username", "f_username")
_SECRET = AliasChoices("secret", "password", "f_passward")


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class RegisterRequestDTO(BaseModel):
    sequence_id: int = Field(validation_alias=_SEQUENCE_ID)
    username: str = Field(min_length=1, max_length=64, validation_alias=_USERNAME)
    secret: str = Field(min_length=1, max_length=128, validation_alias=_SECRET)

    @field_validator("username", "secret")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _reject_blank(value)


class LoginRequestDTO(BaseModel):
    # Presence only: any non-matching value must fail as invalid credentials.
    username: str = Field(min_length=1, validation_alias=_USERNAME)
    secret: str = Field(min_length=1, validation_alias=_SECRET)


class LoginResponseDTO(BaseModel):
    username: str


class CurrentUserDTO(BaseModel):
    username: str
    f_username: str

    @classmethod
    def for_username(cls, username: str) -> CurrentUserDTO:
        return cls(username=username, f_username=username)


class MessageDTO(BaseModel):
    msg: str
