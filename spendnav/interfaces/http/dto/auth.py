from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequestDTO(BaseModel):
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    model_config = ConfigDict(validate_by_name=True)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class MessageDTO(BaseModel):
    msg: str


class PublicProfileDTO(BaseModel):
    id: int
    first_name: str = Field(serialization_alias="firstName")
    email: str
    budget: float


class LoginSuccessDTO(BaseModel):
    token: str
    user: PublicProfileDTO
