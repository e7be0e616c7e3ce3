from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# Requests leave every field optional so that missing values reach the
# use cases and come back as 400 validation errors instead of 422s.
class RegisterReq(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None

class LoginReq(BaseModel):
    user_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("userName", "UserName", "username", "user_name"),
    )
    password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("password", "Password"),
    )

class AddAccountReq(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    role: str | None = None


class RegisteredUser(CamelModel):
    first_name: str
    last_name: str
    email: str
    role: str

class RegisterResp(CamelModel):
    message: str
    user: RegisteredUser

class AccountResp(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    role: str

class MessageResp(BaseModel):
    message: str
