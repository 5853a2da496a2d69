from pydantic import BaseModel, field_validator


class SignIn(BaseModel):
    # kept exactly as sent: the token subject and the email query
    # parameter are compared character for character
    email: str

    @field_validator("email")
    @classmethod
    def email_shape(cls, v):
        local, sep, domain = v.partition("@")
        if not sep or not local or not domain or "@" in domain or any(c.isspace() for c in v):
            raise ValueError("email must look like name@domain")
        return v


class UserOut(BaseModel):
    """Stored user identity plus the credential issued for this sign-in."""
    id: int
    email: str
    token: str
    created: bool = False
