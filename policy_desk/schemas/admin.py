from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class AdminPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    tenant_id: str


class AdminRegister(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class AuthResponse(BaseModel):
    message: str
    access_token: str
    token_type: str = "bearer"
    admin: AdminPublic
