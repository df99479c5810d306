from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from coursex.core.constants import RoleEnum


class UserSummary(BaseModel):
    id: str
    name: Optional[str] = None
    image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class User(UserSummary):
    email: str
    role: RoleEnum
    created_at: Optional[datetime] = None


class UserCreate(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    role: RoleEnum = RoleEnum.STUDENT


class RoleUpdate(BaseModel):
    role: RoleEnum
