from pydantic import BaseModel
from typing import Optional


class IdentityClaims(BaseModel):
    sub: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None
