# users_api/models/users.py

from typing import Optional

from pydantic import BaseModel


class UserIn(BaseModel):
    # id is accepted for symmetry with UserOut but never stored.
    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""


class UserOut(BaseModel):
    id: int
    first_name: str
    last_name: str
