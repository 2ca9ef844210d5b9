from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from fittrack.schemas.common import CamelModel


class GroupCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class GroupResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    creator_id: str
    created_at: datetime


class PersonRef(CamelModel):
    id: Optional[str] = None
    name: str
    email: str


class MemberEntry(CamelModel):
    user: PersonRef
    role: str


class GroupListItem(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    created_by: PersonRef
    members: List[MemberEntry]
    member_count: int
    activity_count: int
    is_member: bool
    is_creator: bool


class MembershipResponse(CamelModel):
    id: str
    group_id: str
    user_id: str
    role: str
    joined_at: datetime
    group_name: Optional[str] = None
