from fittrack.models.user import User, UserRole
from fittrack.models.group import Group
from fittrack.models.group_member import GroupMember, MemberRole
from fittrack.models.activity import Activity, ActivityType
from fittrack.models.weight import Weight
from fittrack.models.personal_data import PersonalData

__all__ = [
    "User", "UserRole",
    "Group",
    "GroupMember", "MemberRole",
    "Activity", "ActivityType",
    "Weight",
    "PersonalData",
]
