"""
MongoDB document models using Pydantic.
Each model is the declarative field table of one collection: type, required-ness,
allowed values and defaults.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
    model_validator,
)

# Strict strings: 0, False, lists and numbers are type errors, not coerced
Text = Annotated[str, StringConstraints(strict=True)]
RequiredText = Annotated[str, StringConstraints(strict=True, min_length=1)]


def utcnow() -> datetime:
    """Naive UTC now, truncated to the millisecond precision BSON stores."""
    now = datetime.utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """utcnow(), bumped past `previous` so successive updates strictly increase."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(milliseconds=1)
    return now


class TaskStatus(str, Enum):
    """Task status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EntityModel(BaseModel):
    """Fields shared by every persisted entity."""

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    id: RequiredText = Field(..., description="Server-generated UUID, also the Mongo _id")
    createdAt: datetime = Field(default_factory=utcnow, description="Creation time")
    updatedAt: datetime = Field(default_factory=utcnow, description="Last update time")

    @model_validator(mode="after")
    def check_timestamps(self):
        created = getattr(self, "createdAt", None)
        updated = getattr(self, "updatedAt", None)
        if created is not None and updated is not None and updated < created:
            raise ValueError("updatedAt must not be earlier than createdAt")
        return self


class TaskModel(EntityModel):
    """Model for a task (MongoDB document)."""

    title: RequiredText
    description: Text = ""
    status: TaskStatus
    assignedTo: Optional[Text] = ""
    assignedBy: RequiredText = Field(..., description="User ID of the creator")
    priority: TaskPriority = TaskPriority.MEDIUM
    dueDate: Optional[datetime] = None
    projectId: Optional[Text] = None
    labels: List[Text] = Field(default_factory=list)


class ProjectModel(EntityModel):
    """Model for a project (MongoDB document)."""

    title: RequiredText
    description: Text = ""
    createdBy: RequiredText = Field(..., description="User ID of the creator")
    teamMembers: List[RequiredText] = Field(
        default_factory=list, description="User IDs associated with the project"
    )

    @field_validator("teamMembers")
    @classmethod
    def unique_members(cls, members: List[str]) -> List[str]:
        if len(set(members)) != len(members):
            raise ValueError("must not contain duplicate user ids")
        return members


class CommentModel(EntityModel):
    """Model for a comment on a task."""

    taskId: RequiredText
    userId: RequiredText
    content: RequiredText


class LabelModel(EntityModel):
    """Model for a label."""

    name: RequiredText
    color: RequiredText
    createdBy: RequiredText


class ActivityModel(EntityModel):
    """Model for a task activity record."""

    taskId: RequiredText
    userId: RequiredText
    action: RequiredText
    details: RequiredText


# --- User profile documents ---


class AccountStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class AuthInfoModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    uid: RequiredText
    username: Optional[Text] = None
    email: Optional[Text] = None
    phone: Optional[Text] = None
    secureLogin: Optional[bool] = None
    createdAt: Optional[datetime] = None
    lastLogin: Optional[datetime] = None


class LocationModel(BaseModel):
    long: float
    lat: float
    fullAddress: Optional[str] = None
    country: Optional[str] = None
    areaName: Optional[str] = None


class BasicUserInfoModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    authInfo: AuthInfoModel
    image: Optional[Text] = None
    firstName: Text = ""
    lastName: Text = ""
    bio: Optional[Text] = None
    isAgreed: Optional[bool] = None
    location: Optional[LocationModel] = None
    website: Optional[Text] = None
    socialLinks: Dict[str, Optional[str]] = Field(default_factory=dict)


class NotificationPreferences(BaseModel):
    email: bool = True
    sms: bool = True
    push: bool = True


class UserPreferences(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    theme: Optional[Theme] = None
    notifications: Optional[NotificationPreferences] = None
    language: Optional[str] = None


class ProfileModel(BaseModel):
    """Model for a user profile, keyed by the identity provider uid."""

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    user: BasicUserInfoModel
    verified: bool = False
    accountStatus: Optional[AccountStatus] = None
    lastUpdated: Optional[datetime] = None
    preferences: Optional[UserPreferences] = None

    @property
    def uid(self) -> str:
        return self.user.authInfo.uid


def default_profile(
    email: str,
    uid: str,
    username: Optional[str] = None,
    first_name: str = "",
    last_name: str = "",
) -> ProfileModel:
    """Profile document written for a freshly registered account."""
    now = utcnow()
    return ProfileModel(
        verified=False,
        accountStatus=AccountStatus.INACTIVE,
        lastUpdated=now,
        preferences=UserPreferences(
            theme=Theme.LIGHT,
            notifications=NotificationPreferences(email=True, sms=True, push=True),
        ),
        user=BasicUserInfoModel(
            authInfo=AuthInfoModel(
                uid=uid,
                email=email,
                username=username,
                phone="",
                secureLogin=True,
                lastLogin=now,
                createdAt=now,
            ),
            firstName=first_name,
            lastName=last_name,
            bio="",
            image="",
            location=None,
            socialLinks={},
            website="",
            isAgreed=False,
        ),
    )


# MongoDB collection names
TASKS_COLLECTION = "tasks"
PROJECTS_COLLECTION = "projects"
COMMENTS_COLLECTION = "comments"
LABELS_COLLECTION = "labels"
ACTIVITIES_COLLECTION = "activities"
PROFILE_COLLECTION = "profile"
