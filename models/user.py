import enum
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from flask_sqlalchemy import SQLAlchemy
from werkzeug.security import check_password_hash, generate_password_hash

db = SQLAlchemy()


class Provider(enum.Enum):
    CREDENTIALS = "CREDENTIALS"
    GOOGLE = "GOOGLE"
    GITHUB = "GITHUB"


# Fields a signed-in user may change on their own profile
EDITABLE_FIELDS = {
    "fullName": "full_name",
    "location": "location",
    "role": "role",
    "bio": "bio",
    "researchFocus": "research_focus",
    "image": "image",
}


def _now():
    return datetime.now(timezone.utc)


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255))
    provider = db.Column(db.Enum(Provider), nullable=False, default=Provider.CREDENTIALS)
    image = db.Column(db.String(500))
    location = db.Column(db.String(200))
    role = db.Column(db.String(100))
    bio = db.Column(db.Text)
    research_focus = db.Column(db.String(200))
    specializations = db.Column(db.JSON, default=list)
    discoveries = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime(timezone=True), default=_now)
    updated_at = db.Column(db.DateTime(timezone=True), default=_now, onupdate=_now)

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return bool(self.password_hash) and check_password_hash(self.password_hash, password)

    def update_profile(self, data: Dict[str, Any]) -> None:
        for key, attr in EDITABLE_FIELDS.items():
            if key in data:
                setattr(self, attr, data[key])

    def identity(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fullName": self.full_name,
            "email": self.email,
            "provider": self.provider.value,
            "image": self.image,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.identity(),
            "location": self.location,
            "role": self.role,
            "bio": self.bio,
            "researchFocus": self.research_focus,
            "specializations": self.specializations or [],
            "discoveries": self.discoveries or 0,
        }
