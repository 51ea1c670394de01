# contact_relay/lib/validation.py
import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_MESSAGE_LENGTH = 5000

PROJECT_TYPES = {
    "website": "Website Development",
    "saas": "SaaS Platform",
    "integration": "Integration",
    "other": "Other",
}

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email) is not None


def _filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_submission(data: Any) -> Optional[str]:
    """Check a parsed request body; return the first failure reason, or None."""
    if not isinstance(data, Mapping):
        data = {}

    if not _filled(data.get("name")):
        return "Name is required"

    email = data.get("email")
    if not _filled(email):
        return "Email is required"
    if not is_valid_email(email):
        return "Invalid email address"

    project_type = data.get("projectType")
    if not isinstance(project_type, str) or not project_type:
        return "Project type is required"

    message = data.get("message")
    if not _filled(message):
        return "Message is required"
    if len(message) > MAX_MESSAGE_LENGTH:
        return f"Message is too long (max {MAX_MESSAGE_LENGTH} characters)"

    return None


class Submission(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    email: str
    company: Optional[str] = None
    project_type: str = Field(alias="projectType")
    message: str

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Submission":
        # Only call after validate_submission(data) returned None
        company = data.get("company")
        return cls(
            name=data["name"],
            email=data["email"],
            company=company if isinstance(company, str) and company else None,
            project_type=data["projectType"],
            message=data["message"],
        )

    @property
    def project_label(self) -> str:
        return PROJECT_TYPES.get(self.project_type, self.project_type)
