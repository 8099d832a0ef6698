# daizy/api/models.py
# Created: 2026-10-19 10:12:41
# Author: Daizy

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict

from ..core.utils import typed_value

@dataclass
class Project:
    """A project owned by an organisation"""
    name: str = ""
    status: str = ""
    user_id: int = 0
    republish_mqtt: bool = False
    id: int = 0
    organisation_id: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            name=typed_value(data, "name", str, ""),
            status=typed_value(data, "status", str, ""),
            user_id=typed_value(data, "user_id", int, 0),
            republish_mqtt=typed_value(data, "republish_mqtt", bool, False),
            id=typed_value(data, "id", int, 0),
            organisation_id=typed_value(data, "organisation_id", int, 0)
        )

@dataclass
class ProjectListResponse:
    """Body of the project listing endpoint"""
    projects: List[Project] = field(default_factory=list)
    total: int = 0
    column_filters: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectListResponse":
        projects = data.get("projects") or []
        if not isinstance(projects, list) or not all(isinstance(p, dict) for p in projects):
            raise ValueError("'projects' must be a list of objects")
        return cls(
            projects=[Project.from_dict(p) for p in projects],
            total=typed_value(data, "total", int, 0),
            column_filters=data.get("columnFilters")
        )

@dataclass
class CreateProjectRequest:
    """Payload for creating a project"""
    name: str
    user_id: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class UpdateProjectRequest:
    """Payload for updating a project"""
    name: str
    user_id: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
