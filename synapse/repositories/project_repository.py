"""Project repository."""

from typing import Any

from synapse.constants import PROJECT_STATUS_OPEN
from synapse.models import Project

from .base import BaseRepository, coerce_string_list, translate_db_errors


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project operations."""

    model = Project

    @translate_db_errors("list_open_projects")
    def list_open_projects(self) -> list[dict[str, Any]]:
        """Return ``[{id, title, description, status, skills_needed}]`` for open projects."""
        projects = (
            self.session.query(Project)
            .filter(Project.status == PROJECT_STATUS_OPEN)
            .order_by(Project.id)
            .all()
        )
        return [
            {
                "id": project.id,
                "title": project.title,
                "description": project.description,
                "status": project.status,
                "skills_needed": coerce_string_list(project.skills_needed),
            }
            for project in projects
        ]
