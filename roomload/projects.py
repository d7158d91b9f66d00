"""Saved calculations.

A `ProjectStore` keeps projects in memory only. Each saved project expires a
fixed time after it was saved (30 minutes by default), unless the store is
created without expiry.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable
import uuid
from .logging import ModuleLogger
from .engine import InputRecord, Results

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)

DEFAULT_EXPIRY = timedelta(minutes=30)


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    inputs: InputRecord
    results: Results
    created_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class ProjectStore:

    def __init__(
        self,
        expiry: timedelta | None = DEFAULT_EXPIRY,
        clock: Callable[[], datetime] = datetime.now
    ):
        """Creates a `ProjectStore`.

        Parameters
        ----------
        expiry:
            Lifetime of a saved project. If None, projects never expire and
            are only removed by `delete`.
        clock:
            Function returning the current time.
        """
        self.expiry = expiry
        self.clock = clock
        self._projects: dict[str, Project] = {}

    def save(self, name: str, inputs: InputRecord, results: Results) -> Project:
        """Saves the input record and the results of a calculation under
        project `name` and returns the saved project.
        """
        if not name or not name.strip():
            raise ValueError("a project name is required to save a project")
        now = self.clock()
        project = Project(
            id=uuid.uuid4().hex,
            name=name.strip(),
            inputs=inputs,
            results=results,
            created_at=now,
            expires_at=now + self.expiry if self.expiry is not None else None
        )
        self._projects[project.id] = project
        logger.info(f"project '{project.name}' saved with id {project.id}")
        return project

    def get(self, project_id: str) -> Project | None:
        """Returns the project with `project_id`, or None if it does not
        exist (anymore).
        """
        project = self._projects.get(project_id)
        if project is not None and project.is_expired(self.clock()):
            del self._projects[project_id]
            logger.info(f"project '{project.name}' ({project_id}) has expired")
            return None
        return project

    def delete(self, project_id: str) -> bool:
        """Deletes the project with `project_id`. Returns False if there was
        no such project.
        """
        return self._projects.pop(project_id, None) is not None

    def list(self) -> list[Project]:
        """Returns the projects that have not expired, newest first."""
        self.purge_expired()
        return sorted(self._projects.values(), key=lambda p: p.created_at, reverse=True)

    def purge_expired(self) -> int:
        """Deletes the expired projects and returns how many were deleted."""
        now = self.clock()
        expired = [pid for pid, p in self._projects.items() if p.is_expired(now)]
        for pid in expired:
            del self._projects[pid]
        if expired:
            logger.info(f"{len(expired)} expired project(s) deleted")
        return len(expired)

    def __len__(self) -> int:
        return len(self._projects)
