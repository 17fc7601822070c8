"""
repositories/project_repo.py
----------------------------
Data access layer for DIY projects.
All SQL touching the `projects`, `material`, `step`, `category` and
`project_category` tables lives here.

Every public method is one unit of work: it borrows a single connection,
runs its statements inside one transaction, commits on success, rolls back
on any error and always gives the connection back. Failures surface as
PersistenceError; a missing row is not a failure.
"""

from typing import Optional

from psycopg2 import extras

from db.connection import PoolConnectionProvider
from db.errors import PersistenceError
from db.row_mapper import extract
from models.project import Category, Material, Project, Step
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_TABLE = "category"
MATERIAL_TABLE = "material"
PROJECT_TABLE = "projects"
PROJECT_CATEGORY_TABLE = "project_category"
STEP_TABLE = "step"


class ProjectRepository:
    """Repository for CRUD operations on the project aggregate."""

    def __init__(self, provider=None):
        self.provider = provider or PoolConnectionProvider()

    # ── CREATE ────────────────────────────────────────────

    def insert_project(self, project: Project) -> Project:
        """
        Insert a new project row from its five scalar fields.

        Args:
            project: The Project to persist. Its child collections are ignored.

        Returns:
            The same Project with `project_id` populated.

        Raises:
            PersistenceError: If the connection or any statement fails.
        """
        sql = f"""
            INSERT INTO {PROJECT_TABLE}
            (project_name, estimated_hours, actual_hours, difficulty, notes)
            VALUES (%s, %s, %s, %s, %s);
        """
        conn = self._connect()
        try:
            self._start_transaction(conn)
            with conn.cursor() as cur:
                cur.execute(sql, (
                    project.project_name, project.estimated_hours,
                    project.actual_hours, project.difficulty, project.notes,
                ))
            project_id = self.provider.last_insert_id(conn, PROJECT_TABLE, "project_id")
            conn.commit()
            project.project_id = project_id
            logger.info(f"Added project #{project_id} '{project.project_name}'")
            return project
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to insert project '{project.project_name}': {e}")
            raise PersistenceError(f"Failed to insert project: {e}") from e
        finally:
            self.provider.release(conn)

    # ── READ ──────────────────────────────────────────────

    def fetch_all_projects(self) -> list[Project]:
        """
        Fetch every project row ordered by name.

        Only the scalar fields are populated; materials, steps and
        categories are left empty.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} ORDER BY project_name;"
        conn = self._connect()
        try:
            self._start_transaction(conn, readonly=True)
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql)
                projects = [extract(r, Project) for r in cur.fetchall()]
            conn.commit()
            return projects
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to fetch projects: {e}")
            raise PersistenceError(f"Failed to fetch projects: {e}") from e
        finally:
            self.provider.release(conn)

    def fetch_project_by_id(self, project_id: int) -> Optional[Project]:
        """
        Fetch one project together with its materials, steps and categories.

        The project row and its three child collections are read on the
        same connection and transaction, so the result is a consistent
        snapshot.

        Args:
            project_id: Primary key of the project.

        Returns:
            The Project, or None if no row has that ID.

        Raises:
            PersistenceError: If any of the queries fails.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} WHERE project_id = %s;"
        conn = self._connect()
        try:
            self._start_transaction(conn, readonly=True)
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, (project_id,))
                row = cur.fetchone()
            project = extract(row, Project) if row else None

            # A missing project has no children; skip the three lookups.
            if project is not None:
                project.materials.extend(self._fetch_materials_for_project(conn, project_id))
                project.steps.extend(self._fetch_steps_for_project(conn, project_id))
                project.categories.extend(self._fetch_categories_for_project(conn, project_id))

            conn.commit()
            return project
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to fetch project #{project_id}: {e}")
            raise PersistenceError(f"Failed to fetch project #{project_id}: {e}") from e
        finally:
            self.provider.release(conn)

    def _fetch_materials_for_project(self, conn, project_id: int) -> list[Material]:
        sql = f"SELECT * FROM {MATERIAL_TABLE} WHERE project_id = %s ORDER BY material_id;"
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            return [extract(r, Material) for r in cur.fetchall()]

    def _fetch_steps_for_project(self, conn, project_id: int) -> list[Step]:
        sql = f"SELECT * FROM {STEP_TABLE} WHERE project_id = %s ORDER BY step_order, step_id;"
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            return [extract(r, Step) for r in cur.fetchall()]

    def _fetch_categories_for_project(self, conn, project_id: int) -> list[Category]:
        """Categories linked to the project through the join table."""
        sql = f"""
            SELECT c.* FROM {CATEGORY_TABLE} c
            JOIN {PROJECT_CATEGORY_TABLE} pc USING (category_id)
            WHERE pc.project_id = %s
            ORDER BY c.category_name;
        """
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, (project_id,))
            return [extract(r, Category) for r in cur.fetchall()]

    # ── UPDATE ────────────────────────────────────────────

    def modify_project_details(self, project: Project) -> bool:
        """
        Overwrite the five scalar fields of an existing project.

        Child collections are never touched.

        Args:
            project: Project with updated fields (must have `project_id` set).

        Returns:
            True if exactly one row was updated, False if the ID does not exist.
        """
        sql = f"""
            UPDATE {PROJECT_TABLE} SET
            project_name = %s,
            estimated_hours = %s,
            actual_hours = %s,
            difficulty = %s,
            notes = %s
            WHERE project_id = %s;
        """
        conn = self._connect()
        try:
            self._start_transaction(conn)
            with conn.cursor() as cur:
                cur.execute(sql, (
                    project.project_name, project.estimated_hours,
                    project.actual_hours, project.difficulty, project.notes,
                    project.project_id,
                ))
                modified = cur.rowcount == 1
            conn.commit()
            return modified
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to update project #{project.project_id}: {e}")
            raise PersistenceError(f"Failed to update project #{project.project_id}: {e}") from e
        finally:
            self.provider.release(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete_project(self, project_id: int) -> bool:
        """
        Delete a project by ID.

        Materials, steps and category links go with it through the
        schema's ON DELETE CASCADE; only the one statement is issued.

        Returns:
            True if exactly one row was deleted, False otherwise.
        """
        sql = f"DELETE FROM {PROJECT_TABLE} WHERE project_id = %s;"
        conn = self._connect()
        try:
            self._start_transaction(conn)
            with conn.cursor() as cur:
                cur.execute(sql, (project_id,))
                deleted = cur.rowcount == 1
            conn.commit()
            if deleted:
                logger.info(f"Deleted project #{project_id}")
            return deleted
        except Exception as e:
            self._rollback(conn)
            logger.error(f"Failed to delete project #{project_id}: {e}")
            raise PersistenceError(f"Failed to delete project #{project_id}: {e}") from e
        finally:
            self.provider.release(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _connect(self):
        """Borrow a connection; no transaction is open yet if this fails."""
        try:
            return self.provider.acquire()
        except Exception as e:
            logger.error(f"Failed to acquire database connection: {e}")
            raise PersistenceError(f"Failed to acquire database connection: {e}") from e

    @staticmethod
    def _start_transaction(conn, readonly: bool = False) -> None:
        # Pooled connections keep session settings, so every call sets both.
        conn.set_session(readonly=readonly, autocommit=False)

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back, logging (not raising) a failure so the original error wins."""
        try:
            conn.rollback()
        except Exception as e:
            logger.error(f"Rollback failed: {e}")
