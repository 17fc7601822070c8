"""
db/init_db.py
-------------
Creates the DIY projects schema (tables) if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Projects: the aggregate root
CREATE TABLE IF NOT EXISTS projects (
    project_id      SERIAL PRIMARY KEY,
    project_name    VARCHAR(128) NOT NULL,
    estimated_hours NUMERIC(7,2),
    actual_hours    NUMERIC(7,2),
    difficulty      INT,
    notes           TEXT
);

-- Materials needed by a project; removed together with the project
CREATE TABLE IF NOT EXISTS material (
    material_id     SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES projects(project_id) ON DELETE CASCADE,
    material_name   VARCHAR(128) NOT NULL,
    num_required    INT,
    cost            NUMERIC(7,2)
);

-- Ordered steps of a project; removed together with the project
CREATE TABLE IF NOT EXISTS step (
    step_id         SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES projects(project_id) ON DELETE CASCADE,
    step_text       TEXT NOT NULL,
    step_order      INT NOT NULL
);

-- Categories exist on their own
CREATE TABLE IF NOT EXISTS category (
    category_id     SERIAL PRIMARY KEY,
    category_name   VARCHAR(128) NOT NULL
);

-- Many-to-many link between projects and categories
CREATE TABLE IF NOT EXISTS project_category (
    project_id      INT NOT NULL REFERENCES projects(project_id) ON DELETE CASCADE,
    category_id     INT NOT NULL REFERENCES category(category_id) ON DELETE CASCADE,
    PRIMARY KEY (project_id, category_id)
);

CREATE INDEX IF NOT EXISTS idx_material_project ON material(project_id);
CREATE INDEX IF NOT EXISTS idx_step_project ON step(project_id, step_order);
"""

DROP_SQL = """
DROP TABLE IF EXISTS project_category;
DROP TABLE IF EXISTS category;
DROP TABLE IF EXISTS step;
DROP TABLE IF EXISTS material;
DROP TABLE IF EXISTS projects;
"""

DEFAULT_CATEGORIES = [
    "Doors and Windows",
    "Repairs",
    "Gardening",
    "Painting",
    "Woodworking",
]

# category_name has no unique constraint, so ON CONFLICT is not an option.
SEED_CATEGORY_SQL = """
    INSERT INTO category (category_name)
    SELECT %s
    WHERE NOT EXISTS (SELECT 1 FROM category WHERE category_name = %s);
"""


def _execute_script(sql: str, action: str) -> None:
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql)
        conn.commit()
        logger.info(f"Database schema {action} completed.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to {action} schema: {e}")
        raise
    finally:
        release_connection(conn)


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _execute_script(SCHEMA_SQL, "initialize")


def drop_tables() -> None:
    """Drop all project tables, children first."""
    _execute_script(DROP_SQL, "drop")


def seed_categories(names: list[str] = DEFAULT_CATEGORIES) -> int:
    """
    Insert the default categories that are not there yet.
    Safe to call multiple times.

    Returns:
        Number of categories actually inserted.
    """
    conn = get_connection()
    try:
        inserted = 0
        with conn.cursor() as cur:
            for name in names:
                cur.execute(SEED_CATEGORY_SQL, (name, name))
                inserted += cur.rowcount
        conn.commit()
        if inserted:
            logger.info(f"Seeded {inserted} categories.")
        return inserted
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to seed categories: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
        seed_categories()
    finally:
        close_pool()
    print("Database schema created successfully.")
