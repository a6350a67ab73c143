import os
import sys

# Add parent directory to path to allow importing opsflow modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from opsflow.core.config import settings
from opsflow.db.base import Base
from opsflow.db.gateway import check_connection
from opsflow.db.session import SessionLocal, engine
import opsflow.models  # noqa: F401


def main() -> int:
    url = engine.url.render_as_string(hide_password=True)
    print(f"Connecting to {url}...")
    db = SessionLocal()
    try:
        if not check_connection(db):
            print("Connection failed, check DATABASE_URL")
            return 1
    finally:
        db.close()
    print("Connection successful!")

    existing = set(inspect(engine).get_table_names())
    missing = sorted(set(Base.metadata.tables) - existing)
    if missing:
        print(f"Missing tables: {', '.join(missing)}. Run 'alembic upgrade head'.")
        return 1
    print(f"All {len(Base.metadata.tables)} tables present in {settings.PROJECT_NAME} database.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
