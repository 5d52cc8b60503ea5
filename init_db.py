from core.db import Base, engine, SessionLocal
from models.audit_log import AuditLog


def init_db(rebuild: bool = False):
    """Create the audit log table. With rebuild=True, drop it first."""
    if rebuild:
        print("Rebuilding database (drop/create)...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("Tables ready:")
    print("   - audit_logs")

    db = SessionLocal()
    try:
        print(f"Audit entries: {db.query(AuditLog).count()}")
    finally:
        db.close()


if __name__ == "__main__":
    import sys
    init_db(rebuild="--rebuild" in sys.argv)
