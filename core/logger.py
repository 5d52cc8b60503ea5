# core/logger.py
import logging
from datetime import datetime

from core.config import LOG_LEVEL
from core.db import SessionLocal
from models.audit_log import AuditLog

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    """Configure root logging once for the app process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def log_action(actor: str, action: str):
    """Record an admin action into the audit log."""
    session = SessionLocal()
    try:
        entry = AuditLog(actor=actor, action=action, timestamp=datetime.utcnow())
        session.add(entry)
        session.commit()
    except Exception as e:
        logger.error("Audit log error: %s", e)
        session.rollback()
    finally:
        session.close()


def audit_recorder(actor: str):
    """Return a one-argument callable that records actions for `actor`."""
    return lambda action: log_action(actor, action)
