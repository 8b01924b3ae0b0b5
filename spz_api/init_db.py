#!/usr/bin/env python3
"""Initialize database tables"""
import logging

from spz_api.db.models import Base
from spz_api.db.session import engine

log = logging.getLogger(__name__)

def init_db(bind=None):
    """Create all tables"""
    Base.metadata.create_all(bind=bind or engine)
    log.info("Database tables ready")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
