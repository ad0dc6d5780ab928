import json
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session

from .infrastructure.persistence.sqlalchemy.repositories.options_repository_sql import SqlAppointmentOptionsRepository

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_FILE = Path(__file__).parent / "data" / "appointment_options.json"


def seed_appointment_options(engine: Engine, path: Optional[Path] = None) -> int:
    """Load the treatment catalog into an empty options table. Returns how many were inserted."""
    path = path or DEFAULT_OPTIONS_FILE
    with Session(engine) as session:
        repo = SqlAppointmentOptionsRepository(session)
        if repo.count() > 0:
            return 0

        with open(path, "r", encoding="utf-8") as fh:
            options = json.load(fh)

        for option in options:
            repo.create(option["name"], float(option.get("price", 0)), option.get("slots", []))

    logger.info(f"Seeded {len(options)} appointment options from {path.name}")
    return len(options)
