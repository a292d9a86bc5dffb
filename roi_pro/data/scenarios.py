"""Named scenario persistence.

Scenarios are stored as config snapshots keyed by name. Loading merges the
snapshot over the baseline template, so snapshots saved before a field
existed still produce a fully populated config.
"""

import logging
from pathlib import Path

from sqlalchemy import Engine, create_engine, delete, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from roi_pro.config import settings
from roi_pro.models.assumptions import (
    BASELINE_CONFIG,
    ProjectionConfig,
    config_from_dict,
    config_to_dict,
)
from roi_pro.models.db import Base, ScenarioRecord

logger = logging.getLogger(__name__)


class ScenarioNotFound(LookupError):
    def __init__(self, name: str):
        super().__init__(f"No saved scenario named {name!r}")
        self.name = name


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


class ScenarioStore:
    def __init__(self, database_url: str | None = None, engine: Engine | None = None):
        if engine is None:
            database_url = database_url or settings.database_url
            _ensure_sqlite_dir(database_url)
            engine = create_engine(database_url, echo=settings.debug)
        self.engine = engine
        self._session = sessionmaker(engine, expire_on_commit=False)
        Base.metadata.create_all(engine)

    def save(self, config: ProjectionConfig) -> None:
        """Insert or replace the scenario with ``config.name``."""
        data = config_to_dict(config)
        try:
            with self._session() as session, session.begin():
                record = session.scalar(
                    select(ScenarioRecord).where(ScenarioRecord.name == config.name)
                )
                if record is None:
                    session.add(ScenarioRecord(
                        name=config.name,
                        strategy=config.strategy.value,
                        config=data,
                    ))
                else:
                    record.strategy = config.strategy.value
                    record.config = data
        except SQLAlchemyError:
            logger.exception("Failed to save scenario %r", config.name)
            raise
        logger.info("Saved scenario %r", config.name)

    def load(self, name: str, base: ProjectionConfig = BASELINE_CONFIG) -> ProjectionConfig:
        try:
            with self._session() as session:
                record = session.scalar(select(ScenarioRecord).where(ScenarioRecord.name == name))
        except SQLAlchemyError:
            logger.exception("Failed to load scenario %r", name)
            raise
        if record is None:
            raise ScenarioNotFound(name)
        return config_from_dict({**record.config, "name": record.name}, base=base)

    def list_names(self) -> list[str]:
        try:
            with self._session() as session:
                return list(session.scalars(select(ScenarioRecord.name).order_by(ScenarioRecord.id)))
        except SQLAlchemyError:
            logger.exception("Failed to list scenarios")
            raise

    def delete(self, name: str) -> None:
        try:
            with self._session() as session, session.begin():
                deleted = session.execute(
                    delete(ScenarioRecord).where(ScenarioRecord.name == name)
                ).rowcount
        except SQLAlchemyError:
            logger.exception("Failed to delete scenario %r", name)
            raise
        if not deleted:
            raise ScenarioNotFound(name)
        logger.info("Deleted scenario %r", name)
