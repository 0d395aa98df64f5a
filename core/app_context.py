from dataclasses import dataclass
from typing import Optional

from core.config_loader import AppConfig
from core.scorer import MatchScorer
from core.scorer.jitter import JitterSource, RandomJitter
from core.storage import BlobStore, LocalBlobStore
from database.database import Database


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Built once at process start. The Database is constructed here but
    only opened by open(), so the web lifespan controls when connections
    are made and when they are released.
    """
    config: AppConfig
    database: Database
    scorer: MatchScorer
    blob_store: BlobStore

    @classmethod
    def build(cls, config: AppConfig, jitter: Optional[JitterSource] = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            jitter: Optional jitter source for the scorer (tests pin it)

        Returns:
            Fully wired AppContext instance (database not yet opened)
        """
        return cls(
            config=config,
            database=Database(config.database),
            scorer=MatchScorer(config=config.scorer, jitter=jitter or RandomJitter()),
            blob_store=cls._build_blob_store(config),
        )

    @staticmethod
    def _build_blob_store(config: AppConfig) -> BlobStore:
        return LocalBlobStore(
            storage_dir=config.uploads.storage_dir,
            base_url=config.uploads.base_url
        )

    def open(self) -> "AppContext":
        self.database.open()
        return self

    def close(self) -> None:
        self.database.close()
