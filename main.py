import logging
import argparse

from core.config_loader import load_config, configure_logging
from database.database import Database

logger = logging.getLogger(__name__)


def init_db(config) -> None:
    """Create all tables, waiting for the database to come up first."""
    logger.info("Initializing database...")
    database = Database(config.database.model_copy(update={"create_tables": True}))
    try:
        database.open()
    finally:
        database.close()
    logger.info("Database initialized")


def serve(config) -> None:
    import uvicorn
    from web.backend.app import create_app

    logger.info(f"Starting Job Board API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        create_app(config=config),
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.logging.level.lower()
    )


def main():
    parser = argparse.ArgumentParser(description="Job Board API")
    parser.add_argument('command', type=str, nargs='?', choices=['serve', 'init-db'], default='serve',
                        help='serve (default) runs the API server, init-db creates the tables')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML config file')
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.logging)

    if args.command == 'init-db':
        init_db(config)
    else:
        serve(config)


if __name__ == "__main__":
    main()
