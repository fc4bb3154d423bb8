import argparse
import logging
import sys

from .core.exceptions import StoreUnavailableError


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.engine.Engine").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)


logger = logging.getLogger(__name__)


def main():
    """Main entry point for cpgview."""
    from .setting import get_settings
    settings = get_settings()

    parser = argparse.ArgumentParser(description="cpgview - Code Property Graph Explorer API")
    parser.add_argument(
        "--db",
        type=str,
        default=settings.db_path,
        help="Path to the CPG SQLite database (opened read-only)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=settings.api_host,
        help="Host interface for the API server"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help="Port for the API server"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger.info(f"Starting cpgview - database: {args.db}")

    from .core.db import get_database_manager
    try:
        db_manager = get_database_manager(args.db, echo=settings.db_echo)
    except StoreUnavailableError as e:
        logger.error(f"Failed to connect to database: {e}")
        sys.exit(1)

    from .api.app import create_app
    app = create_app(db_manager=db_manager, settings=settings)

    import uvicorn

    logger.info(f"Starting FastAPI server on http://{args.host}:{args.port}")
    print(f"\n  API listening on http://localhost:{args.port}")
    print(f"  API docs at: http://localhost:{args.port}/docs\n")

    try:
        uvicorn.run(
            app,
            host=args.host,
            port=args.port,
            log_level=args.log_level.lower(),
        )
    finally:
        db_manager.close()


if __name__ == "__main__":
    main()
