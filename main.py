import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent

logger = logging.getLogger("brave_mcp")


def parse_args(argv=None):
    parser = ArgumentParser(description="Запуск MCP-сервера Brave Search")
    parser.add_argument(
        "--no-run",
        action="store_true",
        help="Проверить загрузку конфигурации без запуска сервера",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="Транспорт MCP (по умолчанию stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    load_dotenv(ROOT / ".env")

    from brave_mcp import SERVER_NAME, SERVER_VERSION, app, config

    config.reload_from_env()
    config.configure_logging()

    try:
        config.require_api_key()
    except config.ConfigurationError as exc:
        logger.error("FATAL ERROR: %s", exc)
        return 1

    logger.info("Configuration loaded. Log level: %s", config.LOG_LEVEL)

    if args.no_run:
        return 0

    logger.info("%s v%s running on %s", SERVER_NAME, SERVER_VERSION, args.transport)
    if args.transport == "http":
        app.run(transport="http", host=args.host, port=args.port)
    else:
        app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
