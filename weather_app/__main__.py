"""Entry point for running the weather app as a module."""

import argparse
import asyncio
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .app import WeatherApp
from .controller import WeatherController
from .models.config import API_KEY_ENV_VAR, Config
from .models.view_state import Failure, Success, ViewState
from .services.icons import emoji_for
from .services.weather_service import WeatherService

LOG_FILE_NAME = "weather.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_app: WeatherApp | None = None
_logger = logging.getLogger(__name__)


def _file_handler(log_dir: Path) -> logging.Handler | None:
    """Rotating file handler under ``log_dir``, or None if it is not writable."""
    try:
        log_dir.mkdir(exist_ok=True)
        return RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        return None


def setup_logging(log_level: str = "INFO", log_dir: Path | str = "logs") -> None:
    """Log to stderr and, when possible, to ``<log_dir>/weather.log``."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_handler = _file_handler(Path(log_dir))
    if file_handler is not None:
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def _request_exit(signum: int, frame: object) -> None:
    """Ask the running app to exit on SIGINT/SIGTERM."""
    _logger.info(f"Received {signal.Signals(signum).name}, exiting")
    if _app is not None:
        _app.exit()


def setup_signal_handlers() -> None:
    signal.signal(signal.SIGINT, _request_exit)
    signal.signal(signal.SIGTERM, _request_exit)


def format_state(state: ViewState) -> str:
    """Plain-text rendering of a settled state for --once."""
    if isinstance(state, Failure):
        return state.message
    if not isinstance(state, Success):
        return ""

    record = state.record
    lines = [record.location_name, record.temperature_display]
    if record.description:
        lines.append(record.description)
    lines.append(f"Ощущается: {record.feels_like_display}")
    lines.append(f"Влажность: {record.humidity_display}")
    if record.icon_code is not None:
        lines.append(emoji_for(record.icon_code))
    return "\n".join(lines)


async def run_once(config: Config, city: str, service: WeatherService | None = None) -> int:
    """Look up ``city`` once and print the result. Returns the exit code."""
    service = service or WeatherService.from_config(config.weather)
    async with service:
        controller = WeatherController(service)
        state = await controller.refresh(city)

    print(format_state(state))
    return 0 if isinstance(state, Success) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simple Weather - current weather for a city from OpenWeatherMap"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "--city",
        help="City to look up first (default: weather.default_city from config)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the weather for one city and exit instead of starting the UI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    global _app

    args = build_parser().parse_args(argv)

    if args.version:
        from . import __version__

        print(f"Simple Weather v{__version__}")
        sys.exit(0)

    config = Config.load_or_default(args.config).with_env_overrides()
    if args.city and args.city.strip():
        weather = config.weather.model_copy(update={"default_city": args.city.strip()})
        config = config.model_copy(update={"weather": weather})

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)

    if not config.weather.api_key:
        _logger.warning(
            f"No API key configured; set weather.api_key in {args.config} or {API_KEY_ENV_VAR}"
        )

    if args.once:
        sys.exit(asyncio.run(run_once(config, config.weather.default_city)))

    setup_signal_handlers()
    _logger.info("Starting Simple Weather")

    _app = WeatherApp(config=config)
    _app.run()
    _logger.info("Simple Weather stopped")


if __name__ == "__main__":
    main()
