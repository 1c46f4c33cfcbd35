"""Main entry point for the UK rail departures application."""

import asyncio
import logging
import sys

import aiohttp

from uk_rail_departures.adapters.config import AppConfig, WidgetConfigurationLoader
from uk_rail_departures.adapters.darwin_api import create_source_factory
from uk_rail_departures.adapters.web import StarletteWebAdapter
from uk_rail_departures.adapters.widget import WidgetRuntime
from uk_rail_departures.application.services import TrainProcessingService

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level_value)

    # Load widget configurations
    try:
        widget_configs = WidgetConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid widget configuration: {e}")
        sys.exit(1)

    if not widget_configs:
        logger.error("No widgets configured.")
        logger.error("Please configure [[widgets]] tables in your config.toml file.")
        logger.error("Or copy config.example.toml to config.toml and customize it.")
        sys.exit(1)

    logger.info(f"Loaded {len(widget_configs)} widget(s):")
    for widget_config in widget_configs:
        logger.info(f"  - {widget_config.widget_id}: station '{widget_config.station}'")

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        source_factory = create_source_factory(
            session,
            base_url=config.darwin_base_url,
            timeout_seconds=config.darwin_timeout_seconds,
        )
        runtime = WidgetRuntime(widget_configs, TrainProcessingService(), source_factory)
        web_adapter = StarletteWebAdapter(runtime, config)

        try:
            await web_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await web_adapter.stop()


if __name__ == "__main__":
    asyncio.run(main())
