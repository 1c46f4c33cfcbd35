"""Widget configuration loader."""

import logging
from typing import Any

from uk_rail_departures.adapters.config.app_config import AppConfig
from uk_rail_departures.domain.models.column import DEFAULT_COLUMNS, Column
from uk_rail_departures.domain.models.widget_configuration import (
    DEFAULT_UPDATE_INTERVAL_MS,
    WidgetConfiguration,
)

logger = logging.getLogger(__name__)

# camelCase option names accepted as aliases
LEGACY_KEYS = {
    "updateInterval": "update_interval_ms",
    "initialLoadDelay": "initial_load_delay_ms",
    "filterDestination": "filter_destination",
    "filterFirstStop": "filter_first_stop",
    "filterCancelled": "filter_cancelled",
    "fetchRows": "fetch_rows",
    "displayRows": "display_rows",
}


def _as_int(value: Any, default: int, minimum: int = 0) -> int:
    try:
        number = int(value)
    except (ValueError, TypeError):
        return default
    if number < minimum:
        return default
    return number


def _as_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_crs_list(value: Any) -> tuple[str, ...]:
    """Normalize a CRS filter: a single string is accepted for backward compatibility."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list | tuple):
        return ()
    return tuple(str(item).strip().upper() for item in value if str(item).strip())


def _as_columns(value: Any, widget_id: str) -> tuple[Column, ...]:
    if value is None:
        return DEFAULT_COLUMNS
    if not isinstance(value, list | tuple):
        logger.warning(f"Widget '{widget_id}': columns must be a list, using defaults")
        return DEFAULT_COLUMNS

    columns: list[Column] = []
    for name in value:
        try:
            columns.append(Column(str(name)))
        except ValueError:
            logger.warning(
                f"Widget '{widget_id}': ignoring unknown column '{name}' "
                f"(valid: {', '.join(Column.names())})"
            )
    return tuple(columns)


class WidgetConfigurationLoader:
    """Loads widget configurations from app config."""

    @staticmethod
    def load_widget_config_from_data(
        widget_data: dict[str, Any], config: AppConfig, index: int = 0
    ) -> WidgetConfiguration | None:
        """Load a single widget configuration from a data dict."""
        if not isinstance(widget_data, dict):
            return None

        data = dict(widget_data)
        for legacy_key, key in LEGACY_KEYS.items():
            if legacy_key in data and key not in data:
                data[key] = data.pop(legacy_key)

        widget_id = str(data.get("id") or f"widget_{index}")
        station = str(data.get("station") or "").strip().upper()
        token = str(data.get("token") or config.darwin_token or "")
        header = data.get("header")

        return WidgetConfiguration(
            widget_id=widget_id,
            station=station,
            token=token,
            header=header if isinstance(header, str) else None,
            update_interval_ms=_as_int(
                data.get("update_interval_ms"), DEFAULT_UPDATE_INTERVAL_MS, minimum=1
            ),
            initial_load_delay_ms=_as_int(data.get("initial_load_delay_ms"), 0),
            filter_destination=_as_crs_list(data.get("filter_destination")),
            filter_first_stop=_as_crs_list(data.get("filter_first_stop")),
            filter_cancelled=_as_bool(data.get("filter_cancelled")),
            fetch_rows=_as_int(data.get("fetch_rows"), 20, minimum=1),
            display_rows=_as_int(data.get("display_rows"), 10, minimum=1),
            columns=_as_columns(data.get("columns"), widget_id),
            debug=_as_bool(data.get("debug")),
        )

    @staticmethod
    def load(config: AppConfig) -> list[WidgetConfiguration]:
        """Load widget configurations from app config.

        Raises ValueError if two widgets share an id.
        """
        widgets_data = config.get_widgets_config()
        widget_configs: list[WidgetConfiguration] = []

        for index, widget_data in enumerate(widgets_data):
            widget_config = WidgetConfigurationLoader.load_widget_config_from_data(
                widget_data, config, index
            )
            if widget_config is not None:
                widget_configs.append(widget_config)

        ids = [w.widget_id for w in widget_configs]
        if len(ids) != len(set(ids)):
            duplicates = {i for i in ids if ids.count(i) > 1}
            raise ValueError(f"Widget ids must be unique. Duplicate ids found: {duplicates}")

        return widget_configs
