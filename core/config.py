import logging
import os
from typing import Dict, Any, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

WEATHER_TOOL_NAME = "weather_tool"
API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(config_path: str) -> Dict[str, Any]:
    logger = logging.getLogger(__name__)

    if not os.path.exists(config_path):
        logger.error(f"Configuration file not found: {config_path}")
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)

        logger.info(f"Loaded configuration from {config_path}")
        return config or {}
    except yaml.YAMLError as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise


def get_tool_config(config: Dict[str, Any], tool_name: str) -> Optional[Dict[str, Any]]:
    logger = logging.getLogger(__name__)

    tools_config = config.get('tools') or []

    for tool_config in tools_config:
        if tool_config.get('name') == tool_name:
            return tool_config.get('config') or {}

    logger.warning(f"No configuration found for tool: {tool_name}")
    return None


def get_weather_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """Weather tool settings with the API key overridable from the environment or a .env file."""
    logger = logging.getLogger(__name__)
    load_dotenv(find_dotenv(usecwd=True))

    settings = dict(get_tool_config(config, WEATHER_TOOL_NAME) or {})
    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        settings["api_key"] = env_key

    logger.info(f"{WEATHER_TOOL_NAME} config loaded: api_key={'present' if settings.get('api_key') else 'missing'}")
    return settings
