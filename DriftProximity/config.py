from __future__ import annotations

import os
import json
import dotenv

from DriftProximity.utils.logger import logger, setup_logging
from typing import Any, Dict, Optional

# load config.json (bundled next to this module)

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "config.json")

def load_config() -> Dict[str, Any]:
    try:
        with open(CONFIG_PATH, "r") as f:
            config = json.load(f)
        logger.info(f"✅ Loaded config from {CONFIG_PATH}")
        return config
    except FileNotFoundError:
        logger.error(f"❌ Config file not found at {CONFIG_PATH}. Using default values.")
        return {}
    except json.JSONDecodeError as e:
        logger.error(f"❌ Config file at {CONFIG_PATH} is not valid JSON ({e}). Using default values.")
        return {}

config = load_config()

# Read environment variables from .env file
env_file = os.path.join(os.getcwd(), ".env")
dotenv.load_dotenv(env_file, override=True)

def get_env_var(name: str, default = None) -> Optional[str]:
    value = os.getenv(name, default)
    if value is None or value == '':
        logger.warning(f"⚠️ Missing environment variable: {name}. Using default: {default}")
        return default
    return value


def get_env_bool(name: str, default: bool = False) -> bool:
    return get_env_var(name, "TRUE" if default else "FALSE").upper() == "TRUE"

# Distance slider domain (miles)
# The slider max doubles as the "no distance limit" sentinel
distance_config = config.get("distance", {})
distance_slider_min_miles: int = distance_config.get("slider_min_miles", 5)
distance_slider_max_miles: int = distance_config.get("slider_max_miles", 200)
default_max_distance_miles: int = distance_config.get("default_max_miles", 50)

# Per-feature "along my route" defaults
features_config = config.get("features", {})
FEATURES = ("dating", "friends", "events")
_feature_route_defaults = {"dating": False, "friends": True, "events": True}
include_route_stops_defaults: Dict[str, bool] = {
    feature: bool(features_config.get(feature, {}).get("include_route_stops", _feature_route_defaults[feature]))
    for feature in FEATURES
}

# Preference persistence
preferences_path = get_env_var(
    "PREFERENCES_PATH",
    config.get("preferences", {}).get("store_path", "data/filter_preferences.json"),
)

# Log Level
log_level = get_env_var("LOG_LEVEL", "INFO").upper()
log_file = get_env_bool("LOG_FILE", False)


def init_logging() -> None:
    """Configure loguru from LOG_LEVEL / LOG_FILE."""
    setup_logging(log_level, {"to_file": log_file, "show_function": True})
