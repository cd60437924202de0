import logging
import os
import random

import yaml
from dotenv import load_dotenv

from adventure.errors import ConfigurationError
from adventure.gameio import GameIO
from adventure.items import DEFAULT_ITEMS_PATH, load_items
from adventure.session import Session
from adventure.world import RoomGrid

DEFAULT_CONFIG_PATH = "config.yaml"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(module)s:%(lineno)d - %(message)s'

DEFAULT_YAML = """
# WILDGRID CONFIGURATION
# ----------------------
# seed: set a number to replay the same world, or leave null for a new one.
# start: x, y, z of the first room; y = 0 is the ground.

prompt: "? "
seed: null
start: [0, 0, 0]
starting_inventory: [stick, apple]
debug_mode: false
log_file: wildgrid.log
log_level: INFO
"""

DEFAULTS = yaml.safe_load(DEFAULT_YAML)


def load_config(config_path=None):
    """
    Loads config.yaml or creates default if missing.
    ADVENTURE_CONFIG picks another file and ADVENTURE_SEED overrides the seed;
    both may come from a .env file.
    """
    load_dotenv()
    config_path = config_path or os.getenv("ADVENTURE_CONFIG", DEFAULT_CONFIG_PATH)

    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_YAML.strip() + "\n")

    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{config_path} is not valid YAML: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"{config_path} must hold a mapping of settings")

    config = dict(DEFAULTS)
    config.update(loaded)

    seed = os.getenv("ADVENTURE_SEED")
    if seed:
        try:
            config['seed'] = int(seed)
        except ValueError as e:
            raise ConfigurationError(f"ADVENTURE_SEED must be an integer, got {seed!r}") from e

    start = config.get('start')
    if not isinstance(start, (list, tuple)) or len(start) != 3:
        raise ConfigurationError(f"start must be [x, y, z], got {start!r}")

    return config


def setup_logging(config):
    """Sends log records to the configured file; the console belongs to the game."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    level = "DEBUG" if config.get('debug_mode') else str(config.get('log_level', 'INFO')).upper()

    log_file = config.get('log_file')
    if log_file:
        handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    logging.info("Logging configured (level %s)", level)


def build_session(config, console=None, items_path=DEFAULT_ITEMS_PATH):
    """Creates a fresh session from a loaded configuration."""
    seed = config.get('seed')
    catalog = load_items(items_path)
    return Session(
        io=GameIO(console),
        grid=RoomGrid(random.Random(seed)),
        catalog=catalog,
        start=tuple(int(c) for c in config['start']),
        inventory=catalog.make(config.get('starting_inventory') or []),
        rng=random.Random(seed),
    )
