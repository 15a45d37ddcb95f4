"""
Static configuration for the explorer.

Values come from settings.json next to this file, merged over the
built-in DEFAULTS, and are exposed as module constants. Everything here
is treated as an opaque input by the numeric core.
"""

import copy
import json
import logging
import os

import numba

logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULTS = {
    'title': 'Mandelbrot Explorer',
    'width': 800,
    'height': 600,
    'step_size': 50.0,        # pixels per pan step, divided by zoom
    'zoom_step_size': 1.5,    # geometric zoom factor per step
    'sharpness_step': 10,     # iterations added/removed per sharpen
    'function': 'mandelbrot',
    'color_mode': 'red',
    'threads': None,          # None = one per core
    'initial_view': {
        'r': -0.75,
        'i': 0.0,
        'zoom': 300.0,
        'sharpness': 30,
    },
}


def load_settings(path=None):
    """
    Load settings from a JSON file, filling missing keys from DEFAULTS.

    A missing or unreadable file falls back to the defaults.
    """
    settings = copy.deepcopy(DEFAULTS)
    settings_path = path or SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            loaded = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s: %s", settings_path, e)
        return settings

    if not isinstance(loaded, dict):
        logger.warning("Ignoring %s: top level is not an object", settings_path)
        return settings

    for key, value in loaded.items():
        if key not in DEFAULTS:
            logger.warning("Ignoring unknown setting %r", key)
        elif key == 'initial_view' and isinstance(value, dict):
            settings[key].update(value)
        else:
            settings[key] = value
    settings['threads'] = check_threads(settings['threads'])
    logger.info("Loaded settings from %s", settings_path)
    return settings


def check_threads(value):
    """
    Return a usable worker-thread count, or None for Numba's default.

    Numba accepts 1..NUMBA_NUM_THREADS; anything else is dropped with a warning.
    """
    if value is None:
        return None
    limit = numba.config.NUMBA_NUM_THREADS
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= limit:
        logger.warning("Ignoring threads=%r: expected an integer from 1 to %d", value, limit)
        return None
    return value


def apply_settings(config):
    """Replace the module constants with values from a load_settings() dict."""
    global _SETTINGS, TITLE, WIDTH, HEIGHT, STEP_SIZE, ZOOM_STEP_SIZE
    global SHARPNESS_STEP, FUNCTION, COLOR_MODE, THREADS, INITIAL_VIEW
    _SETTINGS = config
    TITLE = config['title']
    WIDTH = int(config['width'])
    HEIGHT = int(config['height'])
    STEP_SIZE = float(config['step_size'])
    ZOOM_STEP_SIZE = float(config['zoom_step_size'])
    SHARPNESS_STEP = int(config['sharpness_step'])
    FUNCTION = config['function']
    COLOR_MODE = config['color_mode']
    THREADS = check_threads(config['threads'])
    INITIAL_VIEW = dict(config['initial_view'])


# Global settings loaded from JSON
apply_settings(load_settings())
