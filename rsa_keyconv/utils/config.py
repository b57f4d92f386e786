import copy
import os

import yaml

from rsa_keyconv.crypto.formats import KeyFormat
from rsa_keyconv.utils.logger import DEFAULT_LEVEL, LOG_LEVEL_ENV

DEFAULT_CONFIG_PATH = "rsa-keyconv.yaml"

DEFAULTS = {
    "logging": {
        "level": DEFAULT_LEVEL,
    },
    "conversion": {
        "input_format": KeyFormat.PKCS1.value,
        "output_format": KeyFormat.PKCS8.value,
    },
}


def get_config(path=None):
    """
    Loads YAML configuration from either:
      - explicit path argument, or
      - environment variable RSA_KEYCONV_CONFIG, or
      - default file ./rsa-keyconv.yaml

    A missing explicit or environment path is an error; a missing default
    file just means the built-in defaults apply.
    """
    explicit = path or os.getenv("RSA_KEYCONV_CONFIG")
    path = explicit or DEFAULT_CONFIG_PATH
    cfg = copy.deepcopy(DEFAULTS)

    if not os.path.exists(path):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        return cfg

    with open(path) as f:
        try:
            loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Config file {path} is not valid YAML: {e}") from e
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(cfg.get(section), dict):
            cfg[section].update(values)
        else:
            cfg[section] = values
    return cfg


def get_conversion_config(path=None):
    """
    Get the default input/output formats as KeyFormat members.
    Raises UnsupportedFormatError if the config names an unknown format.
    """
    conversion = get_config(path).get("conversion") or {}
    return {
        "input_format": KeyFormat.parse(conversion.get("input_format", DEFAULTS["conversion"]["input_format"])),
        "output_format": KeyFormat.parse(conversion.get("output_format", DEFAULTS["conversion"]["output_format"])),
    }


def get_log_level(path=None) -> str:
    """
    Resolve the log level. Precedence:
      - environment variable RSA_KEYCONV_LOG_LEVEL, then
      - logging.level from the config file, then
      - INFO
    """
    cfg_level = (get_config(path).get("logging") or {}).get("level", DEFAULT_LEVEL)
    return str(os.getenv(LOG_LEVEL_ENV) or cfg_level).upper()
