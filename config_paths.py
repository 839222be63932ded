import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "stu")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
HEADER_ON_LOAD_DEFAULT = True
BELL_DEFAULT = True
SPLIT_DELIMITER_DEFAULT = ""
SPLIT_MAX_FIELDS_DEFAULT = 0


def load_config():
    cfg = {
        "HEADER_ON_LOAD": HEADER_ON_LOAD_DEFAULT,
        "BELL": BELL_DEFAULT,
        "SPLIT_DELIMITER": SPLIT_DELIMITER_DEFAULT,
        "SPLIT_MAX_FIELDS": SPLIT_MAX_FIELDS_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    header_on_load = data.get("header_on_load")
    if isinstance(header_on_load, bool):
        cfg["HEADER_ON_LOAD"] = header_on_load

    bell = data.get("bell")
    if isinstance(bell, bool):
        cfg["BELL"] = bell

    split = data.get("split")
    if isinstance(split, dict):
        delimiter = split.get("delimiter")
        if isinstance(delimiter, str):
            cfg["SPLIT_DELIMITER"] = delimiter
        max_fields = split.get("max_fields")
        # bool is an int subclass; reject it explicitly
        if (
            isinstance(max_fields, int)
            and not isinstance(max_fields, bool)
            and max_fields >= 0
        ):
            cfg["SPLIT_MAX_FIELDS"] = max_fields

    return cfg
