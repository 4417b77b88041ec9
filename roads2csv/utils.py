import os
import json
import datetime as dt
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import List

from jsonschema import validate, Draft202012Validator
from jsonschema.exceptions import ValidationError

# ---------- Config validation ----------

def load_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def validate_config(cfg: dict):
    here = os.path.dirname(os.path.abspath(__file__))
    schema_path = os.path.join(here, "schemas", "config.schema.json")
    schema = json.loads(load_file(schema_path))
    try:
        validate(instance=cfg, schema=schema, cls=Draft202012Validator)
    except ValidationError as e:
        raise ValueError(f"Config validation error: {e.message} at {list(e.path)}") from e

# ---------- Output writer ----------

def write_output(processed_csv: str, unprocessed_csv: str, out_cfg: dict) -> List[str]:
    """Write both CSV blocks into ``out_cfg["dir"]``.

    Files are opened with ``newline=""`` so the CRLF line terminators are
    written as-is on every platform.
    """
    out_dir = out_cfg["dir"]
    os.makedirs(out_dir, exist_ok=True)

    generated_files = []
    targets = (
        (out_cfg.get("processed_file") or "processed.csv", processed_csv),
        (out_cfg.get("unprocessed_file") or "unprocessed.csv", unprocessed_csv),
    )
    for filename, body in targets:
        path = os.path.join(out_dir, filename)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(body)
        generated_files.append(path)

    return generated_files

# ---------- Logging ----------

_LOGGER_INITIALIZED = False

class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": dt.datetime.fromtimestamp(record.created, dt.timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _build_logger():
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    # Default to a local, writable logs directory
    log_dir = os.getenv("LOG_DIR", "logs")
    json_mode = os.getenv("LOG_JSON", "false").lower() == "true"

    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))

    ch = logging.StreamHandler()
    ch.setLevel(logger.level)

    fh = TimedRotatingFileHandler(os.path.join(log_dir, "roads2csv.log"), when="D", backupCount=7, encoding="utf-8")
    fh.setLevel(logger.level)

    if json_mode:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    ch.setFormatter(fmt)
    fh.setFormatter(fmt)
    logger.addHandler(ch)
    logger.addHandler(fh)

    _LOGGER_INITIALIZED = True

def get_logger(name: str = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else __name__)
