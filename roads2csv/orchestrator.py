import argparse
import time
import uuid
import yaml
from typing import Dict, Any, Optional

from roads2csv.loader import load_streets
from roads2csv.stages.classify import process
from roads2csv.stages.dedup import from_streets
from roads2csv.utils import write_output, validate_config, get_logger

logger = get_logger(__name__)

DEFAULT_DELIMITER = "\t"


def _apply_overrides(cfg: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> None:
    if not overrides:
        return

    inp = cfg.setdefault("input", {})
    if overrides.get("input_path") is not None:
        inp["path"] = overrides["input_path"]
    if overrides.get("input_delimiter") is not None:
        inp["delimiter"] = overrides["input_delimiter"]

    out = cfg.setdefault("output", {})
    if overrides.get("output_dir") is not None:
        out["dir"] = overrides["output_dir"]
    if overrides.get("output_delimiter") is not None:
        out["delimiter"] = overrides["output_delimiter"]


def _execute_pipeline(cfg: Dict[str, Any], run_id: str) -> Dict[str, Any]:
    """Execute load -> dedup -> classify -> render -> write with given configuration."""
    in_cfg = cfg["input"]
    out_cfg = cfg["output"]
    logger.info("config loaded run=%s input=%s output=%s", run_id, in_cfg["path"], out_cfg["dir"])

    t0 = time.monotonic()
    streets = load_streets(
        in_cfg["path"],
        delimiter=in_cfg.get("delimiter") or DEFAULT_DELIMITER,
        encoding=in_cfg.get("encoding") or "utf-8-sig",
    )
    logger.info("loaded records=%d took_ms=%d", len(streets), int((time.monotonic()-t0)*1000))

    t1 = time.monotonic()
    grouping = from_streets(streets)
    processed, unprocessed = process(grouping)
    logger.info("processed streets=%d took_ms=%d", len(grouping.roads), int((time.monotonic()-t1)*1000))

    delimiter = out_cfg.get("delimiter")
    if delimiter is None:
        delimiter = DEFAULT_DELIMITER
    generated_files = write_output(processed.to_csv(delimiter), unprocessed.to_csv(delimiter), out_cfg)
    logger.info("output written dir=%s files=%d", out_cfg["dir"], len(generated_files))

    if len(unprocessed):
        logger.info("%d street(s) span 3+ cells and need manual review", len(unprocessed))

    return {
        "records": len(streets),
        "streets": len(grouping.roads),
        "processed": len(processed),
        "unprocessed": len(unprocessed),
        "files": generated_files,
    }


def run_once(config_path: str, *, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Execute pipeline once with given config file path."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s ===", run_id)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        _apply_overrides(cfg, overrides)
        validate_config(cfg)
        return _execute_pipeline(cfg, run_id)

    except Exception as e:
        logger.error("Pipeline execution failed: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ===", run_id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deduplicate a street index into processed/unprocessed CSV files.")
    parser.add_argument("--config", type=str, required=True, help="Path to the YAML config file.")
    parser.add_argument("--input", dest="input_path", type=str, help="Override input.path")
    parser.add_argument("--delimiter", dest="input_delimiter", type=str, help="Override input.delimiter")
    parser.add_argument("--out-dir", dest="output_dir", type=str, help="Override output.dir")
    parser.add_argument("--output-delimiter", dest="output_delimiter", type=str, help="Override output.delimiter")
    return parser


def main(argv=None):
    """Main entry point for CLI usage."""
    args = build_parser().parse_args(argv)
    overrides = {
        "input_path": args.input_path,
        "input_delimiter": args.input_delimiter,
        "output_dir": args.output_dir,
        "output_delimiter": args.output_delimiter,
    }
    summary = run_once(args.config, overrides=overrides)
    logger.info("OK: %s", {k: v for k, v in summary.items() if k != "files"})


if __name__ == "__main__":
    main()
