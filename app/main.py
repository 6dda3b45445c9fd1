import argparse
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from app.config.settings import Settings, require_authority_settings
from app.logging.logger import Log
from app.processor.exceptions import AuditError
from app.processor.processor import build_processor


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Re-verify revoked Bitbucket access and collect screenshot evidence"
    )
    parser.add_argument("--input", type=Path, help="Decision spreadsheet (overrides INPUT_FILE)")
    parser.add_argument("--output-dir", type=Path, help="Output root (overrides OUTPUT_DIR)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.input is not None:
        overrides["input_file"] = args.input
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return Settings(**overrides)  # type: ignore[arg-type]


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point: load settings -> check credentials -> run the audit once."""
    args = _parse_args(argv)
    try:
        settings = _load_settings(args)
    except ValidationError as exc:
        Log.configure("INFO")
        Log.error(f"Invalid configuration: {exc}")
        raise SystemExit(1) from exc

    Log.configure(settings.log_level)
    try:
        require_authority_settings(settings)
        Log.configure(settings.log_level, settings.log_file)
        processor = build_processor(settings)
        processor.process(settings.input_file)
    except (AuditError, ValueError) as exc:
        Log.error(f"Audit aborted: {exc}")
        raise SystemExit(1) from exc
    finally:
        Log.shutdown()


if __name__ == "__main__":
    main()
