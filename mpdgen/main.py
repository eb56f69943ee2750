import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from mpdgen import converter
from mpdgen import mpd_generator
from mpdgen.config.app_config import ConfigManager
from mpdgen.extractor.attribute_extraction_error import AttributeExtractionError
from mpdgen.process import ProcessError

log = logging.getLogger()

LOGS_FORMAT = '[%(asctime)s][%(levelname)s]: %(message)s'


def configure_logging(logs_dir: Path, verbose: bool = False) -> None:
    logs_dir.mkdir(parents=True, exist_ok=True)

    log.setLevel(logging.DEBUG if verbose else logging.INFO)

    if log.hasHandlers():
        log.handlers.clear()

    logs_formatter = logging.Formatter(LOGS_FORMAT)

    all_logs_handler = logging.FileHandler(logs_dir / "full.log", mode='a', encoding='utf-8')
    all_logs_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    all_logs_handler.setFormatter(logs_formatter)
    log.addHandler(all_logs_handler)

    error_logs_handler = logging.FileHandler(logs_dir / "errors.log", mode='a', encoding='utf-8')
    error_logs_handler.setLevel(logging.ERROR)
    error_logs_handler.setFormatter(logs_formatter)
    log.addHandler(error_logs_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logs_formatter)
    log.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mpdgen", description="Generate DASH manifests and segments with MP4Box.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages, including commands run.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    manifest = subparsers.add_parser("manifest", help="Package video and audio and compose manifest.mpd.")
    manifest.add_argument("--file", type=Path, required=True, help="The path to the source video.")
    manifest.add_argument("--dest", type=Path, required=True,
                          help="The directory where the manifest and segments are stored.")
    manifest.add_argument("--segment", default=None, help="Dash segment value passed to MP4Box.")

    audio_manifest = subparsers.add_parser("audio-manifest", help="Package the audio stream only.")
    audio_manifest.add_argument("--file", type=Path, required=True, help="The path to the source mp4 file.")
    audio_manifest.add_argument("--dest", type=Path, required=True,
                                help="The directory where the manifest and segments are stored.")
    audio_manifest.add_argument("--segment", default=None, help="Dash segment value passed to MP4Box.")

    transcode = subparsers.add_parser("transcode", help="Convert a video to an mp4 file.")
    transcode.add_argument("--file", type=Path, required=True, help="The path to the source video.")
    transcode.add_argument("--dest", type=Path, required=True, help="Directory for the converted file.")

    audio_to_mp4 = subparsers.add_parser("audio-to-mp4", help="Wrap a single audio file into an mp4 container.")
    audio_to_mp4.add_argument("--file", type=Path, required=True, help="The path to the audio file.")
    audio_to_mp4.add_argument("--out", type=Path, required=True, help="The path of the mp4 file to write.")

    batch_audio = subparsers.add_parser("batch-audio", help="Convert all audio files of a directory.")
    batch_audio.add_argument("--src", type=Path, required=True, help="Directory with audio files.")
    batch_audio.add_argument("--dest", type=Path, required=True, help="Directory for the mp4 files.")

    concat = subparsers.add_parser("concat", help="Concatenate all mp4 files of a directory.")
    concat.add_argument("--src", type=Path, required=True, help="Directory with mp4 files.")
    concat.add_argument("--dest", type=Path, required=True, help="Directory for the playlist and output.")

    return parser


def run_command(args: argparse.Namespace) -> None:
    if args.command == "manifest":
        mpd_generator.generate_manifest(args.file, args.dest, args.segment)
    elif args.command == "audio-manifest":
        mpd_generator.generate_audio_manifest(args.file, args.dest, args.segment)
    elif args.command == "transcode":
        converter.transcode(args.file, args.dest)
    elif args.command == "audio-to-mp4":
        converter.audio_to_video_container(args.file, args.out)
    elif args.command == "batch-audio":
        converter.batch_audio_convert(args.src, args.dest)
    elif args.command == "concat":
        converter.concatenate(args.src, args.dest)
    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        app_config = ConfigManager.get_config()
    except ValueError as e:
        log.error("Invalid configuration: %s", e)
        return 1

    configure_logging(app_config.logs_dir, args.verbose)

    log.info("%s v.%s", app_config.app_name, app_config.app_version)
    log.info("Running command: %s", args.command)

    try:
        run_command(args)
    except ProcessError as e:
        log.error("External tool failed: %s", e)
        log.error("|-Command: %s", e.command.readable())
        return 1
    except AttributeExtractionError as e:
        log.error("Intermediate manifest is not usable: %s", e)
        log.error("|-Attribute: %s", e.attribute)
        log.error("|-Reason: %s", e.reason.value)
        return 1
    except OSError as e:
        log.error("File operation failed: %s", e)
        return 1

    log.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
