import logging
from pathlib import Path
from typing import Optional

from mpdgen import commands
from mpdgen import file_utils
from mpdgen.config.app_config import ConfigManager
from mpdgen.process import CommandRunner, SubprocessRunner

log = logging.getLogger(__name__)


def transcode(source_file_path: Path, destination_dir: Path, runner: Optional[CommandRunner] = None) -> Path:
    app_config = ConfigManager.get_config()
    runner = runner or SubprocessRunner()

    output_file_path = destination_dir / app_config.transcoder.output_file_name

    log.info("Transcoding video...")
    log.info("|-Source file: %s", source_file_path)
    log.info("|-Output file: %s", output_file_path)

    runner.run(commands.compose_transcode_command(source_file_path, output_file_path))
    return output_file_path


def audio_to_video_container(audio_file_path: Path, output_file_path: Path,
                             runner: Optional[CommandRunner] = None) -> Path:
    runner = runner or SubprocessRunner()

    log.info("Converting audio: %s -> %s", audio_file_path, output_file_path)

    runner.run(commands.compose_audio_container_command(audio_file_path, output_file_path))
    return output_file_path


def batch_audio_convert(source_dir: Path, destination_dir: Path, runner: Optional[CommandRunner] = None) -> list[Path]:
    """
    Converts every audio file found directly in source_dir. Stops at the first failure.
    Spaces in output file names are replaced with underscores.
    """
    app_config = ConfigManager.get_config()
    transcoder = app_config.transcoder
    runner = runner or SubprocessRunner()

    audio_files = file_utils.list_files_with_extension(source_dir, transcoder.audio_source_extension)
    log.info("Batch converting %d file(s) from %s", len(audio_files), source_dir)

    converted = []
    for audio_file_path in audio_files:
        output_file_name = file_utils.sanitize_file_name(
            file_utils.get_file_name_without_extension(audio_file_path) + transcoder.container_extension
        )
        converted.append(audio_to_video_container(audio_file_path, destination_dir / output_file_name, runner))

    log.info("Batch conversion finished. Converted files: %d", len(converted))
    return converted


def concatenate(source_dir: Path, destination_dir: Path, runner: Optional[CommandRunner] = None) -> Path:
    app_config = ConfigManager.get_config()
    transcoder = app_config.transcoder
    runner = runner or SubprocessRunner()

    list_file_path = destination_dir / transcoder.concat_list_file_name
    generate_playlist(source_dir, list_file_path)

    output_file_path = destination_dir / transcoder.output_file_name
    log.info("Concatenating videos into %s", output_file_path)

    runner.run(commands.compose_concat_command(list_file_path, output_file_path))
    return output_file_path


def generate_playlist(source_dir: Path, list_file_path: Path) -> list[Path]:
    app_config = ConfigManager.get_config()

    container_files = file_utils.list_files_with_extension(source_dir, app_config.transcoder.container_extension)
    if not container_files:
        log.warning(f"No '{app_config.transcoder.container_extension}' files found in {source_dir}")

    lines = [f"file '{_escape_playlist_path(path.resolve())}'" for path in container_files]
    file_utils.write_text_file(list_file_path, "\n".join(lines))

    log.info("Playlist written: %s", list_file_path)
    log.info("|-Entries: %d", len(container_files))
    return container_files


def _escape_playlist_path(path: Path) -> str:
    # concat demuxer: a quote inside a quoted string is written as '\''
    return str(path).replace("'", "'\\''")
