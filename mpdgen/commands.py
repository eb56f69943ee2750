import logging
from pathlib import Path

from mpdgen.config.app_config import ConfigManager
from mpdgen.model.command_description import CommandDescription
from mpdgen.model.media_type import MediaType

log = logging.getLogger(__name__)


def compose_transcode_command(source_file_path: Path, output_file_path: Path) -> CommandDescription:
    app_config = ConfigManager.get_config()
    transcoder = app_config.transcoder

    args = [
        '-i', str(source_file_path),
        '-codec:v', transcoder.video_codec,
        '-profile', transcoder.profile,
        '-threads', str(transcoder.threads),
        '-codec:a', transcoder.audio_codec,
        '-b:a', transcoder.audio_bitrate,
        str(output_file_path),
    ]

    return CommandDescription(executable=app_config.ffmpeg_path, args=args)


def compose_audio_container_command(audio_file_path: Path, output_file_path: Path) -> CommandDescription:
    app_config = ConfigManager.get_config()

    args = [
        '-i', str(audio_file_path),
        '-vn', str(output_file_path),
    ]

    return CommandDescription(executable=app_config.ffmpeg_path, args=args)


def compose_concat_command(list_file_path: Path, output_file_path: Path) -> CommandDescription:
    app_config = ConfigManager.get_config()

    args = [
        '-f', 'concat',
        '-safe', '0',
        '-i', str(list_file_path),
        '-c', 'copy',
        str(output_file_path),
    ]

    return CommandDescription(executable=app_config.ffmpeg_path, args=args)


def compose_dash_command(source_file_path: Path,
                         destination_dir: Path,
                         segment_duration: str,
                         media_type: MediaType,
                         mpd_file_name: str) -> CommandDescription:
    """
    MP4Box -dash 1000 -dash-profile live -segment-name video -out <dest>/video.mpd <source>#video

    MP4Box runs inside the destination directory so that segments land there,
    so both paths are made absolute first.
    """
    app_config = ConfigManager.get_config()

    destination_dir = destination_dir.resolve()
    source_file_path = source_file_path.resolve()

    args = [
        '-dash', segment_duration,
        '-dash-profile', app_config.packager.dash_profile,
        '-segment-name', media_type.value,
        '-out', str(destination_dir / mpd_file_name),
        f"{source_file_path}{media_type.stream_selector}",
    ]

    return CommandDescription(executable=app_config.mp4box_path, args=args, working_dir=destination_dir)
