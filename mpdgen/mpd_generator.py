import logging
from pathlib import Path
from typing import Optional

from mpdgen import commands
from mpdgen import file_utils
from mpdgen.config.app_config import ConfigManager
from mpdgen.extractor import mpd_attributes_extractor
from mpdgen.manifest_composer import compose_manifest
from mpdgen.model.media_type import MediaType
from mpdgen.process import CommandRunner, SubprocessRunner

log = logging.getLogger(__name__)


def generate_manifest(source_video_path: Path,
                      destination_dir: Path,
                      segment_duration: Optional[str] = None,
                      runner: Optional[CommandRunner] = None) -> Path:
    """
    Packages the video and the audio stream of the source separately with MP4Box,
    then merges both intermediate manifests into one static manifest.

    Any failure aborts the run. Segments already written by MP4Box are left in place.

    :return: Path of the written manifest.
    """
    app_config = ConfigManager.get_config()
    packager = app_config.packager
    runner = runner or SubprocessRunner()
    segment_duration = segment_duration or app_config.segment_duration

    log.info("Generating DASH manifest...")
    log.info("|-Source file: %s", source_video_path)
    log.info("|-Destination dir: %s", destination_dir)
    log.info("|-Segment duration: %s", segment_duration)

    video_mpd_path = _package_stream(runner, source_video_path, destination_dir, segment_duration,
                                     MediaType.VIDEO, packager.video_mpd_file_name)
    audio_mpd_path = _package_stream(runner, source_video_path, destination_dir, segment_duration,
                                     MediaType.AUDIO, packager.audio_mpd_file_name)

    video_attributes = mpd_attributes_extractor.extract_video_attributes(file_utils.read_text_file(video_mpd_path))
    audio_attributes = mpd_attributes_extractor.extract_audio_attributes(file_utils.read_text_file(audio_mpd_path))

    manifest = compose_manifest(video_attributes, audio_attributes)

    manifest_path = destination_dir / packager.manifest_file_name
    file_utils.write_text_file(manifest_path, manifest)

    log.info("Manifest generated: %s", manifest_path)
    return manifest_path


def generate_audio_manifest(source_file_path: Path,
                            destination_dir: Path,
                            segment_duration: Optional[str] = None,
                            runner: Optional[CommandRunner] = None) -> Path:
    """Audio-only variant: MP4Box writes the final manifest directly, nothing is composed."""
    app_config = ConfigManager.get_config()
    runner = runner or SubprocessRunner()
    segment_duration = segment_duration or app_config.segment_duration

    log.info("Generating audio-only DASH manifest for %s", source_file_path)

    return _package_stream(runner, source_file_path, destination_dir, segment_duration,
                           MediaType.AUDIO, app_config.packager.manifest_file_name)


def _package_stream(runner: CommandRunner,
                    source_file_path: Path,
                    destination_dir: Path,
                    segment_duration: str,
                    media_type: MediaType,
                    mpd_file_name: str) -> Path:
    command = commands.compose_dash_command(source_file_path=source_file_path,
                                            destination_dir=destination_dir,
                                            segment_duration=segment_duration,
                                            media_type=media_type,
                                            mpd_file_name=mpd_file_name)
    log.info("Packaging %s stream...", media_type.value)
    runner.run(command)
    return destination_dir / mpd_file_name
