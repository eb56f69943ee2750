import logging

from mpdgen.config.app_config import AppConfig

log = logging.getLogger(__name__)


class ConfigValidator:
    @staticmethod
    def validate(config: AppConfig) -> None:
        transcoder = config.transcoder
        packager = config.packager

        if not config.ffmpeg_path:
            raise ValueError("ffmpeg path must not be empty.")
        if not config.mp4box_path:
            raise ValueError("MP4Box path must not be empty.")
        if not config.segment_duration.isdigit():
            raise ValueError(f"Invalid segment duration in configuration: '{config.segment_duration}'. "
                             f"Expected a positive integer.")
        if int(config.segment_duration) == 0:
            raise ValueError("Segment duration must be greater than 0.")
        if transcoder.threads < 0:
            raise ValueError("Threads count must be a positive integer or 0.")
        if transcoder.threads == 0:
            log.debug("Threads count is set to 0. ffmpeg will pick the thread count.")
        if not transcoder.video_codec or not transcoder.audio_codec:
            raise ValueError("Video and audio codecs must not be empty.")
        for extension in (transcoder.audio_source_extension, transcoder.container_extension):
            if not extension.startswith(".") or len(extension) < 2:
                raise ValueError(f"Invalid file extension in configuration: '{extension}'. Expected e.g. '.mp4'.")
        if packager.dash_profile != "live":
            log.warning(f"Dash profile '{packager.dash_profile}' is not 'live'. "
                        f"Intermediate manifests may not contain the expected attributes.")
        manifest_names = {packager.video_mpd_file_name, packager.audio_mpd_file_name, packager.manifest_file_name}
        if len(manifest_names) != 3:
            raise ValueError("Video, audio and final manifest file names must be distinct.")
