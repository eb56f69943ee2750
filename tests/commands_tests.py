from pathlib import Path

from mpdgen import commands
from mpdgen.model.media_type import MediaType


def test_transcode_command_uses_configured_encoder(mock_app_config, tmp_path):
    command = commands.compose_transcode_command(tmp_path / "in.mov", tmp_path / "out.mp4")

    assert command.executable == "ffmpeg"
    assert command.working_dir is None
    assert command.args == [
        "-i", str(tmp_path / "in.mov"),
        "-codec:v", "libx264",
        "-profile", "high",
        "-threads", "0",
        "-codec:a", "libfdk_aac",
        "-b:a", "128k",
        str(tmp_path / "out.mp4"),
    ]


def test_transcode_command_follows_config_overrides(mock_app_config, tmp_path):
    mock_app_config.transcoder.video_codec = "libx265"
    mock_app_config.transcoder.threads = 4

    command = commands.compose_transcode_command(tmp_path / "in.mov", tmp_path / "out.mp4")

    assert command.args[command.args.index("-codec:v") + 1] == "libx265"
    assert command.args[command.args.index("-threads") + 1] == "4"


def test_dash_command_selects_stream_and_runs_in_destination(mock_app_config, tmp_path):
    source = tmp_path / "src" / "movie.mp4"
    destination = tmp_path / "dest"

    command = commands.compose_dash_command(source, destination, "2000", MediaType.AUDIO, "audio.mpd")

    assert command.executable == "MP4Box"
    assert command.working_dir == destination.resolve()
    assert command.args == [
        "-dash", "2000",
        "-dash-profile", "live",
        "-segment-name", "audio",
        "-out", str(destination.resolve() / "audio.mpd"),
        f"{source.resolve()}#audio",
    ]


def test_dash_command_makes_relative_paths_absolute(mock_app_config, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    command = commands.compose_dash_command(Path("movie.mp4"), Path("out"), "1000", MediaType.VIDEO, "video.mpd")

    assert command.args[-1] == f"{tmp_path.resolve() / 'movie.mp4'}#video"
    assert command.args[-2] == str(tmp_path.resolve() / "out" / "video.mpd")


def test_concat_command(mock_app_config, tmp_path):
    command = commands.compose_concat_command(tmp_path / "list.txt", tmp_path / "out.mp4")

    assert command.args == ["-f", "concat", "-safe", "0", "-i", str(tmp_path / "list.txt"),
                            "-c", "copy", str(tmp_path / "out.mp4")]
