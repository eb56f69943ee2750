import logging

log = logging.getLogger(__name__)

from pathlib import Path


def get_file_name_without_extension(file_path: Path) -> str:
    return file_path.stem


def check_file_exists(file_path: Path) -> bool:
    return file_path.is_file()


def check_directory_exists(dir_path: Path) -> bool:
    return dir_path.is_dir()


def list_files_with_extension(dir_path: Path, extension: str) -> list[Path]:
    """
    Lists regular files directly inside a directory whose extension matches, ignoring case.
    Sub-directories are not descended into. Result is sorted by file name.
    :param dir_path: Directory to scan.
    :param extension: Extension starting with full stop (e.g. '.mp4').
    :return: Matching file paths.
    """
    if not check_directory_exists(dir_path):
        log.error(f"Directory does not exist or is not a directory: {dir_path}")
        raise NotADirectoryError(f"Directory does not exist or is not a directory: {dir_path}")

    wanted = extension.lower()
    files = [
        entry for entry in sorted(dir_path.iterdir(), key=lambda p: p.name)
        if entry.is_file() and entry.suffix.lower() == wanted
    ]
    log.debug(f"Found {len(files)} '{extension}' file(s) in {dir_path}")
    return files


def sanitize_file_name(file_name: str) -> str:
    return file_name.replace(" ", "_")


def read_text_file(file_path: Path) -> str:
    log.debug(f"Reading file: {file_path}")
    return file_path.read_text(encoding="utf-8")


def write_text_file(file_path: Path, content: str) -> None:
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    log.debug(f"File written: {file_path}")
