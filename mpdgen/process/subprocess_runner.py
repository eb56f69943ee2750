import logging
import subprocess

from mpdgen.model.command_description import CommandDescription, ProcessResult
from mpdgen.process.command_runner import CommandRunner
from mpdgen.process.process_error import ProcessFailedError, ProcessStartError

log = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Blocking runner backed by subprocess.Popen. No timeout, no retry."""

    def run(self, command: CommandDescription) -> ProcessResult:
        cwd = str(command.working_dir) if command.working_dir else None

        log.debug("Running command: %s", command.readable())
        if cwd:
            log.debug("|-Working dir: %s", cwd)

        process = None
        try:
            process = subprocess.Popen(
                [command.executable, *command.args],
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
            stdout, stderr = process.communicate()
        except OSError as e:
            log.error(f"Could not start '{command.executable}'. Details: {e}")
            raise ProcessStartError(f"Could not start '{command.executable}': {e}", command) from e
        except KeyboardInterrupt:
            log.info("Command interrupted by user.")
            if process:
                process.kill()
            raise

        if process.returncode != 0:
            log.error(f"Command failed: {command.readable()}")
            log.error(f"Return code: {process.returncode}")
            log.error(f"Error output:\n{stderr}")
            raise ProcessFailedError(
                f"'{command.executable}' exited with status {process.returncode}",
                command,
                return_code=process.returncode,
                stdout=stdout,
                stderr=stderr,
            )

        log.debug(f"Command finished successfully: {command.executable}")
        return ProcessResult(command=command, return_code=process.returncode, stdout=stdout, stderr=stderr)
