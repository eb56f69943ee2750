from mpdgen.process.command_runner import CommandRunner
from mpdgen.process.process_error import ProcessError, ProcessFailedError, ProcessStartError
from mpdgen.process.subprocess_runner import SubprocessRunner

__all__ = ["CommandRunner", "ProcessError", "ProcessFailedError", "ProcessStartError", "SubprocessRunner"]
