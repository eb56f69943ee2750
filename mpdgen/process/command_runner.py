from abc import ABC, abstractmethod

from mpdgen.model.command_description import CommandDescription, ProcessResult


class CommandRunner(ABC):
    @abstractmethod
    def run(self, command: CommandDescription) -> ProcessResult:
        """
        Runs the command to completion.

        :param command: Executable, arguments and optional working directory.
        :return: Result of a run that exited with status 0.
        :raises ProcessStartError: The executable could not be started.
        :raises ProcessFailedError: The executable ran and exited with a non-zero status.
        """
        pass
