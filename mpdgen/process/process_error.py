from mpdgen.model.command_description import CommandDescription


class ProcessError(Exception):
    def __init__(self, reason: str, command: CommandDescription):
        super().__init__(reason)
        self.command: CommandDescription = command


class ProcessStartError(ProcessError):
    pass


class ProcessFailedError(ProcessError):
    def __init__(self, reason: str, command: CommandDescription, return_code: int, stdout: str, stderr: str):
        super().__init__(reason, command)
        self.return_code: int = return_code
        self.stdout: str = stdout
        self.stderr: str = stderr
