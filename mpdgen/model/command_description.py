import shlex
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CommandDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    executable: str
    args: list[str]
    working_dir: Optional[Path] = None

    def readable(self) -> str:
        return shlex.join([self.executable, *self.args])


class ProcessResult(BaseModel):
    command: CommandDescription
    return_code: int
    stdout: str = ""
    stderr: str = ""
