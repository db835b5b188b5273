from pathlib import Path
from pydantic import BaseModel, Field

from sitepublisher.util import (
    DEFAULT_ROOT,
    DEFAULT_GENERATOR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REMOTE,
    DEFAULT_BRANCH,
)


class PublishConfig(BaseModel):
    root: Path = Path(DEFAULT_ROOT)
    generator: list[str] = Field(default_factory=lambda: list(DEFAULT_GENERATOR), min_length=1, validate_default=True)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    remote: str = DEFAULT_REMOTE
    branch: str = DEFAULT_BRANCH


class StepResult(BaseModel):
    step: str
    ok: bool
    returncode: int = 0
    output: str = ""


class PublishResult(BaseModel):
    message: str = ""
    steps: list[StepResult] = Field(default_factory=list)

    @property
    def failed_step(self) -> str | None:
        for step in self.steps:
            if not step.ok:
                return step.step
        return None

    @property
    def ok(self) -> bool:
        return bool(self.steps) and self.failed_step is None

    @property
    def returncode(self) -> int:
        for step in self.steps:
            if not step.ok:
                return step.returncode or 1
        return 0 if self.steps else 1
