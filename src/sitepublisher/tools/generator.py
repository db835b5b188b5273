import subprocess

from sitepublisher.models import StepResult
from sitepublisher.util import logger

# exit statuses a shell reports for a command it cannot find or cannot execute
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class SiteGenerator:
    """Runs the external static site generator."""

    def __init__(self, command):
        self.command = list(command)

    def build(self, site_root) -> StepResult:
        """
        Builds the site. The generator's own output goes straight to the console.

        Parameters:
            site_root: Directory the generator runs in.
        Returns:
            A StepResult carrying the generator's exit status.
        """
        if not self.command:
            logger.error("Error: no generator command configured.")
            return StepResult(step="build", ok=False, returncode=1, output="empty generator command")

        logger.info(f"Running generator: {' '.join(self.command)}")
        try:
            completed = subprocess.run(self.command, cwd=site_root)
        except FileNotFoundError as e:
            logger.error(f"Generator not found: {e}")
            return StepResult(step="build", ok=False, returncode=COMMAND_NOT_FOUND, output=str(e))
        except PermissionError as e:
            logger.error(f"Generator is not executable: {e}")
            return StepResult(step="build", ok=False, returncode=COMMAND_NOT_EXECUTABLE, output=str(e))

        if completed.returncode != 0:
            logger.error(f"Generator failed with exit status {completed.returncode}")
            return StepResult(step="build", ok=False, returncode=completed.returncode)
        return StepResult(step="build", ok=True)
