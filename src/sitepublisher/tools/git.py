from git import Repo, InvalidGitRepositoryError, NoSuchPathError, GitCommandError

from sitepublisher.models import StepResult
from sitepublisher.util import logger


def _failure(step, e: GitCommandError) -> StepResult:
    status = e.status if isinstance(e.status, int) and e.status else 1
    output = (e.stderr or e.stdout or str(e)).strip()
    logger.error(f"git {step} failed ({status}): {output}")
    return StepResult(step=step, ok=False, returncode=status, output=output)


class GitPublishTool:
    """Stages, commits and pushes the generated site working copy."""

    def __init__(self, repo_path):
        self.repo_path = repo_path
        self.repo = None

    def open(self) -> StepResult:
        """Opens the output directory as a git working copy."""
        try:
            self.repo = Repo(self.repo_path)
            return StepResult(step="open", ok=True)
        except NoSuchPathError:
            logger.error(f"Error: output directory '{self.repo_path}' does not exist.")
            return StepResult(step="open", ok=False, returncode=1, output=f"{self.repo_path}: no such directory")
        except InvalidGitRepositoryError:
            logger.error(f"Error: '{self.repo_path}' is not a valid Git repository.")
            return StepResult(step="open", ok=False, returncode=1, output=f"{self.repo_path}: not a git repository")

    def stage_all(self) -> StepResult:
        """Stages new, modified and deleted files."""
        try:
            self.repo.git.add(all=True)
            status_output = self.repo.git.status("--short")
        except GitCommandError as e:
            return _failure("stage", e)

        if status_output:
            logger.info(f"\n--- Files staged for commit ---\n{status_output}\n-------------------------------")
        else:
            logger.info("No changes detected in the output directory.")
        return StepResult(step="stage", ok=True, output=status_output)

    def commit(self, message) -> StepResult:
        try:
            output = self.repo.git.commit(m=message)
        except GitCommandError as e:
            return _failure("commit", e)
        logger.info(f"Committed: {message}")
        return StepResult(step="commit", ok=True, output=output)

    def push(self, remote, branch) -> StepResult:
        try:
            output = self.repo.git.push(remote, branch)
        except GitCommandError as e:
            return _failure("push", e)
        logger.info(f"Pushed to {remote}/{branch}")
        return StepResult(step="push", ok=True, output=output)
