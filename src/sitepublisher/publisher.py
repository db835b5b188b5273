from sitepublisher.message import build_commit_message, local_now
from sitepublisher.models import PublishConfig, PublishResult, StepResult
from sitepublisher.tools.generator import SiteGenerator
from sitepublisher.tools.git import GitPublishTool
from sitepublisher.util import logger, working_directory


class Publisher:
    """
    Rebuilds the site and publishes the generated output to the remote.

    Every step returns a StepResult; the run stops at the first failure.
    The process working directory is the same on return as on entry.
    """

    def __init__(self, config: PublishConfig, clock=local_now):
        self.config = config
        self.clock = clock
        self.root = config.root.resolve()
        self.output_path = self.root / config.output_dir

    def run(self, args) -> PublishResult:
        result = PublishResult()

        if not self.root.is_dir():
            logger.error(f"Error: site root '{self.root}' does not exist.")
            result.steps.append(StepResult(step="build", ok=False, returncode=1, output=f"{self.root}: no such directory"))
            return result

        with working_directory(self.root):
            build = SiteGenerator(self.config.generator).build(self.root)
            result.steps.append(build)
            if not build.ok:
                return result

            git_tool = GitPublishTool(self.output_path)
            for step in (git_tool.open, git_tool.stage_all):
                outcome = step()
                result.steps.append(outcome)
                if not outcome.ok:
                    return result

            result.message = build_commit_message(args, clock=self.clock)
            logger.debug(f"Commit message: {result.message}")

            commit = git_tool.commit(result.message)
            result.steps.append(commit)
            if not commit.ok:
                return result

            result.steps.append(git_tool.push(self.config.remote, self.config.branch))

        return result
