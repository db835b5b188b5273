import sys
import shlex
import logging
import argparse
from pathlib import Path
from pydantic import ValidationError

from sitepublisher.models import PublishConfig
from sitepublisher.publisher import Publisher
from sitepublisher.util import logger, colored

# same status argparse uses for bad command lines
USAGE_ERROR = 2


def build_config(args) -> PublishConfig:
    overrides = {}
    if args.root is not None:
        overrides["root"] = Path(args.root)
    if args.output_dir is not None:
        overrides["output_dir"] = Path(args.output_dir)
    if args.remote is not None:
        overrides["remote"] = args.remote
    if args.branch is not None:
        overrides["branch"] = args.branch
    if args.generator is not None:
        overrides["generator"] = shlex.split(args.generator)
    return PublishConfig(**overrides)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rebuild the static site and push the generated output.")
    parser.add_argument("message", nargs="*", help="Commit message. Defaults to 'rebuilding site <date>'.")
    parser.add_argument("--root", help="Site root the generator runs in.")
    parser.add_argument("--output-dir", help="Generated site directory, a git working copy.")
    parser.add_argument("--remote", help="Remote to push to.")
    parser.add_argument("--branch", help="Branch to push to.")
    parser.add_argument("--generator", help="Generator command line, e.g. 'hugo --minify --gc'.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        config = build_config(args)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return USAGE_ERROR

    print(colored("Rebuilding site..."))
    result = Publisher(config).run(args.message)

    if not result.ok:
        logger.error(f"Publish aborted at step '{result.failed_step}'.")
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
