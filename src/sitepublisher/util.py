import os
import shlex
import logging
from contextlib import contextmanager
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True), override=True)

logging.basicConfig(level=logging.INFO)
logging.getLogger("git").setLevel(logging.ERROR)
logger = logging.getLogger("sitepublisher")

DEFAULT_ROOT = os.getenv("PUBLISH_ROOT", ".")
DEFAULT_GENERATOR = shlex.split(os.getenv("PUBLISH_GENERATOR", "hugo --minify --gc"))
DEFAULT_OUTPUT_DIR = os.getenv("PUBLISH_OUTPUT_DIR", "public")
DEFAULT_REMOTE = os.getenv("PUBLISH_REMOTE", "origin")
DEFAULT_BRANCH = os.getenv("PUBLISH_BRANCH", "main")

GREEN = "\033[0;32m"
RESET = "\033[0m"


def colored(text, color=GREEN):
    return f"{color}{text}{RESET}"


@contextmanager
def working_directory(path):
    """Changes into `path` for the duration of the block, restoring the previous cwd on any exit."""
    saved = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(saved)
