import sys


def python_command(code):
    """Generator stand-in: runs a python snippet in the site root."""
    return [sys.executable, "-c", code]


def write_page(text):
    return python_command(f"from pathlib import Path; Path('public/index.html').write_text({text!r})")


def configure_identity(repo):
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Site Publisher")
        writer.set_value("user", "email", "publisher@example.com")
        writer.set_value("commit", "gpgsign", "false")
