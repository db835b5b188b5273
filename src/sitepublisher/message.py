from datetime import datetime

DEFAULT_PREFIX = "rebuilding site "

# fixed names, independent of the process locale
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def local_now():
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """Render a datetime the way `date` does, e.g. 'Mon Jan 1 00:00:00 UTC 2024'."""
    day_name = DAY_NAMES[moment.weekday()]
    month_name = MONTH_NAMES[moment.month - 1]
    parts = [day_name, month_name, str(moment.day), f"{moment:%H:%M:%S}", moment.tzname(), str(moment.year)]
    return " ".join(part for part in parts if part)


def build_commit_message(args, clock=local_now) -> str:
    """
    Builds the commit message for a publish.

    Parameters:
        args: Words given on the command line, joined with single spaces.
        clock: Callable returning the current (timezone aware) datetime,
            used for the default message when no words are given.
    Returns:
        The user message, or 'rebuilding site <timestamp>'.
    """
    message = " ".join(args)
    if message:
        return message
    return DEFAULT_PREFIX + format_timestamp(clock())
