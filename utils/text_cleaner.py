import re

TITLE_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)
DEFAULT_TITLE = "Generated Article"


def extract_title(markdown: str):
    """
    Split a generated article into its first level-1 heading and the rest.
    """
    match = TITLE_PATTERN.search(markdown or "")
    if not match:
        return DEFAULT_TITLE, markdown or ""
    body = (markdown[:match.start()] + markdown[match.end():]).strip()
    return match.group(1), body
