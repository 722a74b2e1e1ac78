"""Discovery of GitHub issue and pull request body templates."""

from pathlib import Path

PULL_REQUEST_TEMPLATE = "pull_request_template"
ISSUE_TEMPLATE = "issue_template"
GITHUB_TEMPLATE_DIR = ".github"

_TEMPLATE_EXTENSIONS = (".md", ".txt")


def get_pull_request_template(root: Path) -> str:
    return get_github_template(root, PULL_REQUEST_TEMPLATE)


def get_issue_template(root: Path) -> str:
    return get_github_template(root, ISSUE_TEMPLATE)


def get_github_template(root: Path, kind: str) -> str:
    """Find and read a template, searching `.github/` before the project root.

    File names match case-insensitively, with a `.md` or `.txt` extension
    ignored, so `.github/PULL_REQUEST_TEMPLATE.md` matches
    `pull_request_template`.

    Returns:
        Template content with CRLF line endings normalised and surrounding
        whitespace trimmed, or "" when no template exists
    """
    path = None
    github_dir = root / GITHUB_TEMPLATE_DIR
    if github_dir.is_dir():
        path = _find_template(github_dir, kind)
    if path is None:
        path = _find_template(root, kind)
    if path is None:
        return ""

    content = path.read_text(encoding="utf-8")
    return content.replace("\r\n", "\n").strip()


def _template_stem(file_name: str) -> str:
    lowered = file_name.lower()
    for ext in _TEMPLATE_EXTENSIONS:
        if lowered.endswith(ext):
            return lowered[: -len(ext)]
    return lowered


def _find_template(directory: Path, kind: str) -> Path | None:
    for entry in sorted(directory.iterdir()):
        if entry.is_file() and _template_stem(entry.name) == kind:
            return entry
    return None
