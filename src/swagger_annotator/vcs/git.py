import subprocess
from pathlib import Path

from swagger_annotator.errors import GitStatusError


def get_uncommitted_changes(root: Path) -> str:
    """Return ``git status --porcelain`` for the working tree containing *root*.

    An empty string means the tree is clean.
    """
    try:
        result = subprocess.run(
            ["git", "-C", str(root), "status", "--porcelain"],
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise GitStatusError("git is not installed or not in PATH") from exc
    if result.returncode != 0:
        message = result.stderr.strip() or f"git status exited with code {result.returncode}"
        raise GitStatusError(message)
    return result.stdout.rstrip()
