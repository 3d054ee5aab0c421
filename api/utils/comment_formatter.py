from maintainability.models import PRFindings

# ── Fixed comment text ────────────────────────────────────────────────────────

TITLE = "## 🤖 PR Maintainability Check"
ISSUES_HEADING = "### ⚠️ Issues Detected:"
NO_ISSUES_LINE = "✅ No major maintainability issues found."
LOCKFILE_WARNING = (
    "⚠️ `package.json` was modified but `package-lock.json` was not. "
    "Ensure lockfile is up to date!"
)
TODO_HEADING = "### 📝 TODO / FIXME Found:"
TODO_REMINDER = "Please address these before merging."


def _bullets(entries: list[str]) -> str:
    return "\n".join(f"- {entry}" for entry in entries)


# ── Public API ────────────────────────────────────────────────────────────────

def compose(findings: PRFindings) -> str:
    """Format aggregated findings into the PR summary comment (Markdown)."""
    parts: list[str] = [f"{TITLE}\n\n"]

    if findings.issues:
        parts.append(f"{ISSUES_HEADING}\n{_bullets(findings.issues)}\n\n")
    else:
        parts.append(f"{NO_ISSUES_LINE}\n\n")

    # Only a manifest change without a lockfile change is suspicious
    if findings.manifest_changed and not findings.lockfile_changed:
        parts.append(f"{LOCKFILE_WARNING}\n\n")

    if findings.todo_entries:
        parts.append(f"{TODO_HEADING}\n{_bullets(findings.todo_entries)}\n{TODO_REMINDER}\n")

    return "".join(parts)
