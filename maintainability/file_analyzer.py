from maintainability.metrics import count_loc, count_methods, find_todos
from maintainability.models import FileMetrics

LOC_THRESHOLD = 200
METHOD_THRESHOLD = 8


def analyze(path: str, content: str) -> FileMetrics:
    """Run every metric extractor over one file's content."""
    return FileMetrics(
        path=path,
        loc=count_loc(content),
        method_count=count_methods(content),
        todo_lines=find_todos(content),
    )


def file_issues(metrics: FileMetrics) -> list[str]:
    """Size and complexity issues for one file, large-file issue first."""
    issues: list[str] = []

    if metrics.loc > LOC_THRESHOLD:
        issues.append(f"`{metrics.path}`: LOC = {metrics.loc} 🔥")

    if metrics.method_count > METHOD_THRESHOLD:
        issues.append(f"`{metrics.path}`: Method Count = {metrics.method_count} 🧠")

    return issues


def todo_entries(metrics: FileMetrics) -> list[str]:
    return [f"`{metrics.path}`: {todo}" for todo in metrics.todo_lines]
