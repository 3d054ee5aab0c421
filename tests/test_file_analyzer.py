from maintainability.file_analyzer import analyze, file_issues, todo_entries
from maintainability.models import FileMetrics


def _functions(n: int) -> str:
    # Each declaration matches both the broad and the declaration pattern
    return "\n".join(f"function f{i}() {{\n  return {i};\n}}" for i in range(n))


def test_analyze_runs_all_extractors():
    content = "import a from 'a';\n// TODO: split this\nfunction main() {\n  run();\n}\n"

    metrics = analyze("src/main.js", content)

    assert metrics.path == "src/main.js"
    assert metrics.loc == 3
    assert metrics.method_count == 2
    assert metrics.todo_lines == ["// TODO: split this"]


def test_analyze_empty_file():
    metrics = analyze("empty.ts", "")

    assert metrics == FileMetrics(path="empty.ts", loc=0, method_count=0, todo_lines=[])


def test_file_issues_large_file_before_method_count():
    metrics = FileMetrics(path="big.ts", loc=250, method_count=9)

    assert file_issues(metrics) == [
        "`big.ts`: LOC = 250 🔥",
        "`big.ts`: Method Count = 9 🧠",
    ]


def test_file_issues_thresholds_are_exclusive():
    metrics = FileMetrics(path="edge.js", loc=200, method_count=8)

    assert file_issues(metrics) == []


def test_file_issues_from_real_content():
    content = "\n".join(["let v = 1;"] * 201) + "\n" + _functions(5)

    metrics = analyze("app.tsx", content)

    assert metrics.loc == 201 + 15
    assert metrics.method_count == 10
    assert file_issues(metrics) == [
        "`app.tsx`: LOC = 216 🔥",
        "`app.tsx`: Method Count = 10 🧠",
    ]


def test_todo_entries_tag_each_line_with_path():
    metrics = FileMetrics(
        path="lib/util.js",
        loc=10,
        method_count=1,
        todo_lines=["// TODO: one", "// FIXME two"],
    )

    assert todo_entries(metrics) == [
        "`lib/util.js`: // TODO: one",
        "`lib/util.js`: // FIXME two",
    ]
