"""
Demonstration of annotated config-change reports.

Run this with:
    python examples/config_report.py

Shows the same edit to an application config rendered in each output
mode, then with redaction of sensitive values.
"""

from jsondiffer import (
    DiffConfig,
    OutputMode,
    RedactionPolicy,
    differentiate,
    from_python,
    to_json,
)

BEFORE = {
    "service": {"host": "0.0.0.0", "port": 80, "debug": True},
    "database": {"url": "postgres://db/app", "password": "hunter2"},
    "workers": [{"name": "mailer", "replicas": 1}, {"name": "indexer", "replicas": 2}],
    "features": ["search", "export"],
}

AFTER = {
    "service": {"host": "0.0.0.0", "port": 8080},
    "database": {"url": "postgres://db/app", "password": "correct-horse"},
    "workers": [{"name": "mailer", "replicas": 3}, {"name": "indexer", "replicas": 2}],
    "features": ["search"],
    "owner": "platform-team",
}


def demo_output_modes():
    """Render one diff in every output mode."""
    before, after = from_python(BEFORE), from_python(AFTER)

    for mode in OutputMode:
        print(f"=== {mode.value} ===\n")
        result = differentiate(before, after, DiffConfig(output_mode=mode))
        print(to_json(result))
        print()


def demo_redaction():
    """Hide the database password while reporting that it changed."""
    print("=== Redacted (symbolic, original values) ===\n")

    config = DiffConfig(
        show_original_value=True,
        redaction=RedactionPolicy.listed(["password"]),
    )
    result = differentiate(from_python(BEFORE), from_python(AFTER), config)
    print(to_json(result))
    print()


def main() -> None:
    demo_output_modes()
    demo_redaction()


if __name__ == "__main__":
    main()
