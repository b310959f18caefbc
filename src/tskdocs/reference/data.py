"""Built-in tsk reference data.

Commands, tasks.toml syntax and examples are static and loaded once at
startup. Site docs are seeded with url and title only; their content is
fetched at runtime by the site doc cache. The raw markdown sources are
used because they are by far the smallest representation of the docs.
"""

from __future__ import annotations

from tskdocs.reference.models import (
    Command,
    CommandOption,
    Example,
    SiteDoc,
    SyntaxElement,
)

_FILE_OPTION = CommandOption(
    name="file",
    shorthand="f",
    description="Path to the tasks file to use instead of discovering tasks.toml.",
    type="string",
    default="tasks.toml",
)

_CWD_OPTION = CommandOption(
    name="cwd",
    shorthand="C",
    description="Directory to run from. Tasks files are discovered relative to it.",
    type="string",
)

COMMANDS: tuple[Command, ...] = (
    Command(
        name="run",
        description=(
            "Run one or more tasks in order. Each task's deps run first; deps in the "
            "same group run in parallel. `tsk <task>` is shorthand for `tsk run <task>`."
        ),
        usage="tsk run [options] <task> [<task>...] [-- <args>]",
        examples=(
            "tsk run build",
            "tsk run lint test",
            "tsk run deploy -- --dry-run",
            "tsk run --pure test",
        ),
        options=(
            _FILE_OPTION,
            _CWD_OPTION,
            CommandOption(
                name="pure",
                description="Do not inherit the parent shell's environment. Only task and "
                "tasks file env vars are set.",
                type="boolean",
                default=False,
            ),
        ),
    ),
    Command(
        name="list",
        description="List the tasks defined in the tasks file with their descriptions.",
        usage="tsk list [options]",
        examples=(
            "tsk list",
            "tsk list --output markdown",
            "tsk list -f ci/tasks.toml",
        ),
        options=(
            _FILE_OPTION,
            CommandOption(
                name="output",
                shorthand="o",
                description="Output format for the task list.",
                type="string",
                default="text",
                valid_values=("text", "markdown", "toml"),
            ),
        ),
    ),
    Command(
        name="init",
        description="Create a starter tasks.toml in the current directory.",
        usage="tsk init [options]",
        examples=("tsk init", "tsk init -C ./service"),
        options=(_CWD_OPTION,),
    ),
    Command(
        name="which",
        description="Print the path of the tasks file tsk would use, after discovery.",
        usage="tsk which [options]",
        examples=("tsk which", "tsk which -C ./service"),
        options=(_FILE_OPTION, _CWD_OPTION),
    ),
    Command(
        name="version",
        description="Print the tsk version.",
        usage="tsk version",
        examples=("tsk version",),
    ),
)

SYNTAX: tuple[SyntaxElement, ...] = (
    SyntaxElement(
        key="tasks",
        type="table",
        description="Table of task definitions. Every task lives under [tasks.<name>].",
        required=True,
        examples=('[tasks.build]\ncmds = ["go build ./..."]',),
    ),
    SyntaxElement(
        key="tasks.*",
        type="table",
        description="A single task. The key after `tasks.` is the name used on the command line.",
        examples=('[tasks.test]\ndesc = "Run the test suite"\ncmds = ["go test ./..."]',),
    ),
    SyntaxElement(
        key="tasks.*.desc",
        type="string",
        description="Human-readable description shown by `tsk list`.",
        examples=('desc = "Build the binary"',),
    ),
    SyntaxElement(
        key="tasks.*.cmds",
        type="array",
        description="Commands to run, in order. Each command runs in its own shell; "
        "the task stops at the first failing command.",
        examples=('cmds = ["go vet ./...", "go build ./..."]',),
    ),
    SyntaxElement(
        key="tasks.*.deps",
        type="array",
        description="Tasks to run before this one. Each inner array is a group whose "
        "tasks run in parallel; groups run in order.",
        examples=('deps = [["lint", "fmt"], ["generate"]]',),
    ),
    SyntaxElement(
        key="tasks.*.env",
        type="table",
        description="Environment variables for this task. Overrides the top-level env table.",
        examples=('env = { GOOS = "linux", CGO_ENABLED = "0" }',),
    ),
    SyntaxElement(
        key="tasks.*.dotenv",
        type="string",
        description="Path to a dotenv file loaded for this task only.",
        examples=('dotenv = ".env.test"',),
    ),
    SyntaxElement(
        key="tasks.*.dir",
        type="string",
        description="Working directory for the task's commands, relative to the tasks file.",
        examples=('dir = "frontend"',),
    ),
    SyntaxElement(
        key="tasks.*.pre",
        type="array",
        description="Tasks to run immediately before this task's cmds, after its deps.",
        examples=('pre = ["clean"]',),
    ),
    SyntaxElement(
        key="tasks.*.post",
        type="array",
        description="Tasks to run after this task's cmds complete successfully.",
        examples=('post = ["notify"]',),
    ),
    SyntaxElement(
        key="env",
        type="table",
        description="Environment variables applied to every task.",
        examples=('[env]\nAPP_ENV = "dev"\nLOG_LEVEL = "debug"',),
    ),
    SyntaxElement(
        key="dotenv",
        type="string",
        description="Path to a dotenv file loaded for every task.",
        examples=('dotenv = ".env"',),
    ),
)

EXAMPLES: tuple[Example, ...] = (
    Example(
        name="Basic Setup",
        description="A minimal tasks.toml with build, test and clean tasks.",
        content="""\
[tasks.build]
desc = "Build the project"
cmds = ["go build -o bin/app ./cmd/app"]

[tasks.test]
desc = "Run the tests"
cmds = ["go test ./..."]

[tasks.clean]
desc = "Remove build artifacts"
cmds = ["rm -rf bin"]
""",
    ),
    Example(
        name="Advanced Workflow",
        description="Parallel dependency groups, per-task env, dotenv files and pre/post hooks.",
        content="""\
dotenv = ".env"

[env]
APP_ENV = "dev"

[tasks.lint]
desc = "Lint sources"
cmds = ["golangci-lint run"]

[tasks.fmt]
desc = "Check formatting"
cmds = ["gofmt -l ."]

[tasks.build]
desc = "Build a static linux binary"
deps = [["lint", "fmt"]]
env = { GOOS = "linux", CGO_ENABLED = "0" }
cmds = ["go build -o bin/app ./cmd/app"]

[tasks.release]
desc = "Build and publish a release"
pre = ["build"]
post = ["notify"]
dotenv = ".env.release"
cmds = ["goreleaser release --clean"]

[tasks.notify]
cmds = ["echo released $APP_ENV"]
""",
    ),
    Example(
        name="Multi-Language Monorepo",
        description="One tasks file driving a Go backend and a Node frontend via dir.",
        content="""\
[tasks.backend]
desc = "Build the Go API"
dir = "backend"
cmds = ["go build ./..."]

[tasks.frontend]
desc = "Build the web client"
dir = "frontend"
cmds = ["npm ci", "npm run build"]

[tasks.all]
desc = "Build everything"
deps = [["backend", "frontend"]]
""",
    ),
)


def seed_site_docs() -> list[SiteDoc]:
    """Fresh, unfetched site doc records in display order."""
    return [
        SiteDoc(
            url="https://raw.githubusercontent.com/notnmeyer/tsk-docs/refs/heads/main/docs/home.md",
            title="Core Concepts",
        ),
        SiteDoc(
            url="https://raw.githubusercontent.com/notnmeyer/tsk-docs/refs/heads/main/docs/installation.md",
            title="Installation Guide",
        ),
        SiteDoc(
            url="https://raw.githubusercontent.com/notnmeyer/tsk-docs/refs/heads/main/docs/usage.md",
            title="Usage Documentation",
        ),
    ]
