# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Stand-in ``prettier`` and ``eslint`` executables driven by markers in the checked file.

Markers understood by the fake formatter:

* ``FORMAT_ME``: ``--check`` exits 1; ``--write`` rewrites the marker and exits 0.
* ``STUBBORN``: ``--check`` exits 1 and ``--write`` fails with exit 2.
* ``SYNTAX_ERROR``: exits 2 with a parser error on stderr.
* ``FORMAT_CRASH``: the process kills itself with ``SIGSEGV``.
* ``SLOW_FORMAT``: sleeps far beyond any test deadline.
* ``SLOW_TREE``: spawns a sleeping child process, then sleeps.

Markers understood by the fake linter:

* ``UNUSED``: reports ``no-unused-vars`` and exits 1.
* ``LINT_CONFIG_ERROR``: exits 2.
* ``CONSOLE_LOG``: reports a ``no-console`` warning and exits 0.
* ``SLOW_LINT``: sleeps far beyond any test deadline.

Each invocation appends ``<tool> <args...>`` to ``calls.log`` and its pid to
``pids.log``, both next to the ``node_modules`` directory holding the fakes.
"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from textwrap import dedent

_COMMON = dedent(
    """
    import os
    import signal
    import subprocess
    import sys
    import time
    from pathlib import Path

    STATE_DIR = Path(__file__).resolve().parents[2]
    TOOL = Path(__file__).name
    args = sys.argv[1:]
    with (STATE_DIR / "calls.log").open("a", encoding="utf-8") as handle:
        handle.write(" ".join([TOOL, *args]) + "\\n")
    with (STATE_DIR / "pids.log").open("a", encoding="utf-8") as handle:
        handle.write(f"{os.getpid()}\\n")
    target = Path(args[-1])
    content = target.read_text(encoding="utf-8")
    """,
)

_PRETTIER = dedent(
    """
    if "SLOW_TREE" in content:
        child = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
        with (STATE_DIR / "pids.log").open("a", encoding="utf-8") as handle:
            handle.write(f"{child.pid}\\n")
        time.sleep(60)
    if "SLOW_FORMAT" in content:
        time.sleep(60)
    if "FORMAT_CRASH" in content:
        os.kill(os.getpid(), signal.SIGSEGV)
    if "SYNTAX_ERROR" in content:
        print(f"[error] {target}: SyntaxError: Unexpected token (1:7)", file=sys.stderr)
        sys.exit(2)
    if "--check" in args:
        if "FORMAT_ME" in content or "STUBBORN" in content:
            print("Checking formatting...")
            print(f"[warn] {target}")
            print("[warn] Code style issues found in the above file. Run Prettier with --write to fix.")
            sys.exit(1)
        print("Checking formatting...")
        print("All matched files use Prettier code style!")
        sys.exit(0)
    if "--write" in args:
        if "STUBBORN" in content:
            print(f"[error] {target}: cannot rewrite", file=sys.stderr)
            sys.exit(2)
        target.write_text(content.replace("FORMAT_ME", "formatted"), encoding="utf-8")
        print(f"{target} 12ms")
        sys.exit(0)
    sys.exit(0)
    """,
)

_ESLINT = dedent(
    """
    if "SLOW_LINT" in content:
        time.sleep(60)
    if "LINT_CONFIG_ERROR" in content:
        print("Oops! Something went wrong! :(", file=sys.stderr)
        sys.exit(2)
    if "CONSOLE_LOG" in content:
        print(str(target))
        print("  1:7  warning  Unexpected console statement  no-console")
        print("")
        print("\\u2716 1 problem (0 errors, 1 warning)")
        sys.exit(0)
    if "UNUSED" in content:
        print(str(target))
        print("  1:7  error  'unusedVariable' is defined but never used  no-unused-vars")
        print("")
        print("\\u2716 1 problem (1 error, 0 warnings)")
        sys.exit(1)
    sys.exit(0)
    """,
)

_BODIES = {"prettier": _PRETTIER, "eslint": _ESLINT}


def install_fake_tools(root: Path, *, tools: tuple[str, ...] = ("prettier", "eslint")) -> Path:
    """Write the fake executables into ``root/node_modules/.bin`` and return that directory."""

    bin_dir = root / "node_modules" / ".bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    for name in tools:
        script = bin_dir / name
        script.write_text(f"#!{sys.executable}\n{_COMMON}{_BODIES[name]}", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return bin_dir


def read_calls(root: Path) -> list[str]:
    log = root / "calls.log"
    if not log.exists():
        return []
    return log.read_text(encoding="utf-8").splitlines()


def read_pids(root: Path) -> list[int]:
    log = root / "pids.log"
    if not log.exists():
        return []
    return [int(line) for line in log.read_text(encoding="utf-8").split()]


def is_running(pid: int) -> bool:
    """Return ``True`` when *pid* exists and is not a zombie."""

    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    stat_file = Path(f"/proc/{pid}/stat")
    try:
        fields = stat_file.read_text(encoding="utf-8").rsplit(")", 1)[1].split()
    except (OSError, IndexError):
        return True
    return fields[0] != "Z"


__all__ = ["install_fake_tools", "is_running", "read_calls", "read_pids"]
