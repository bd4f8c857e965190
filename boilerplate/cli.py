"""Command-line entry point.

Usage::

    web-boilerplate meu-novo-site
    python -m boilerplate meu-novo-site

The argument vector is taken as-is: exactly one argument, used verbatim as
the project name.  ``--`` and option-like strings are counted, not parsed.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import ValidationError

from boilerplate.config import Config
from boilerplate.reporter import ConsoleReporter, Reporter, SilentReporter
from boilerplate.scaffolder import (
    AlreadyExistsError,
    GenerationError,
    InvalidInvocationError,
    generate,
)

PROG = "web-boilerplate"


def parse_project_name(argv: list[str]) -> str:
    """Return the single project name in *argv*.

    Raises:
        InvalidInvocationError: *argv* does not hold exactly one non-empty
            argument.
    """
    if len(argv) != 1 or not argv[0]:
        raise InvalidInvocationError(
            f"expected exactly one project name, got {len(argv)} argument(s)"
        )
    return argv[0]


def print_usage(reporter: Reporter) -> None:
    reporter.warning("Uso incorreto.")
    reporter.info("Por favor, forneça o nome do projeto.")
    reporter.info(f"Exemplo: {PROG} meu-novo-site")


def run(
    argv: list[str] | None = None,
    working_dir: str | Path | None = None,
    reporter: Reporter | None = None,
    settings: Config | None = None,
) -> int:
    """Validate *argv*, generate the project and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        try:
            settings = Config.from_env()
        except ValidationError as exc:
            (reporter or ConsoleReporter()).error(f"Configuração inválida: {exc}")
            return 1
    if reporter is None:
        reporter = SilentReporter() if settings.quiet else ConsoleReporter()

    try:
        project_name = parse_project_name(list(argv))
    except InvalidInvocationError:
        print_usage(reporter)
        return 1

    if working_dir is None:
        working_dir = Path(os.getcwd())

    try:
        generate(project_name, working_dir, reporter=reporter, settings=settings)
    except GenerationError as exc:
        reporter.error(str(exc))
        if isinstance(exc, AlreadyExistsError):
            reporter.info("Escolha outro nome ou remova o diretório existente.")
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``web-boilerplate`` and ``python -m boilerplate``."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
