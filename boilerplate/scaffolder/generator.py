"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and creates ``<working_dir>/<name>/`` holding the
three boilerplate files: ``index.html``, ``style.css`` and ``script.js``.
Generation is create-only: an existing target is never touched and a
partially written directory is never rolled back.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from boilerplate.config import Config
from boilerplate.reporter import Reporter, SilentReporter

from .templates import TemplateRenderer, output_name


# ---------------------------------------------------------------------------
# Template set
# ---------------------------------------------------------------------------

# Write order: markup, stylesheet, script.
TEMPLATE_FILES: tuple[str, ...] = ("index.html.j2", "style.css.j2", "script.js.j2")

HTML_LANG = "pt-BR"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Base class for every failure that aborts a generation run."""


class InvalidInvocationError(GenerationError):
    """Raised when the tool is not called with exactly one project name."""


class AlreadyExistsError(GenerationError):
    """Raised when the target path is already present on disk."""

    def __init__(self, path: Path, name: str) -> None:
        self.path = path
        self.name = name
        super().__init__(f'Erro: O diretório "{name}" já existe.')


class CreationFailedError(GenerationError):
    """Raised when the project directory cannot be created."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Ocorreu um erro ao criar o projeto: {_describe(cause)}")


class WriteFailedError(GenerationError):
    """Raised when one of the boilerplate files cannot be written."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f'Ocorreu um erro ao criar o projeto: falha ao gravar "{path.name}": '
            f"{_describe(cause)}"
        )


class GenerationStage(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    CREATING = "creating"
    RENDERING = "rendering"
    WRITING = "writing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    name: str = Field(..., min_length=1, description="Project name, used verbatim")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates the project directory and writes the boilerplate into it.

    Attributes:
        config: The project being generated.
        settings: Global tool configuration (file encoding).
        reporter: Where progress and the final summary are reported.
        stage: Current position in the generation state machine.
    """

    def __init__(
        self,
        config: ProjectConfig,
        reporter: Reporter | None = None,
        settings: Config | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Config()
        self.reporter: Reporter = reporter or SilentReporter()
        self.renderer = TemplateRenderer()
        self.stage = GenerationStage.IDLE

    # -- Public API --------------------------------------------------------

    def generate(self, working_dir: str | Path) -> Path:
        """Generate the project inside *working_dir*.

        Args:
            working_dir: Parent directory of the new project.  It is not
                created if missing.

        Returns:
            Path to the generated project root.

        Raises:
            AlreadyExistsError: The target path exists.
            CreationFailedError: The directory could not be created.
            WriteFailedError: A file could not be written.
            GenerationError: Anything else that went wrong.
        """
        name = self.config.name
        project_root = project_path(working_dir, name)

        try:
            self.stage = GenerationStage.VALIDATING
            # is_symlink catches dangling links that exists() reports as absent.
            if project_root.exists() or project_root.is_symlink():
                raise AlreadyExistsError(project_root, self.config.name)

            self.stage = GenerationStage.CREATING
            self._create_root(project_root)
            self.reporter.success(f'Diretório "{name}" criado.')

            self.stage = GenerationStage.RENDERING
            files = self.render_files()

            self.stage = GenerationStage.WRITING
            for filename, content in files.items():
                self._write_file(project_root / filename, content)
                self.reporter.success(f'Arquivo "{filename}" criado.')
        except GenerationError:
            self.stage = GenerationStage.FAILED
            raise
        except Exception as exc:
            self.stage = GenerationStage.FAILED
            raise GenerationError(
                f"Ocorreu um erro ao criar o projeto: {_describe(exc)}"
            ) from exc

        self.stage = GenerationStage.SUCCEEDED
        self.reporter.banner(f'Projeto "{name}" gerado com sucesso!')
        self.reporter.info("")
        self.reporter.info("Para começar, execute:")
        self.reporter.info(f"  cd {name}")
        return project_root

    def render_files(self) -> dict[str, str]:
        """Render every template, keyed by output filename in write order."""
        context = self._build_context()
        return {
            output_name(template): self.renderer.render(template, context)
            for template in TEMPLATE_FILES
        }

    # -- Internal helpers --------------------------------------------------

    def _build_context(self) -> dict[str, str]:
        return {
            "project_name": self.config.name,
            "lang": HTML_LANG,
            "stylesheet": output_name(TEMPLATE_FILES[1]),
            "script": output_name(TEMPLATE_FILES[2]),
        }

    def _create_root(self, project_root: Path) -> None:
        try:
            project_root.mkdir(exist_ok=False)
        except FileExistsError as exc:
            # Lost the race between the existence check and mkdir.
            raise AlreadyExistsError(project_root, self.config.name) from exc
        except OSError as exc:
            raise CreationFailedError(project_root, exc) from exc

    def _write_file(self, path: Path, content: str) -> None:
        try:
            path.write_bytes(content.encode(self.settings.encoding))
        except OSError as exc:
            raise WriteFailedError(path, exc) from exc


def generate(
    project_name: str,
    working_dir: str | Path,
    reporter: Reporter | None = None,
    settings: Config | None = None,
) -> Path:
    """Validate *project_name* and generate the project in *working_dir*."""
    if not project_name:
        raise InvalidInvocationError("O nome do projeto não pode ser vazio.")
    generator = ProjectGenerator(
        ProjectConfig(name=project_name), reporter=reporter, settings=settings
    )
    return generator.generate(working_dir)


def project_path(working_dir: str | Path, name: str) -> Path:
    """Join *name* under *working_dir*, even when *name* looks absolute.

    A drive prefix and leading separators are dropped so ``/abs/site``
    becomes ``<working_dir>/abs/site``.  Nothing else is normalised: ``..``
    segments are kept as typed.
    """
    separators = "/" + os.sep + (os.altsep or "")
    relative = os.path.splitdrive(name)[1].lstrip(separators)
    return Path(os.path.join(working_dir, relative))


def _describe(exc: BaseException) -> str:
    """Prefer the OS error text over the full ``[Errno N] ...: path`` repr."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__
