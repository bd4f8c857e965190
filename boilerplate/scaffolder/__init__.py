"""web-boilerplate scaffolder -- generates a minimal static web project.

Quick usage::

    from boilerplate.scaffolder import ProjectConfig, ProjectGenerator

    generator = ProjectGenerator(ProjectConfig(name="my-site"))
    project_path = generator.generate("/tmp/output")
"""

from boilerplate.scaffolder.generator import (
    AlreadyExistsError,
    CreationFailedError,
    GenerationError,
    GenerationStage,
    InvalidInvocationError,
    ProjectConfig,
    ProjectGenerator,
    WriteFailedError,
    generate,
)
from boilerplate.scaffolder.templates import TemplateRenderer

__all__ = [
    "AlreadyExistsError",
    "CreationFailedError",
    "GenerationError",
    "GenerationStage",
    "InvalidInvocationError",
    "ProjectConfig",
    "ProjectGenerator",
    "TemplateRenderer",
    "WriteFailedError",
    "generate",
]
