"""Scaffold pipeline: runs the fixed sequence of tool invocations and file writes.

Steps run strictly in order. The first failure propagates out of run()
unchanged; nothing already done is undone.
"""

import os
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from create_next_auth_app import invocations
from create_next_auth_app.command_runner import CommandRunner
from create_next_auth_app.errors import (
    ExternalProcessFailure,
    FileSystemFailure,
    MissingArgument,
)
from create_next_auth_app.file_writer import FileWriter
from create_next_auth_app.templates.template_renderer import render_template

ENV_FILE = ".env"
SCHEMA_FILE = os.path.join("prisma", "schema.prisma")
PRISMA_LIB_FILE = os.path.join("src", "lib", "prisma.ts")
REGISTER_ROUTE_FILE = os.path.join("src", "app", "api", "register", "route.ts")
NEXTAUTH_ROUTE_FILE = os.path.join("src", "app", "api", "auth", "[...nextauth]", "route.ts")
LOGIN_PAGE_FILE = os.path.join("src", "app", "auth", "login", "page.tsx")
REGISTER_PAGE_FILE = os.path.join("src", "app", "auth", "register", "page.tsx")
HOME_PAGE_FILE = os.path.join("src", "app", "page.tsx")

ROUTE_TEMPLATES = [
    (REGISTER_ROUTE_FILE, "register_route.ts.j2"),
    (NEXTAUTH_ROUTE_FILE, "nextauth_route.ts.j2"),
]

PAGE_TEMPLATES = [
    (LOGIN_PAGE_FILE, "login_page.tsx.j2"),
    (REGISTER_PAGE_FILE, "register_page.tsx.j2"),
    (HOME_PAGE_FILE, "home_page.tsx.j2"),
]


def render(template_name: str, **kwargs) -> str:
    return render_template(template_name, package=__package__, **kwargs)


def render_env_file(database_url: str) -> str:
    return render("env.j2", database_url=database_url)


_CALLABLE_DEFAULTS = {
    "file_writer_factory": FileWriter,
    "chdir_fn": os.chdir,
    "cwd_fn": os.getcwd,
}


@dataclass
class PipelineDeps:
    """Injectable collaborators for the scaffold pipeline."""

    command_runner: Optional[object] = None
    file_writer_factory: Optional[Callable[[str], FileWriter]] = None
    chdir_fn: Optional[Callable[[str], None]] = None
    cwd_fn: Optional[Callable[[], str]] = None
    output: Optional[TextIO] = None

    def __post_init__(self):
        if self.command_runner is None:
            self.command_runner = CommandRunner()
        if self.output is None:
            self.output = sys.stdout
        for attr, default in _CALLABLE_DEFAULTS.items():
            if getattr(self, attr) is None:
                setattr(self, attr, default)


class ScaffoldPipeline:
    """Creates a Next.js + Prisma + NextAuth project in <cwd>/<app_name>."""

    def __init__(self, deps: Optional[PipelineDeps] = None):
        self._deps = deps or PipelineDeps()
        self._writer = None

    def run(self, app_name: str, database_url: Optional[str] = None) -> str:
        """Run every step in order.

        Returns:
            The absolute path of the created project.

        Raises:
            MissingArgument: If app_name is empty. Nothing has been run yet.
            ExternalProcessFailure: If a tool exits non-zero or cannot start.
            FileSystemFailure: If a generated file cannot be written.
        """
        if not app_name:
            raise MissingArgument("an app name")

        project_path = os.path.abspath(os.path.join(self._deps.cwd_fn(), app_name))
        self._writer = self._deps.file_writer_factory(project_path)

        self._bootstrap(app_name, project_path)
        self._install_dependencies()
        self._install_ui_kit()
        self._write_environment(database_url)
        self._write_schema()
        self._write_library()
        self._write_routes()
        self._write_pages()

        self._say("Project setup complete!")
        self._say(f"Next: cd {app_name} && npx prisma migrate dev && npm run dev")
        return project_path

    def _bootstrap(self, app_name, project_path):
        self._say(f"Creating Next.js app: {app_name}...")
        self._run(invocations.create_next_app(app_name))
        try:
            self._deps.chdir_fn(project_path)
        except OSError as e:
            raise FileSystemFailure(project_path, e) from e

    def _install_dependencies(self):
        self._say("Installing extra dependencies...")
        self._run(invocations.install_runtime_packages())
        self._say("Installing dev dependencies...")
        self._run(invocations.install_dev_packages())

    def _install_ui_kit(self):
        self._say("Setting up shadcn/ui...")
        self._run(invocations.shadcn_init())
        self._run(invocations.shadcn_add_components())

    def _write_environment(self, database_url):
        self._say("Initializing Prisma...")
        self._run(invocations.prisma_init())
        if not database_url:
            return
        # Replaces the .env that prisma init may have just created.
        self._say("Setting up database connection...")
        self._writer.write(ENV_FILE, render_env_file(database_url))

    def _write_schema(self):
        self._writer.write(SCHEMA_FILE, render("schema.prisma.j2"))
        self._say("Generating Prisma client...")
        self._run(invocations.prisma_generate())

    def _write_library(self):
        self._writer.write(PRISMA_LIB_FILE, render("prisma.ts.j2"))

    def _write_routes(self):
        self._say("Writing auth routes and pages...")
        for path, template_name in ROUTE_TEMPLATES:
            self._writer.write(path, render(template_name))

    def _write_pages(self):
        for path, template_name in PAGE_TEMPLATES:
            self._writer.write(path, render(template_name))

    def _run(self, invocation):
        result = self._deps.command_runner.run(invocation)
        if not result.succeeded:
            raise ExternalProcessFailure(invocation, result.returncode)
        return result

    def _say(self, message):
        print(message, file=self._deps.output)
