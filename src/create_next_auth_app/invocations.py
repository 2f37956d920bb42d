"""Fixed command lines for the external tools driven by the scaffolder."""

import shlex
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RunMode(Enum):
    INHERIT = "inherit"
    CAPTURE = "capture"


@dataclass(frozen=True)
class Invocation:
    """A single external command: executable, arguments and stream mode."""

    command: str
    args: Tuple[str, ...] = ()
    mode: RunMode = RunMode.INHERIT

    def argv(self):
        return [self.command, *self.args]

    def command_line(self):
        return shlex.join(self.argv())


CREATE_NEXT_APP = "create-next-app@latest"
CREATE_NEXT_APP_FLAGS = (
    "--typescript",
    "--tailwind",
    "--eslint",
    "--app",
    "--src-dir",
)

RUNTIME_PACKAGES = (
    "@prisma/client",
    "prisma",
    "next-auth",
    "@auth/prisma-adapter",
    "bcrypt",
    "lucide-react",
    "react-hook-form",
    "zod",
    "@hookform/resolvers",
)

DEV_PACKAGES = ("@types/bcrypt",)

SHADCN = "shadcn@latest"
SHADCN_COMPONENTS = ("form", "button", "input", "label", "card")


def create_next_app(app_name: str) -> Invocation:
    return Invocation("npx", (CREATE_NEXT_APP, app_name, *CREATE_NEXT_APP_FLAGS))


def install_runtime_packages() -> Invocation:
    return Invocation("npm", ("install", *RUNTIME_PACKAGES))


def install_dev_packages() -> Invocation:
    return Invocation("npm", ("install", "--save-dev", *DEV_PACKAGES))


def shadcn_init() -> Invocation:
    return Invocation("npx", (SHADCN, "init"))


def shadcn_add_components() -> Invocation:
    return Invocation("npx", (SHADCN, "add", *SHADCN_COMPONENTS))


def prisma_init() -> Invocation:
    return Invocation("npx", ("prisma", "init"))


def prisma_generate() -> Invocation:
    return Invocation("npx", ("prisma", "generate"))
