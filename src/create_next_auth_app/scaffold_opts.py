"""Options dataclass for the scaffold command."""

import sys
from dataclasses import dataclass
from typing import Optional

from create_next_auth_app.command_runner import DryRunCommandRunner
from create_next_auth_app.file_writer import DryRunFileWriter
from create_next_auth_app.pipeline import PipelineDeps


@dataclass
class ScaffoldOpts:
    """All options for the scaffold command."""

    app_name: str
    database_url: Optional[str] = None
    dry_run: bool = False

    def pipeline_deps(self, output=None) -> PipelineDeps:
        """Build pipeline collaborators; dry runs only print what they would do."""
        if not self.dry_run:
            return PipelineDeps(output=output)
        output = output or sys.stdout
        return PipelineDeps(
            command_runner=DryRunCommandRunner(output),
            file_writer_factory=lambda root: DryRunFileWriter(root, output),
            chdir_fn=lambda path: print(f"Would change directory to: {path}", file=output),
            output=output,
        )
