"""Shared fixtures for pipeline tests."""

import io
import os
import sys
import tempfile

import pytest

# Ensure tests/pipeline/ is on sys.path so test files can import
# fake_command_runner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402

from create_next_auth_app.pipeline import PipelineDeps, ScaffoldPipeline  # noqa: E402


class RecordingChdir:
    """Records chdir targets without changing the process working directory."""

    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)


class PipelineHarness:
    """A ScaffoldPipeline wired to fakes, rooted in a temporary directory."""

    def __init__(self, workdir):
        self.workdir = workdir
        self.runner = FakeCommandRunner()
        self.chdir = RecordingChdir()
        self.output = io.StringIO()
        self.pipeline = ScaffoldPipeline(PipelineDeps(
            command_runner=self.runner,
            chdir_fn=self.chdir,
            cwd_fn=lambda: workdir,
            output=self.output,
        ))

    def project_file(self, *parts):
        return os.path.join(self.workdir, "myapp", *parts)

    def written_files(self):
        root = os.path.join(self.workdir, "myapp")
        found = []
        for dirpath, _dirnames, filenames in os.walk(root):
            for name in filenames:
                found.append(os.path.relpath(os.path.join(dirpath, name), root))
        return sorted(found)


@pytest.fixture
def harness():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield PipelineHarness(os.path.realpath(tmpdir))
