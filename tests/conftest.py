"""Pytest configuration and shared fixtures."""

import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from ui_elf.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["-t", "form", "-d", "src"])
        result.exit_code, result.output
    """

    def _invoke(args):
        return cli_runner.invoke(cli, args)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def write_file(tmp_path):
    """Write dedented text to a file under tmp_path and return its path."""

    def _write(relative, body):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body))
        return path

    return _write


@pytest.fixture
def project(write_file, tmp_path):
    """Small mixed Vue/React project.

    Creates:
        src/components/LoginForm.vue  - q-form on line 3
        src/views/Home.jsx            - Button on line 4
        node_modules/lib/Form.jsx     - excluded
        src/components/Form.test.jsx  - excluded
    """
    write_file(
        "src/components/LoginForm.vue",
        """\
        <template>
          <div>
            <q-form @submit="save">
              <q-btn label="Save" />
            </q-form>
          </div>
        </template>
        """,
    )
    write_file(
        "src/views/Home.jsx",
        """\
        export default function Home() {
          return (
            <main>
              <Button>Click me</Button>
            </main>
          );
        }
        """,
    )
    write_file("node_modules/lib/Form.jsx", "const f = <Form />;\n")
    write_file("src/components/Form.test.jsx", "const f = <Form />;\n")
    return tmp_path
