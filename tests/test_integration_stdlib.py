import os
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    os.environ.get("MOCKF_INTEGRATION") != "1",
    reason="set MOCKF_INTEGRATION=1 to run integration tests (requires Go)",
)


def _mockf(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "mockf", *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=False,
    )


def test_net_http_handler():
    proc = _mockf("net/http", "Handler")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == (
        "type handlerFunc func(http.ResponseWriter, *http.Request)\n"
        "\n"
        "func (f handlerFunc) ServeHTTP(rw http.ResponseWriter, r *http.Request) {\n"
        "\tf(rw, r)\n"
        "}\n"
    )


def test_io_reader():
    proc = _mockf("io", "Reader")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == (
        "type readerFunc func([]byte) (int, error)\n"
        "\n"
        "func (f readerFunc) Read(p []byte) (int, error) {\n"
        "\treturn f(p)\n"
        "}\n"
    )


def test_gofmt_keeps_template_layout():
    proc = _mockf("--format", "always", "io", "Writer")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == (
        "type writerFunc func([]byte) (int, error)\n"
        "\n"
        "func (f writerFunc) Write(p []byte) (int, error) {\n"
        "\treturn f(p)\n"
        "}\n"
    )


def test_unknown_package():
    proc = _mockf("example.invalid/nope", "X")
    assert proc.returncode == 2
    assert proc.stderr.startswith("couldn't find package example.invalid/nope: ")
