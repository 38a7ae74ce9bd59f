import hashlib
import io

import pytest

from fips_sha256 import cli


def test_main_prints_digest(tmp_path):
    source = tmp_path / "mark.txt"
    source.write_bytes(b"abc")
    stream = io.StringIO()

    exit_code = cli.main([str(source)], stream=stream, err_stream=io.StringIO())

    assert exit_code == 0
    assert stream.getvalue() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        f"  {source}\n"
    )


def test_main_reports_missing_file(tmp_path):
    present = tmp_path / "present.bin"
    present.write_bytes(b"")
    missing = tmp_path / "missing.bin"
    stream = io.StringIO()
    err_stream = io.StringIO()

    exit_code = cli.main(
        [str(missing), str(present)], stream=stream, err_stream=err_stream
    )

    assert exit_code == 1
    assert f"Unable to open file: {missing}" in err_stream.getvalue()
    assert stream.getvalue() == f"{hashlib.sha256(b'').hexdigest()}  {present}\n"


def test_main_graph_backend(tmp_path):
    source = tmp_path / "data.bin"
    source.write_bytes(b"x" * 70)
    stream = io.StringIO()

    exit_code = cli.main(
        ["--backend", "graph", "-v", str(source)],
        stream=stream,
        err_stream=io.StringIO(),
    )

    assert exit_code == 0
    assert stream.getvalue().split() == [
        hashlib.sha256(b"x" * 70).hexdigest(),
        str(source),
    ]


def test_read_source_wraps_os_errors(tmp_path):
    with pytest.raises(cli.SourceReadError) as exc_info:
        cli.read_source(str(tmp_path))
    assert isinstance(exc_info.value.__cause__, OSError)
