from ndsel import __version__


def test_zcat_emits_every_line(invoke, write_gz):
    a = write_gz("a.ndjson.gz", ["a1", "a2", "a3"])
    b = write_gz("b.ndjson.gz", ["b1", "b2", "b3", "b4"])
    res = invoke(["zcat", "-p", "2", str(a), str(b)])
    assert res.exit_code == 0
    lines = res.stdout.splitlines()
    assert len(lines) == 7
    assert [l for l in lines if l.startswith("a")] == ["a1", "a2", "a3"]
    assert [l for l in lines if l.startswith("b")] == ["b1", "b2", "b3", "b4"]


def test_zcat_small_queue(invoke, write_gz):
    paths = [str(write_gz(f"{n}.gz", [f"{n}-{i}" for i in range(100)])) for n in range(3)]
    res = invoke(["zcat", "--queue-size", "1", *paths])
    assert res.exit_code == 0
    assert len(res.stdout.splitlines()) == 300


def test_zcat_requires_inputs(invoke):
    res = invoke(["zcat"])
    assert res.exit_code == 2


def test_zcat_rejects_negative_parallelism(invoke, write_gz):
    res = invoke(["zcat", "-p", "-1", str(write_gz("a.gz", ["x"]))])
    assert res.exit_code == 2


def test_zcat_bad_input_fails(invoke, write_gz, tmp_path):
    plain = tmp_path / "plain.gz"
    plain.write_text("hello\n")
    res = invoke(["zcat", str(write_gz("ok.gz", ["x"])), str(plain)])
    assert res.exit_code == 1
    assert "Error: failed to decompress" in res.stderr
    assert "plain.gz" in res.stderr


def test_zcat_missing_file_fails(invoke, tmp_path):
    res = invoke(["zcat", str(tmp_path / "missing.gz")])
    assert res.exit_code == 1
    assert "missing.gz" in res.stderr


def test_version(invoke):
    res = invoke(["--version"])
    assert res.exit_code == 0
    assert __version__ in res.stdout
