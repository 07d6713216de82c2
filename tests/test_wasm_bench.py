from unidemos.wasm_bench import create_large_file, fibonacci, main, read_large_file


def test_fibonacci_30():
    assert fibonacci(30) == 832040


def test_fibonacci_recurrence():
    for n in range(3, 40):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_start():
    assert fibonacci(1) == fibonacci(2)


def test_file_round_trip(tmp_path):
    path = tmp_path / "big.bin"
    size = 3 * 1024 * 1024 + 17
    create_large_file(path, size)
    assert path.stat().st_size == size
    assert read_large_file(path) == bytes(size)


def test_main_cleans_up(tmp_path, capsys):
    path = tmp_path / "large.bin"
    code = main(
        ["--calls", "5", "--file-iterations", "2", "--file-size", "2048", "--path", str(path)]
    )
    assert code == 0
    assert not path.exists()
    out = capsys.readouterr().out
    assert "fibonacci(30) = 832040" in out
    assert "Total Read File Time" in out