import io

from arboles.cli import main


def test_repetitions_from_argument(capsys):
    assert main(["--repetitions", "2", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("[OUTPUT] Diferencia de alturas") == 2
    assert "repeticion 2:" in out
    assert "En Conclusion" in out


def test_zero_repetitions_prints_no_conclusion(capsys):
    assert main(["-n", "0"]) == 0
    out = capsys.readouterr().out
    assert "En Conclusion" not in out
    assert "Diferencia" not in out


def test_repetitions_read_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n3\n"))
    assert main(["--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "[INPUT] Ingrese el numero de repeticiones: " in out
    assert "[ERROR] Debe ingresar un valor valido." in out
    assert out.count("[OUTPUT] La altura de ABB es de:") == 3


def test_seed_gives_same_output(capsys):
    main(["-n", "4", "--seed", "9"])
    first = capsys.readouterr().out
    main(["-n", "4", "--seed", "9"])
    second = capsys.readouterr().out
    assert first == second


def test_range_too_small_fails(capsys):
    assert main(["-n", "1", "--count", "10", "--minimum", "1", "--maximum", "5"]) == 1
    err = capsys.readouterr().err
    assert "No es posible generar 10 claves" in err


def test_missing_input_fails(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1


def test_whole_range_gives_chain_free_heights(capsys):
    assert main(["-n", "1", "--count", "1", "--minimum", "7", "--maximum", "7"]) == 0
    out = capsys.readouterr().out
    assert "[OUTPUT] La altura de ABB es de: 1 " in out
    assert "[OUTPUT] La altura de AVL es de: 1 " in out
    assert "repeticion 1: 0" in out