import pytest
from sympy import isprime

from randprime import cli, config


def run(capsys, *argv):
    rc = cli.main(list(argv))
    out = capsys.readouterr().out
    return rc, out


def test_atoi():
    assert cli.atoi("64") == 64
    assert cli.atoi("  12abc") == 12
    assert cli.atoi("+7") == 7
    assert cli.atoi("-5") == -5
    assert cli.atoi("abc") == 0
    assert cli.atoi("") == 0


def test_parse_bits_default():
    assert cli.parse_bits(None) == 16384 == config.DEFAULT_BITS


def test_parse_bits_lenient_clamps():
    assert cli.parse_bits("-9") == 0
    assert cli.parse_bits("x") == 0
    assert cli.parse_bits("33 bits") == 33


@pytest.mark.parametrize("text", ["abc", "0", "-4", "12abc"])
def test_parse_bits_strict(text):
    with pytest.raises(cli.InvalidBits):
        cli.parse_bits(text, strict=True)


def test_prints_one_prime_line(capsys):
    rc, out = run(capsys, "96", "--seed", "5")
    assert rc == 0
    assert out.endswith("\n") and out.count("\n") == 1
    digits = out.strip()
    assert digits.isdigit()
    assert isprime(int(digits))
    assert int(digits).bit_length() >= 1


def test_fixed_seed_is_deterministic(capsys):
    _, a = run(capsys, "128", "--seed", "77")
    _, b = run(capsys, "128", "--seed", "77")
    assert a == b


def test_sympy_backend_matches_contract(capsys):
    rc, out = run(capsys, "80", "--seed", "3", "--backend", "sympy")
    assert rc == 0 and isprime(int(out))


def test_secure_seed(capsys):
    rc, out = run(capsys, "48", "--secure")
    assert rc == 0 and isprime(int(out))


@pytest.mark.parametrize("arg", ["abc", "-5", "0"])
def test_garbage_bits_still_succeeds(capsys, arg):
    rc, out = run(capsys, arg, "--seed", "1")
    assert rc == 0
    assert out == "2\n"


def test_extra_args_ignored(capsys):
    rc, out = run(capsys, "16", "junk", "--seed", "1")
    assert rc == 0 and isprime(int(out))


def test_strict_rejects(capsys):
    with pytest.raises(SystemExit) as e:
        cli.main(["abc", "--strict"])
    assert e.value.code == 2


def test_default_bits_used(capsys, monkeypatch):
    seen = []
    real = cli.draw

    def spy(bits, backend):
        seen.append(bits)
        return real(16, backend)

    monkeypatch.setattr(cli, "draw", spy)
    rc, out = run(capsys, "--seed", "4")
    assert rc == 0
    assert seen == [16384]
    assert isprime(int(out))


def test_verbose_logs_to_stderr_only(capsys):
    rc = cli.main(["32", "--seed", "2", "-v"])
    cap = capsys.readouterr()
    assert rc == 0
    assert cap.out.strip().isdigit()
    assert "seed_source=fixed" in cap.err
    assert "candidate_bits=" in cap.err
    assert "seed_source" not in cap.out


@pytest.mark.parametrize("arg", ["-12abc", "-x"])
def test_dash_led_bits_read_like_atoi(capsys, monkeypatch, arg):
    monkeypatch.setattr(config, "DEFAULT_BITS", 64)
    rc, out = run(capsys, arg, "--seed", "1")
    assert rc == 0
    assert out == "2\n"


def test_seed_without_value_falls_back_to_clock(capsys):
    rc, out = run(capsys, "24", "--seed")
    assert rc == 0 and isprime(int(out))


def test_garbage_seed_read_like_atoi(capsys):
    _, a = run(capsys, "64", "--seed", "7xyz")
    _, b = run(capsys, "64", "--seed", "7")
    assert a == b


def test_strict_rejects_garbage_seed():
    with pytest.raises(SystemExit) as e:
        cli.main(["64", "--strict", "--seed", "7xyz"])
    assert e.value.code == 2
