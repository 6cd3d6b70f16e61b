from rvbench import pi


def test_digits_prefix():
    assert pi.pi_digits().startswith("31415926535897932384626433832795")


def test_digit_count_and_content():
    digits = pi.pi_digits()
    assert len(digits) == 800
    assert digits.isdigit()


def test_deterministic():
    first = pi.pi_digits()
    assert first[:10] == "3141592653"
    assert pi.pi_digits() == first


def test_main_output(capsys):
    assert pi.main([]) == 0
    out = capsys.readouterr().out
    assert out == pi.pi_digits() + "\n\n"