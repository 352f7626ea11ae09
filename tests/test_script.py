import pytest

from matscript.script import execute_script, main

A_DEF = "3 5 [-4 18 6 7 10 ; -14 29 8 21 -99 ; 0 7 5 2 -9 ;]"
B_DEF = "3 5 [10 9 -2 -33 22 ; 44 10 12 72 52 ; -88 17 16 14 -9 ;]"


def _write(tmp_path, text):
    path = tmp_path / "script.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_add_script(tmp_path):
    path = _write(tmp_path, f"A = {A_DEF}\nB = {B_DEF}\nC = A + B\n")
    result = execute_script(path)
    assert result.name == "C"
    assert result.shape == (3, 5)
    assert result.values == (6, 27, 4, -26, 32, 30, 39, 20, 93, -47, -88, 24, 21, 16, -18)


def test_mult_script_with_blank_lines(tmp_path):
    text = (
        "\n  U = 7 1 [-38 ; 4 ; 46 ; -14 ; -102 ; -72 ; -27 ;]\n"
        "   \n"
        "N=1 5 [52 65 -94 -73 -48 ;]\n"
        "Z = U * N\n\n"
    )
    result = execute_script(_write(tmp_path, text))
    assert result.name == "Z"
    assert result.values == (
        -1976, -2470, 3572, 2774, 1824, 208, 260, -376, -292, -192, 2392, 2990,
        -4324, -3358, -2208, -728, -910, 1316, 1022, 672, -5304, -6630, 9588, 7446,
        4896, -3744, -4680, 6768, 5256, 3456, -1404, -1755, 2538, 1971, 1296,
    )


def test_transpose_script(tmp_path):
    text = (
        "J = 6 3 [121 -1 128 ; 78 -138 138 ; -61 51 -35 ; -84 125 -83 ; "
        "-78 138 2 ; 81 -5 -36 ;]\n"
        "T = J'\n"
    )
    result = execute_script(_write(tmp_path, text))
    assert result.shape == (3, 6)
    assert result.values == (121, 78, -61, -84, -78, 81, -1, -138, 51, 125, 138, -5,
                             128, 138, -35, -83, 2, -36)


def test_compound_expression_script(tmp_path):
    text = (
        f"A = {A_DEF}\nB = {B_DEF}\n"
        "H = 1 5 [52 65 -94 -73 -48 ;]\n"
        "D = 1 4 [-16 122 135 107 ;]\n"
        "R = (A + B) * H' * D\n"
    )
    result = execute_script(_write(tmp_path, text))
    assert result.shape == (3, 4)
    assert result.values == (
        -32848, 250466, 277155, 219671, 37088, -282796, -312930, -248026, 84704,
        -645868, -714690, -566458,
    )


def test_double_transpose_script(tmp_path):
    path = _write(tmp_path, "A = 2 3 [1 2 3 ; 4 5 6 ;]\nB = A''\n")
    result = execute_script(path)
    assert result.shape == (2, 3)
    assert result.values == (1, 2, 3, 4, 5, 6)


def test_redefined_name_keeps_first_for_lookup(tmp_path):
    text = "A = 1 1 [1 ;]\nA = 1 1 [5 ;]\nB = A + A\n"
    result = execute_script(_write(tmp_path, text))
    assert result.values == (2,)


def test_empty_script_returns_none(tmp_path):
    assert execute_script(_write(tmp_path, "\n   \n")) is None


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        execute_script(tmp_path / "absent.txt")


def test_undefined_name(tmp_path):
    with pytest.raises(KeyError):
        execute_script(_write(tmp_path, "B = A + A\n"))


def test_main_prints_result(tmp_path, capsys):
    path = _write(tmp_path, "A = 2 2 [1 2 ; 3 4 ;]\nB = A'\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "2 2 1 3 2 4\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "matscript" in capsys.readouterr().err


def test_main_empty_script(tmp_path, capsys):
    assert main([str(_write(tmp_path, ""))]) == 1
    assert "no matrix" in capsys.readouterr().err