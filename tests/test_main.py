from pocket_cube.main import create_arg_parser, main


def test_arg_parser_defaults():
    args = create_arg_parser().parse_args([])
    assert args.max_moves == 12
    assert args.seed is None
    assert args.scramble is None
    assert not args.net and not args.debug


def test_main_explicit_scramble(capsys):
    assert main(["--scramble", "F D' L"]) == 0
    out = capsys.readouterr().out
    assert "Jumbled up cube (F D' L):" in out
    assert "Moves to solve: 3" in out
    assert "Solution: L' D F'" in out
    solved_section = out.split("Solved cube:")[1]
    assert "\nSOLVED\n" in solved_section


def test_main_random_scramble_net(capsys):
    assert main(["--seed", "3", "--max-moves", "5", "--net"]) == 0
    out = capsys.readouterr().out
    assert "Initial cube:" in out
    assert "Moves to solve:" in out
    assert "U      D      F      B      L      R" in out


def test_main_no_moves(capsys):
    assert main(["--max-moves", "0"]) == 0
    out = capsys.readouterr().out
    assert "Jumbled up cube (no moves):" in out
    assert "Moves to solve: 0" in out


def test_main_rejects_bad_input(capsys):
    assert main(["--scramble", "F X"]) == 2
    assert main(["--max-moves", "-1"]) == 2
