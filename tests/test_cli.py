import chess
import pytest

from interface import cli

MATE_IN_ONE_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 4 4"
WHITE_MATED_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.depth == 4
    assert args.fen == chess.STARTING_FEN
    assert not (args.interactive or args.selfplay or args.bench or args.verbose)


def test_parser_short_flags():
    args = cli.build_parser().parse_args(["-i", "-d", "2", "-f", STALEMATE_FEN])
    assert args.interactive
    assert args.depth == 2
    assert args.fen == STALEMATE_FEN


@pytest.mark.parametrize("depth", ["-1", "two"])
def test_parser_rejects_bad_depth(depth):
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--depth", depth])


def test_render_start_position():
    lines = cli.render_board(chess.Board()).splitlines()
    assert lines[0] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖ "
    assert lines[1] == "2 ♙ ♙ ♙ ♙ ♙ ♙ ♙ ♙ "
    assert lines[3] == "4 . . . . . . . . "
    assert lines[7] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜ "
    assert lines[8] == "  a b c d e f g h"
    assert len(lines) == 9


def test_main_prints_best_move(capsys):
    assert cli.main(["--depth", "1", "--fen", MATE_IN_ONE_FEN]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Scacchi !!"
    assert out[1] == "Depth: 1"
    assert out[2] == "Best Move: h5f7"


def test_main_reports_finished_game(capsys):
    assert cli.main(["-d", "1", "-f", WHITE_MATED_FEN]) == 0
    assert "Error!! No move found!" in capsys.readouterr().out


@pytest.mark.parametrize("fen", ["garbage", "8/8/8/8/8/8/8/8 w - - 0 1"])
def test_main_rejects_bad_fen(capsys, fen):
    assert cli.main(["-f", fen]) == 1
    out = capsys.readouterr().out
    assert "Bad FEN" in out
    assert "Best Move" not in out


def test_main_selfplay_until_mate(capsys):
    assert cli.main(["-s", "-d", "1", "-f", MATE_IN_ONE_FEN]) == 0
    out = capsys.readouterr().out
    assert out.count(cli.SEPARATOR) == 1
    assert out.rstrip().endswith("Good Game!")


def test_main_runs_benchmark(capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "run_benchmark", lambda: calls.append(True))
    assert cli.main(["--bench", "-f", "garbage"]) == 0
    assert calls == [True]
    assert "Bad FEN" not in capsys.readouterr().out


def test_exec_ai_turn_without_moves_keeps_board(capsys):
    board = chess.Board(STALEMATE_FEN)
    assert cli.exec_ai_turn(board, 1) is board
    assert "Error!! No move found" in capsys.readouterr().out


def test_exec_ai_turn_plays_a_move():
    board = chess.Board(MATE_IN_ONE_FEN)
    after = cli.exec_ai_turn(board, 1)
    assert after.is_checkmate()
    assert board.fen() == MATE_IN_ONE_FEN


def test_exec_user_turn_retries_until_legal(capsys):
    board = chess.Board()
    after = cli.exec_user_turn(board, iter(["Ke2\n", "nonsense\n", "e4\n"]))
    assert after.peek() == chess.Move.from_uci("e2e4")
    assert capsys.readouterr().out.count("Invalid Move") == 2


def test_exec_user_turn_input_exhausted():
    assert cli.exec_user_turn(chess.Board(), iter(["Ke2\n"])) is None


def test_interactive_engine_moves_first_and_mates(capsys):
    final = cli.interactive_loop(chess.Board(MATE_IN_ONE_FEN), 1, lines=[])
    out = capsys.readouterr().out
    assert final.is_checkmate()
    assert "Your turn..." not in out
    assert out.rstrip().endswith("Checkmate!!")


def test_interactive_reports_stalemate(capsys):
    cli.interactive_loop(chess.Board(STALEMATE_FEN), 1, lines=[])
    assert capsys.readouterr().out.strip() == "Stalemate..."


def test_interactive_human_turn(capsys):
    final = cli.interactive_loop(chess.Board(), 0, lines=["Ke2\n", "e5\n"])
    out = capsys.readouterr().out

    # engine, human, engine; then the input runs out on the second human turn
    assert len(final.move_stack) == 3
    assert final.move_stack[1] == chess.Move.from_uci("e7e5")
    assert out.count("Your turn...") == 2
    assert out.count("Invalid Move") == 1
