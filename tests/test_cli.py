"""Tests for the command-line front end."""

from __future__ import annotations

import pytest

from tileplay.cli import build_parser, main


def _board_file(tmp_path, rows: dict[int, str]):
    lines = []
    for r in range(15):
        line = ["."] * 15
        for c, ch in enumerate(rows.get(r, "")):
            if ch != " ":
                line[c] = ch
        lines.append("".join(line))
    path = tmp_path / "board.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def dict_file(tmp_path, words) -> str:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(path)


class TestMain:
    def test_finds_extension(self, tmp_path, dict_file, capsys) -> None:
        board = _board_file(tmp_path, {7: "       CAT"})
        code = main(["--dict", dict_file, "--board", board, "--rack", "S", "--seed", "3"])
        out = capsys.readouterr().out
        assert code == 0
        assert "CATS" in out
        assert "CHOSEN (hard)" in out

    def test_no_move(self, tmp_path, dict_file, capsys) -> None:
        board = _board_file(tmp_path, {})
        assert main(["--dict", dict_file, "--board", board, "--rack", "QQ"]) == 1
        assert "No legal move" in capsys.readouterr().out

    def test_bad_rack(self, tmp_path, dict_file) -> None:
        board = _board_file(tmp_path, {})
        assert main(["--dict", dict_file, "--board", board, "--rack", "1"]) == 2

    def test_bad_board_file(self, tmp_path, dict_file) -> None:
        path = tmp_path / "board.txt"
        path.write_text("...\n..\n", encoding="utf-8")
        assert main(["--dict", dict_file, "--board", str(path), "--rack", "S"]) == 2


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.difficulty == "hard"
    assert args.workers == 1
    assert args.top == 10
    assert not args.heuristics
