import json

import cv2
import pytest

from sudoku_core.cli import PuzzleProcessor, main


def test_main_solves_inline_grid(tmp_path, capsys, classic_text, classic_solution_text):
    assert main(["--grid", classic_text, "--output", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Solved puzzle" in out

    data = json.loads((tmp_path / "puzzle_solution.json").read_text())
    flat = "".join(str(v) for row in data["board"] for v in row)
    assert flat == classic_solution_text
    assert cv2.imread(str(tmp_path / "puzzle_solution.png")) is not None


def test_main_solves_puzzle_file(tmp_path, classic_text):
    puzzle = tmp_path / "easy.txt"
    puzzle.write_text(classic_text)
    out_dir = tmp_path / "out"
    assert main(["--puzzle", str(puzzle), "--output", str(out_dir), "--size", "270"]) == 0
    image = cv2.imread(str(out_dir / "easy_solution.png"))
    assert image.shape[:2] == (270, 270)


def test_main_no_save(tmp_path, classic_text):
    out_dir = tmp_path / "out"
    assert main(["--grid", classic_text, "--output", str(out_dir), "--no-save"]) == 0
    assert not out_dir.exists()


def test_main_unsolvable(tmp_path, capsys):
    grid = "55" + "0" * 79
    assert main(["--grid", grid, "--output", str(tmp_path)]) == 1
    assert "Could not solve" in capsys.readouterr().out


def test_main_bad_grid(capsys):
    assert main(["--grid", "123", "--no-save"]) == 1
    assert "Error" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["--puzzle", str(tmp_path / "missing.txt")]) == 1
    assert "not found" in capsys.readouterr().out


def test_main_undecodable_file(tmp_path, capsys):
    puzzle = tmp_path / "garbled.txt"
    puzzle.write_bytes(b"\xff" + b"0" * 81)
    assert main(["--puzzle", str(puzzle), "--no-save"]) == 1
    assert "Could not read puzzle" in capsys.readouterr().out


@pytest.mark.parametrize("size", ["-5", "0", "8"])
def test_main_rejects_small_image_size(tmp_path, capsys, classic_text, size):
    out_dir = tmp_path / "out"
    assert main(["--grid", classic_text, "--output", str(out_dir), "--size", size]) == 1
    assert "--size" in capsys.readouterr().out
    assert not out_dir.exists()


def test_processor_result(classic, tmp_path):
    processor = PuzzleProcessor(save_results=False)
    result = processor.process_board(classic, str(tmp_path))
    assert result["message"].startswith("Solved in")
    assert result["filled"].sum() == sum(v == 0 for row in classic for v in row)
    assert result["original"].tolist() == classic


def test_processor_step_limit(minimal):
    processor = PuzzleProcessor(save_results=False, max_steps=5)
    assert processor.process_board(minimal) is None
