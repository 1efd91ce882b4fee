import gzip

import pydantic
import pytest

from toggle_game.state import GameState


def test_new_game_is_solved():
    state = GameState()
    assert state.board == "111111111"
    assert state.solved
    assert state.clicks == 0


def test_click():
    state = GameState()
    state.click(4)
    assert state.board == "101000101"
    assert state.history == [4]
    assert state.clicks == 1
    assert not state.solved


def test_bad_click_leaves_state_alone():
    state = GameState()
    with pytest.raises(ValueError):
        state.click(9)
    assert state.board == "111111111"
    assert state.clicks == 0
    assert state.history == []


def test_rejects_bad_board():
    with pytest.raises(pydantic.ValidationError):
        GameState(board="12")
    with pytest.raises(pydantic.ValidationError):
        GameState(history=[10])


def test_missing_file_gives_new_game(tmp_path):
    state = GameState.load(tmp_path / "nope.json.gz")
    assert state == GameState()


def test_save_and_load(tmp_path):
    path = tmp_path / "state.json.gz"
    state = GameState(target="000000000")
    state.click(0)
    state.save(path)
    assert b'"target": "000000000"' in gzip.decompress(path.read_bytes())
    assert GameState.load(path) == state


def test_auto_load_and_save(tmp_path):
    path = tmp_path / "state.json.gz"
    with GameState.auto_load_and_save(path) as state:
        state.click(4)
    with GameState.auto_load_and_save(path) as state:
        assert state.history == [4]
        state.click(4)
    assert GameState.load(path).solved


def test_auto_save_on_error(tmp_path):
    path = tmp_path / "state.json.gz"
    with pytest.raises(RuntimeError):
        with GameState.auto_load_and_save(path) as state:
            state.click(1)
            raise RuntimeError("boom")
    assert GameState.load(path).history == [1]
