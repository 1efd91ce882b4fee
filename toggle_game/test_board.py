import pytest

from toggle_game import board


def test_masks_match_grid():
    assert board.MASKS == (416, 464, 200, 308, 186, 89, 38, 23, 11)


def test_corner_has_three_neighbours():
    assert sorted(board.neighbours(0)) == [0, 1, 3]
    assert sorted(board.neighbours(4)) == [1, 3, 4, 5, 7]
    assert sorted(board.neighbours(8)) == [5, 7, 8]


def test_masks_for_other_grids():
    # 1x2: each button flips both cells
    assert board.button_masks(1, 2) == (0b11, 0b11)
    assert board.button_masks(2, 2) == (0b1110, 0b1101, 0b1011, 0b0111)


def test_encode_decode():
    assert board.encode("111111111") == 511
    assert board.encode("000000000") == 0
    assert board.encode("100000000") == 256
    assert board.decode(5) == "000000101"


@pytest.mark.parametrize("bad", ["", "11111111", "1111111111", "11111111x", "2" * 9])
def test_encode_rejects_bad_boards(bad):
    with pytest.raises(ValueError):
        board.encode(bad)


@pytest.mark.parametrize("vertex", [-1, 512])
def test_decode_rejects_out_of_range(vertex):
    with pytest.raises(ValueError):
        board.decode(vertex)


def test_click_center():
    assert board.click("111111111", 4) == "101000101"
    assert board.click("101000101", 4) == "111111111"


@pytest.mark.parametrize("button", [-1, 9])
def test_click_rejects_bad_button(button):
    with pytest.raises(ValueError, match="between 0-8"):
        board.click("111111111", button)


def test_apply_moves():
    assert board.apply_moves(511, []) == 511
    assert board.apply_moves(511, [4, 4]) == 511
    assert board.apply_moves(511, [0, 8]) == 511 ^ 416 ^ 11


def test_render():
    assert board.render("110001111") == ["110", "001", "111"]
