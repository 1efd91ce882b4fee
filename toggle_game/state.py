"""The saved game, so the board survives between commands."""

import contextlib
import gzip
import pathlib

import pydantic
import structlog

from toggle_game import board as codec

STATE_FILENAME = pathlib.Path.home() / ".toggle-game-state.json.gz"

logger = structlog.get_logger()


class GameState(pydantic.BaseModel):
    """One game in progress"""

    board: str = codec.ALL_WHITE
    target: str = codec.ALL_WHITE
    clicks: int = 0
    history: list[int] = pydantic.Field(default_factory=list)

    @pydantic.field_validator("board", "target")
    @classmethod
    def check_board(cls, value: str) -> str:
        return codec.validate_board(value)

    @pydantic.field_validator("history")
    @classmethod
    def check_history(cls, value: list[int]) -> list[int]:
        for button in value:
            codec.validate_button(button)
        return value

    @property
    def solved(self) -> bool:
        return self.board == self.target

    def click(self, button: int):
        self.board = codec.click(self.board, button)
        self.clicks += 1
        self.history.append(button)

    @classmethod
    def load(cls, path: pathlib.Path = STATE_FILENAME) -> "GameState":
        try:
            text = gzip.decompress(pathlib.Path(path).read_bytes()).decode("utf-8")
            return cls.model_validate_json(text)
        except FileNotFoundError:
            return cls()

    def save(self, path: pathlib.Path = STATE_FILENAME):
        pathlib.Path(path).write_bytes(
            gzip.compress(self.model_dump_json(indent=1).encode("utf-8"))
        )
        logger.debug("saved state", path=str(path), board=self.board)

    @classmethod
    @contextlib.contextmanager
    def auto_load_and_save(cls, path: pathlib.Path = STATE_FILENAME):
        state = cls.load(path)
        try:
            yield state
        finally:
            state.save(path)
