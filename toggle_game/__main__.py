from toggle_game.cli import app

app(prog_name="toggle-game")
