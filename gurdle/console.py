"""
Terminal Console

A line-based front end for playing in a terminal. ``ConsoleView`` observes
a game model and redraws the grid and keyboard with rich whenever the model
reports a change.
"""

from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from .models.game import GameState, Status
from .services.game_model import GameModel, REASON_NEW_GAME
from .utils.game_logger import game_logger

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")

STATUS_STYLES = {
    Status.RIGHT_POSITION: "bold black on green",
    Status.WRONG_POSITION: "bold black on gold1",
    Status.ABSENT: "bold white on grey37",
    Status.UNSET: "bold",
}

HELP_TEXT = "Type a word and press enter. Commands: :new  :cheat  :quit"


class ConsoleView:
    """Renders a game model to a rich console."""

    def __init__(self, model: GameModel, console: Optional[Console] = None):
        self.model = model
        self.console = console or Console()
        self.cheating = False
        model.add_observer(self.update)

    def update(self, model: GameModel, reason: str) -> None:
        if reason == REASON_NEW_GAME:
            self.cheating = False
        self.render()

    def status_line(self) -> str:
        model = self.model
        state = model.game_state()
        if state == GameState.WON:
            return "Congratulations, you won!"
        if state == GameState.LOST:
            return f"You lost :(  The secret word was {model.secret()}"
        if state == GameState.ILLEGAL_WORD:
            return "Illegal word, try again"

        line = f"{model.num_attempts()} guesses used, Make a guess!"
        if self.cheating:
            line += f"\t SECRET: {model.secret()}"
        return line

    def render_grid(self) -> Text:
        model = self.model
        grid = Text()
        buffer = model.guess_buffer()

        for row in range(model.NUM_TRIES):
            for col in range(model.WORD_SIZE):
                cell = model.get(row, col)
                char = cell.char
                # The row being typed shows the buffered letters
                if row == model.num_attempts() and col < len(buffer):
                    char = buffer[col]
                grid.append(f" {char or '_'} ", style=STATUS_STYLES[cell.status])
                grid.append(" ")
            grid.append("\n")
        return grid

    def render_keyboard(self) -> Text:
        statuses = self.model.letter_statuses()
        keyboard = Text()
        for indent, keys in enumerate(KEYBOARD_ROWS):
            keyboard.append(" " * indent)
            for letter in keys:
                keyboard.append(f" {letter} ", style=STATUS_STYLES[statuses[letter]])
            keyboard.append("\n")
        return keyboard

    def render(self) -> None:
        self.console.print(self.status_line())
        self.console.print(self.render_grid())
        self.console.print(self.render_keyboard())


def run_console(model: GameModel,
                input_func: Callable[[str], str] = input,
                console: Optional[Console] = None) -> None:
    """
    Play games in the terminal until ``:quit`` or end of input.

    Args:
        model: The game to drive; it should already have a game started
        input_func: Reads one line of player input
        console: Console to draw on
    """
    view = ConsoleView(model, console)
    view.console.print(HELP_TEXT)
    view.render()

    while True:
        try:
            line = input_func("> ")
        except EOFError:
            break

        command = line.strip()
        if not command:
            continue

        if command == ":quit":
            game_logger.log_user_action(None, 'quit')
            break

        if command == ":new":
            game_logger.log_user_action(None, 'new_game')
            model.new_game()
            continue

        if command == ":cheat":
            game_logger.log_game_event(
                'word_revealed', 'console',
                num_attempts=model.num_attempts(), game_state=model.game_state().value
            )
            view.cheating = True
            view.render()
            continue

        if model.is_game_over():
            view.console.print("The game is over. Type :new to play again.")
            continue

        attempts_before = model.num_attempts()
        game_logger.log_user_action(None, 'submit_guess', guess=command.upper())
        model.submit_guess(command)

        if model.num_attempts() > attempts_before and model.is_game_over():
            event = 'game_won' if model.game_state() == GameState.WON else 'game_lost'
            game_logger.log_game_event(
                event, 'console',
                rounds_used=model.num_attempts(), secret=model.secret()
            )

    model.remove_observer(view.update)
