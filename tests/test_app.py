import io

from rich.console import Console

import hangman
from termhang.core.errors import GameAborted
from termhang.services.terminal import TerminalUI


class ScriptedUI(TerminalUI):
    def __init__(self, guesses, again=()):
        super().__init__(console=Console(file=io.StringIO(), color_system=None), delay=0, clear=False)
        self.guesses = list(guesses)
        self.again = list(again)
        self.lines = []

    def emit(self, text):
        self.lines.append(text)

    def error(self, text):
        self.lines.append(text)

    def prompt_for_guess(self, validator):
        if not self.guesses:
            raise GameAborted("no more input")
        return self.guesses.pop(0)

    def confirm(self, question):
        return self.again.pop(0) if self.again else False


def write_words(tmp_path, *words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(path)


def test_plays_one_game(tmp_path, monkeypatch):
    monkeypatch.setattr(hangman, "load_dotenv", lambda **kwargs: None)
    ui = ScriptedUI(["c", "a", "t"])
    code = hangman.main(["-f", write_words(tmp_path, "cat", "xy")], ui=ui)
    assert code == hangman.EXIT_OK
    assert "You guessed the word" in ui.lines


def test_missing_word_list_is_fatal(tmp_path, monkeypatch):
    monkeypatch.setattr(hangman, "load_dotenv", lambda **kwargs: None)
    ui = ScriptedUI([])
    code = hangman.main(["-f", str(tmp_path / "missing.txt")], ui=ui)
    assert code == hangman.EXIT_FATAL
    assert "missing.txt" in ui.lines[-1]


def test_no_word_in_range_is_fatal(tmp_path, monkeypatch):
    monkeypatch.setattr(hangman, "load_dotenv", lambda **kwargs: None)
    ui = ScriptedUI(["a"])
    code = hangman.main(["-f", write_words(tmp_path, "ab", "abcdefghij"), "-l", "3:8"], ui=ui)
    assert code == hangman.EXIT_FATAL
    assert "3:8" in ui.lines[-1]
    assert ui.guesses == ["a"]


def test_abort_exit_code(tmp_path, monkeypatch):
    monkeypatch.setattr(hangman, "load_dotenv", lambda **kwargs: None)
    ui = ScriptedUI(["c"])
    code = hangman.main(["-f", write_words(tmp_path, "cat")], ui=ui)
    assert code == hangman.EXIT_ABORTED
    assert ui.lines[-1] == "Game aborted."


def test_play_again_keeps_stats(tmp_path, monkeypatch):
    monkeypatch.setattr(hangman, "load_dotenv", lambda **kwargs: None)
    ui = ScriptedUI(["c", "a", "t", "z"], again=[True])
    code = hangman.main(["-f", write_words(tmp_path, "cat"), "-g", "1", "--play-again"], ui=ui)
    assert code == hangman.EXIT_OK
    assert ui.lines[-1].startswith("Games: 2  Wins: 1  Losses: 1")
