import pytest

from termhang.core.engine import Game, game_status, play
from termhang.core.errors import DuplicateGuessError, GameAborted, GameOverError
from termhang.core.state import GameConfig, GuessSet, LengthRange


class ScriptedPlayer:
    """Feeds guesses to `play` and records what it was shown."""

    def __init__(self, guesses):
        self.guesses = list(guesses)
        self.output = []
        self.prompts = 0
        self.turns_ended = 0

    def prompt_for_guess(self, validator):
        self.prompts += 1
        if not self.guesses:
            raise GameAborted("out of input")
        return self.guesses.pop(0)

    def emit(self, text):
        self.output.append(text)

    def end_turn(self):
        self.turns_ended += 1


def run(word, guesses, max_wrong=8):
    player = ScriptedPlayer(guesses)
    result = play(word, GameConfig(max_wrong=max_wrong), player.prompt_for_guess, player.emit, player.end_turn)
    return result, player


def test_game_status_precedence():
    config = GameConfig(max_wrong=1)
    assert game_status("cat", GuessSet(), config) == "playing"
    assert game_status("cat", GuessSet(correct=("c", "a", "t")), config) == "won"
    assert game_status("cat", GuessSet(wrong=("z",)), config) == "lost"
    # Won is checked before lost.
    assert game_status("cat", GuessSet(correct=("c", "a", "t"), wrong=("z",)), config) == "won"


def test_win_cat_in_three():
    result, player = run("cat", ["c", "a", "t"])
    assert result.status == "won"
    assert [m.outcome for m in result.history] == ["hit", "hit", "hit"]
    assert [m.mask for m in result.history] == ["c _ _ ", "c a _ ", "c a t "]
    assert player.output[0] == "_ _ _ "
    assert player.output[-3:] == [
        "c a t ",
        "You guessed the word",
        "0 incorrect guesses, with 8 wrong guesses remaining",
    ]
    assert player.prompts == 3
    assert player.turns_ended == 3


def test_lose_with_budget_of_one():
    result, player = run("cat", ["z"], max_wrong=1)
    assert result.status == "lost"
    assert result.wrong_count == 1
    assert player.output[-1] == "You failed, the word was cat"
    assert player.prompts == 1


def test_duplicate_guess_retries_same_turn():
    result, player = run("cat", ["a", "a", "c", "t"], max_wrong=1)
    assert result.status == "won"
    assert len(result.history) == 3
    assert result.wrong_count == 0
    assert "You already guessed 'a'" in player.output
    assert player.turns_ended == 3


def test_malformed_guess_does_not_use_budget():
    result, player = run("cat", ["xy", "", "c", "a", "t"], max_wrong=1)
    assert result.status == "won"
    assert player.output.count("Input must be one character") == 2


def test_board_shows_wrong_guesses_and_remaining():
    game = Game("cat", GameConfig(max_wrong=8))
    assert game.board() == ["_ _ _ "]
    game.submit("z")
    game.submit("q")
    assert game.board() == ["_ _ _ ", "6 Incorrect Guesses Remaining.", "Wrong Guesses: z, q"]
    for ch in "xwvu":
        game.submit(ch)
    assert game.board()[1] == "Only 2 Incorrect Guesses Left!"
    game.submit("k")
    assert game.board()[1] == "Only 1 Incorrect Guess Left!"


def test_finished_game_accepts_no_more_guesses():
    game = Game("cat", GameConfig(max_wrong=1))
    game.submit("z")
    assert game.status == "lost"
    with pytest.raises(GameOverError):
        game.submit("c")
    assert game.validate("c") == "The game is over"
    assert game.status == "lost"
    assert game.guesses == GuessSet(wrong=("z",))


def test_won_game_stays_won():
    game = Game("dad")
    game.submit("d")
    assert game.tracker.correct_letters_revealed_count() == 2
    game.submit("a")
    assert game.status == "won"
    with pytest.raises(GameOverError):
        game.submit("q")
    assert game.result().status == "won"


def test_duplicate_via_game_raises():
    game = Game("cat")
    game.submit("a")
    with pytest.raises(DuplicateGuessError):
        game.submit("a")
    assert game.guesses == GuessSet(correct=("a",))


def test_abort_propagates():
    with pytest.raises(GameAborted):
        run("cat", ["c"])


def test_game_rejects_word_outside_range():
    with pytest.raises(ValueError):
        Game("elephants", GameConfig(length_range=LengthRange(3, 8)))
    with pytest.raises(ValueError):
        Game("")


def test_validator_passed_to_prompt_reflects_state():
    seen = []

    def prompt(validator):
        seen.append((validator("c"), validator("zz")))
        return ["c", "a", "t"][len(seen) - 1]

    play("cat", GameConfig(), prompt, lambda _text: None)
    assert seen[0] == (None, "Input must be one character")
    assert seen[1][0] == "You already guessed 'c'"
