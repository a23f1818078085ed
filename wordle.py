#!/usr/bin/env python3
"""
Terminal Wordle — guess the hidden five-letter word in six tries.
Features:
- Daily word picked by the number of days since 2021-06-20, or a random
  word with the -r flag
- Letter-by-letter entry redrawn in place as you type
- Colored feedback: green (exact), yellow (elsewhere in the word),
  plain (not in the word)
- Shareable emoji grid printed when the game ends
- Keys: a-z=type, backspace=delete, enter=submit (only when the row is full)
"""

import collections
import contextlib
import curses
import datetime
import random
import sys

from loguru import logger

from words import WORDS

# Maximum guesses allowed
MAX_GUESSES = 6

# Word length
WORD_LENGTH = 5

# Placeholder for an empty slot in the guess row
BLANK = "_"

# Day zero of the daily word list
EPOCH = datetime.date(2021, 6, 20)

# First argument selecting a random word instead of the daily one
RANDOM_FLAG = "-r"

# Letter classifications
EXACT = "exact"
PARTIAL = "partial"
ABSENT = "absent"

# Game states
GUESSING = "guessing"
WON = "won"
LOST = "lost"

SHARE_SYMBOLS = {
    EXACT: "🟩",
    PARTIAL: "🟨",
    # Black square with VS16 so it renders as a wide emoji
    ABSENT: "⬛️",
}

# Key actions
CHAR = "char"
BACKSPACE = "backspace"
SUBMIT = "submit"

BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)

# Screen layout: title on row 0, guesses from GRID_TOP down
GRID_TOP = 2
GRID_LEFT = 2
MIN_HEIGHT = GRID_TOP + MAX_GUESSES + 1
MIN_WIDTH = 24

GameResult = collections.namedtuple("GameResult", "state attempts history")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class WordleError(Exception):
    """Fatal error that ends the game."""


class TerminalError(WordleError):
    """Reading a key or writing to the screen failed."""


class WordIndexError(WordleError):
    """The word list has no entry for the requested index."""


# ---------------------------------------------------------------------------
# Color pair indices
# ---------------------------------------------------------------------------
COLOR_TITLE = 1
COLOR_EXACT = 2
COLOR_PARTIAL = 3


def init_colors():
    """Initialize curses color pairs and return the attribute for each role."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_EXACT, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PARTIAL, curses.COLOR_YELLOW, -1)
    return {
        "title": curses.color_pair(COLOR_TITLE) | curses.A_BOLD,
        EXACT: curses.color_pair(COLOR_EXACT) | curses.A_BOLD,
        PARTIAL: curses.color_pair(COLOR_PARTIAL) | curses.A_BOLD,
        ABSENT: curses.A_NORMAL,
    }


# ---------------------------------------------------------------------------
# Pure game logic (no curses dependency)
# ---------------------------------------------------------------------------
def should_be_partial(guess, target, i):
    """Return True if guess[i] should be marked as present elsewhere.

    A letter missing from the target is never partial. Otherwise it is
    partial while the exact hits on that letter, counted over the whole
    guess, stay below the number of times it occurs in the target.

    Repeated letters are not consumed one at a time, so a guess with more
    copies of a letter than the target can show extra partials: "speed"
    against "react" marks both e's partial.
    """
    letter = guess[i]
    if letter not in target:
        return False
    confirmed = 0
    for j in range(len(target)):
        if guess[j] == letter and target[j] == letter:
            confirmed += 1
    return confirmed < target.count(letter)


def classify_guess(guess, target):
    """Classify each position of a guess as 'exact', 'partial' or 'absent'."""
    result = []
    for i in range(len(guess)):
        if guess[i] == target[i]:
            result.append(EXACT)
        elif should_be_partial(guess, target, i):
            result.append(PARTIAL)
        else:
            result.append(ABSENT)
    return result


def check_win(result):
    """Return True if all letters are exact."""
    return all(r == EXACT for r in result)


def next_state(result, attempt, max_guesses=MAX_GUESSES):
    """Return the game state after a classified attempt."""
    if check_win(result):
        return WON
    if attempt >= max_guesses:
        return LOST
    return GUESSING


def share_grid(history):
    """Render the classification history as rows of emoji squares."""
    return ["".join(SHARE_SYMBOLS[state] for state in result)
            for result in history]


def outcome_lines(index, target, result):
    """Lines printed after the terminal is restored."""
    if result.state == WON:
        lines = ["",
                 "🎉 🥳 🎆 Congratulations, you got it! 🎆 🥳 🎉",
                 f"Wordle {index} {result.attempts}/{MAX_GUESSES}"]
    else:
        lines = ["",
                 "Out of guesses. Better luck next time 🙃",
                 f"Wordle {index} was: {target.upper()}"]
    return lines + share_grid(result.history)


# ---------------------------------------------------------------------------
# Word selection
# ---------------------------------------------------------------------------
def days_since_epoch(today=None):
    if today is None:
        today = datetime.date.today()
    return (today - EPOCH).days


def word_by_date(words, today=None):
    """Return (index, word) for the daily word."""
    index = days_since_epoch(today)
    if not 0 <= index < len(words):
        raise WordIndexError(
            f"day {index} is outside the word list (0-{len(words) - 1})")
    return index, words[index]


def random_word(words, rng=None):
    """Return (len(words), word) for a uniformly drawn word.

    The list length stands in for the puzzle number, since a random word
    has no day of its own.
    """
    if rng is None:
        rng = random
    count = len(words)
    if count == 0:
        raise WordIndexError("word list is empty")
    return count, words[rng.randrange(count)]


def select_word(argv, words=WORDS, today=None, rng=None):
    """Pick the random word for '-r', otherwise the daily word."""
    if argv and argv[0] == RANDOM_FLAG:
        index, word = random_word(words, rng)
        logger.debug("Random word drawn from {} words", index)
    else:
        index, word = word_by_date(words, today)
        logger.debug("Daily word #{}", index)
    return index, word


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------
@contextlib.contextmanager
def terminal_errors(action):
    """Turn curses errors raised inside the block into TerminalError."""
    try:
        yield
    except curses.error as e:
        raise TerminalError(f"failed to {action}: {e}") from e


def put(win, y, x, text, attr=0):
    """addstr that turns curses errors into TerminalError."""
    with terminal_errors("write to terminal"):
        win.addstr(y, x, text, attr)


def move(win, y, x):
    with terminal_errors("move cursor"):
        win.move(y, x)


def refresh(win):
    with terminal_errors("refresh screen"):
        win.refresh()


@contextlib.contextmanager
def saved_cursor(win):
    """Yield the cursor position and move back to it on exit."""
    y, x = win.getyx()
    try:
        yield y, x
    finally:
        move(win, y, x)


class Renderer:
    """Draws guess rows at the cursor without moving it for good."""

    def __init__(self, win, attrs=None):
        self.win = win
        self.attrs = attrs or {}

    def attr_for(self, role):
        return self.attrs.get(role, curses.A_NORMAL)

    def render_buffer(self, slots):
        """Draw the slots of an in-progress guess, e.g. 'C R _ _ _'."""
        with saved_cursor(self.win) as (y, x):
            put(self.win, y, x, " ".join(slots).upper())
        refresh(self.win)

    def render_classified(self, slots, result):
        """Draw a finished guess in its colors and step to the next row."""
        with saved_cursor(self.win) as (y, x):
            for i, (letter, state) in enumerate(zip(slots, result)):
                put(self.win, y, x + i * 2, letter.upper() + " ",
                    self.attr_for(state))
        move(self.win, y + 1, x)
        with terminal_errors("reset attributes"):
            self.win.attrset(curses.A_NORMAL)
        refresh(self.win)


def draw_title(win, index, attrs):
    title = f"★ WORDLE {index} ★"
    put(win, 0, GRID_LEFT, title, attrs.get("title", curses.A_BOLD))


# ---------------------------------------------------------------------------
# Line editor
# ---------------------------------------------------------------------------
def init_guess(length):
    """Return an empty guess row of the given length."""
    return [BLANK] * length


def key_action(ch):
    """Map a curses key code to (action, character)."""
    if ch in BACKSPACE_KEYS:
        return BACKSPACE, None
    if ch in ENTER_KEYS:
        return SUBMIT, None
    # Visible ASCII only; space and the blank marker would read as a gap
    if 33 <= ch <= 126 and chr(ch) != BLANK:
        return CHAR, chr(ch).lower()
    return None, None


def read_key(win):
    """Block until a key is pressed and return its code."""
    with terminal_errors("read key"):
        ch = win.getch()
    if ch == -1:
        raise TerminalError("failed to read key")
    return ch


class LineEditor:
    """Collects a fixed-length guess one keystroke at a time.

    Each accepted edit is redrawn through the renderer. Enter is only
    honoured once every slot holds a letter.
    """

    def __init__(self, renderer, length=WORD_LENGTH):
        self.renderer = renderer
        self.length = length
        self.slots = init_guess(length)
        self.pos = 0

    def handle_key(self, ch):
        """Apply one key; return True when a full guess was submitted."""
        action, char = key_action(ch)
        if action == SUBMIT:
            return self.pos == self.length
        if action == BACKSPACE:
            if self.pos == 0:
                return False
            self.pos -= 1
            self.slots[self.pos] = BLANK
        elif action == CHAR:
            if self.pos == self.length:
                return False
            self.slots[self.pos] = char
            self.pos += 1
        else:
            return False
        self.renderer.render_buffer(self.slots)
        return False

    def collect(self, win):
        while not self.handle_key(read_key(win)):
            pass
        return list(self.slots)


# ---------------------------------------------------------------------------
# Main game
# ---------------------------------------------------------------------------
def play(win, renderer, target, max_guesses=MAX_GUESSES):
    """Run guess rounds until the word is found or the guesses run out."""
    history = []
    attempt = 0
    state = GUESSING
    while state == GUESSING:
        attempt += 1
        renderer.render_buffer(init_guess(len(target)))
        slots = LineEditor(renderer, len(target)).collect(win)
        result = classify_guess(slots, target)
        renderer.render_classified(slots, result)
        history.append(result)
        state = next_state(result, attempt, max_guesses)
        logger.debug("Attempt {}/{}: {} -> {}",
                     attempt, max_guesses, " ".join(result), state)
    return GameResult(state, attempt, history)


def main(stdscr, index, target):
    """Curses entry point: set up the screen and play one game."""
    attrs = init_colors()
    with terminal_errors("hide cursor"):
        curses.curs_set(0)

    height, width = stdscr.getmaxyx()
    if height < MIN_HEIGHT or width < MIN_WIDTH:
        raise TerminalError(
            f"terminal too small: need {MIN_WIDTH}x{MIN_HEIGHT}, "
            f"have {width}x{height}")

    with terminal_errors("clear screen"):
        stdscr.clear()
    draw_title(stdscr, index, attrs)
    move(stdscr, GRID_TOP, GRID_LEFT)
    return play(stdscr, Renderer(stdscr, attrs), target)


def configure_logging(level="WARNING"):
    """Send log records to stderr, keeping debug chatter off the game screen."""
    logger.remove()
    logger.add(sys.stderr, level=level,
               format="<level>{level}</level>: {message}")


def run(argv=None):
    """Command-line entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    configure_logging()

    try:
        index, target = select_word(argv)
        # wrapper restores the terminal on every exit path
        result = curses.wrapper(main, index, target)
    except WordleError as e:
        logger.error("{}", e)
        return 1

    for line in outcome_lines(index, target, result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(run())
