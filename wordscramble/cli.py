"""
Word Scramble CLI.

Usage:
    wordscramble play              Play a round in the terminal
    wordscramble serve             Run the REST / Socket.IO server

While playing, type a word and press enter. `:new` starts a new round with a
fresh root word, `:quit` (or end of input) leaves the game.
"""

import argparse
import logging
import random
import sys

from .config import Config, configure_logging
from .dictionary import DictionaryService
from .errors import DictionaryUnavailable, WordListUnavailable
from .game_logic import GameSession

logger = logging.getLogger(__name__)

NEW_GAME = ":new"
QUIT = ":quit"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Word Scramble - make words out of a root word",
        prog="wordscramble",
    )
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--word-list", default=Config.WORD_LIST_PATH, help="File of root words, one per line")
    play_parser.add_argument("--dictionary", default=Config.DICTIONARY_PATH, help="File of valid words, one per line")
    play_parser.add_argument("--language", default=Config.LANGUAGE, help="Dictionary language tag")
    play_parser.add_argument("--seed", type=int, help="Random seed for root word selection")

    serve_parser = subparsers.add_parser("serve", help="Run the game server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "play":
        sys.exit(cmd_play(args))
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Start a terminal game."""
    from .words import WordSource

    try:
        checker = DictionaryService.from_file(args.dictionary, language=args.language)
    except DictionaryUnavailable as exc:
        print(f"Error: {exc}")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(
        WordSource(args.word_list, rng=rng),
        checker,
        language=args.language,
        min_length=Config.MIN_WORD_LENGTH,
    )
    return play(session, sys.stdin, sys.stdout)


def cmd_serve(args):
    """Run uvicorn on the ASGI application."""
    import uvicorn

    uvicorn.run("wordscramble.main:application", host=args.host, port=args.port, reload=args.reload)


def play(session, stdin, stdout):
    """Run the read-submit-render loop until the player quits. Returns an exit code."""

    def say(text=""):
        stdout.write(text + "\n")
        stdout.flush()

    if not _start_round(session, stdin, say):
        return 1

    for line in stdin:
        command = line.strip().lower()
        if command == QUIT:
            break
        if command == NEW_GAME:
            if not _start_round(session, stdin, say):
                return 1
            continue

        result = session.submit(line)
        if result is None:
            continue
        if result.accepted:
            render(session, say)
        else:
            say(f"{result.title}: {result.message}")

    say(f"Final score: {session.score}")
    return 0


def render(session, say):
    say()
    say(f"== {session.root_word} ==")
    for word in session.used_words:
        say(f"  ({len(word)}) {word}")
    say(f"Score: {session.score}")


def _start_round(session, stdin, say):
    while True:
        try:
            session.start_game()
        except WordListUnavailable as exc:
            say(f"Could not start a game: {exc}")
            say("Retry? [y/N]")
            answer = stdin.readline()
            if answer.strip().lower() in ("y", "yes"):
                continue
            return False
        render(session, say)
        say(f"Enter a word ({NEW_GAME} for a new game, {QUIT} to quit)")
        return True


if __name__ == "__main__":
    main()
