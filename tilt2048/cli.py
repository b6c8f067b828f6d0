# -*- coding: utf-8 -*-
"""
Play 2048
"""
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Optional, Sequence, TextIO

from tilt2048.config import GameConfig
from tilt2048.envs import SessionController
from tilt2048.utils.display import ConsoleDisplay, DisplaySink, NullDisplay
from tilt2048.utils.sources import InputSource, InteractiveSource, RecordingSource, ScriptedSource

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> Namespace:
    """
    Parse the command line.

    Parameters
    ----------
    argv: Sequence[str], optional
        Arguments without the program name; defaults to ``sys.argv[1:]``.
    """
    parser = ArgumentParser(prog="tilt2048", description="Play the 2048 tile-sliding game.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for new tiles")
    parser.add_argument("--log", action="store_true", help="Record tiles and commands to standard output")
    parser.add_argument("--testing", action="store_true", help="Read tiles and commands from standard input")
    parser.add_argument("--no-display", dest="display", action="store_false", help="Do not open a window")
    parser.add_argument("--size", type=int, default=GameConfig.size, help="Rows and columns of the board")
    parser.add_argument("--goal", type=int, default=GameConfig.goal, help="Tile value that wins the game")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more (repeat for debug output)")
    return parser.parse_args(argv)


def build_session(
    config: GameConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> SessionController:
    """
    Wire a session to its input source and display.

    Parameters
    ----------
    config: GameConfig
        Chosen options
    stdin: TextIO, optional
        Script read in testing mode (default is standard input)
    stdout: TextIO, optional
        Destination of the move log and of the text display (default is standard output)
    stderr: TextIO, optional
        Destination of the text display when the move log takes standard output (default is standard error)
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    display: DisplaySink
    if config.display:
        # ##: Imported here so headless runs never load a GUI backend.
        from tilt2048.utils.windows import WindowBoard

        display = WindowBoard(title="2048", size=config.size)
        read_command = display.read_key
    elif config.testing:
        display = NullDisplay()
        read_command = None
    else:
        # ##: With the move log on standard output, the board is printed to standard error.
        display = ConsoleDisplay(config.size, stream=stderr if config.log else stdout)
        read_command = display.read_command

    source: InputSource
    if config.testing:
        source = ScriptedSource(stdin)
    else:
        source = InteractiveSource(read_command, config.size, seed=config.seed)
    if config.log:
        source = RecordingSource(source, stdout)

    return SessionController(source, display, size=config.size, goal=config.goal)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the game from the command line.

    Returns
    -------
    int
        Exit status: 0 after a normal quit, 1 if a collaborator broke its contract.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = GameConfig(
            size=args.size,
            goal=args.goal,
            seed=args.seed,
            testing=args.testing,
            log=args.log,
            display=args.display,
        )
        session = build_session(config)
        best = session.play()
    except (ValueError, IndexError) as error:
        logger.error("Aborting: %s", error)
        return 1

    logger.info("Best score: %d", best)
    return 0


if __name__ == "__main__":
    sys.exit(main())
