"""
Main Entry Point: QWOP AI
Finds the game on screen and plays random control strings
"""
import argparse
import logging
import os
import sys

import cv2

from qwop_ai.config import config
from qwop_ai.core.exceptions import NotFoundError
from qwop_ai.core.qwopper import Qwopper
from qwop_ai.input.kill_switch import KillSwitch
from qwop_ai.input.sequence_generator import make_realistic_random_string
from qwop_ai.utils.file_utils import ensure_dir
from qwop_ai.utils.logger import get_logger, setup_logger

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play QWOP with random control strings")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument("--duration", type=int, default=config.DEFAULT_DURATION_TICKS,
                        help="Ticks per random control string")
    parser.add_argument("--string", default=None, help="Play this control string instead of random ones")
    parser.add_argument("--save-captures", default=None, metavar="DIR",
                        help="Save the annotated distance capture of every game")
    parser.add_argument("--debug", action="store_true", help="Detailed logging")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    setup_logger("qwop_ai", detailed=args.debug or None)
    logger = get_logger("main")

    from qwop_ai.platform.desktop import DesktopEnvironment

    qwopper = Qwopper(DesktopEnvironment())
    kill_switch = KillSwitch(kill_callback=qwopper.stop)
    kill_switch.start()

    try:
        qwopper.find_real_origin()
    except NotFoundError as e:
        logger.error(str(e))
        kill_switch.stop()
        return 1

    if args.save_captures:
        ensure_dir(args.save_captures)

    outcomes = []
    try:
        for game in range(args.games):
            if kill_switch.is_killed():
                break
            string = args.string or make_realistic_random_string(args.duration)
            qwopper.start_game()
            outcome = qwopper.play_one_game(string)
            outcomes.append(outcome)
            if args.save_captures and qwopper.get_last_transformed() is not None:
                path = os.path.join(args.save_captures, f"distance_{game:04d}.png")
                cv2.imwrite(path, cv2.cvtColor(qwopper.get_last_transformed(), cv2.COLOR_RGB2BGR))
            if outcome.aborted:
                break
    finally:
        kill_switch.stop()

    successes = sum(1 for o in outcomes if o.success)
    logger.info(f"Played {len(outcomes)} game(s), {successes} successful")
    return 0

if __name__ == "__main__":
    sys.exit(main())
