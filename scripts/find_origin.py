"""Locate QWOP on screen and save a screenshot marking the origin and probes"""
import argparse
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import cv2

from qwop_ai.config import config
from qwop_ai.core.exceptions import NotFoundError
from qwop_ai.core.qwopper import Qwopper
from qwop_ai.platform.desktop import DesktopEnvironment
from qwop_ai.utils.logger import setup_logger

def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", default="origin.png")
    args = parser.parse_args()
    setup_logger("qwop_ai")

    env = DesktopEnvironment()
    qwopper = Qwopper(env)
    try:
        origin = qwopper.find_real_origin()
    except NotFoundError as e:
        print(e)
        return 1

    calibration = config.calibration
    shot = env.capture_screen()
    cv2.circle(shot, tuple(origin), 4, (255, 0, 0), 1)
    for dx, dy in calibration.MEDAL_OFFSETS:
        cv2.circle(shot, tuple(origin.offset(dx, dy)), 4, (255, 255, 0), 1)
    rect = qwopper.reader.score_rect(origin)
    cv2.rectangle(shot, (rect.left, rect.top),
                  (rect.left + rect.width - 1, rect.top + rect.height - 1), (0, 255, 0), 1)
    cv2.imwrite(args.output, cv2.cvtColor(shot, cv2.COLOR_RGB2BGR))

    print(f"Origin: {tuple(origin)}")
    print(f"Finished: {qwopper.is_finished()}")
    print(f"Distance: {qwopper.capture_distance()!r}")
    print(f"Saved {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
