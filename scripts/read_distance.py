"""Run the distance OCR on a saved image and print what it reads"""
import argparse
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import cv2

from qwop_ai.perception.digit_templates import DigitTemplates
from qwop_ai.perception.score_reader import ScoreReader

def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("image", help="Capture of the distance counter")
    parser.add_argument("--templates", default="", help="JSON digit font (built-in font when omitted)")
    parser.add_argument("--annotated", default=None, help="Where to save the thresholded, boxed image")
    args = parser.parse_args()

    image = cv2.imread(args.image)
    if image is None:
        print(f"Cannot read {args.image}")
        return 1
    reader = ScoreReader(templates=DigitTemplates.load(args.templates))
    text, annotated = reader.read_image(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))
    print(f"Read: {text!r}")
    if args.annotated:
        cv2.imwrite(args.annotated, cv2.cvtColor(annotated, cv2.COLOR_RGB2BGR))
    return 0

if __name__ == "__main__":
    sys.exit(main())
