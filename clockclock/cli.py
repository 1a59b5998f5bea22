#!/usr/bin/env python3
"""Command line entry point for the clock of clocks."""

import argparse
import sys

from .animation import ANIM_DURATION_FRAMES
from .base import add_common_args, common_args_from_parsed
from .face import InvalidTimeComponent


def _time_arg(text):
    from .clock import parse_time
    try:
        return parse_time(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser():
    parser = argparse.ArgumentParser(
        prog='clockclock',
        description='A digital clock drawn with tiny analog clocks, on your oscilloscope. '
                    'Connect audio L/R to scope CH1/CH2, set to XY mode.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='command', help='Available modes')

    # Live clock
    run_parser = subparsers.add_parser(
        'run',
        help='Live animated clock',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    run_parser.add_argument("--fps", type=int, default=60,
                            help="Animation frames per second")
    run_parser.add_argument("--duration-frames", type=int,
                            default=ANIM_DURATION_FRAMES,
                            help="Frames for the hands to reach a new digit")
    run_parser.add_argument("--padding", type=float, default=30.0,
                            help="Gap between digit pairs (one clock is 45)")
    run_parser.add_argument("--dials", action="store_true",
                            help="Also trace the dial of every small clock")
    add_common_args(run_parser)

    # Still frame to file
    wav_parser = subparsers.add_parser(
        'wav',
        help='Write a still face for a given time to a WAV file',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    wav_parser.add_argument("--time", type=_time_arg, default="12:34:56",
                            help="Time to show, HH:MM:SS")
    wav_parser.add_argument("-o", "--out", default="clockclock.wav",
                            help="Output WAV file")
    wav_parser.add_argument("--padding", type=float, default=30.0,
                            help="Gap between digit pairs (one clock is 45)")
    wav_parser.add_argument("--dials", action="store_true",
                            help="Also trace the dial of every small clock")
    add_common_args(wav_parser)

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == 'wav':
        from .clock import generate_wav
        hours, minutes, seconds = args.time
        try:
            generate_wav(hours, minutes, seconds, args.out,
                         rate=args.rate, secs=args.secs, amp=args.amp,
                         padding=args.padding, dials=args.dials)
        except InvalidTimeComponent as e:
            parser.error(str(e))
        return 0

    from .clock import ClockFacePlayer
    try:
        player = ClockFacePlayer(
            fps=args.fps,
            duration_frames=args.duration_frames,
            padding=args.padding,
            dials=args.dials,
            **common_args_from_parsed(args)
        )
    except ValueError as e:
        parser.error(str(e))
    player.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
