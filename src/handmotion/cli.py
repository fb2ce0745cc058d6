"""CLI for handmotion: ``handmotion classify``."""

import argparse
import json
import logging
import sys
from typing import IO, Iterator, Tuple

from handmotion.analyzer import HandMovementAnalyzer
from handmotion.codec import decode_hand_frame, encode_result
from handmotion.config import HandMovementConfig
from handmotion.errors import InvalidInput

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handmotion",
        description="Recognize scroll, zoom and slide movements from hand landmarks",
    )
    sub = parser.add_subparsers(dest="command")

    # handmotion classify
    cls_p = sub.add_parser("classify", help="Classify a JSON-lines stream of hand frames")
    cls_p.add_argument(
        "input",
        help="JSON-lines file with one frame record per line ('-' for stdin)",
    )
    cls_p.add_argument(
        "--format",
        choices=["text", "json", "labels"],
        default="text",
        help="Output format (default: text)",
    )
    cls_p.add_argument(
        "--only-gestures",
        action="store_true",
        help="Only print frames with at least one recognized movement",
    )
    cls_p.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Log and skip invalid frame records instead of stopping",
    )
    cls_p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    return parser


def _read_records(stream: IO[str]) -> Iterator[Tuple[int, object]]:
    """Yield (line_number, decoded_json_or_error) for non-blank lines."""
    for line_no, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield line_no, json.loads(line)
        except json.JSONDecodeError as e:
            yield line_no, InvalidInput(f"Malformed JSON: {e.msg}")


def _format_line(fmt: str, obs) -> str:
    output = obs.data
    if fmt == "json":
        record = {"frame_id": obs.frame_id, "t_ns": obs.t_ns}
        record.update(encode_result(output.result, output=output))
        return json.dumps(record)
    if fmt == "labels":
        labels = obs.metadata["labels"]
        return "\t".join((labels["scroll"], labels["zoom"], labels["slide"]))
    signals = obs.signals
    return (
        f"frame={obs.frame_id} scroll={signals['scroll']} "
        f"zoom={signals['zoom']} slide={signals['slide']}"
    )


def _cmd_classify(args: argparse.Namespace, out: IO[str]) -> int:
    """Handle ``handmotion classify``."""
    try:
        config = HandMovementConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.input == "-":
        stream = sys.stdin
        close = False
    else:
        try:
            stream = open(args.input, "r", encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot open {args.input}: {e}", file=sys.stderr)
            return 1
        close = True

    analyzer = HandMovementAnalyzer(config)
    try:
        with analyzer:
            for line_no, record in _read_records(stream):
                try:
                    if isinstance(record, InvalidInput):
                        raise record
                    obs = analyzer.process(decode_hand_frame(record))
                except InvalidInput as e:
                    if args.skip_invalid:
                        logger.warning("Skipping line %d: %s", line_no, e)
                        continue
                    print(f"Error: line {line_no}: {e}", file=sys.stderr)
                    return 1

                if args.only_gestures and not obs.signals["gesture_detected"]:
                    continue
                print(_format_line(args.format, obs), file=out)
    finally:
        if close:
            stream.close()

    return 0


def main(argv=None) -> int:
    """Entry point for ``handmotion`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "classify":
        return _cmd_classify(args, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
