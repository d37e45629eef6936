#!/usr/bin/env python3
"""
Old Phone Pad Multi-Tap Decoder/Encoder

Turn a sequence of old phone keypad presses into text. Pressing a key
N times selects its N-th letter, a space pauses between two letters on
the same key, '*' is backspace and a trailing '#' is the send key.

Examples:
    # Decode key presses
    python3 multitap.py decode "4433555 555666#"
    # Output: HELLO

    # Backspace removes the previous letter
    python3 multitap.py decode "8 88777444666*664#"
    # Output: TURING

    # Encode text back into key presses
    python3 multitap.py encode "hello"
    # Output: 4433555 555666#

    # Type sequences one at a time, 'exit' quits
    python3 multitap.py interactive
"""

import sys
import argparse
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Optional, Tuple


# Keypad Mapping

KEYPAD = MappingProxyType({
    '0': ' ',
    '1': "&'(",
    '2': 'ABC',
    '3': 'DEF',
    '4': 'GHI',
    '5': 'JKL',
    '6': 'MNO',
    '7': 'PQRS',
    '8': 'TUV',
    '9': 'WXYZ',
})

PAUSE = ' '
BACKSPACE = '*'
SEND = '#'

# Reverse mapping: character -> (key, position)
LETTER_MAP = {}
for key, letters in KEYPAD.items():
    for pos, letter in enumerate(letters, 1):
        LETTER_MAP[letter] = (key, pos)


# Decoding

def press_runs(sequence: str) -> Iterator[Tuple[str, int]]:
    """
    Split a press sequence into (key, count) runs in scan order.

    Digit runs carry their press count, pauses and backspaces come out
    as single presses. Anything else is skipped.
    """
    if not sequence or sequence.isspace():
        return

    # Only the final send key is stripped
    if sequence.endswith(SEND):
        sequence = sequence[:-1]

    i = 0
    n = len(sequence)
    while i < n:
        char = sequence[i]

        if char in (PAUSE, BACKSPACE):
            yield char, 1
            i += 1
            continue

        if char not in KEYPAD:
            i += 1
            continue

        j = i + 1
        while j < n and sequence[j] == char:
            j += 1
        yield char, j - i
        i = j


def select_char(key: str, count: int) -> str:
    """Character picked by pressing `key` `count` times, wrapping around."""
    letters = KEYPAD[key]
    return letters[(count - 1) % len(letters)]


def decode(sequence: str) -> str:
    """
    Decode key presses to text.

    Never raises: unknown characters are ignored and a backspace on
    empty output does nothing.
    """
    chars = []

    for key, count in press_runs(sequence):
        if key == PAUSE:
            continue
        if key == BACKSPACE:
            if chars:
                chars.pop()
            continue
        chars.append(select_char(key, count))

    return ''.join(chars)


# Encoding

def encode_char(char: str) -> str:
    """Encode single character to its key presses."""
    if char not in LETTER_MAP:
        raise ValueError(f"Unsupported character: '{char}'")

    key, count = LETTER_MAP[char]
    return key * count


def encode(text: str, send: bool = True) -> str:
    """
    Encode text to a key press sequence.

    A pause separates consecutive letters on the same key.
    """
    parts = []
    previous = None

    for char in text.upper():
        presses = encode_char(char)
        if previous == presses[0]:
            parts.append(PAUSE)
        parts.append(presses)
        previous = presses[0]

    if send:
        parts.append(SEND)

    return ''.join(parts)


# Help / self-check

SELF_TEST_CASES = (
    ("33#", "E"),
    ("227*#", "B"),
    ("4433555 555666#", "HELLO"),
    ("8 88777444666*664#", "TURING"),
    ("#", ""),
    ("0#", " "),
    ("222#", "C"),
    ("2222#", "A"),
    ("22*#", ""),
    ("2 2#", "AA"),
)


def keypad_help() -> str:
    """Text listing every key and the special keys."""
    lines = ["Keypad:"]
    for key, letters in KEYPAD.items():
        shown = 'space' if letters == ' ' else letters
        lines.append(f"  {key}  {shown}")
    lines.append("")
    lines.append("Special keys:")
    lines.append("  ' '  pause between two letters on the same key")
    lines.append("  '*'  backspace")
    lines.append("  '#'  send (end of input)")
    return '\n'.join(lines)


def run_self_test(cases=SELF_TEST_CASES) -> bool:
    """Decode each case, print the comparison and return True if all pass."""
    failed = 0

    for sequence, expected in cases:
        actual = decode(sequence)
        passed = actual == expected
        if not passed:
            failed += 1

        print(f'Input: "{sequence}"')
        print(f'Expected: "{expected}"')
        print(f'Actual: "{actual}"')
        print(f"Status: {'PASSED' if passed else 'FAILED'}")
        print()

    print(f"{len(cases) - failed}/{len(cases)} passed")
    return failed == 0


def interactive(stream=None) -> None:
    """Decode lines until 'exit' or end of input."""
    stream = stream or sys.stdin
    print("Enter key presses (or 'exit' to quit):")

    while True:
        print("\nInput: ", end='', flush=True)
        line = stream.readline()
        if not line:
            print()
            break

        line = line.rstrip('\n')
        if line.strip().lower() == 'exit':
            break

        print(f"Output: {decode(line)}")


# File I/O

def read_input(path: str) -> str:
    """Read input from file or stdin."""
    if path == '-':
        return sys.stdin.read().rstrip('\n')

    try:
        return Path(path).read_text(encoding='utf-8').rstrip('\n')
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"Error: Invalid UTF-8 encoding: {path}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)


def write_output(content: str, path: Optional[str]) -> None:
    """Write output to file or stdout."""
    if path:
        try:
            Path(path).write_text(content + '\n', encoding='utf-8')
            print(f"Saved: {path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(content)


def print_trace(sequence: str) -> None:
    for key, count in press_runs(sequence):
        if key == PAUSE:
            print("  pause", file=sys.stderr)
        elif key == BACKSPACE:
            print("  backspace", file=sys.stderr)
        else:
            print(f"  {key} x{count} -> '{select_char(key, count)}'",
                  file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='oldphonepad',
        description='Old phone keypad multi-tap decoder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', required=True,
                                       help='Operation mode')

    # Decode command
    decode_parser = subparsers.add_parser('decode',
                                          help='Decode key presses to text')
    decode_parser.add_argument('sequence', nargs='?',
                               help='Key presses (or use -i for file)')
    decode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    decode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')
    decode_parser.add_argument('-v', '--verbose', action='store_true',
                               help='Print press runs to stderr')

    # Encode command
    encode_parser = subparsers.add_parser('encode',
                                          help='Encode text to key presses')
    encode_parser.add_argument('text', nargs='?',
                               help='Text to encode (or use -i for file)')
    encode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    encode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')
    encode_parser.add_argument('--no-send', action='store_true',
                               help="Leave off the trailing '#'")

    subparsers.add_parser('interactive',
                          help="Decode lines typed at the prompt")
    subparsers.add_parser('keypad', help='Show the keypad layout')
    subparsers.add_parser('selftest', help='Run the built-in decode cases')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == 'keypad':
            print(keypad_help())
            return

        if args.command == 'selftest':
            if not run_self_test():
                sys.exit(1)
            return

        if args.command == 'interactive':
            interactive()
            return

        # Get input
        positional = args.sequence if args.command == 'decode' else args.text
        if args.input:
            input_data = read_input(args.input)
        elif positional is not None:
            input_data = positional
        else:
            parser.error('Provide input or use -i for file input')

        if args.command == 'encode':
            result = encode(input_data, send=not args.no_send)
        else:
            if args.verbose:
                print_trace(input_data)
            result = decode(input_data)

        # Output result
        write_output(result, args.output)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
