import sys
import argparse

from noopbin.noopfill import ByteOrder, effective_length, fill
from noopbin.platforms import DEFAULT_PLATFORM, PLATFORMS, find_platform, platform_names


class NoopArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        print(f'{self.prog}: error: {message}', file=sys.stderr)
        self.print_help(sys.stderr)
        sys.exit(2)


def main(args):
    length = effective_length(args.size)
    try:
        with open(args.output_file, 'wb') as fOut:
            data = fill(args.size, args.byte_order)
            fOut.write(data)
            fOut.flush()
    except (MemoryError, OverflowError):
        print(f'Error: unable to allocate {length} bytes', file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f'Error: {args.output_file}: {e.strerror or e}', file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f'Wrote {length} bytes (requested {args.size}) to {args.output_file}')
        print(f'Pattern: {data[:4].hex(" ").upper()} ({args.byte_order.name.lower()} endian). Platform: {args.platform}')


def list_platforms():
    for p in PLATFORMS:
        print(f'{p.name:<10} {p.description:<24} nop 0x{p.opcode:08X}')


def auto_int(x):
    return int(x, 0)


def positive_size(x):
    try:
        size = auto_int(x)
    except ValueError:
        # leading-zero decimals such as 010
        try:
            size = int(x, 10)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid size: {x!r}") from None
    if size <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {x!r}")
    return size


def endian(x):
    try:
        return ByteOrder.from_name(x)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def known_platform(x):
    try:
        return find_platform(x).name
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown platform: {x!r} (choose from {', '.join(platform_names())})") from None


def build_parser():
    parser = NoopArgumentParser(prog='mknoopbin', description='Create a binary of some size filled with NOOPS!')
    parser.add_argument('-e', '--endian', type=endian, action="store", dest="byte_order", metavar="{little,big}", help="Byte order (endianess) of the NOOP pattern.")
    parser.add_argument('-s', '--size', type=positive_size, action="store", dest="size", help="Size of the binary in bytes. Rounded up to the next multiple of 4.")
    parser.add_argument('-f', '--file', action="store", dest="output_file", help="Name of the output binary file.")
    parser.add_argument('-p', '--platform', type=known_platform, default=DEFAULT_PLATFORM, action="store", dest="platform", help="Target platform. See --list-platforms.")
    parser.add_argument('-l', '--list-platforms', action="store_true", dest="list_platforms", help="List known platforms and exit.")
    parser.add_argument('-v', '--verbose', action="store_true", dest="verbose", help="Increase verbosity of output.")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.list_platforms:
        missing = [opt for opt, dest in (('--endian', 'byte_order'), ('--size', 'size'), ('--file', 'output_file'))
                   if getattr(args, dest) is None]
        if missing:
            parser.error(f"missing arguments: {', '.join(missing)}")
    return args


def run(argv=None):
    args = parse_args(argv)
    if args.list_platforms:
        list_platforms()
        return
    main(args)


if __name__ == '__main__':
    run()
